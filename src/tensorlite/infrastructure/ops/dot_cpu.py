"""
CPU reference kernels for rank-restricted contraction (NumPy backend).

Four kernels are provided, one per supported operand-rank pair:

- :func:`dot_1d_1d`: vector · vector -> shape ``(1,)``
- :func:`dot_2d_2d`: (M, K) · (K, N) -> (M, N)
- :func:`dot_2d_1d`: (M, K) · (K,)   -> (M,)
- :func:`dot_1d_2d`: (K,)   · (K, N) -> (N,)

Design notes
------------
- 2-D operands are read strictly through their stored strides: element
  ``(i, j)`` is ``data[i * strides[0] + j * strides[1]]``. The gather is done
  with NumPy index arithmetic rather than `reshape`, so no row-major order is
  assumed beyond what the strides encode.
- Every result cell accumulates from the additive identity of the output
  dtype (``result_type`` of the operand dtypes) in i-k-j order.
- Dimension checks raise `DimensionMismatchError` naming both contracted
  sizes. Rank checking is the caller's responsibility.
"""

from __future__ import annotations

import numpy as np

from ...domain._errors import DimensionMismatchError
from ...domain._tensor import ITensor


def _gather_2d(t: ITensor) -> np.ndarray:
    """
    Materialize a 2-D operand as an (R, C) array using its stored strides.
    """
    rows, cols = t.shape
    s0, s1 = t.strides
    idx = (
        np.arange(rows, dtype=np.intp)[:, None] * s0
        + np.arange(cols, dtype=np.intp)[None, :] * s1
    )
    return t.data[idx]


def _out_dtype(a: ITensor, b: ITensor) -> np.dtype:
    return np.result_type(a.dtype, b.dtype)


def dot_1d_1d(a: ITensor, b: ITensor) -> ITensor:
    """
    Inner product of two equal-length vectors.

    Returns
    -------
    ITensor
        Rank-1, size-1 tensor holding the sum of pairwise products.

    Raises
    ------
    DimensionMismatchError
        If the vector lengths differ.
    """
    (k,) = a.shape
    (k2,) = b.shape
    if k != k2:
        raise DimensionMismatchError("dot 1D·1D", k, k2)

    dt = _out_dtype(a, b)
    acc = np.zeros(1, dtype=dt)
    acc[0] += np.sum(a.data * b.data, dtype=dt)
    return type(a)._from_buffer((1,), acc)


def dot_2d_2d(a: ITensor, b: ITensor) -> ITensor:
    """
    Matrix product of an (M, K) and a (K, N) tensor.

    Raises
    ------
    DimensionMismatchError
        If the left inner dimension differs from the right outer dimension.
    """
    m, k = a.shape
    k2, n = b.shape
    if k != k2:
        raise DimensionMismatchError("dot 2D·2D", k, k2)

    dt = _out_dtype(a, b)
    lhs = _gather_2d(a)
    rhs = _gather_2d(b)

    # naive i-k-j: row i of out accumulates lhs[i, k] * rhs[k, :]
    out = np.zeros((m, n), dtype=dt)
    for kk in range(k):
        out += lhs[:, kk, None] * rhs[None, kk, :]
    return type(a)._from_buffer((m, n), out.reshape(-1))


def dot_2d_1d(a: ITensor, b: ITensor) -> ITensor:
    """
    Matrix-vector product of an (M, K) tensor and a length-K vector.

    Raises
    ------
    DimensionMismatchError
        If the matrix inner dimension differs from the vector length.
    """
    m, k = a.shape
    (k2,) = b.shape
    if k != k2:
        raise DimensionMismatchError("dot 2D·1D", k, k2)

    dt = _out_dtype(a, b)
    lhs = _gather_2d(a)

    out = np.zeros(m, dtype=dt)
    for kk in range(k):
        out += lhs[:, kk] * b.data[kk]
    return type(a)._from_buffer((m,), out)


def dot_1d_2d(a: ITensor, b: ITensor) -> ITensor:
    """
    Vector-matrix product: the length-K vector is treated as a (1, K) row.

    Returns
    -------
    ITensor
        Length-N vector for a (K, N) right operand.

    Raises
    ------
    DimensionMismatchError
        If the vector length differs from the matrix outer dimension.
    """
    (k,) = a.shape
    k2, n = b.shape
    if k != k2:
        raise DimensionMismatchError("dot 1D·2D", k, k2)

    dt = _out_dtype(a, b)
    rhs = _gather_2d(b)

    out = np.zeros(n, dtype=dt)
    for kk in range(k):
        out += a.data[kk] * rhs[kk, :]
    return type(a)._from_buffer((n,), out)

