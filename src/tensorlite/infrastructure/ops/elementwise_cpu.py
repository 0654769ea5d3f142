"""
CPU elementwise apply engine (NumPy backend).

This module implements the single routine behind every elementwise binary
Tensor operator. It has two paths:

Fast path
    Both operands have identical shapes. The operation is applied
    index-for-index over the two flat buffers; no index decoding happens.

General (broadcast) path
    Shapes differ. The broadcast output shape is resolved, each operand's
    shape/strides are right-aligned to the output rank with *effective*
    strides (zero along broadcast dimensions), and every flat output index
    is decoded into a multi-index using per-dimension multipliers. The
    operand offsets are the dot products of that multi-index with the
    effective strides.

The decode is vectorized over blocks of flat output indices, so the work is
O(output_size * rank) integer arithmetic on NumPy arrays instead of a Python
loop per element.

Design notes
------------
- Operands are accessed only through their public surface (`shape`,
  `strides`, `dtype`, `data`); results are built with the operand class's
  `_from_buffer` constructor, which adopts a freshly allocated buffer.
- The output dtype is ``numpy.result_type`` of the operand dtypes; the raw
  result of `op` is cast into it.
- `op` may be any binary function over two element values. NumPy ufuncs,
  ``numpy.vectorize`` objects and functions marked with :func:`array_op` are
  applied to whole gathered arrays; other callables are lifted with
  ``numpy.frompyfunc`` and called once per element pair.
- Division uses :func:`truncate_divide`, which is exact for integer dtypes.
- Numeric faults are not trapped. Floating-point division by zero produces
  inf/nan and NumPy's usual ``RuntimeWarning``.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, Tuple

import numpy as np

from ...domain._errors import SizeMismatchError
from ...domain._tensor import ITensor
from .broadcast_cpu import align_to, broadcast_shapes
from .layout_cpu import numel

BinaryOp = Callable[[Any, Any], Any]
"""A NumPy ufunc, or any binary function over two operand values."""

_BLOCK = 1 << 16
"""Number of flat output indices decoded per block on the general path."""


def _check_buffer(op_name: str, t: ITensor) -> None:
    """
    Verify that an operand's buffer length matches its own shape.

    Raises
    ------
    SizeMismatchError
        If the buffer holds a different number of elements than the shape
        describes.
    """
    expected = numel(t.shape)
    actual = int(t.data.size)
    if actual != expected:
        raise SizeMismatchError(op_name, actual, expected)


def _store(out: np.ndarray, result: Any) -> None:
    """Cast `result` into the preallocated output slice."""
    np.copyto(out, result, casting="unsafe")


def array_op(fn: BinaryOp) -> BinaryOp:
    """
    Mark `fn` as operating on whole NumPy arrays.

    Marked functions are handed the gathered operand arrays directly, like
    ufuncs. Unmarked callables are applied one element pair at a time.
    """
    fn.__array_op__ = True
    return fn


def _as_array_op(op: BinaryOp) -> BinaryOp:
    """Return a form of `op` that accepts two operand arrays."""
    if isinstance(op, (np.ufunc, np.vectorize)) or getattr(op, "__array_op__", False):
        return op
    return np.frompyfunc(op, 2, 1)


@array_op
def truncate_divide(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """
    Division over the promoted operand type.

    Floating operands use true division. Integer operands are divided
    exactly, rounding toward zero, without going through a float quotient.
    Integer division by zero is unspecified.
    """
    if np.result_type(x, y).kind not in "iu":
        return np.true_divide(x, y)
    q = np.floor_divide(x, y)
    # floor rounds down; step back toward zero for inexact negative quotients
    return q + ((np.remainder(x, y) != 0) & ((x < 0) != (y < 0)))


def magnitude_multipliers(shape: Sequence[int]) -> Tuple[int, ...]:
    """
    Per-dimension multipliers used to decode flat indices of `shape`.

    ``multipliers[d]`` is the product of all sizes strictly to the right of
    dimension ``d`` (1 for the last dimension).

    Parameters
    ----------
    shape : Sequence[int]
        Output shape.

    Returns
    -------
    tuple[int, ...]
        One multiplier per dimension.
    """
    nd = len(shape)
    multipliers = [1] * nd
    for d in range(nd - 2, -1, -1):
        multipliers[d] = multipliers[d + 1] * int(shape[d + 1])
    return tuple(multipliers)


def decode_offsets(
    flat: np.ndarray,
    multipliers: Sequence[int],
    eff_strides: Sequence[Sequence[int]],
) -> Tuple[np.ndarray, ...]:
    """
    Decode flat output indices and accumulate operand buffer offsets.

    Parameters
    ----------
    flat : np.ndarray
        1-D integer array of flat output indices.
    multipliers : Sequence[int]
        Output multipliers from :func:`magnitude_multipliers`.
    eff_strides : Sequence[Sequence[int]]
        Effective strides of each operand, aligned to the output rank.

    Returns
    -------
    tuple[np.ndarray, ...]
        One offset array per operand, same length as `flat`.
    """
    offsets = [np.zeros(flat.shape, dtype=np.intp) for _ in eff_strides]
    rem = flat
    for d, m in enumerate(multipliers):
        idx, rem = np.divmod(rem, m)
        for off, strides in zip(offsets, eff_strides):
            if strides[d]:
                off += idx * strides[d]
    return tuple(offsets)


def apply_same_shape(a: ITensor, b: ITensor, op: BinaryOp) -> ITensor:
    """
    Fast path: apply `op` index-for-index over two identically shaped tensors.

    Parameters
    ----------
    a, b : ITensor
        Operands. Their shapes must be equal.
    op : BinaryOp
        Elementwise binary operation.

    Returns
    -------
    ITensor
        New tensor of the common shape.

    Raises
    ------
    SizeMismatchError
        If either buffer disagrees with the common shape.
    """
    _check_buffer("apply_binary", a)
    _check_buffer("apply_binary", b)
    op = _as_array_op(op)

    out_dtype = np.result_type(a.dtype, b.dtype)
    out = np.empty(numel(a.shape), dtype=out_dtype)
    if out.size:
        _store(out, op(a.data, b.data))
    return type(a)._from_buffer(a.shape, out)


def apply_broadcast(a: ITensor, b: ITensor, op: BinaryOp) -> ITensor:
    """
    General path: apply `op` under right-aligned broadcasting.

    Parameters
    ----------
    a, b : ITensor
        Operands of broadcast-compatible shapes.
    op : BinaryOp
        Elementwise binary operation.

    Returns
    -------
    ITensor
        New tensor of the broadcast output shape.

    Raises
    ------
    BroadcastIncompatibleError
        If the shapes cannot be broadcast together.
    SizeMismatchError
        If an operand's buffer disagrees with its shape, or if an operand
        holds no elements while the output is non-empty.
    """
    _check_buffer("apply_binary", a)
    _check_buffer("apply_binary", b)
    op = _as_array_op(op)

    out_shape = broadcast_shapes(a.shape, b.shape)
    nd = len(out_shape)
    total = numel(out_shape)

    out_dtype = np.result_type(a.dtype, b.dtype)
    out = np.empty(total, dtype=out_dtype)
    if total == 0:
        return type(a)._from_buffer(out_shape, out)

    for t in (a, b):
        if t.data.size == 0:
            # An empty-shape operand has no element to broadcast.
            raise SizeMismatchError("apply_binary", 0, 1)

    _, a_eff = align_to(a.shape, a.strides, nd)
    _, b_eff = align_to(b.shape, b.strides, nd)
    multipliers = magnitude_multipliers(out_shape)

    a_data = a.data
    b_data = b.data
    for start in range(0, total, _BLOCK):
        stop = min(start + _BLOCK, total)
        flat = np.arange(start, stop, dtype=np.intp)
        off_a, off_b = decode_offsets(flat, multipliers, (a_eff, b_eff))
        _store(out[start:stop], op(a_data[off_a], b_data[off_b]))

    return type(a)._from_buffer(out_shape, out)


def apply_binary(
    a: ITensor, b: ITensor, op: BinaryOp, *, force_broadcast: bool = False
) -> ITensor:
    """
    Broadcasting-aware elementwise binary operation.

    Parameters
    ----------
    a, b : ITensor
        Operands.
    op : BinaryOp
        Elementwise binary operation: a ufunc such as ``np.add``, an
        `array_op` function, or a plain function of two element values.
    force_broadcast : bool, optional
        Route identical shapes through the general path as well. Used to
        cross-check the two paths. Defaults to False.

    Returns
    -------
    ITensor
        A new tensor; inputs are never aliased.
    """
    if not force_broadcast and tuple(a.shape) == tuple(b.shape):
        return apply_same_shape(a, b, op)
    return apply_broadcast(a, b, op)
