"""
CPU broadcast helpers for tensorlite.

This module implements NumPy-style, right-aligned broadcasting on shapes:

- :func:`broadcast_shapes` resolves the output shape of two operand shapes.
- :func:`align_to` right-aligns one operand's shape/strides to an output rank
  and produces *effective* strides, which are zero on every dimension the
  operand is broadcast along.

No data is touched here; the elementwise engine combines these results with
the operands' flat buffers.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from ...domain._errors import BroadcastIncompatibleError


def broadcast_shapes(a: Sequence[int], b: Sequence[int]) -> Tuple[int, ...]:
    """
    Compute the broadcast output shape of two shapes.

    The shorter shape is conceptually left-padded with 1s to the longer
    rank. Two aligned sizes are compatible when they are equal or when
    either is 1; the output size is the larger of the two.

    Parameters
    ----------
    a : Sequence[int]
        Left operand shape.
    b : Sequence[int]
        Right operand shape.

    Returns
    -------
    tuple[int, ...]
        Output shape of rank ``max(len(a), len(b))``.

    Raises
    ------
    BroadcastIncompatibleError
        If any aligned pair of sizes is incompatible. The error carries both
        original shapes verbatim.
    """
    na, nb = len(a), len(b)
    n = max(na, nb)
    out = []
    for i in range(n):
        ai = 1 if i < n - na else int(a[i - (n - na)])
        bi = 1 if i < n - nb else int(b[i - (n - nb)])
        if ai != bi and ai != 1 and bi != 1:
            raise BroadcastIncompatibleError(tuple(a), tuple(b))
        out.append(max(ai, bi))
    return tuple(out)


def align_to(
    shape: Sequence[int], strides: Sequence[int], ndim: int
) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """
    Right-align an operand's shape and strides to `ndim` dimensions.

    Parameters
    ----------
    shape : Sequence[int]
        Operand shape (rank <= `ndim`).
    strides : Sequence[int]
        Operand strides, one per dimension of `shape`.
    ndim : int
        Output rank.

    Returns
    -------
    (aligned_shape, effective_strides) : tuple[tuple[int, ...], tuple[int, ...]]
        `aligned_shape` has leading 1s for padded positions.
        `effective_strides` is 0 for padded positions and for any position
        where the operand's size is 1; otherwise it is the stored stride.

    Notes
    -----
    A size-1 dimension may have a nonzero stored stride. Its effective stride
    is still 0, so the single element is reused along the output dimension.
    """
    offset = ndim - len(shape)
    if offset < 0:
        raise ValueError(f"cannot align rank {len(shape)} shape to rank {ndim}")

    aligned_shape = [1] * ndim
    eff_strides = [0] * ndim
    for d in range(len(shape)):
        size = int(shape[d])
        aligned_shape[offset + d] = size
        if size != 1:
            eff_strides[offset + d] = int(strides[d])
    return tuple(aligned_shape), tuple(eff_strides)
