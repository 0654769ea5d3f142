"""
CPU layout helpers: element counts and C-order strides.

These helpers are pure functions over shapes. Strides are expressed in
**elements** (not bytes) and follow row-major (C-order) layout: the last
dimension has stride 1, and each preceding dimension's stride is the product
of the stride and size of the dimension to its right.
"""

from __future__ import annotations

from typing import Sequence, Tuple
import operator

import numpy as np


def normalize_shape(shape: Sequence[int]) -> Tuple[int, ...]:
    """
    Validate a shape-like sequence and return it as a tuple of ints.

    Parameters
    ----------
    shape : Sequence[int]
        Dimension sizes. NumPy integer scalars are accepted.

    Returns
    -------
    tuple[int, ...]
        The normalized shape.

    Raises
    ------
    TypeError
        If `shape` is not a sequence of integers.
    ValueError
        If any dimension is negative.
    """
    if isinstance(shape, (int, np.integer)):
        shape = (shape,)
    try:
        dims = tuple(operator.index(d) for d in shape)
    except TypeError as e:
        raise TypeError(f"shape must be a sequence of ints, got {shape!r}") from e
    for d in dims:
        if d < 0:
            raise ValueError(f"shape dimensions must be non-negative, got {dims}")
    return dims


def numel(shape: Sequence[int]) -> int:
    """
    Number of elements described by `shape`.

    The empty shape describes a degenerate tensor and yields 0.
    """
    if len(shape) == 0:
        return 0
    n = 1
    for d in shape:
        n *= int(d)
    return n


def compute_strides(shape: Sequence[int]) -> Tuple[int, ...]:
    """
    Compute C-order strides (in elements) for `shape`.

    Parameters
    ----------
    shape : Sequence[int]
        Dimension sizes.

    Returns
    -------
    tuple[int, ...]
        One stride per dimension; ``()`` for the empty shape.
    """
    nd = len(shape)
    if nd == 0:
        return ()
    strides = [1] * nd
    for d in range(nd - 2, -1, -1):
        strides[d] = strides[d + 1] * int(shape[d + 1])
    return tuple(strides)
