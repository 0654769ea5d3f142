"""
Concrete Tensor implementation (NumPy backend).

This module provides the concrete `Tensor`, which satisfies the domain-level
`ITensor` protocol. A tensor owns exactly one flat, C-contiguous NumPy buffer
of its element dtype, plus shape and C-order stride metadata (strides are in
elements, not bytes).

Construction
------------
- ``Tensor(shape)`` allocates ``numel(shape)`` zero (default-valued) elements.
- ``Tensor(shape, data)`` copies `data` and requires its length to equal
  ``numel(shape)``; otherwise `ShapeMismatchError` is raised.
- The empty shape is special: it accepts either no data (yielding a tensor
  with no elements) or exactly one element, in which case the tensor is
  normalized to the ``(1,)`` scalar convention shared with `dot`.

Design notes
------------
- This file sits in the infrastructure layer: it imports NumPy and concrete
  error types, and provides a concrete runtime implementation.
- Shape and strides never change after construction. Element values may be
  written through ``t[i] = v``, ``t.data`` or `fill`.
- There are no views. Every operation allocates a new buffer, and results are
  built with `_from_buffer`, which adopts an already-fresh buffer without a
  second copy.
- Operators live in mixins: arithmetic (`mixins/arithmetic`), contraction
  (`mixins/contraction`), memory helpers (`mixins/memory`), and layout
  queries (`_shape_and_indexing.py`).
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from ...domain._errors import ShapeMismatchError
from ...domain._tensor import ITensor
from ..ops.layout_cpu import compute_strides, normalize_shape, numel
from ._shape_and_indexing import TensorShapeAndIndexingMixin
from .mixins.arithmetic import TensorMixinArithmetic
from .mixins.contraction import TensorMixinContraction
from .mixins.memory import TensorMixinMemory

DEFAULT_DTYPE = np.dtype(np.float64)
"""Element dtype used when none is given and none can be inferred."""

DEFAULT_MAX_ELEMS = 256
"""Maximum number of elements listed by `Tensor.to_string` by default."""


class Tensor(
    TensorMixinArithmetic,
    TensorMixinContraction,
    TensorMixinMemory,
    TensorShapeAndIndexingMixin,
    ITensor,
):
    """
    Concrete n-dimensional tensor (NumPy CPU backend).

    Parameters
    ----------
    shape : Sequence[int]
        Tensor shape. Sizes must be non-negative integers.
    data : array-like, optional
        Initial values. Nested sequences and multi-dimensional arrays are
        flattened in C order; the data is always copied. If omitted, the
        tensor is zero-filled.
    dtype : optional
        Element dtype. Defaults to the dtype of an ndarray `data`, else
        float64.

    Raises
    ------
    ShapeMismatchError
        If the number of supplied elements disagrees with the shape.
    ValueError
        If a dimension is negative.
    TypeError
        If `shape` is not a sequence of integers.

    Notes
    -----
    - `_data` is a 1-D NumPy ndarray of dtype `self._dtype`, owned exclusively
      by this tensor.
    """

    # Keep NumPy from broadcasting its own ufuncs over a Tensor operand;
    # ``np.float64(2) * t`` defers to ``Tensor.__rmul__``.
    __array_ufunc__ = None

    def __init__(
        self,
        shape: Sequence[int],
        data: Optional[Any] = None,
        *,
        dtype: Optional[Any] = None,
    ) -> None:
        shape = normalize_shape(shape)

        if data is None:
            self._dtype = DEFAULT_DTYPE if dtype is None else np.dtype(dtype)
            self._shape = shape
            self._strides = compute_strides(shape)
            self._data = np.zeros(numel(shape), dtype=self._dtype)
            return

        if dtype is None:
            dtype = data.dtype if isinstance(data, np.ndarray) else DEFAULT_DTYPE
        buf = np.array(data, dtype=dtype).reshape(-1)

        if len(shape) == 0:
            # scalar / empty-shape special case
            if buf.size > 1:
                raise ShapeMismatchError(shape, int(buf.size), 1)
            if buf.size == 1:
                shape = (1,)
        elif buf.size != numel(shape):
            raise ShapeMismatchError(shape, int(buf.size), numel(shape))

        self._dtype = buf.dtype
        self._shape = shape
        self._strides = compute_strides(shape)
        self._data = buf

    @classmethod
    def _from_buffer(cls, shape: Sequence[int], buffer: np.ndarray) -> "Tensor":
        """
        Construct a tensor that adopts `buffer` without copying it.

        Parameters
        ----------
        shape : Sequence[int]
            Tensor shape.
        buffer : np.ndarray
            Freshly allocated, C-contiguous buffer whose length equals
            ``numel(shape)``. The caller must not retain other references to
            it, since the tensor takes exclusive ownership.

        Returns
        -------
        Tensor
            A tensor backed by `buffer`.

        Raises
        ------
        ShapeMismatchError
            If the buffer length disagrees with `shape`.

        Notes
        -----
        This constructor bypasses `__init__` and exists for operation results,
        which already own a new buffer.
        """
        shape = normalize_shape(shape)
        buf = np.ascontiguousarray(buffer).reshape(-1)
        if buf.size != numel(shape):
            raise ShapeMismatchError(shape, int(buf.size), numel(shape))

        obj = cls.__new__(cls)  # bypass __init__
        obj._shape = shape
        obj._strides = compute_strides(shape)
        obj._dtype = buf.dtype
        obj._data = buf
        return obj

    # ----------------------------
    # Layout / storage
    # ----------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the tensor shape.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape.
        """
        return self._shape

    @property
    def strides(self) -> tuple[int, ...]:
        """
        Return the C-order strides, in elements.

        Returns
        -------
        tuple[int, ...]
            One stride per dimension; ``()`` for the empty shape.
        """
        return self._strides

    @property
    def dtype(self) -> np.dtype:
        """
        Return the element dtype of this tensor.

        Returns
        -------
        np.dtype
            NumPy dtype representing the tensor element type.
        """
        return self._dtype

    @property
    def data(self) -> np.ndarray:
        """
        Return the flat owned buffer.

        Returns
        -------
        numpy.ndarray
            The 1-D buffer backing the tensor. Writes through it change the
            tensor's elements; its length must not be changed.
        """
        return self._data

    # ----------------------------
    # Rendering
    # ----------------------------
    def to_string(self, max_elems: int = DEFAULT_MAX_ELEMS) -> str:
        """
        Render a bounded, human-readable description of the tensor.

        The rendering lists the shape, the dtype, the total element count and
        at most `max_elems` leading elements, followed by ``...`` when the
        buffer holds more.

        Parameters
        ----------
        max_elems : int, optional
            Maximum number of elements to list. Negative values list none.

        Returns
        -------
        str
            Two lines, e.g.::

                Tensor(shape=[2, 3], dtype=float64)
                data(6) [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
        """
        total = self.size
        show = max(0, min(total, int(max_elems)))
        items = ", ".join(str(v) for v in self._data[:show].tolist())
        if show < total:
            items = f"{items}, ..." if items else "..."
        return f"{self!r}\ndata({total}) [{items}]\n"

    def __repr__(self) -> str:
        """
        Return a one-line description of the tensor.

        Returns
        -------
        str
            Shape and dtype, without contents.
        """
        dims = ", ".join(str(d) for d in self._shape)
        return f"Tensor(shape=[{dims}], dtype={self._dtype})"

    def __str__(self) -> str:
        return self.to_string()
