"""
Tensor shape, stride, and flat-indexing mixin (NumPy CPU backend).

This module defines `TensorShapeAndIndexingMixin`, a cohesive mixin that
implements the layout queries and flat element access of the concrete
Tensor implementation.

Design notes
------------
- This mixin is intended to be inherited by the concrete `Tensor` class.
- Methods assume the host class provides `.shape`, `.strides` and `.data`.
- Indexing is *flat*: ``t[i]`` addresses the i-th element of the owned
  buffer, independently of the shape. Multi-dimensional positions are
  converted with :meth:`flat_index`.
"""

from __future__ import annotations

import operator
from typing import Any, Sequence

from ...domain._tensor import ITensor
from ..ops.layout_cpu import numel as _numel


class TensorShapeAndIndexingMixin(ITensor):
    """
    Shape queries and flat indexing for the concrete Tensor implementation.

    Notes
    -----
    - `size` reports the buffer length while `numel()` reports the product of
      the shape; the two agree for every correctly constructed tensor.
    - Element access is bounds-checked and raises `IndexError`; negative
      indices are rejected rather than wrapped.
    """

    @property
    def ndim(self) -> int:
        """
        Number of dimensions (rank) of the tensor.

        Returns
        -------
        int
            ``len(self.shape)``.
        """
        return len(self.shape)

    @property
    def size(self) -> int:
        """
        Number of elements held in the owned buffer.

        Returns
        -------
        int
            Buffer length.
        """
        return int(self.data.size)

    def numel(self) -> int:
        """
        Return the number of elements described by the shape.

        Returns
        -------
        int
            Product of all dimensions; 0 for the empty shape.
        """
        return _numel(self.shape)

    def _check_flat_index(self, index: Any) -> int:
        try:
            i = operator.index(index)
        except TypeError:
            raise TypeError(
                f"Tensor indices must be integers, got {type(index).__name__}"
            ) from None
        if i < 0 or i >= self.size:
            raise IndexError(
                f"flat index {i} out of range for tensor of size {self.size}"
            )
        return i

    def flat_index(self, position: Sequence[int]) -> int:
        """
        Convert a multi-dimensional position into a flat buffer index.

        Parameters
        ----------
        position : Sequence[int]
            One index per dimension.

        Returns
        -------
        int
            ``sum(position[d] * strides[d])``.

        Raises
        ------
        IndexError
            If `position` has the wrong length or any coordinate is out of
            range for its dimension.
        """
        if len(position) != self.ndim:
            raise IndexError(
                f"expected {self.ndim} indices for shape {self.shape}, got {len(position)}"
            )
        offset = 0
        for d, (p, n, s) in enumerate(zip(position, self.shape, self.strides)):
            p = operator.index(p)
            if p < 0 or p >= n:
                raise IndexError(
                    f"index {p} out of range for dimension {d} of size {n}"
                )
            offset += p * s
        return offset

    def __getitem__(self, index: int) -> Any:
        """
        Return the element at flat buffer position `index`.

        Raises
        ------
        IndexError
            If `index` is negative or not less than `size`.
        """
        return self.data[self._check_flat_index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        """
        Write `value` at flat buffer position `index`.

        Raises
        ------
        IndexError
            If `index` is negative or not less than `size`.
        """
        self.data[self._check_flat_index(index)] = value

