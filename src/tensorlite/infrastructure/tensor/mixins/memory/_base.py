"""
Tensor memory / construction mixin.

This module defines `TensorMixinMemory`, a focused mixin that provides
factory constructors (`zeros`, `from_numpy`) and core memory utilities
(`to_numpy`, `clone`, `fill`) for a concrete `Tensor` that satisfies the
domain-level `ITensor` protocol.

Design intent
-------------
- Keep object creation and memory movement centralized in the tensor
  implementation (infrastructure layer), while still presenting a clean,
  framework-style API (`Tensor.zeros`, `Tensor.from_numpy`, etc.).
- Every factory and copy returns a tensor that owns a fresh buffer; nothing
  here creates views of another tensor's storage.

Notes
-----
- The mixin assumes the concrete `Tensor` class provides `_from_buffer(...)`
  and the `_data` / `_shape` fields.
"""

from typing import Any, Optional, Sequence, Type, Union

import numpy as np

from .....domain._tensor import ITensor

Number = Union[int, float]


class TensorMixinMemory:
    """
    Mixin that implements tensor construction and memory-management helpers.

    - Factory constructors: `zeros`, `from_numpy`
    - Memory utilities: `to_numpy`, `clone`, `fill`
    """

    @classmethod
    def zeros(
        cls: Type[ITensor],
        shape: Sequence[int],
        *,
        dtype: Optional[Any] = None,
    ) -> "ITensor":
        """
        Create a tensor of `shape` filled with the default value of `dtype`.

        Parameters
        ----------
        shape : Sequence[int]
            Shape of the output tensor.
        dtype : optional
            Element dtype; defaults to the module default (float64).

        Returns
        -------
        ITensor
            Newly created zero-filled tensor. The empty shape yields a tensor
            with no elements.
        """
        return cls(shape, dtype=dtype)

    @classmethod
    def from_numpy(
        cls: Type[ITensor],
        arr: Any,
        *,
        dtype: Optional[Any] = None,
    ) -> "ITensor":
        """
        Copy an array-like into a new tensor of the same shape.

        Parameters
        ----------
        arr : array-like
            Source data. A 0-d array becomes a ``(1,)`` scalar tensor.
        dtype : optional
            Element dtype; defaults to the source dtype.

        Returns
        -------
        ITensor
            A tensor owning a copy of `arr`.
        """
        src = np.asarray(arr)
        return cls(src.shape, src, dtype=src.dtype if dtype is None else dtype)

    def to_numpy(self) -> np.ndarray:
        """
        Return a shaped copy of the tensor contents.

        Returns
        -------
        np.ndarray
            Array of shape `self.shape` (or ``(0,)`` for the empty shape).
            Mutating it never affects the tensor.
        """
        if len(self._shape) == 0:
            return self._data.copy()
        return self._data.reshape(self._shape).copy()

    def clone(self) -> "ITensor":
        """
        Return a deep copy of this tensor.

        Returns
        -------
        ITensor
            Same shape/dtype, independent buffer.
        """
        return type(self)._from_buffer(self._shape, self._data.copy())

    def fill(self, value: Number) -> None:
        """
        Overwrite every element with `value` (cast to the tensor dtype).

        Parameters
        ----------
        value : Number
            Fill value.
        """
        self._data.fill(value)
