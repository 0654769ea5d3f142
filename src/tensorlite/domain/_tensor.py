"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects using
structural typing. The interface captures the backend-agnostic surface that
the elementwise apply engine, the contraction kernels, and callers rely on:
shape and stride metadata, a flat owned buffer, and the public operators.

Notes
-----
The protocol mirrors the public API of the NumPy-backed `Tensor` so code can
type against the tensor contract without importing the concrete class.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, Union, runtime_checkable

Number = Union[int, float]


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` is a homogeneous n-dimensional array stored as one flat,
    exclusively owned buffer plus C-order (row-major) shape/stride metadata.

    Notes
    -----
    - Shape and strides never change after construction; element values may
      be written.
    - Operations never alias their inputs: every result owns a fresh buffer.
    """

    # ---------------------------------------------------------------------
    # Layout
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            Dimension sizes, outermost first.
        """
        ...

    @property
    def strides(self) -> tuple[int, ...]:
        """
        Return the per-dimension strides, in elements.

        Returns
        -------
        tuple[int, ...]
            ``strides[d]`` is the number of buffer elements skipped to advance
            one step along dimension ``d``.
        """
        ...

    @property
    def ndim(self) -> int:
        """Number of dimensions (rank)."""
        ...

    @property
    def size(self) -> int:
        """Number of elements held in the buffer."""
        ...

    @property
    def dtype(self) -> Any:
        """Element type descriptor (a NumPy dtype in the current backend)."""
        ...

    @property
    def data(self) -> Any:
        """
        Return the flat owned buffer.

        Returns
        -------
        Any
            Backend-native 1-D array (``numpy.ndarray`` in the current backend).
        """
        ...

    def numel(self) -> int:
        """Product of the shape (zero for the empty shape)."""
        ...

    # ---------------------------------------------------------------------
    # Element access / host interop
    # ---------------------------------------------------------------------
    def __getitem__(self, index: int) -> Any: ...

    def __setitem__(self, index: int, value: Any) -> None: ...

    def to_numpy(self) -> Any:
        """
        Return a shaped copy of the tensor contents as a backend-native array.
        """
        ...

    def clone(self) -> "ITensor":
        """Return a deep copy owning its own buffer."""
        ...

    def fill(self, value: Number) -> None:
        """Overwrite every element with `value`."""
        ...

    # ---------------------------------------------------------------------
    # Operations
    # ---------------------------------------------------------------------
    def apply(
        self, other: Union["ITensor", Number], op: Callable[[Any, Any], Any]
    ) -> "ITensor":
        """Broadcasting-aware elementwise binary operation."""
        ...

    def __add__(self, other: Union["ITensor", Number]) -> "ITensor": ...

    def __sub__(self, other: Union["ITensor", Number]) -> "ITensor": ...

    def __mul__(self, other: Union["ITensor", Number]) -> "ITensor": ...

    def __truediv__(self, other: Union["ITensor", Number]) -> "ITensor": ...

    def dot(self, other: "ITensor") -> "ITensor":
        """Rank-dispatched contraction for 1D/2D operands."""
        ...

    def to_string(self, max_elems: int = 256) -> str:
        """Bounded diagnostic rendering."""
        ...
