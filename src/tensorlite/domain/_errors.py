"""
Shape- and contraction-related exceptions for tensorlite.

This module defines the error taxonomy raised by tensor construction,
elementwise operations, and contraction (`dot`). Every error is raised
synchronously at the failing call and carries the offending values as
attributes so callers can inspect them without parsing messages.

All errors derive from :class:`TensorError`, which allows callers to catch
the whole family at once. None of them are recoverable at the tensor layer:
computation is deterministic, so retrying cannot change the outcome.
"""

from typing import Tuple


class TensorError(Exception):
    """
    Base class of every error raised by the tensor engine.
    """


class ShapeMismatchError(TensorError, ValueError):
    """
    Raised when supplied data length disagrees with a declared shape.

    This covers both the regular case (``len(data) != numel(shape)``) and the
    empty-shape special case, which accepts at most one element.

    Attributes
    ----------
    shape : tuple[int, ...]
        The declared shape.
    actual : int
        Number of elements supplied.
    expected : int
        Number of elements the shape requires (for the empty shape, the
        maximum number accepted).
    """

    def __init__(self, shape: Tuple[int, ...], actual: int, expected: int) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        shape : tuple[int, ...]
            The declared shape.
        actual : int
            Number of elements supplied.
        expected : int
            Number of elements required by `shape`.
        """
        if len(shape) == 0:
            msg = (
                f"Empty shape accepts either no data or a single element; "
                f"got data size ({actual})."
            )
        else:
            msg = (
                f"Data size ({actual}) doesn't match shape {tuple(shape)} "
                f"product ({expected})."
            )
        super().__init__(msg)
        self.shape = tuple(shape)
        self.actual = actual
        self.expected = expected


class BroadcastIncompatibleError(TensorError, ValueError):
    """
    Raised when two shapes cannot be right-aligned under broadcasting rules.

    Attributes
    ----------
    shape_a : tuple[int, ...]
        Left operand shape, as given.
    shape_b : tuple[int, ...]
        Right operand shape, as given.
    """

    def __init__(self, shape_a: Tuple[int, ...], shape_b: Tuple[int, ...]) -> None:
        super().__init__(
            f"Shapes not compatible for broadcasting: {tuple(shape_a)} vs {tuple(shape_b)}."
        )
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)


class SizeMismatchError(TensorError, RuntimeError):
    """
    Raised when an operand's buffer length disagrees with its own shape.

    This is an internal consistency check; correctly constructed tensors
    never trigger it.

    Attributes
    ----------
    op : str
        The operation that detected the inconsistency.
    actual : int
        Buffer length found.
    expected : int
        Buffer length implied by the shape.
    """

    def __init__(self, op: str, actual: int, expected: int) -> None:
        super().__init__(
            f"{op}: unexpected size mismatch (buffer holds {actual} elements, "
            f"shape requires {expected})."
        )
        self.op = op
        self.actual = actual
        self.expected = expected


class DimensionMismatchError(TensorError, ValueError):
    """
    Raised when the contracted dimensions of `dot` operands disagree.

    Attributes
    ----------
    op : str
        Short description of the contraction (e.g. ``"dot 2D·1D"``).
    dim_a : int
        Contracted dimension size of the left operand.
    dim_b : int
        Contracted dimension size of the right operand.
    """

    def __init__(self, op: str, dim_a: int, dim_b: int) -> None:
        super().__init__(f"{op}: inner dimensions must match ({dim_a} vs {dim_b}).")
        self.op = op
        self.dim_a = dim_a
        self.dim_b = dim_b


class UnsupportedRankError(TensorError, ValueError):
    """
    Raised when `dot` is invoked on an unsupported rank combination.

    Only 1D·1D, 2D·2D, 2D·1D and 1D·2D are supported.

    Attributes
    ----------
    op : str
        The operation name.
    ndim_a : int
        Rank of the left operand.
    ndim_b : int
        Rank of the right operand.
    """

    def __init__(self, op: str, ndim_a: int, ndim_b: int) -> None:
        super().__init__(
            f"{op}: unsupported operand ranks ({ndim_a}D·{ndim_b}D); "
            f"only 1D/2D operands are supported."
        )
        self.op = op
        self.ndim_a = ndim_a
        self.ndim_b = ndim_b
