"""
Rank-specific implementations of Tensor contraction via control-path dispatch.

This module registers one CPU kernel per supported operand-rank pair on
`TensorMixinContraction._dot`. Implementations are selected at runtime using
the `tensor_control_path_manager`, which dispatches on
``(self.ndim, other.ndim)``:

- (1, 1) -> vector · vector
- (2, 2) -> matrix · matrix
- (2, 1) -> matrix · vector
- (1, 2) -> vector · matrix

Any other rank pair is trapped and raises `UnsupportedRankError`.
"""

from ..._tensor_builder import tensor_control_path_manager

from .....domain._errors import UnsupportedRankError
from .....domain._tensor import ITensor
from ....ops import dot_cpu

from ._base import TensorMixinContraction as TMC


def _unsupported_rank(method, self: ITensor, other: ITensor) -> UnsupportedRankError:
    """Build the error raised for an unregistered rank pair."""
    return UnsupportedRankError("dot", self.ndim, other.ndim)


@tensor_control_path_manager(TMC, TMC._dot, (1, 1), _unsupported_rank)
def tensor_dot_1d_1d(self: ITensor, other: ITensor) -> ITensor:
    """
    Vector · vector control path.

    Returns a rank-1, size-1 tensor holding the inner product.
    """
    return dot_cpu.dot_1d_1d(self, other)


@tensor_control_path_manager(TMC, TMC._dot, (2, 2))
def tensor_dot_2d_2d(self: ITensor, other: ITensor) -> ITensor:
    """Matrix · matrix control path: (M, K) · (K, N) -> (M, N)."""
    return dot_cpu.dot_2d_2d(self, other)


@tensor_control_path_manager(TMC, TMC._dot, (2, 1))
def tensor_dot_2d_1d(self: ITensor, other: ITensor) -> ITensor:
    """Matrix · vector control path: (M, K) · (K,) -> (M,)."""
    return dot_cpu.dot_2d_1d(self, other)


@tensor_control_path_manager(TMC, TMC._dot, (1, 2))
def tensor_dot_1d_2d(self: ITensor, other: ITensor) -> ITensor:
    """
    Vector · matrix control path: the vector is treated as a (1, K) row and
    the (1, N) product is returned as a length-N vector.
    """
    return dot_cpu.dot_1d_2d(self, other)
