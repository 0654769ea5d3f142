"""
Public import location of the concrete Tensor.

The implementation lives in :mod:`tensorlite.infrastructure.tensor._tensor`;
this module re-exports it so callers can write
``from tensorlite.infrastructure._tensor import Tensor``.
"""

from .tensor import Tensor, DEFAULT_DTYPE, DEFAULT_MAX_ELEMS

__all__ = [
    Tensor.__name__,
    "DEFAULT_DTYPE",
    "DEFAULT_MAX_ELEMS",
]
