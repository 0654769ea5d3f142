from ._tensor import Tensor, DEFAULT_DTYPE, DEFAULT_MAX_ELEMS


__all__ = [
    Tensor.__name__,
    "DEFAULT_DTYPE",
    "DEFAULT_MAX_ELEMS",
]
