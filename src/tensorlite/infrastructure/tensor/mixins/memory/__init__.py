"""
Tensor memory operations for tensorlite.

This package provides the memory-related `Tensor` mixin:

- `zeros`        : zero-filled factory
- `from_numpy`   : copy an array-like into a new tensor
- `to_numpy`     : materialize tensor data as a shaped NumPy ndarray
- `clone`        : deep copy of tensor storage
- `fill`         : in-place scalar fill

Public API
----------
Only `TensorMixinMemory` is re-exported as part of the public interface.
"""

from ._base import TensorMixinMemory

__all__ = [
    TensorMixinMemory.__name__,
]
