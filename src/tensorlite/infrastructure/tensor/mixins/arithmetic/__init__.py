"""
Arithmetic mixin for Tensor operations.

This package provides the elementwise arithmetic operators of the Tensor:

- addition           (``__add__`` / ``__radd__``)
- subtraction        (``__sub__`` / ``__rsub__``)
- multiplication     (``__mul__`` / ``__rmul__``)
- true division      (``__truediv__`` / ``__rtruediv__``)
- generic binary op  (``apply``)

All of them are implemented by one broadcasting-aware apply routine in
``infrastructure/ops/elementwise_cpu.py``.

Public API
----------
Only the mixin class is exported as part of the public interface:

- ``TensorMixinArithmetic``
"""

from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
