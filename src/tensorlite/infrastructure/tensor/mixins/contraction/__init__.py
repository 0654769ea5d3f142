"""
Contraction mixin and rank-specific implementations for Tensor `dot`.

Design notes
------------
- `_tensor_dot` is imported for its *side effects*: registering one control
  path per supported rank pair with the tensor control-path manager.
- The implementation module is not part of the public API and should not be
  imported directly by users.

Public API
----------
- ``TensorMixinContraction``
"""

from ._tensor_dot import *
from ._base import TensorMixinContraction

__all__ = [
    TensorMixinContraction.__name__,
]
