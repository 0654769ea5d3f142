"""
Tensor control-path manager for rank-pair dispatch.

This module defines a shared control-path manager used to register and resolve
rank-specific implementations of Tensor methods that take a second tensor
operand.

The manager is created by specializing the generic `create_path_builder`
utility with a key function returning ``(self.ndim, other.ndim)``. As a
result, method dispatch is performed on the ranks of both operands.

Typical usage
-------------
Rank-specific kernels register themselves using this manager:

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, (1, 1))
    def op_1d_1d(self, other): ...

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, (2, 2))
    def op_2d_2d(self, other): ...

At runtime, calling ``Tensor.op(other)`` dispatches to the implementation whose
registered key equals ``(self.ndim, other.ndim)``.

Notes
-----
- All control paths registered via this manager share a single internal
  registry, ensuring consistent dispatch behavior across the Tensor subsystem.
"""

from ...domain.utils._control_path import create_path_builder


def _rank_pair(self, other, *args, **kwargs) -> tuple[int, int]:
    """Dispatch key: ranks of the receiver and of the first operand."""
    return (self.ndim, other.ndim)


# Control-path manager that dispatches Tensor methods on (self.ndim, other.ndim)
tensor_control_path_manager = create_path_builder(_rank_pair)
