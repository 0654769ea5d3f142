"""
Arithmetic mixin defining elementwise Tensor operators.

This module declares :class:`TensorMixinArithmetic`, the mixin that provides
the public elementwise arithmetic API (``+``, ``-``, ``*``, ``/`` and their
reflected forms) on tensors.

Every operator funnels into :meth:`TensorMixinArithmetic.apply`, which lifts
scalar operands and hands both tensors to the shared broadcasting-aware apply
engine (:func:`~tensorlite.infrastructure.ops.elementwise_cpu.apply_binary`).
"""

from typing import Any, Callable, Union

import numpy as np

from .....domain._tensor import ITensor
from ....ops.elementwise_cpu import apply_binary, truncate_divide

Number = Union[int, float, np.number]
"""Scalar types accepted by Tensor arithmetic operators."""


class TensorMixinArithmetic:
    """
    Mixin defining elementwise arithmetic operations for tensors.

    Notes
    -----
    - Tensor operands are combined under right-aligned broadcasting; operands
      of identical shape take the linear fast path.
    - Scalars are lifted to ``(1,)`` tensors (the scalar convention used
      throughout the engine, matching the result of 1D·1D `dot`) and
      broadcast against the receiver.
    - Results always own a fresh buffer; operands are never modified.
    """

    @staticmethod
    def _as_tensor_like(x: Union["ITensor", Number], like: "ITensor") -> "ITensor":
        """
        Convert an operand into a Tensor usable against a reference tensor.

        If `x` is already a Tensor, it is returned as-is. If `x` is a scalar,
        a new ``(1,)`` tensor holding it is created. Its dtype follows NumPy
        promotion of `like.dtype` with the scalar, so a float scalar against
        an integer tensor yields a float scalar tensor.

        Parameters
        ----------
        x : Union[ITensor, Number]
            Operand to convert.
        like : ITensor
            Reference tensor providing the dtype and class.

        Returns
        -------
        ITensor
            A tensor operand.

        Raises
        ------
        TypeError
            If `x` is neither a Tensor nor a supported scalar type, or if `x` is
            a Python int outside the range of an integer `like.dtype`.
        """
        TensorClass = type(like)
        if isinstance(x, TensorClass):
            return x
        if isinstance(x, (bool, np.bool_)):
            raise TypeError(f"Unsupported operand type: {type(x)!r}")
        if isinstance(x, (int, float, np.number)):
            if isinstance(x, int) and like.dtype.kind in "iu":
                info = np.iinfo(like.dtype)
                if not info.min <= x <= info.max:
                    raise TypeError(
                        f"Scalar operand {x!r} does not fit tensor dtype {like.dtype}"
                    )
            dtype = np.result_type(like.dtype, x)
            return TensorClass((1,), [x], dtype=dtype)
        raise TypeError(f"Unsupported operand type: {type(x)!r}")

    def apply(
        self: ITensor,
        other: Union["ITensor", Number],
        op: Callable[[Any, Any], Any],
    ) -> "ITensor":
        """
        Broadcasting-aware elementwise binary operation.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand.
        op : Callable
            NumPy ufunc, or any binary function of two element values (for
            example ``lambda x, y: x if x > y else y``). Plain functions are
            called once per output element; mark array-level functions with
            `elementwise_cpu.array_op` to keep them vectorized.

        Returns
        -------
        ITensor
            ``op(self, other)`` evaluated elementwise.

        Raises
        ------
        BroadcastIncompatibleError
            If the shapes cannot be broadcast together.
        """
        other_t = self._as_tensor_like(other, self)
        return apply_binary(self, other_t, op)

    # ----------------------------
    # Addition
    # ----------------------------
    def __add__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise addition, ``self + other``.
        """
        if not self._is_operand(other):
            return NotImplemented
        return self.apply(other, np.add)

    def __radd__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand addition to support ``scalar + Tensor``.

        Notes
        -----
        The scalar is lifted and placed on the left so the result dtype and
        evaluation order match ``Tensor + Tensor``.
        """
        if not self._is_operand(other):
            return NotImplemented
        return self._as_tensor_like(other, self).apply(self, np.add)

    # ----------------------------
    # Subtraction
    # ----------------------------
    def __sub__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise subtraction, ``self - other``.
        """
        if not self._is_operand(other):
            return NotImplemented
        return self.apply(other, np.subtract)

    def __rsub__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand subtraction to support ``scalar - Tensor``.
        """
        if not self._is_operand(other):
            return NotImplemented
        return self._as_tensor_like(other, self).apply(self, np.subtract)

    # ----------------------------
    # Multiplication
    # ----------------------------
    def __mul__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise multiplication, ``self * other``.
        """
        if not self._is_operand(other):
            return NotImplemented
        return self.apply(other, np.multiply)

    def __rmul__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand multiplication to support ``scalar * Tensor``.
        """
        if not self._is_operand(other):
            return NotImplemented
        return self._as_tensor_like(other, self).apply(self, np.multiply)

    # ----------------------------
    # True division
    # ----------------------------
    def __truediv__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise division, ``self / other``.

        Notes
        -----
        Integer tensors produce exact quotients rounded toward zero, computed
        without a floating-point intermediate. Floating-point division
        by zero yields inf/nan (with NumPy's ``RuntimeWarning``); integer
        division by zero is unspecified.
        """
        if not self._is_operand(other):
            return NotImplemented
        return self.apply(other, truncate_divide)

    def __rtruediv__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand division to support ``scalar / Tensor``.
        """
        if not self._is_operand(other):
            return NotImplemented
        return self._as_tensor_like(other, self).apply(self, truncate_divide)

    @classmethod
    def _is_operand(cls, x: Any) -> bool:
        """Whether `x` can participate in an arithmetic operator."""
        if isinstance(x, (bool, np.bool_)):
            return False
        return isinstance(x, (cls, int, float, np.number))
