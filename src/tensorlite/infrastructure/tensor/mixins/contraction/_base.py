"""
Contraction mixin defining the Tensor `dot` API.

This module declares :class:`TensorMixinContraction`, the mixin that exposes
rank-restricted contraction on tensors:

- ``dot`` / ``matmul`` / ``@`` validate the operand type, then call
  ``_dot``.
- ``_dot`` is a dispatch point: concrete kernels for each supported rank
  pair are registered on it through the tensor control-path manager (see
  ``_tensor_dot.py``). An unregistered rank pair raises
  `UnsupportedRankError`.
"""

from .....domain._tensor import ITensor


class TensorMixinContraction:
    """
    Mixin defining contraction (`dot`) for tensors.

    Supported operand ranks:

    ======  =======  ==========================================
    left    right    result
    ======  =======  ==========================================
    1       1        shape ``(1,)``: sum of pairwise products
    2       2        ``(M, N)`` for ``(M, K) · (K, N)``
    2       1        ``(M,)`` for ``(M, K) · (K,)``
    1       2        ``(N,)`` for ``(K,) · (K, N)``
    ======  =======  ==========================================

    No broadcasting is performed.
    """

    def dot(self: ITensor, other: "ITensor") -> "ITensor":
        """
        Contract this tensor with `other`.

        Parameters
        ----------
        other : ITensor
            Right operand (rank 1 or 2).

        Returns
        -------
        ITensor
            Newly allocated result (see the class table).

        Raises
        ------
        TypeError
            If `other` is not a Tensor.
        UnsupportedRankError
            If the rank pair is not one of the four supported pairs.
        DimensionMismatchError
            If the contracted dimensions disagree.
        """
        if not isinstance(other, type(self)):
            raise TypeError(f"dot expects Tensor, got {type(other)!r}")
        return self._dot(other)

    def matmul(self: ITensor, other: "ITensor") -> "ITensor":
        """Alias of :meth:`dot`."""
        return self.dot(other)

    def __matmul__(self: ITensor, other: "ITensor") -> "ITensor":
        """Support the ``@`` operator."""
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.dot(other)

    def _dot(self: ITensor, other: "ITensor") -> "ITensor":
        """
        Rank-pair dispatch point for contraction kernels.

        Replaced by the control-path wrapper once kernels are registered.
        """
        ...
