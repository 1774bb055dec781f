"""
Broadcasting engine and binary-operand helpers.

This module defines `TensorMixinBroadcast`, which brings two tensors to a
common shape following NumPy broadcasting rules, and the helpers every binary
operator uses to prepare its operands:

- `_as_tensor_like`: lift a Python scalar to a single-value tensor of the
  receiver's type, or check that a tensor operand has the receiver's type,
- `_binary_elementwise`: broadcast both operands and run a vectorized kernel
  over their logical element arrays.

Broadcasting rules
------------------
1. Identical shapes pass through unchanged (no copy).
2. Shapes are aligned on their trailing dimensions. Each aligned pair must be
   equal or contain a 1; otherwise broadcasting fails.
3. Size-1 axes in the aligned region are stretched to the other operand's
   size, and the lower-rank operand is replicated across the missing leading
   dimensions.

Stretching is eager: broadcast results are compact copies, never views, so a
write through one of them can not alias several logical cells.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, Union

import numpy as np

from .....domain._errors import InvalidArgumentError, InvalidTypeError
from .....domain._tensor import ITensor
from .....domain.types._dtype import DataType
from .....domain.utils._shape import are_shapes_compatible
from ..._indices import row_major_indices

Number = Union[bool, int, float]
"""Scalar types accepted as binary operands."""


class TensorMixinBroadcast:
    """
    Broadcasting support for the concrete Tensor.

    Notes
    -----
    The host class must provide ``_from_logical(...)``, ``_logical()`` and
    ``single_value(...)``.
    """

    @staticmethod
    def broadcast_shape(shape1: Sequence[int], shape2: Sequence[int]) -> tuple[int, ...]:
        """
        Compute the common shape of two broadcast-compatible shapes.

        Raises
        ------
        InvalidArgumentError
            If the shapes are not compatible.
        """
        if not are_shapes_compatible(shape1, shape2):
            raise InvalidArgumentError("could not broadcast operands together")

        longer, shorter = (shape1, shape2) if len(shape1) >= len(shape2) else (shape2, shape1)
        lead = len(longer) - len(shorter)
        aligned = tuple(max(a, b) for a, b in zip(longer[lead:], shorter))
        return tuple(longer[:lead]) + aligned

    def broadcast_to(self: ITensor, shape: Sequence[int]) -> ITensor:
        """
        Stretch the tensor to `shape`.

        Parameters
        ----------
        shape : Sequence[int]
            Target shape. Its rank must be at least the tensor's rank, and each
            trailing-aligned dimension must equal the tensor's or the tensor's
            must be 1.

        Returns
        -------
        ITensor
            The receiver itself if the shape already matches, otherwise a
            compact copy of the target shape.

        Raises
        ------
        InvalidArgumentError
            If the tensor can not be stretched to `shape`.
        """
        shape = tuple(int(d) for d in shape)
        if shape == self.shape:
            return self
        if self.rank == 0 or len(shape) < self.rank:
            raise InvalidArgumentError("could not broadcast operands together")

        lead = len(shape) - self.rank
        for source, target in zip(self.shape, shape[lead:]):
            if source != target and source != 1:
                raise InvalidArgumentError("could not broadcast operands together")

        # size-1 source axes always read index 0
        grid = row_major_indices(shape)[:, lead:]
        keep = np.asarray([d != 1 for d in self.shape], dtype=np.int64)
        strides = np.asarray(self.strides, dtype=np.int64)
        positions = (grid * keep) @ strides

        return self._from_logical(shape, self.dtype, self._logical()[positions])

    @staticmethod
    def broadcast(tensor1: ITensor, tensor2: ITensor) -> tuple[ITensor, ITensor]:
        """
        Bring two tensors to a common shape.

        Parameters
        ----------
        tensor1, tensor2 : ITensor
            Operands, possibly of different ranks and element types.

        Returns
        -------
        tuple[ITensor, ITensor]
            Both operands with the same shape. Operands whose shape already
            equals the common shape are returned unchanged.

        Raises
        ------
        InvalidArgumentError
            If the shapes are not broadcast-compatible, or exactly one operand
            is the rank-0 tensor.

        Examples
        --------
        >>> a, b = Tensor.broadcast(Tensor.ones((3, 1)), Tensor.ones((1, 4)))
        >>> a.shape, b.shape
        ((3, 4), (3, 4))
        """
        if tensor1.shape == tensor2.shape:
            return tensor1, tensor2
        if tensor1.rank == 0 or tensor2.rank == 0:
            raise InvalidArgumentError("could not broadcast operands together")

        shape = TensorMixinBroadcast.broadcast_shape(tensor1.shape, tensor2.shape)
        return tensor1.broadcast_to(shape), tensor2.broadcast_to(shape)

    # ----------------------------
    # Binary operand helpers
    # ----------------------------
    def _as_tensor_like(self: ITensor, other: Union[ITensor, Number]) -> ITensor:
        """
        Prepare the right-hand operand of a binary operator.

        Scalars (Python or NumPy) are lifted to a single-value tensor of the
        receiver's element type. Tensors must share the receiver's type.

        Raises
        ------
        InvalidTypeError
            If `other` is a tensor of another element type, or neither a tensor
            nor a scalar.
        """
        if isinstance(other, TensorMixinBroadcast):
            if other.dtype is not self.dtype:
                raise InvalidTypeError(
                    f"operand types differ: {self.dtype.name} and {other.dtype.name}"
                )
            return other

        if isinstance(other, np.generic):
            other = other.item()
        if isinstance(other, (bool, int, float)):
            return self.single_value(other, self.dtype)

        raise InvalidTypeError(f"unsupported operand type {type(other).__name__}")

    def _binary_elementwise(
        self: ITensor,
        other: Union[ITensor, Number],
        kernel: Callable[[np.ndarray, np.ndarray], np.ndarray],
        dtype: Optional[DataType] = None,
    ) -> ITensor:
        """
        Broadcast the operands and apply a vectorized kernel.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand (see `_as_tensor_like`).
        kernel : Callable[[np.ndarray, np.ndarray], np.ndarray]
            Function of the two flat logical element arrays.
        dtype : Optional[DataType]
            Element type of the result. Defaults to the receiver's type.

        Returns
        -------
        ITensor
            New, non-view tensor of the broadcast shape.
        """
        a, b = self.broadcast(self, self._as_tensor_like(other))
        out = kernel(a._logical(), b._logical())
        return self._from_logical(a.shape, dtype or self.dtype, np.asarray(out))

    def _unary_elementwise(
        self: ITensor,
        kernel: Callable[[np.ndarray], np.ndarray],
        dtype: Optional[DataType] = None,
    ) -> ITensor:
        """Apply a vectorized kernel to the logical element array."""
        out = kernel(self._logical())
        return self._from_logical(self.shape, dtype or self.dtype, np.asarray(out))
