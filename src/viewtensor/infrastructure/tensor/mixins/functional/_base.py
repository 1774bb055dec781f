"""
Elementwise engine: user functions, masks and filters.

This module defines `TensorMixinFunctional`, the operations that apply
arbitrary Python callables to tensor elements:

- `map` / `Tensor.apply_function`: one value in, one value out,
- `Tensor.apply_binary_operation`: broadcast two tensors, then combine pairs,
- `apply_mask` / `filter`: select leading cells by a boolean mask,
- `replace`: substitute elements that satisfy a predicate.

Callables receive and return Python scalars. Results are converted to the
requested element type when stored. Unlike the typed operators, these paths
run one Python call per element.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import numpy as np

from .....domain._errors import InvalidArgumentError, InvalidTypeError
from .....domain._tensor import ITensor
from .....domain.types._dtype import DataType


class TensorMixinFunctional:
    """
    Callable-driven elementwise operations for the concrete Tensor.

    Notes
    -----
    The host class must provide ``from_data``, ``empty``, ``broadcast`` and
    ``to_list``.
    """

    @staticmethod
    def apply_function(
        tensor: ITensor,
        function: Callable[[Any], Any],
        dtype: Optional[DataType] = None,
    ) -> ITensor:
        """
        Apply `function` to every element of `tensor`.

        Parameters
        ----------
        tensor : ITensor
            Source tensor.
        function : Callable[[Any], Any]
            Called once per element, in row-major order.
        dtype : Optional[DataType]
            Element type of the result. Defaults to the source type.

        Returns
        -------
        ITensor
            New tensor of the same shape.
        """
        values = [function(value) for value in tensor.to_list()]
        return tensor.from_data(values, tensor.shape, dtype or tensor.dtype)

    def map(
        self: ITensor,
        function: Callable[[Any], Any],
        dtype: Optional[DataType] = None,
    ) -> ITensor:
        """Instance form of `apply_function`."""
        return self.apply_function(self, function, dtype)

    @staticmethod
    def apply_binary_operation(
        tensor1: ITensor,
        tensor2: ITensor,
        operation: Callable[[Any, Any], Any],
        dtype: Optional[DataType] = None,
    ) -> ITensor:
        """
        Broadcast two tensors and combine their elements pairwise.

        Parameters
        ----------
        tensor1, tensor2 : ITensor
            Operands; element types may differ.
        operation : Callable[[Any, Any], Any]
            Called once per broadcast position with ``(a, b)``.
        dtype : Optional[DataType]
            Element type of the result. Defaults to ``tensor1.dtype``.

        Raises
        ------
        InvalidArgumentError
            If the shapes are not broadcast-compatible.
        """
        a, b = tensor1.broadcast(tensor1, tensor2)
        values = [operation(x, y) for x, y in zip(a.to_list(), b.to_list())]
        return tensor1.from_data(values, a.shape, dtype or tensor1.dtype)

    def apply_mask(self: ITensor, mask: ITensor) -> ITensor:
        """
        Select the cells whose mask entry is True.

        Parameters
        ----------
        mask : ITensor
            BOOLEAN tensor whose shape equals the leading ``mask.rank``
            dimensions of the receiver.

        Returns
        -------
        ITensor
            Tensor of shape ``(count,) + self.shape[mask.rank:]`` holding the
            selected cells in row-major order, or the rank-0 tensor when no
            entry is True.

        Raises
        ------
        InvalidTypeError
            If `mask` is not BOOLEAN.
        InvalidArgumentError
            If the mask shape does not match the receiver's leading shape.

        Examples
        --------
        >>> t = Tensor.from_nested([[5, 6, 1], [-1, 0, 2]], DataType.INT)
        >>> t.apply_mask(t > 0).to_list()
        [5, 6, 1, 2]
        """
        if not mask.dtype.is_boolean():
            raise InvalidTypeError(f"mask must be BOOLEAN, got {mask.dtype.name}")
        if mask.rank == 0 or mask.rank > self.rank or self.shape[: mask.rank] != mask.shape:
            raise InvalidArgumentError(
                "the corresponding dimensions of the mask and the tensor should be equal"
            )

        selected = self.to_numpy()[mask.to_numpy()]
        if selected.shape[0] == 0:
            return self.empty(self.dtype)
        return self._from_logical(selected.shape, self.dtype, np.ravel(selected))

    def filter(self: ITensor, predicate: Callable[[Any], bool]) -> ITensor:
        """Keep the elements satisfying `predicate`, flattened into one dimension."""
        return self.apply_mask(self.map(predicate, DataType.BOOLEAN))

    def replace(
        self: ITensor,
        predicate: Callable[[Any], bool],
        replacer: Callable[[Any], Any],
    ) -> ITensor:
        """
        Replace every element satisfying `predicate` with ``replacer(element)``.

        Elements for which the predicate is False are kept unchanged.
        """
        return self.map(lambda x: replacer(x) if predicate(x) else x)
