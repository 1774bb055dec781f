"""
Reduction mixin defining the public Tensor reduction API.

This module declares :class:`TensorMixinReduction`, which provides:

- the generic reduction engine (`reduce_along`, `reduce_all`), which folds
  elements with an arbitrary accumulator and is defined for every kind,
- interface declarations of the built-in reductions (`sum`, `product`,
  `max`, `min`, `mean`, `var`, `std`, `argmax`, `argmin`). Their concrete
  implementations are registered elsewhere via control-path dispatch on the
  element kind and are defined for the numeric kinds only.

Fold order
----------
Elements of one reduced lane are folded in row-major (Index Iterator) order,
starting from the identity: ``acc = accumulator(acc, x)``. For a fixed
position of the other dimensions this visits the reduced axis from index 0
upward, so order-sensitive accumulators (first-occurrence argmax,
floating-point sums) behave deterministically.
"""

from __future__ import annotations

from abc import ABC
from functools import reduce
from typing import Any, Callable, Optional

import numpy as np

from .....domain._errors import InvalidArgumentError
from .....domain._tensor import ITensor
from .....domain.types._dtype import DataType


class TensorMixinReduction(ABC):
    """
    Reduction operations for tensors.

    Notes
    -----
    - `dimension` must satisfy ``0 <= dimension < rank``.
    - With ``keep_dimensions=True`` the reduced dimension is kept with size 1;
      otherwise it is removed, which is rejected for rank-1 tensors because
      the result would have no dimensions.
    """

    # ----------------------------
    # Engine
    # ----------------------------
    def _reduced_shape(self: ITensor, dimension: int, keep_dimensions: bool) -> tuple[int, ...]:
        """
        Validate a reduction request and return the result shape.

        Raises
        ------
        InvalidArgumentError
            If `dimension` is out of range, or the tensor has rank 1 and
            `keep_dimensions` is False.
        """
        self._check_dimension(dimension)
        if keep_dimensions:
            return self.shape[:dimension] + (1,) + self.shape[dimension + 1 :]
        if self.rank == 1:
            raise InvalidArgumentError(
                "keep_dimensions can not be false if the tensor has only one dimension"
            )
        return self.shape[:dimension] + self.shape[dimension + 1 :]

    def _fold_along(
        self: ITensor,
        dimension: int,
        keep_dimensions: bool,
        fold: Callable[[list[Any]], Any],
        dtype: Optional[DataType] = None,
    ) -> ITensor:
        """
        Apply `fold` to every lane of values along `dimension`.

        Parameters
        ----------
        dimension : int
            Dimension to reduce.
        keep_dimensions : bool
            Whether the reduced dimension is kept with size 1.
        fold : Callable[[list[Any]], Any]
            Receives the lane's values (Python scalars, ascending index order)
            and returns the lane's result.
        dtype : Optional[DataType]
            Element type of the result. Defaults to the receiver's type.
        """
        shape = self._reduced_shape(dimension, keep_dimensions)
        lanes = np.moveaxis(self.to_numpy(), dimension, -1)
        lanes = lanes.reshape(-1, self.shape[dimension])
        values = [fold(lane) for lane in lanes.tolist()]
        return self.from_data(values, shape, dtype or self.dtype)

    def reduce_along(
        self: ITensor,
        identity: Any,
        accumulator: Callable[[Any, Any], Any],
        dimension: int,
        keep_dimensions: bool = False,
    ) -> ITensor:
        """
        Fold every lane along `dimension` with `accumulator`.

        Parameters
        ----------
        identity : Any
            Initial accumulator value of every lane.
        accumulator : Callable[[Any, Any], Any]
            Binary operation ``(acc, element) -> acc``.
        dimension : int
            Dimension to reduce.
        keep_dimensions : bool, optional
            Keep the reduced dimension with size 1. Defaults to False.

        Returns
        -------
        ITensor
            Tensor of the receiver's type holding one folded value per lane.

        Raises
        ------
        InvalidArgumentError
            If `dimension` is invalid, or the tensor has rank 1 and
            `keep_dimensions` is False.

        Examples
        --------
        >>> t = Tensor.from_nested([[1, 2], [3, 4]], DataType.INT)
        >>> t.reduce_along(0, lambda a, b: a + b, 1).to_list()
        [3, 7]
        """
        return self._fold_along(
            dimension,
            keep_dimensions,
            lambda lane: reduce(accumulator, lane, identity),
        )

    def reduce_all(
        self: ITensor,
        identity: Any,
        accumulator: Callable[[Any, Any], Any],
        dimension: int,
        keep_dimensions: bool = False,
    ) -> ITensor:
        """
        Fold every element contained in `dimension` and the ones after it.

        Dimensions ``dimension..rank-1`` are collapsed into one axis of size
        ``strides[dimension] * shape[dimension]``, which is then reduced.

        Returns
        -------
        ITensor
            - ``keep_dimensions=True``: the receiver's rank, with size 1 from
              `dimension` onward.
            - otherwise: only the dimensions before `dimension`, or shape
              ``(1,)`` when `dimension` is 0.

        Raises
        ------
        InvalidArgumentError
            If `dimension` is invalid, or the tensor has rank 1 and
            `keep_dimensions` is False.
        """
        self._check_dimension(dimension)
        if not keep_dimensions and self.rank == 1:
            raise InvalidArgumentError(
                "keep_dimensions can not be false if the tensor has only one dimension"
            )

        collapsed = self.shape[:dimension] + (self.strides[dimension] * self.shape[dimension],)
        reduced = self.reshape(collapsed).reduce_along(identity, accumulator, dimension, True)

        if keep_dimensions:
            return reduced.reshape(self.shape[:dimension] + (1,) * (self.rank - dimension))
        if reduced.rank == 1:
            return reduced
        return reduced.squeeze(dimension)

    # ----------------------------
    # Built-in reductions (numeric kinds)
    # ----------------------------
    def sum(self: ITensor, dimension: int, keep_dimensions: bool = False) -> ITensor:
        """
        Sum along a dimension.

        The identity is the type's zero; integral sums wrap.
        """
        ...

    def product(self: ITensor, dimension: int, keep_dimensions: bool = False) -> ITensor:
        """Product along a dimension, starting from the type's one."""
        ...

    def max(self: ITensor, dimension: int, keep_dimensions: bool = False) -> ITensor:
        """
        Maximum along a dimension.

        The identity is the most negative value of the type (``-inf`` for
        floating types).
        """
        ...

    def min(self: ITensor, dimension: int, keep_dimensions: bool = False) -> ITensor:
        """Minimum along a dimension, starting from the type's largest value."""
        ...

    def mean(self: ITensor, dimension: int, keep_dimensions: bool = False) -> ITensor:
        """
        Arithmetic mean along a dimension.

        Computed as ``sum / shape[dimension]`` in the receiver's type, so
        integral means truncate toward zero.
        """
        ...

    def var(self: ITensor, dimension: int, keep_dimensions: bool = False) -> ITensor:
        """
        Population variance along a dimension.

        Returns
        -------
        ITensor
            ``mean((x - mean(x)) ** 2)`` along `dimension`, in the receiver's
            type. A dimension of size 1 yields zeros without further
            arithmetic.
        """
        ...

    def std(self: ITensor, dimension: int, keep_dimensions: bool = False) -> ITensor:
        """Population standard deviation: ``sqrt(var)``."""
        ...

    def argmax(self: ITensor, dimension: int, keep_dimensions: bool = False) -> ITensor:
        """
        Index of the maximum along a dimension.

        Returns
        -------
        ITensor
            INT tensor of positions along `dimension`. On ties the first
            occurrence wins.
        """
        ...

    def argmin(self: ITensor, dimension: int, keep_dimensions: bool = False) -> ITensor:
        """Index of the minimum along a dimension (INT, first occurrence wins)."""
        ...
