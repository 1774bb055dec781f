"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects using
structural typing. The interface captures the metadata and element access
every tensor exposes, independent of how storage is implemented.

Notes
-----
The protocol deliberately stops at the structural surface (shape, strides,
indirection, element access, view transforms). Arithmetic, reductions and
codecs live on the concrete infrastructure `Tensor`.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, Sequence, runtime_checkable

from .types._dtype import DataType, ElementKind


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` is a dense, homogeneously typed multi-dimensional array whose
    logical multi-indices are mapped to physical storage offsets through
    row-major strides and an indirection table.

    Notes
    -----
    - Shape metadata is immutable after construction; element content is
      mutable through `set_item`.
    - Several tensors may alias the same storage (views). Mutations through
      one are visible through the others.
    """

    # ---------------------------------------------------------------------
    # Metadata
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            Strictly positive dimension sizes; empty for a rank-0 tensor.
        """
        ...

    @property
    def strides(self) -> tuple[int, ...]:
        """
        Return the row-major strides of the tensor's shape.

        Returns
        -------
        tuple[int, ...]
            ``strides[i]`` equals the product of ``shape[i + 1:]``.
        """
        ...

    @property
    def size(self) -> int:
        """Number of logical elements (0 for a rank-0 tensor)."""
        ...

    @property
    def rank(self) -> int:
        """Number of dimensions."""
        ...

    @property
    def dtype(self) -> DataType:
        """Element type of the tensor."""
        ...

    @property
    def kind(self) -> ElementKind:
        """Element kind used for operator dispatch."""
        ...

    @property
    def is_view(self) -> bool:
        """True if the storage is (potentially) shared with another tensor."""
        ...

    # ---------------------------------------------------------------------
    # Element access
    # ---------------------------------------------------------------------
    def get_item(self, indices: Sequence[int]) -> Any:
        """
        Read the element at a multi-index.

        Parameters
        ----------
        indices : Sequence[int]
            One index per dimension.

        Returns
        -------
        Any
            The element as a Python scalar.
        """
        ...

    def set_item(self, indices: Sequence[int], value: Any) -> None:
        """
        Write the element at a multi-index.

        Parameters
        ----------
        indices : Sequence[int]
            One index per dimension.
        value : Any
            New value, converted to the tensor's element type.
        """
        ...

    def indices(self) -> Iterator[tuple[int, ...]]:
        """
        Return a fresh iterator over every multi-index in row-major order.
        """
        ...

    # ---------------------------------------------------------------------
    # View transforms
    # ---------------------------------------------------------------------
    def reshape(self, shape: Sequence[int]) -> "ITensor":
        """Return a tensor with the same elements and a new shape."""
        ...

    def transpose(self) -> "ITensor":
        """Return a view with all dimensions reversed."""
        ...

    def swap_dimensions(self, dimension1: int, dimension2: int) -> "ITensor":
        """Return a view with two dimensions exchanged."""
        ...

    def slice(self, intervals: Sequence[Sequence[int]]) -> "ITensor":
        """Return a view restricted to half-open intervals, one per dimension."""
        ...

    def reverse(self, dimension: int) -> "ITensor":
        """Return a view with the order along one dimension reversed."""
        ...
