from ._indices import IndexIterator, resolve_flat_position, row_major_indices
from ._storage import Storage
from ._tensor import Tensor

__all__ = [
    IndexIterator.__name__,
    Storage.__name__,
    Tensor.__name__,
    resolve_flat_position.__name__,
    row_major_indices.__name__,
]
