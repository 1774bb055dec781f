from ._control_path import create_path_builder
from ._shape import (
    are_shapes_compatible,
    compute_size,
    compute_strides,
    flat_position,
    normalize_shape,
)

__all__ = [
    "are_shapes_compatible",
    "compute_size",
    "compute_strides",
    "create_path_builder",
    "flat_position",
    "normalize_shape",
]
