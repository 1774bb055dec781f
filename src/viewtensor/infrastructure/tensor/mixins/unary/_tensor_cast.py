"""
Kind-specific boolean conversions.

`cast_to_boolean` is registered for the numeric kinds and
`cast_from_boolean` for BOOLEAN only, so each direction rejects tensors that
are already on the other side of the conversion.
"""

from ..._tensor_builder import tensor_control_path_manager, type_not_supported

from .....domain._errors import InvalidTypeError
from .....domain._tensor import ITensor
from .....domain.types._dtype import DataType, ElementKind

from ._base import TensorMixinUnary as TMU


@tensor_control_path_manager(TMU, TMU.cast_to_boolean, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMU, TMU.cast_to_boolean, ElementKind.FLOATING, type_not_supported)
def tensor_cast_to_boolean(self: ITensor) -> "ITensor":
    return self.cast(DataType.BOOLEAN)


@tensor_control_path_manager(TMU, TMU.cast_from_boolean, ElementKind.BOOLEAN, type_not_supported)
def tensor_cast_from_boolean(self: ITensor, dtype: DataType) -> "ITensor":
    """
    BOOLEAN control path for the conversion to a numeric type.

    Raises
    ------
    InvalidTypeError
        If `dtype` is not numeric.
    """
    if not dtype.is_numeric():
        raise InvalidTypeError(f"cast_from_boolean: {dtype.name} type not supported")
    return self.cast(dtype)
