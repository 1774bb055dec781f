"""
Numeric capabilities per element type.

`numeric_traits(dtype)` is the single collaborator through which tensors
perform element arithmetic, comparison and conversion.
"""

from ._traits import (
    BooleanTraits,
    FloatingTraits,
    IntegralTraits,
    NumericTraits,
    data_type_of,
    numeric_traits,
    numpy_dtype,
)

__all__ = [
    "BooleanTraits",
    "FloatingTraits",
    "IntegralTraits",
    "NumericTraits",
    "data_type_of",
    "numeric_traits",
    "numpy_dtype",
]
