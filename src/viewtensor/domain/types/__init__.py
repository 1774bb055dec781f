from ._dtype import DataType, ElementKind

__all__ = [
    DataType.__name__,
    ElementKind.__name__,
]
