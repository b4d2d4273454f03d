from ._array import Array
from ._factories import DimensionType, arr

__all__ = [
    Array.__name__,
    DimensionType.__name__,
    "arr",
]
