"""
Dimension descriptors.

- ``Ix`` / ``Ix1`` / ``Ix2`` / ``Ix3``: fixed-rank dimensions
- ``IxDyn``: dynamic-rank dimension
- ``Axis``: axis index value type
"""

from ._ix import Ix, Ix1, Ix2, Ix3
from ._ix_dyn import IxDyn
from ._axis import Axis

__all__ = [
    Ix.__name__,
    Ix1.__name__,
    Ix2.__name__,
    Ix3.__name__,
    IxDyn.__name__,
    Axis.__name__,
]
