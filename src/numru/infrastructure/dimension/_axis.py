"""
Axis value type.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral


@dataclass(frozen=True, order=True)
class Axis:
    """
    Names one axis of an array by its index (axis 0 is the outermost).

    Builders accept either an `Axis` or a plain integer.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, Integral):
            raise TypeError(f"Axis index must be an integer, got {self.value!r}")
        if self.value < 0:
            raise ValueError(f"Axis index must be >= 0, got {self.value}")
        object.__setattr__(self, "value", int(self.value))

    def index(self) -> int:
        return self.value
