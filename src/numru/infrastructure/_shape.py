"""
Array shape.

`Shape` wraps exactly one dimension value and is the single source of truth
for buffer layout. It holds no state of its own: `ndim()`, `size()` and
`dims()` delegate to the wrapped dimension, so
``shape.size() == shape.raw_dim().size()`` always holds.

It also derives the row-major strides used by indexing and by the
reduction planner.
"""

from __future__ import annotations

from typing import Iterable, Union

from ..domain._dimension import IDimension
from .dimension._ix_dyn import IxDyn


class Shape:
    """
    Immutable wrapper around a dimension value.

    Parameters
    ----------
    dim : IDimension
        Any object satisfying the dimension protocol (`Ix1`, `Ix2`, `Ix3`,
        `IxDyn`, ...).

    Raises
    ------
    TypeError
        If `dim` does not satisfy the dimension protocol.
    """

    __slots__ = ("_dim",)

    def __init__(self, dim: IDimension) -> None:
        if isinstance(dim, Shape):
            dim = dim.raw_dim()
        if not isinstance(dim, IDimension):
            raise TypeError(
                f"Shape expects a dimension (Ix*/IxDyn), got {type(dim).__name__}"
            )
        self._dim = dim

    @classmethod
    def from_dims(cls, extents: Iterable[int]) -> "Shape":
        """
        Build a dynamic-rank shape from a sequence of extents.
        """
        return cls(IxDyn(extents))

    @classmethod
    def coerce(cls, shape: Union["Shape", IDimension, Iterable[int]]) -> "Shape":
        """
        Return `shape` as a `Shape`.

        Shapes are returned unchanged, dimensions are wrapped, and plain
        extent sequences become dynamic-rank shapes.
        """
        if isinstance(shape, Shape):
            return shape
        if isinstance(shape, IDimension):
            return cls(shape)
        return cls.from_dims(shape)

    def raw_dim(self) -> IDimension:
        return self._dim

    def ndim(self) -> int:
        return self._dim.ndim()

    def size(self) -> int:
        return self._dim.size()

    def dims(self) -> tuple[int, ...]:
        return self._dim.dims()

    def strides(self) -> tuple[int, ...]:
        """
        Return the row-major element strides of each axis.

        The last axis has stride 1; every other axis has the product of the
        extents to its right.
        """
        dims = self.dims()
        strides = [0] * len(dims)
        step = 1
        for axis in range(len(dims) - 1, -1, -1):
            strides[axis] = step
            step *= dims[axis]
        return tuple(strides)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self._dim == other._dim

    def __hash__(self) -> int:
        return hash(("Shape", self._dim))

    def __repr__(self) -> str:
        return f"Shape={self._dim!r}"
