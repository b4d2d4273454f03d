"""
Fixed-rank dimension types.

This module defines `Ix`, the family of dimension descriptors whose rank is
pinned by the class itself. `Ix1`, `Ix2` and `Ix3` cover the ranks the
reduction engine supports; `Ix.with_rank(n)` creates (and caches) the class
for any other rank.

Examples
--------
    >>> Ix2(3, 4).dims()
    (3, 4)
    >>> Ix2(3, 4, 5)
    Traceback (most recent call last):
    ...
    ValueError: Ix2 expects exactly 2 extents, got 3
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, ClassVar, Dict, Iterable, Iterator, Optional, Type

from ...domain._dimension import product_of_extents


def _normalize_extents(extents: Iterable[Any]) -> tuple[int, ...]:
    """
    Validate extents and convert them to a tuple of Python ints.

    Raises
    ------
    TypeError
        If an extent is not an integer (booleans are rejected).
    ValueError
        If an extent is negative.
    """
    out = []
    for axis, extent in enumerate(extents):
        if isinstance(extent, bool) or not isinstance(extent, Integral):
            raise TypeError(
                f"extent for axis {axis} must be an integer, got {extent!r}"
            )
        if extent < 0:
            raise ValueError(f"extent for axis {axis} must be >= 0, got {extent}")
        out.append(int(extent))
    return tuple(out)


def _unpack_extents(extents: tuple[Any, ...]) -> tuple[Any, ...]:
    # Accept both Ix2(3, 4) and Ix2((3, 4)).
    if len(extents) == 1 and isinstance(extents[0], (list, tuple)):
        return tuple(extents[0])
    return extents


class Ix:
    """
    Fixed-rank dimension descriptor.

    Subclasses set `NDIM`; the base class itself cannot be instantiated.

    Parameters
    ----------
    *extents : int
        Exactly `NDIM` non-negative extents, outermost axis first. A single
        list or tuple of extents is accepted as well.

    Raises
    ------
    TypeError
        If instantiated without a rank, or if an extent is not an integer.
    ValueError
        If the extent count differs from `NDIM`, or an extent is negative.
    """

    NDIM: ClassVar[Optional[int]] = None

    __slots__ = ("_dims",)

    def __init__(self, *extents: int) -> None:
        if self.NDIM is None:
            raise TypeError(
                "Ix has no rank; use Ix1/Ix2/Ix3 or Ix.with_rank(n) instead"
            )
        dims = _normalize_extents(_unpack_extents(extents))
        if len(dims) != self.NDIM:
            raise ValueError(
                f"{type(self).__name__} expects exactly {self.NDIM} extents, "
                f"got {len(dims)}"
            )
        self._dims = dims

    @classmethod
    def with_rank(cls, ndim: int) -> Type["Ix"]:
        """
        Return the fixed-rank dimension class for `ndim` axes.

        Classes are created once per rank and cached, so
        ``Ix.with_rank(2) is Ix2``.

        Raises
        ------
        ValueError
            If `ndim` is negative.
        """
        if isinstance(ndim, bool) or not isinstance(ndim, Integral) or ndim < 0:
            raise ValueError(f"rank must be a non-negative integer, got {ndim!r}")
        ndim = int(ndim)
        klass = _FIXED_RANK_CLASSES.get(ndim)
        if klass is None:
            klass = type(f"Ix{ndim}", (Ix,), {"NDIM": ndim, "__slots__": ()})
            _FIXED_RANK_CLASSES[ndim] = klass
        return klass

    def ndim(self) -> int:
        return self.NDIM  # type: ignore[return-value]

    def size(self) -> int:
        return product_of_extents(self._dims)

    def dims(self) -> tuple[int, ...]:
        return self._dims

    def __getitem__(self, axis: int) -> int:
        return self._dims[axis]

    def __iter__(self) -> Iterator[int]:
        return iter(self._dims)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ix):
            return NotImplemented
        return type(self) is type(other) and self._dims == other._dims

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._dims))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(d) for d in self._dims)})"


class Ix1(Ix):
    """One-dimensional fixed-rank dimension: ``(len,)``."""

    NDIM = 1
    __slots__ = ()


class Ix2(Ix):
    """Two-dimensional fixed-rank dimension: ``(rows, cols)``."""

    NDIM = 2
    __slots__ = ()


class Ix3(Ix):
    """Three-dimensional fixed-rank dimension: ``(depth, rows, cols)``."""

    NDIM = 3
    __slots__ = ()


_FIXED_RANK_CLASSES: Dict[int, Type[Ix]] = {1: Ix1, 2: Ix2, 3: Ix3}
