"""
Dynamic-rank dimension type.

`IxDyn` holds a variable-length sequence of extents whose rank is only known
at runtime. It is the representation used when shapes are inferred from
data (e.g., by `arr`).
"""

from __future__ import annotations

from typing import Iterable, Iterator

from ...domain._dimension import product_of_extents
from ._ix import _normalize_extents


class IxDyn:
    """
    Dynamic-rank dimension descriptor.

    Parameters
    ----------
    extents : Iterable[int]
        Non-negative extents, outermost axis first. An empty iterable
        describes an empty array (size 0).

    Raises
    ------
    TypeError
        If an extent is not an integer.
    ValueError
        If an extent is negative.
    """

    __slots__ = ("_dims",)

    def __init__(self, extents: Iterable[int]) -> None:
        self._dims = _normalize_extents(extents)

    def ndim(self) -> int:
        return len(self._dims)

    def size(self) -> int:
        return product_of_extents(self._dims)

    def dims(self) -> tuple[int, ...]:
        return self._dims

    def __getitem__(self, axis: int) -> int:
        return self._dims[axis]

    def __iter__(self) -> Iterator[int]:
        return iter(self._dims)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IxDyn):
            return NotImplemented
        return self._dims == other._dims

    def __hash__(self) -> int:
        return hash(("IxDyn", self._dims))

    def __repr__(self) -> str:
        return f"IxDyn({list(self._dims)})"
