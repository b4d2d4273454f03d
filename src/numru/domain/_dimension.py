"""
Dimension interface definitions.

This module defines the domain-level contract for objects that describe the
extents of an array. Any object exposing ``ndim()``, ``size()`` and
``dims()`` can back a ``Shape``, regardless of whether its rank is pinned by
its class (fixed rank) or only known at runtime (dynamic rank).

Notes
-----
- The reduction engine is written against this protocol only.
- Dimensions are immutable; ``dims()`` returns a tuple.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IDimension(Protocol):
    """
    Dimension interface.

    Axis 0 is the outermost (slowest-varying) axis; extents are listed in
    outer-to-inner order.
    """

    def ndim(self) -> int:
        """
        Return the number of axes.

        Returns
        -------
        int
            Extent count.
        """
        ...

    def size(self) -> int:
        """
        Return the total number of elements.

        Returns
        -------
        int
            Product of all extents; 0 when any extent is 0 or when there are
            no extents at all.
        """
        ...

    def dims(self) -> tuple[int, ...]:
        """
        Return the per-axis extents.

        Returns
        -------
        tuple[int, ...]
            Extents in declaration order, axis 0 first.
        """
        ...


def product_of_extents(extents: tuple[int, ...]) -> int:
    """
    Compute the element count for a sequence of extents.

    An empty extent sequence describes an empty array, so its size is 0
    rather than the mathematical empty product.
    """
    if not extents:
        return 0
    size = 1
    for extent in extents:
        size *= extent
    return size
