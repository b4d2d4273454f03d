"""
Reduction requests, validation and stride planning.

This module holds the backend-independent half of the reduction engine:

- `ReduceOp`: the supported aggregation kinds.
- `validate_reduction`: the precondition checks shared by every backend.
- `ReductionPlan`: a description of how one reduction walks a dense
  row-major buffer.

Planning
--------
For an array of extents ``dims`` reduced along axis ``a``, every output
element aggregates one *group*: the elements that share the same coordinates
on every axis except ``a``. In a row-major buffer such a group is a strided
walk

    base, base + s_a, base + 2*s_a, ..., base + (n_a - 1)*s_a

where ``n_a`` / ``s_a`` are the extent and stride of the reduced axis and
``base`` is the offset of the group's first element. Group bases are
enumerated by a multi-index cursor over the kept axes in row-major order,
which yields the output ordering:

- rank 2, axis 0: one group per column
- rank 2, axis 1: one group per row
- rank 3, axis 0: one per (row, col), row-major
- rank 3, axis 1: one per (depth, col), depth-major
- rank 3, axis 2: one per (depth, row), depth-major

A full reduction (``axis=None``) is a single group spanning the whole
buffer with stride 1.

The planner works for any rank; the rank ceiling is enforced separately by
`validate_reduction`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Any, Iterator, Optional, Union

from .....domain._array import IShape
from .....domain._errors import (
    EmptyArrayError,
    InvalidAxisError,
    UnimplementedDimensionError,
)
from ....dimension._axis import Axis

SUPPORTED_RANKS = (1, 2, 3)
"""Array ranks accepted by the reduction engine."""


class ReduceOp(Enum):
    """
    Aggregation applied to each reduction group.

    Attributes
    ----------
    MAX : ReduceOp
        Largest element; result keeps the source dtype.
    MIN : ReduceOp
        Smallest element; result keeps the source dtype.
    MEAN : ReduceOp
        Arithmetic mean computed in float64; result is always float64.
    """

    MAX = "max"
    MIN = "min"
    MEAN = "mean"

    @classmethod
    def coerce(cls, op: Union["ReduceOp", str]) -> "ReduceOp":
        """
        Return `op` as a `ReduceOp`, parsing strings case-insensitively.

        Raises
        ------
        ValueError
            If the operation name is unknown.
        """
        if isinstance(op, ReduceOp):
            return op
        try:
            return cls(str(op).strip().lower())
        except ValueError:
            expected = ", ".join(repr(o.value) for o in cls)
            raise ValueError(
                f"Unsupported reduction {op!r}. Expected one of {expected}"
            ) from None


def normalize_axis(axis: Any, ndim: int) -> Optional[int]:
    """
    Validate an axis request against an array rank.

    Parameters
    ----------
    axis : int | Axis | None
        Requested axis. None means "reduce over every element".
    ndim : int
        Rank of the array.

    Returns
    -------
    Optional[int]
        The axis as a plain int, or None.

    Raises
    ------
    InvalidAxisError
        If the axis is not a non-negative integer below `ndim`.
    """
    if axis is None:
        return None
    if isinstance(axis, Axis):
        axis = axis.index()
    if isinstance(axis, bool) or not isinstance(axis, Integral):
        raise InvalidAxisError(axis, ndim)
    if axis < 0 or axis >= ndim:
        raise InvalidAxisError(axis, ndim)
    return int(axis)


def validate_reduction(shape: IShape, axis: Any) -> Optional[int]:
    """
    Check the reduction preconditions for an array of the given shape.

    Checks run in a fixed order: emptiness, then axis, then rank.

    Returns
    -------
    Optional[int]
        The validated axis.

    Raises
    ------
    EmptyArrayError
        If the array holds no elements (regardless of axis).
    InvalidAxisError
        If `axis` is given and is not a valid axis index.
    UnimplementedDimensionError
        If the rank is not 1, 2 or 3.
    """
    if shape.size() == 0:
        raise EmptyArrayError("reduction")
    ndim = shape.ndim()
    axis_ = normalize_axis(axis, ndim)
    if ndim not in SUPPORTED_RANKS:
        raise UnimplementedDimensionError(ndim)
    return axis_


def result_dims(dims: tuple[int, ...], axis: Optional[int]) -> tuple[int, ...]:
    """
    Return the extents of a reduction result.

    The reduced axis is dropped. A result without any remaining axis (full
    reduction, or reducing a rank-1 array) has extents ``(1,)``.
    """
    if axis is None:
        return (1,)
    kept = dims[:axis] + dims[axis + 1 :]
    return kept if kept else (1,)


@dataclass(frozen=True)
class ReductionPlan:
    """
    Strided-walk description of one reduction.

    Attributes
    ----------
    dims : tuple[int, ...]
        Extents of the source array.
    axis : Optional[int]
        Reduced axis, or None for a full reduction.
    reduced_extent : int
        Number of elements aggregated per group.
    reduced_stride : int
        Buffer distance between consecutive elements of a group.
    kept_dims : tuple[int, ...]
        Extents of the axes that survive the reduction.
    kept_strides : tuple[int, ...]
        Row-major strides of the surviving axes in the source buffer.
    """

    dims: tuple[int, ...]
    axis: Optional[int]
    reduced_extent: int
    reduced_stride: int
    kept_dims: tuple[int, ...]
    kept_strides: tuple[int, ...]

    @classmethod
    def build(cls, shape: IShape, axis: Optional[int]) -> "ReductionPlan":
        """
        Plan a reduction of `shape` along `axis` (already validated).
        """
        dims = tuple(shape.dims())
        if axis is None:
            return cls(
                dims=dims,
                axis=None,
                reduced_extent=shape.size(),
                reduced_stride=1,
                kept_dims=(),
                kept_strides=(),
            )

        strides = tuple(shape.strides())
        return cls(
            dims=dims,
            axis=axis,
            reduced_extent=dims[axis],
            reduced_stride=strides[axis],
            kept_dims=dims[:axis] + dims[axis + 1 :],
            kept_strides=strides[:axis] + strides[axis + 1 :],
        )

    @property
    def num_groups(self) -> int:
        count = 1
        for extent in self.kept_dims:
            count *= extent
        return count

    @property
    def result_dims(self) -> tuple[int, ...]:
        return result_dims(self.dims, self.axis)

    def group_bases(self) -> Iterator[int]:
        """
        Yield the buffer offset of each group's first element.

        Offsets are produced by a multi-index cursor over `kept_dims`,
        last axis fastest, so the output is in row-major order of the kept
        axes.
        """
        if not self.kept_dims:
            yield 0
            return
        if any(extent == 0 for extent in self.kept_dims):
            return

        k = len(self.kept_dims)
        cursor = [0] * k
        base = 0
        while True:
            yield base
            for j in range(k - 1, -1, -1):
                cursor[j] += 1
                base += self.kept_strides[j]
                if cursor[j] < self.kept_dims[j]:
                    break
                base -= self.kept_strides[j] * self.kept_dims[j]
                cursor[j] = 0
            else:
                return

    def group_offsets(self, base: int) -> range:
        """
        Return the buffer offsets of the group starting at `base`.
        """
        return range(
            base,
            base + self.reduced_extent * self.reduced_stride,
            self.reduced_stride,
        )

