"""
Reduction mixin defining the public Array reduction API.

This module declares :class:`ArrayMixinReduction`, the mixin that gives
arrays their fluent reduction entry points (`max`, `min`, `mean`) and
declares the backend kernel (`_reduce_kernel`) that concrete backends
implement.

The kernel itself contains no numerical logic here. Implementations are
registered per `Backend` via control-path dispatch, so the Array exposes a
single stable API while the NumPy and pure-Python strategies live in their
own modules.
"""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np

    from ....operations._builders import MaxBuilder, MeanBuilder, MinBuilder
    from ._plan import ReduceOp, ReductionPlan


class ArrayMixinReduction(ABC):
    """
    Mixin providing reduction builders and the backend reduction kernel.

    Notes
    -----
    - `max`, `min` and `mean` only create builders; nothing is computed
      until the builder's `compute()` is called.
    - `_reduce_kernel` is a pure interface declaration replaced at import
      time by a dispatcher over the registered backends.
    """

    def max(self) -> "MaxBuilder":
        """
        Start building a maximum reduction of this array.

        Returns
        -------
        MaxBuilder
            Builder whose `compute()` returns the maximum of every group.
            Results keep the array's dtype.
        """
        from ....operations._builders import MaxBuilder

        return MaxBuilder(self)

    def min(self) -> "MinBuilder":
        """
        Start building a minimum reduction of this array.

        Returns
        -------
        MinBuilder
            Builder whose `compute()` returns the minimum of every group.
            Results keep the array's dtype.
        """
        from ....operations._builders import MinBuilder

        return MinBuilder(self)

    def mean(self) -> "MeanBuilder":
        """
        Start building a mean reduction of this array.

        Returns
        -------
        MeanBuilder
            Builder whose `compute()` returns the float64 mean of every
            group, whatever the array's dtype.
        """
        from ....operations._builders import MeanBuilder

        return MeanBuilder(self)

    def _reduce_kernel(self, plan: "ReductionPlan", op: "ReduceOp") -> "np.ndarray":
        """
        Aggregate every group described by `plan` with `op`.

        Parameters
        ----------
        plan : ReductionPlan
            Validated plan for this array's shape.
        op : ReduceOp
            Aggregation to apply.

        Returns
        -------
        np.ndarray
            Flat result with one value per group, in `plan.group_bases()`
            order. MAX/MIN keep the source dtype; MEAN is float64.

        Notes
        -----
        Callers must validate the request first (see
        `validate_reduction`); kernels assume a non-empty array and a
        valid axis.
        """
