"""
Pure-Python implementation of the reduction kernel.

This is the reference kernel: it walks the flat buffer with the strided
offsets produced by `ReductionPlan` and aggregates each group with plain
Python arithmetic. It is slower than the NumPy kernel but makes the index
arithmetic explicit, and the test-suite checks both backends against each
other.

Registered for ``Backend("python")``.
"""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np

from ..._array_builder import array_control_path_manager
from .....domain._array import IArray
from .....domain.backend._backend import Backend

from ._base import ArrayMixinReduction as AMR
from ._plan import ReduceOp, ReductionPlan


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _group_max(group: Sequence[Any]) -> Any:
    best = group[0]
    for value in group:
        if _is_nan(value):
            return value
        if value > best:
            best = value
    return best


def _group_min(group: Sequence[Any]) -> Any:
    best = group[0]
    for value in group:
        if _is_nan(value):
            return value
        if value < best:
            best = value
    return best


def _group_mean(group: Sequence[Any]) -> float:
    total = 0.0
    for value in group:
        total += float(value)
    return total / len(group)


_AGGREGATORS = {
    ReduceOp.MAX: _group_max,
    ReduceOp.MIN: _group_min,
    ReduceOp.MEAN: _group_mean,
}


@array_control_path_manager(AMR, AMR._reduce_kernel, Backend("python"))
def array_reduce_python(
    self: IArray, plan: ReductionPlan, op: ReduceOp
) -> np.ndarray:
    """
    Strided-walk reduction kernel.

    Parameters
    ----------
    self : IArray
        Source array (not modified).
    plan : ReductionPlan
        Validated plan for `self`.
    op : ReduceOp
        Aggregation to apply.

    Returns
    -------
    np.ndarray
        Freshly allocated 1-D result; MAX/MIN keep the source dtype and
        MEAN is float64.
    """
    try:
        aggregate = _AGGREGATORS[op]
    except KeyError:
        raise ValueError(f"Unsupported reduction {op!r}") from None

    values = self.data().tolist()
    step = plan.reduced_stride
    span = (plan.reduced_extent - 1) * step + 1

    out = [aggregate(values[base : base + span : step]) for base in plan.group_bases()]

    dtype = np.float64 if op is ReduceOp.MEAN else self.dtype
    return np.asarray(out, dtype=dtype)
