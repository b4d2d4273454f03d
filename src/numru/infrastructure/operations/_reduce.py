"""
Reduction engine entry point.

`reduce` is the fallible engine contract behind every builder:

1. validate the request (empty input, axis, rank, in that order),
2. plan the strided walk for the array's shape,
3. dispatch to the kernel registered for the array's backend.

The source array is only read; the result is a freshly allocated flat
buffer.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

import numpy as np

from ...domain._array import IArray
from ..array.mixins.reduction._plan import (
    ReduceOp,
    ReductionPlan,
    validate_reduction,
)
from ..dimension._axis import Axis

logger = logging.getLogger(__name__)


def plan_reduction(
    array: IArray, axis: Optional[Union[int, Axis]] = None
) -> ReductionPlan:
    """
    Validate a reduction request and return its plan.

    Raises
    ------
    EmptyArrayError
        If the array holds no elements.
    InvalidAxisError
        If `axis` is not an axis of the array.
    UnimplementedDimensionError
        If the array rank is not 1, 2 or 3.
    """
    shape = array.shape()
    axis_ = validate_reduction(shape, axis)
    return ReductionPlan.build(shape, axis_)


def reduce(
    array: IArray,
    operation: Union[ReduceOp, str],
    axis: Optional[Union[int, Axis]] = None,
) -> np.ndarray:
    """
    Reduce `array` with `operation`, optionally along one axis.

    Parameters
    ----------
    array : IArray
        Source array. Never modified.
    operation : ReduceOp | str
        ``"max"``, ``"min"`` or ``"mean"``.
    axis : int | Axis | None, optional
        Axis to collapse. None aggregates every element into a single value.

    Returns
    -------
    np.ndarray
        Flat result. For an axis reduction it holds one value per group in
        row-major order of the remaining axes; for ``axis=None`` it holds a
        single value. MAX/MIN keep the source dtype, MEAN is float64.

    Raises
    ------
    EmptyArrayError
        If the array holds no elements, whatever the axis.
    InvalidAxisError
        If `axis` is given and is not smaller than the rank.
    UnimplementedDimensionError
        If the array rank is not 1, 2 or 3.
    ValueError
        If `operation` is unknown.
    """
    op = ReduceOp.coerce(operation)
    plan = plan_reduction(array, axis)
    logger.debug(
        "reduce op=%s axis=%s dims=%s backend=%s groups=%d extent=%d stride=%d",
        op.value,
        plan.axis,
        plan.dims,
        array.backend,
        plan.num_groups,
        plan.reduced_extent,
        plan.reduced_stride,
    )
    return array._reduce_kernel(plan, op)


def reduce_to_array(
    array: Any,
    operation: Union[ReduceOp, str],
    axis: Optional[Union[int, Axis]] = None,
) -> Any:
    """
    Reduce `array` and wrap the result in an array of the reduced shape.

    The result has the source rank minus one (``(1,)`` for full reductions
    and for rank-1 inputs) and runs on the same backend as the source.
    """
    plan = plan_reduction(array, axis)
    values = reduce(array, operation, plan.axis)
    ArrayClass = type(array)
    return ArrayClass(values, plan.result_dims, backend=array.backend)
