"""
NumPy implementation of the reduction kernel.

The kernel turns a `ReductionPlan` into a 2-D gather index of shape
``(num_groups, reduced_extent)``: row ``g`` lists the buffer offsets of
group ``g``. One fancy-indexing gather then materializes every group and a
single ufunc reduction along axis 1 aggregates them.

Registered for ``Backend("numpy")``.
"""

from __future__ import annotations

import numpy as np

from ..._array_builder import array_control_path_manager
from .....domain._array import IArray
from .....domain.backend._backend import Backend

from ._base import ArrayMixinReduction as AMR
from ._plan import ReduceOp, ReductionPlan


def gather_index(plan: ReductionPlan) -> np.ndarray:
    """
    Build the ``(num_groups, reduced_extent)`` offset matrix for `plan`.

    Group bases are accumulated axis by axis (outermost first), which
    reproduces the row-major ordering of `ReductionPlan.group_bases`.
    """
    bases = np.zeros(1, dtype=np.intp)
    for extent, stride in zip(plan.kept_dims, plan.kept_strides):
        bases = (bases[:, None] + np.arange(extent, dtype=np.intp) * stride).ravel()

    steps = np.arange(plan.reduced_extent, dtype=np.intp) * plan.reduced_stride
    return bases[:, None] + steps[None, :]


@array_control_path_manager(AMR, AMR._reduce_kernel, Backend("numpy"))
def array_reduce_numpy(self: IArray, plan: ReductionPlan, op: ReduceOp) -> np.ndarray:
    """
    Vectorized reduction kernel.

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
        Freshly allocated 1-D result.

    Notes
    -----
    - `np.max` / `np.min` propagate NaN, matching the Python backend.
    - MEAN accumulates in float64 and divides by the group size.
    """
    data = self.data()
    if plan.axis is None:
        groups = data.reshape(1, -1)
    else:
        groups = data[gather_index(plan)]

    if op is ReduceOp.MAX:
        out = np.max(groups, axis=1)
    elif op is ReduceOp.MIN:
        out = np.min(groups, axis=1)
    elif op is ReduceOp.MEAN:
        out = groups.astype(np.float64).sum(axis=1) / float(plan.reduced_extent)
    else:
        raise ValueError(f"Unsupported reduction {op!r}")

    return np.ascontiguousarray(out)
