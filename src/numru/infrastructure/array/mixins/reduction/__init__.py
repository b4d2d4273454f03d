"""
Reduction mixin and backend-specific kernels for Array operations.

This package aggregates the reduction-related Array mixin and the kernels
registered for each execution backend:

- ``_reduce_numpy``  : vectorized gather + ufunc reduction
- ``_reduce_python`` : explicit strided walk over the flat buffer

The kernel modules are imported for side effects so that their control
paths are registered; they are not intended to be used directly.
"""

from ._reduce_numpy import *
from ._reduce_python import *
from ._plan import ReduceOp, ReductionPlan
from ._base import ArrayMixinReduction

__all__ = [
    ArrayMixinReduction.__name__,
    ReduceOp.__name__,
    ReductionPlan.__name__,
]
