"""
numru: a minimal multi-dimensional numeric array engine.

Arrays own a flat row-major buffer plus a typed shape, and support
maximum, minimum and mean reductions along an axis or over every element.

    >>> from numru import arr
    >>> a = arr([[1, 5, 3], [4, 2, 6], [0, 9, 8]])
    >>> a.max().axis(1).compute_list()
    [5, 6, 9]
"""

import logging

from ._config import NumruConfig, configure_logging, get_config, set_config
from .domain._errors import (
    ArrayError,
    DataTypeMismatchError,
    DimensionMismatchError,
    EmptyArrayError,
    IndexOutOfBoundsError,
    InvalidAxisError,
    UnimplementedDimensionError,
)
from .domain.backend import Backend, BackendType
from .infrastructure._shape import Shape
from .infrastructure._visualization import VisualizeBuilder
from .infrastructure.array import Array, DimensionType, arr
from .infrastructure.array.mixins.reduction import ReduceOp, ReductionPlan
from .infrastructure.dimension import Axis, Ix, Ix1, Ix2, Ix3, IxDyn
from .infrastructure.operations import (
    MaxBuilder,
    MeanBuilder,
    MinBuilder,
    ReductionBuilder,
    plan_reduction,
    reduce,
    reduce_to_array,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Array",
    "ArrayError",
    "Axis",
    "Backend",
    "BackendType",
    "DataTypeMismatchError",
    "DimensionMismatchError",
    "DimensionType",
    "EmptyArrayError",
    "IndexOutOfBoundsError",
    "InvalidAxisError",
    "Ix",
    "Ix1",
    "Ix2",
    "Ix3",
    "IxDyn",
    "MaxBuilder",
    "MeanBuilder",
    "MinBuilder",
    "NumruConfig",
    "ReduceOp",
    "ReductionBuilder",
    "ReductionPlan",
    "Shape",
    "UnimplementedDimensionError",
    "VisualizeBuilder",
    "arr",
    "configure_logging",
    "get_config",
    "plan_reduction",
    "reduce",
    "reduce_to_array",
    "set_config",
]
