from ._reduce import plan_reduction, reduce, reduce_to_array
from ._builders import MaxBuilder, MeanBuilder, MinBuilder, ReductionBuilder

__all__ = [
    "plan_reduction",
    "reduce",
    "reduce_to_array",
    MaxBuilder.__name__,
    MeanBuilder.__name__,
    MinBuilder.__name__,
    ReductionBuilder.__name__,
]
