"""
Fluent reduction builders.

A builder is a plain configuration object: it borrows the source array,
fixes the operation, optionally records an axis, and computes nothing until
a terminal method is called. It adds no semantics of its own; every
terminal method delegates to the reduction engine and propagates its typed
errors unchanged.

    >>> a = arr([[1, 5, 3], [4, 2, 6], [0, 9, 8]])
    >>> a.max().axis(0).compute_list()
    [4, 9, 8]
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional, Union

import numpy as np

from ...domain._array import IArray
from ..array.mixins.reduction._plan import ReduceOp
from ..dimension._axis import Axis
from ._reduce import reduce, reduce_to_array


class ReductionBuilder:
    """
    Deferred reduction of one array.

    Parameters
    ----------
    array : IArray
        Source array, borrowed for the lifetime of the builder.
    operation : ReduceOp | str, optional
        Aggregation. Subclasses fix it through `OP`.

    Raises
    ------
    TypeError
        If no operation is given to the base class, or a subclass is given
        an operation other than its own `OP`.
    """

    OP: ClassVar[Optional[ReduceOp]] = None

    def __init__(
        self, array: IArray, operation: Optional[Union[ReduceOp, str]] = None
    ) -> None:
        if operation is None:
            if self.OP is None:
                raise TypeError(f"{type(self).__name__} requires an operation")
            operation = self.OP
        operation = ReduceOp.coerce(operation)
        if self.OP is not None and operation is not self.OP:
            raise TypeError(
                f"{type(self).__name__} always reduces with {self.OP.value!r}, "
                f"got {operation.value!r}"
            )
        self._array = array
        self._operation = operation
        self._axis: Optional[Union[int, Axis]] = None

    @property
    def operation(self) -> ReduceOp:
        return self._operation

    @property
    def configured_axis(self) -> Optional[int]:
        """The axis set through `axis()`, or None."""
        if isinstance(self._axis, Axis):
            return self._axis.index()
        return self._axis

    def axis(self, axis: Union[int, Axis]) -> "ReductionBuilder":
        """
        Set the axis to reduce along and return this builder.

        The axis is validated when the reduction runs, not here.
        """
        self._axis = axis
        return self

    def compute(self) -> np.ndarray:
        """
        Run the reduction.

        Returns
        -------
        np.ndarray
            Flat result buffer (see `numru.reduce`).

        Raises
        ------
        EmptyArrayError, InvalidAxisError, UnimplementedDimensionError
            Propagated from the engine.
        """
        return reduce(self._array, self._operation, self._axis)

    def compute_list(self) -> list:
        """Run the reduction and return plain Python values."""
        return self.compute().tolist()

    def compute_array(self) -> Any:
        """
        Run the reduction and return an array of the reduced shape.
        """
        return reduce_to_array(self._array, self._operation, self._axis)

    def __repr__(self) -> str:
        array = self._array
        dim_name = type(array.shape().raw_dim()).__name__
        return (
            f"{type(self).__name__}("
            f"array=Array<{array.dtype}, {dim_name}>, "
            f"axis={self.configured_axis})"
        )


class MaxBuilder(ReductionBuilder):
    """Builder for maximum reductions."""

    OP = ReduceOp.MAX


class MinBuilder(ReductionBuilder):
    """Builder for minimum reductions."""

    OP = ReduceOp.MIN


class MeanBuilder(ReductionBuilder):
    """Builder for mean reductions; results are always float64."""

    OP = ReduceOp.MEAN
