"""
Array- and reduction-related exceptions for numru.

This module defines the error taxonomy used across the package. Every error
is a local, recoverable condition surfaced to the immediate caller:

- ``DimensionMismatchError``: buffer length differs from the declared shape
  size (raised at Array construction).
- ``EmptyArrayError``: a reduction was requested on an array with no
  elements.
- ``InvalidAxisError``: the requested axis does not exist for the array.
- ``UnimplementedDimensionError``: the array rank is outside the ranks the
  reduction engine supports.
- ``IndexOutOfBoundsError``: a multi-index does not address an element.
- ``DataTypeMismatchError``: the supplied data is not a numeric buffer.

Each class also derives from the closest built-in exception so callers that
catch ``ValueError`` / ``IndexError`` / ``TypeError`` keep working.
"""

from typing import Sequence


class ArrayError(Exception):
    """
    Base class for all numru array errors.
    """


class DimensionMismatchError(ArrayError, ValueError):
    """
    Raised when the number of elements in a data buffer does not match the
    element count implied by a shape.

    Attributes
    ----------
    expected : int
        Number of elements implied by the shape.
    actual : int
        Number of elements actually supplied.
    """

    def __init__(self, expected: int, actual: int) -> None:
        """
        Initialize the DimensionMismatchError.

        Parameters
        ----------
        expected : int
            Element count derived from the shape.
        actual : int
            Element count of the data buffer.
        """
        super().__init__(
            f"Dimension mismatch: Expected {expected} elements based on the shape, "
            f"but the data vector contains {actual} elements"
        )
        self.expected = expected
        self.actual = actual


class EmptyArrayError(ArrayError, ValueError):
    """
    Raised when an operation that needs at least one element is applied to
    an empty array.
    """

    def __init__(self, op: str = "operation") -> None:
        super().__init__(f"Array is empty: {op} requires at least one element.")
        self.op = op


class InvalidAxisError(ArrayError, ValueError):
    """
    Raised when an axis index is not valid for the array it is applied to.

    Attributes
    ----------
    axis : object
        The axis value that was requested.
    ndim : int
        Rank of the array.
    """

    def __init__(self, axis: object, ndim: int) -> None:
        super().__init__(
            f"Invalid axis specified: {axis!r} (array has {ndim} dimension(s))"
        )
        self.axis = axis
        self.ndim = ndim


class UnimplementedDimensionError(ArrayError, NotImplementedError):
    """
    Raised when an operation is not implemented for arrays of a given rank.

    Attributes
    ----------
    ndim : int
        Rank of the rejected array.
    """

    def __init__(self, ndim: int, op: str = "reduction") -> None:
        super().__init__(
            f"Unimplemented dimension: {op} is not implemented for {ndim}-D arrays"
        )
        self.ndim = ndim
        self.op = op


class IndexOutOfBoundsError(ArrayError, IndexError):
    """
    Raised when a multi-index does not address an element of the array.

    Attributes
    ----------
    index : tuple[int, ...]
        The requested multi-index.
    dims : tuple[int, ...]
        Extents of the indexed array.
    """

    def __init__(self, index: Sequence[int], dims: Sequence[int]) -> None:
        super().__init__(
            f"Index out of bounds: {tuple(index)} for shape {tuple(dims)}"
        )
        self.index = tuple(index)
        self.dims = tuple(dims)


class DataTypeMismatchError(ArrayError, TypeError):
    """
    Raised when supplied data cannot be stored as a numeric array buffer.

    Attributes
    ----------
    detail : str
        Description of the offending data.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(f"Data type mismatch: {detail}")
        self.detail = detail
