"""Various geometry abstractions and functions"""

import logging
import math
import operator
from typing import Any, Callable, Iterable, Iterator, TypeAlias, Union

import attrs
from expression import Result

from npoint.exceptions import DimensionMismatchError
from npoint.numeric_types import NumberLike, is_number_like, to_float64

__all__ = ["Coordinates", "Point"]

Coordinates: TypeAlias = tuple[NumberLike, ...]


def _is_number_like_sequence(_, attribute: attrs.Attribute, value: Coordinates) -> None:
    for i, x in enumerate(value):
        if not is_number_like(x):
            raise TypeError(
                f"Value for {attribute.name} has non-numeric element at index {i}: {x!r} (type={type(x).__name__})"
            )


@attrs.define(frozen=True)
class Point:
    """
    General abstraction of a point in N-dimensional (assumed Euclidean) space

    The dimension is fixed by the number of coordinates given at construction, and may be 0.
    Arithmetic works element-wise, either against another point of the same dimension or
    against a single number applied to every coordinate. Each operation builds a new point,
    leaving its operands untouched. Points may be added, subtracted, and multiplied, but a
    point may only be divided by a scalar.
    """

    coordinates = attrs.field(converter=tuple, validator=_is_number_like_sequence) # type: Coordinates

    # Make numpy scalars on the left defer to the reflected operators.
    __array_ufunc__ = None

    @classmethod
    def of(cls, *values: NumberLike) -> "Point":
        return cls(values)

    @classmethod
    def from_values(cls, values: Iterable[NumberLike]) -> Result["Point", TypeError]:
        try:
            return Result.Ok(cls(values))
        except TypeError as e:
            return Result.Error(e)

    def dim(self) -> int:
        return len(self.coordinates)

    def data(self) -> Coordinates:
        """Get the coordinates themselves, as an immutable sequence."""
        return self.coordinates

    def dist(self) -> float:
        """Euclidean distance from the origin."""
        return math.hypot(*(to_float64(x) for x in self.coordinates))

    def apply(self, func: Callable[[Coordinates], float]) -> float:
        """Reduce the coordinates with the given function, returning its result as-is."""
        return func(self.coordinates)

    def add(self, other: Union["Point", NumberLike]) -> "Point":
        return self._combine_or_raise(other, operator.add)

    def subtract(self, other: Union["Point", NumberLike]) -> "Point":
        return self._combine_or_raise(other, operator.sub)

    def multiply(self, other: Union["Point", NumberLike]) -> "Point":
        return self._combine_or_raise(other, operator.mul)

    def divide(self, scalar: NumberLike) -> "Point":
        if isinstance(scalar, Point):
            raise TypeError("Division of one point by another is not supported, only by a scalar")
        return self._combine_or_raise(scalar, operator.truediv)

    def __add__(self, other: Any) -> "Point":
        return self._combine(other, operator.add)

    def __sub__(self, other: Any) -> "Point":
        return self._combine(other, operator.sub)

    def __mul__(self, other: Any) -> "Point":
        return self._combine(other, operator.mul)

    def __truediv__(self, other: Any) -> "Point":
        if isinstance(other, Point):
            return NotImplemented
        return self._combine(other, operator.truediv)

    # Only scalars reach the reflected forms, and only for the commutative operations.
    def __radd__(self, other: Any) -> "Point":
        return self.__add__(other)

    def __rmul__(self, other: Any) -> "Point":
        return self.__mul__(other)

    def __len__(self) -> int:
        return self.dim()

    def __iter__(self) -> Iterator[NumberLike]:
        return iter(self.coordinates)

    def _combine(self, other: Any, op: Callable[[Any, Any], Any]) -> "Point":
        match other:
            case Point():
                self._check_same_dimension(other)
                return Point(op(a, b) for a, b in zip(self.coordinates, other.coordinates, strict=True))
            case _ if is_number_like(other):
                return Point(op(a, other) for a in self.coordinates)
            case _:
                return NotImplemented

    def _combine_or_raise(self, other: Any, op: Callable[[Any, Any], Any]) -> "Point":
        result = self._combine(other, op)
        if result is NotImplemented:
            raise TypeError(
                f"Operand for {op.__name__} with a point must be a point or a number, not {type(other).__name__}"
            )
        return result

    def _check_same_dimension(self, other: "Point") -> None:
        if self.dim() != other.dim():
            logging.error("Cannot combine points element-wise: %s and %s", self, other)
            raise DimensionMismatchError(self.dim(), other.dim())

