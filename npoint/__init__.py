"""Fixed-dimension numeric points, with element-wise arithmetic against points and scalars"""

from typing import *

from expression import Result, result

from npoint.exceptions import DimensionalityError, DimensionMismatchError, NpointException
from npoint.geometry import Point
from npoint.numeric_types import FloatLike, IntegerLike, NumberLike

__all__ = [
    "DimensionalityError",
    "DimensionMismatchError",
    "FloatLike",
    "IntegerLike",
    "NpointException",
    "NumberLike",
    "Point",
    "unsafe_extract_result",
    ]


_E = TypeVar('_E', bound=BaseException)
_R = TypeVar('_R', covariant=True)


def unsafe_extract_result(res: Result[_R, _E]) -> _R:
    match res:
        case result.Result(tag="ok", ok=r):
            return r
        case result.Result(tag="error", error=e):
            raise e
        case unexpected:
            raise TypeError(f"Unexpected result type ({type(unexpected).__name__}), not expression.Result")
