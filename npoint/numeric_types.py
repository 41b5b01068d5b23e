"""Groupings of numeric types and tools for working with them"""

from typing import *
import numpy as np

__all__ = ["FloatLike", "IntegerLike", "NumberLike", "is_number_like", "to_float64"]


FloatLike = Union[float, np.float16, np.float32, np.float64]
IntegerLike = Union[int, np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64]
NumberLike = Union[IntegerLike, FloatLike]


def is_number_like(x: Any) -> bool:
    """Determine whether the given value may serve as a point coordinate or scalar operand."""
    # Handle the fact that instance check of Boolean against int can be True.
    return isinstance(x, NumberLike) and not isinstance(x, bool)


def to_float64(x: NumberLike) -> float:
    if not is_number_like(x):
        raise TypeError(f"Value ({x}) (type={type(x).__name__}) is not number-like!")
    return float(x)
