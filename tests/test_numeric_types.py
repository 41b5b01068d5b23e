"""Tests for the numeric type groupings and checks"""

from hypothesis import given, strategies as st
import numpy as np
import pytest

from npoint.numeric_types import is_number_like, to_float64
from hypothesis_extra_strategies import gen_non_number


NUMPY_SCALAR_TYPES = [
    np.float16, np.float32, np.float64,
    np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64,
    ]


@given(st.one_of(st.integers(), st.floats()))
def test_python_numbers_are_number_like(x):
    assert is_number_like(x)


@pytest.mark.parametrize("numpy_type", NUMPY_SCALAR_TYPES)
def test_numpy_scalars_are_number_like(numpy_type):
    assert is_number_like(numpy_type(3))
    assert to_float64(numpy_type(3)) == 3.0


@given(gen_non_number())
def test_non_numbers_are_not_number_like(x):
    assert not is_number_like(x)


@pytest.mark.parametrize("flag", [False, True])
def test_booleans_are_not_number_like_despite_subclassing_int(flag):
    assert not is_number_like(flag)


@given(gen_non_number())
def test_to_float64__is_expected_error_when_input_is_not_number(alleged_number):
    with pytest.raises(TypeError) as err_ctx:
        to_float64(alleged_number)
    assert str(err_ctx.value) == f"Value ({alleged_number}) (type={type(alleged_number).__name__}) is not number-like!"


@given(st.integers(min_value=-(2 ** 53), max_value=2 ** 53))
def test_to_float64_is_exact_for_representable_integers(n):
    x = to_float64(n)
    assert isinstance(x, float)
    assert x == n
