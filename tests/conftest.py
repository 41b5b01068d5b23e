"""Test fixtures and utilities"""

import pytest

from npoint import Point


#################################################################
# Fixtures
#################################################################
@pytest.fixture
def p123():
    return Point([1, 2, 3])


@pytest.fixture
def p456():
    return Point([4, 5, 6])


@pytest.fixture
def empty_point():
    return Point([])
