import numpy as np
import pytest

from versioned import Versioned


@pytest.fixture(scope="function")
def versioned_string():
    return Versioned("Hello")


@pytest.fixture(scope="function")
def versioned_list():
    return Versioned([1, 2, [3, 4]])


@pytest.fixture(scope="function")
def versioned_array():
    return Versioned(np.arange(6, dtype=np.float64).reshape(3, 2))
