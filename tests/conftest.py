import warnings

import pytest


@pytest.fixture
def no_runtime_warnings():
    """Turn numpy RuntimeWarnings (divide by zero, invalid value) into failures."""
    with warnings.catch_warnings():
        warnings.simplefilter("error", RuntimeWarning)
        yield
