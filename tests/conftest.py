"""Shared pytest configuration."""

import pytest
from jax import config as jax_config

# The Newton-Raphson tolerance of the Kepler solver is only meaningful in double
# precision; tests that also cover float32 use the ``dtype`` fixture.
jax_config.update("jax_enable_x64", True)


@pytest.fixture(params=["float32", "float64"])
def dtype(request):
    """Parametrize tests over float32 and float64."""
    original_value = jax_config.read("jax_enable_x64")
    jax_config.update("jax_enable_x64", request.param == "float64")
    yield request.param
    jax_config.update("jax_enable_x64", original_value)
