"""Test configuration for simplevectors tests."""

import jax
import pytest

from simplevectors.core.config import VectorConfig, set_config


def pytest_generate_tests(metafunc):
    """Run each kernel test with JIT enabled and disabled."""
    if "jit_mode" in metafunc.fixturenames:
        metafunc.parametrize("jit_mode", ["no_jit", "jit"])


@pytest.fixture
def jit_mode(request):
    """
    Name of the JAX compilation mode under test.

    Only the name is returned; JAX_DISABLE_JIT is not toggled. Tests apply jit
    through the ``transform`` fixture.
    """
    return request.param


@pytest.fixture
def transform(jit_mode):
    """Wrap a function with jax.jit in jit mode, leave it untouched otherwise."""
    if jit_mode == "jit":
        return jax.jit
    return lambda fn, **kwargs: fn


@pytest.fixture(autouse=True)
def default_config():
    """Give every test the default configuration and restore it afterwards."""
    previous = set_config(VectorConfig())
    yield
    set_config(previous)
