import jax.numpy as jnp
import pytest

from datumjax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that change the dtype (test_config.py) restore float64 through
    this fixture, so no test depends on the order the modules run in.
    """
    set_dtype(jnp.float64)
