"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout datumjax.  The default is ``jnp.float64``: geocentric
coordinates are of order 6.4e6 m, and float32 only resolves those to about
half a metre, which is far coarser than the millimetre-level effects a
velocity model corrects for.  Selecting ``jnp.float64`` enables JAX's
64-bit mode (``jax_enable_x64``).

The import-time default can be overridden with the ``DATUMJAX_DTYPE``
environment variable (``"float16"``, ``"bfloat16"``, ``"float32"`` or
``"float64"``).

Call ``set_dtype`` **before** any JIT compilation.  Under JIT,
``get_dtype()`` runs during tracing and its result is baked into the
compiled program.
"""

from __future__ import annotations

import os

import jax
import jax.numpy as jnp

_ENV_VAR = "DATUMJAX_DTYPE"

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

_DTYPE_NAMES = {
    "float16": jnp.float16,
    "bfloat16": jnp.bfloat16,
    "float32": jnp.float32,
    "float64": jnp.float64,
}

_dtype = jnp.float64


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for datumjax.

    Must be called **before** any ``jax.jit`` compilation.  In eager mode
    the change takes effect immediately.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float64``).
    """
    return _dtype


def dtype_from_name(name: str):
    """Resolve a dtype name such as ``"float64"`` to the JAX dtype.

    Args:
        name: Case-insensitive dtype name.

    Returns:
        The matching ``jnp`` float dtype.

    Raises:
        ValueError: If *name* is not a supported float dtype.
    """
    try:
        return _DTYPE_NAMES[name.strip().lower()]
    except KeyError as err:
        raise ValueError(
            f"Unsupported dtype name '{name}'. "
            f"Available: {sorted(_DTYPE_NAMES)}"
        ) from err


def get_position_eq_tolerance() -> float:
    """Return the dtype-adaptive tolerance for geocentric position comparisons.

    The tolerance scales with the precision of the configured float dtype
    at Earth-radius magnitudes:

    - ``float64``:  1e-6 m
    - ``float32``:  1.0 m
    - ``float16``:  1e4 m
    - ``bfloat16``: 1e4 m

    Returns:
        float: Tolerance in metres.
    """
    if _dtype == jnp.float64:
        return 1e-6
    if _dtype == jnp.float32:
        return 1.0
    # float16 and bfloat16
    return 1e4


def _init_from_env() -> None:
    name = os.environ.get(_ENV_VAR)
    set_dtype(dtype_from_name(name) if name else jnp.float64)


_init_from_env()
