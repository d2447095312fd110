"""
Primitives module for shared vector aliases, numerical constants, and dtype helpers.
"""

import jax
import jax.numpy as jnp
from jaxtyping import Array, Bool, Float, Num, Scalar

# Project precision settings
FLOAT_DTYPE = jnp.float32
INT_DTYPE = jnp.int32
EPS = 1e-6

# Project type aliases
Scalar = Scalar
BoolScalar = Bool[Array, ""]
FloatScalar = Float[Array, ""]
NumScalar = Num[Array, ""]
Vector = Num[Array, "D"]
Vector2 = Float[Array, "2"]
Vector3 = Float[Array, "3"]
Array = Array


def resolve_dtype(dtype) -> jnp.dtype:
    """
    Normalise a dtype specifier and check that it is numeric.

    Parameters
    ----------
    dtype : dtype-like
        Anything accepted by ``jnp.dtype`` (``jnp.float32``, ``"int32"``, ...).

    Returns
    -------
    dtype : jnp.dtype
        The canonical numeric dtype. 64-bit types narrow to 32-bit unless
        ``jax_enable_x64`` is set, matching what ``jnp`` arrays store.

    Raises
    ------
    TypeError
        If the dtype is not an integer or floating point type.
    """
    resolved = jax.dtypes.canonicalize_dtype(jnp.dtype(dtype))
    if not (
        jnp.issubdtype(resolved, jnp.integer) or jnp.issubdtype(resolved, jnp.floating)
    ):
        raise TypeError(f"Vector dtype must be numeric, got {resolved}")
    return resolved
