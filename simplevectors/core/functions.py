"""
Free-function forms of the vector operations.

These mirror the methods on ``Vector``, ``Vector2D`` and ``Vector3D`` for code
that prefers a functional style, and add ``make_vector`` for building vectors
from existing sequences and arrays.
"""

from typing import Iterable, Optional

import jax.numpy as jnp

from .primitives import FLOAT_DTYPE, BoolScalar, FloatScalar, NumScalar, resolve_dtype
from .units import AngleDir
from .vector import Vector
from .vector2d import Vector2D
from .vector3d import Vector3D


def vector_class(dimensions: int, dtype=FLOAT_DTYPE) -> type:
    """
    Most specific vector class for a dimension and dtype.

    Float vectors of dimension 2 and 3 map to ``Vector2D`` and ``Vector3D``,
    everything else to ``Vector[dimensions, dtype]``.
    """
    if resolve_dtype(dtype) == jnp.dtype(FLOAT_DTYPE):
        if dimensions == 2:
            return Vector2D
        if dimensions == 3:
            return Vector3D
    return Vector[dimensions, dtype]


def make_vector(
    values: Iterable,
    dimensions: Optional[int] = None,
    dtype=FLOAT_DTYPE,
) -> Vector:
    """
    Build a vector from a sequence or array of components.

    Parameters
    ----------
    values : Iterable
        Components in order. Lists, tuples, NumPy and JAX arrays all work.
    dimensions : int, optional
        Target dimension. Defaults to the number of values. Extra values are
        dropped and missing ones are zero.
    dtype : dtype-like
        Component dtype.

    Returns
    -------
    vector : Vector
        ``Vector2D``/``Vector3D`` for float vectors of those sizes, otherwise a
        ``Vector[dimensions, dtype]``.
    """
    components = list(values)
    if dimensions is None:
        dimensions = len(components)
    return vector_class(dimensions, dtype)(*components)


def dot(a: Vector, b: Vector) -> NumScalar:
    """Dot product of two vectors of the same dimension."""
    return a.dot(b)


def cross(a: Vector3D, b: Vector3D) -> Vector3D:
    """Cross product of two 3D vectors."""
    return a.cross(b)


def magn(v: Vector) -> FloatScalar:
    """Euclidean norm of a vector."""
    return v.magn()


def normalize(v: Vector) -> Vector:
    """Unit vector in the direction of ``v``, NaN for the zero vector."""
    return v.normalize()


def is_zero(v: Vector) -> BoolScalar:
    """Whether ``v`` has zero magnitude."""
    return v.is_zero()


def x(v: Vector, value=None):
    """Read the x component, or set it when ``value`` is given and return ``v``."""
    if value is None:
        return v.x
    v.x = value
    return v


def y(v: Vector, value=None):
    """Read the y component, or set it when ``value`` is given and return ``v``."""
    if value is None:
        return v.y
    v.y = value
    return v


def z(v: Vector3D, value=None):
    """Read the z component, or set it when ``value`` is given and return ``v``."""
    if value is None:
        return v.z
    v.z = value
    return v


def angle(v: Vector, axis: Optional[AngleDir] = None) -> FloatScalar:
    """
    Angle of a 2D vector, or reference angle of a 3D vector.

    A 2D vector ignores ``axis`` and returns its polar angle. A 3D vector
    requires ``axis`` and returns the angle to that positive axis.
    """
    if isinstance(v, Vector3D):
        return v.angle(axis)
    return v.angle()


def alpha(v: Vector3D) -> FloatScalar:
    """Angle between a 3D vector and the positive x-axis."""
    return v.alpha()


def beta(v: Vector3D) -> FloatScalar:
    """Angle between a 3D vector and the positive y-axis."""
    return v.beta()


def gamma(v: Vector3D) -> FloatScalar:
    """Angle between a 3D vector and the positive z-axis."""
    return v.gamma()


def rotate(v: Vector, angle: FloatScalar, axis: Optional[AngleDir] = None) -> Vector:
    """
    Rotate a 2D vector, or a 3D vector about one reference axis.

    A 2D vector ignores ``axis``. A 3D vector requires it.
    """
    if isinstance(v, Vector3D):
        return v.rotate(angle, axis)
    return v.rotate(angle)


def rotate_alpha(v: Vector3D, angle: FloatScalar) -> Vector3D:
    """Rotate a 3D vector about the x-axis."""
    return v.rotate_alpha(angle)


def rotate_beta(v: Vector3D, angle: FloatScalar) -> Vector3D:
    """Rotate a 3D vector about the y-axis."""
    return v.rotate_beta(angle)


def rotate_gamma(v: Vector3D, angle: FloatScalar) -> Vector3D:
    """Rotate a 3D vector about the z-axis."""
    return v.rotate_gamma(angle)
