"""
Linear algebra kernels for fixed-dimension vectors.

Every function operates on raw ``jnp`` arrays and is safe to use under
``jax.jit`` and ``jax.vmap``. Angles are in radians, rotations are right-handed
with positive angles counter-clockwise when looking down the rotation axis.

Functions that divide by the magnitude (``normalize``, ``direction_angle``)
do not guard against zero vectors and return NaN for them.
"""

import jax.numpy as jnp

from .primitives import FloatScalar, NumScalar, Vector, Vector2, Vector3
from .units import AngleDir


def dot(a: Vector, b: Vector) -> NumScalar:
    """
    Dot product of two vectors of equal length.

    Parameters
    ----------
    a : (D,) Vector
        First vector.
    b : (D,) Vector
        Second vector.

    Returns
    -------
    product : NumScalar
        Sum of pairwise component products, zero for empty vectors.
    """
    return jnp.sum(a * b)


def magnitude(v: Vector) -> FloatScalar:
    """
    Euclidean norm of a vector of any length.

    Parameters
    ----------
    v : (D,) Vector
        Input vector.

    Returns
    -------
    norm : FloatScalar
        Square root of the sum of squared components. Exactly zero for the
        zero vector and for empty vectors.
    """
    return jnp.sqrt(jnp.sum(v * v))


def normalize(v: Vector) -> Vector:
    """
    Unit vector pointing in the same direction as ``v``.

    Parameters
    ----------
    v : (D,) Vector
        Input vector, must be non-zero.

    Returns
    -------
    (D,) Vector
        ``v / magnitude(v)``.

    Notes
    -----
    A zero vector divides by zero and yields NaN components.
    """
    return v / magnitude(v)


def cross(a: Vector3, b: Vector3) -> Vector3:
    """
    Cross product of two 3D vectors.

    Parameters
    ----------
    a : (3,) Vector3
        Left operand.
    b : (3,) Vector3
        Right operand.

    Returns
    -------
    (3,) Vector3
        ``a x b``, anti-commutative in its operands.
    """
    ax, ay, az = a
    bx, by, bz = b
    return jnp.stack(
        [
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx,
        ]
    )


def planar_angle(v: Vector2) -> FloatScalar:
    """
    Signed angle of a 2D vector from the positive x-axis.

    Parameters
    ----------
    v : (2,) Vector2
        2D vector [x, y].

    Returns
    -------
    angle : FloatScalar
        Four-quadrant arctangent of (y, x) in (-pi, pi].
    """
    return jnp.arctan2(v[1], v[0])


def rotate_planar(v: Vector2, angle: FloatScalar) -> Vector2:
    """
    Rotate a 2D vector counter-clockwise about the origin.

    Parameters
    ----------
    v : (2,) Vector2
        2D vector [x, y].
    angle : FloatScalar
        Rotation angle [rad].

    Returns
    -------
    (2,) Vector2
        Rotated vector.
    """
    x, y = v
    c, s = jnp.cos(angle), jnp.sin(angle)
    return jnp.stack([x * c - y * s, x * s + y * c])


def direction_angle(v: Vector3, axis: AngleDir) -> FloatScalar:
    """
    Angle between a 3D vector and one positive reference axis.

    Parameters
    ----------
    v : (3,) Vector3
        3D vector [x, y, z], must be non-zero.
    axis : AngleDir
        Reference axis (ALPHA = x, BETA = y, GAMMA = z).

    Returns
    -------
    angle : FloatScalar
        ``acos(component / magnitude)`` in [0, pi].

    Notes
    -----
    The cosine is clipped to [-1, 1] to absorb rounding. A zero vector still
    produces NaN.
    """
    cosine = v[_axis_index(axis)] / magnitude(v)
    return jnp.arccos(jnp.clip(cosine, -1.0, 1.0))


def direction_angles(v: Vector3) -> Vector3:
    """
    Angles between a 3D vector and the x, y and z axes.

    Parameters
    ----------
    v : (3,) Vector3
        3D vector [x, y, z], must be non-zero.

    Returns
    -------
    (3,) Vector3
        [alpha, beta, gamma] in radians.
    """
    return jnp.arccos(jnp.clip(v / magnitude(v), -1.0, 1.0))


def rotate_x(v: Vector3, angle: FloatScalar) -> Vector3:
    """
    Rotate a 3D vector about the x-axis.

    Parameters
    ----------
    v : (3,) Vector3
        3D vector [x, y, z].
    angle : FloatScalar
        Rotation angle [rad].

    Returns
    -------
    (3,) Vector3
        Rotated vector with the x component unchanged.
    """
    x, y, z = v
    c, s = jnp.cos(angle), jnp.sin(angle)
    return jnp.stack([x, y * c - z * s, y * s + z * c])


def rotate_y(v: Vector3, angle: FloatScalar) -> Vector3:
    """
    Rotate a 3D vector about the y-axis.

    Parameters
    ----------
    v : (3,) Vector3
        3D vector [x, y, z].
    angle : FloatScalar
        Rotation angle [rad].

    Returns
    -------
    (3,) Vector3
        Rotated vector with the y component unchanged.
    """
    x, y, z = v
    c, s = jnp.cos(angle), jnp.sin(angle)
    return jnp.stack([x * c + z * s, y, -x * s + z * c])


def rotate_z(v: Vector3, angle: FloatScalar) -> Vector3:
    """
    Rotate a 3D vector about the z-axis.

    Parameters
    ----------
    v : (3,) Vector3
        3D vector [x, y, z].
    angle : FloatScalar
        Rotation angle [rad].

    Returns
    -------
    (3,) Vector3
        Rotated vector with the z component unchanged.
    """
    x, y, z = v
    c, s = jnp.cos(angle), jnp.sin(angle)
    return jnp.stack([x * c - y * s, x * s + y * c, z])


def rotate_about(v: Vector3, angle: FloatScalar, axis: AngleDir) -> Vector3:
    """
    Rotate a 3D vector about the reference axis named by ``axis``.

    Parameters
    ----------
    v : (3,) Vector3
        3D vector [x, y, z].
    angle : FloatScalar
        Rotation angle [rad].
    axis : AngleDir
        Rotation axis, must be a static Python value under ``jax.jit``.

    Returns
    -------
    (3,) Vector3
        Rotated vector.

    Raises
    ------
    ValueError
        If ``axis`` is not an AngleDir member.
    """
    if axis is AngleDir.ALPHA:
        return rotate_x(v, angle)
    elif axis is AngleDir.BETA:
        return rotate_y(v, angle)
    elif axis is AngleDir.GAMMA:
        return rotate_z(v, angle)
    raise ValueError(f"Invalid rotation axis: {axis!r}")


def _axis_index(axis: AngleDir) -> int:
    if not isinstance(axis, AngleDir):
        raise ValueError(f"Invalid reference axis: {axis!r}")
    return axis.index
