"""
Spatial vector.

Uses a right-handed coordinate system. Reference angles and axis rotations are
selected with ``AngleDir``: ALPHA is the x-axis, BETA the y-axis and GAMMA the
z-axis. All angles in radians.
"""

from typing import Any, Callable

from . import linalg
from .primitives import FloatScalar
from .units import AngleDir
from .vector import Vector


class Vector3D(Vector[3]):
    """
    3D vector with named x/y/z components.

    ``Vector3D(x, y, z)`` or ``Vector3D(x=..., y=..., z=...)`` builds from
    components, ``Vector3D()`` is the zero vector and ``Vector3D(v)`` copies
    any 3D vector.

    The reference angles (``alpha``, ``beta``, ``gamma``) divide by the
    magnitude and are NaN for the zero vector.
    """

    component_names = ("x", "y", "z")

    @property
    def x(self) -> FloatScalar:
        """Component 0."""
        return self._components[0]

    @x.setter
    def x(self, value) -> None:
        self._components = self._components.at[0].set(value)

    @property
    def y(self) -> FloatScalar:
        """Component 1."""
        return self._components[1]

    @y.setter
    def y(self, value) -> None:
        self._components = self._components.at[1].set(value)

    @property
    def z(self) -> FloatScalar:
        """Component 2."""
        return self._components[2]

    @z.setter
    def z(self, value) -> None:
        self._components = self._components.at[2].set(value)

    def cross(self, other: Vector) -> "Vector3D":
        """
        Cross product ``self x other``.

        Parameters
        ----------
        other : Vector3D
            Right operand, any 3D vector.

        Returns
        -------
        product : Vector3D
            Vector orthogonal to both operands.
        """
        self._check_operand(other)
        return type(self)._wrap(linalg.cross(self._components, other._components))

    def alpha(self) -> FloatScalar:
        """Angle to the positive x-axis in [0, pi]."""
        return linalg.direction_angle(self._components, AngleDir.ALPHA)

    def beta(self) -> FloatScalar:
        """Angle to the positive y-axis in [0, pi]."""
        return linalg.direction_angle(self._components, AngleDir.BETA)

    def gamma(self) -> FloatScalar:
        """Angle to the positive z-axis in [0, pi]."""
        return linalg.direction_angle(self._components, AngleDir.GAMMA)

    def angle(self, axis: AngleDir) -> FloatScalar:
        """Angle to the positive reference axis named by ``axis``."""
        return linalg.direction_angle(self._components, axis)

    def angles_as(self, factory: Callable[..., Any]) -> Any:
        """Unpack the reference angles into ``factory(alpha, beta, gamma)``."""
        return factory(*linalg.direction_angles(self._components))

    def rotate_alpha(self, angle: FloatScalar) -> "Vector3D":
        """Rotate about the x-axis, keeping x fixed."""
        return type(self)._wrap(linalg.rotate_x(self._components, angle))

    def rotate_beta(self, angle: FloatScalar) -> "Vector3D":
        """Rotate about the y-axis, keeping y fixed."""
        return type(self)._wrap(linalg.rotate_y(self._components, angle))

    def rotate_gamma(self, angle: FloatScalar) -> "Vector3D":
        """Rotate about the z-axis, keeping z fixed."""
        return type(self)._wrap(linalg.rotate_z(self._components, angle))

    def rotate(self, angle: FloatScalar, axis: AngleDir) -> "Vector3D":
        """
        Rotate about one reference axis.

        Parameters
        ----------
        angle : FloatScalar
            Rotation angle [rad].
        axis : AngleDir
            Rotation axis.

        Returns
        -------
        rotated : Vector3D
            New rotated vector.

        Raises
        ------
        ValueError
            If ``axis`` is not an AngleDir member.
        """
        return type(self)._wrap(linalg.rotate_about(self._components, angle, axis))
