"""
Planar vector.

Angles are in radians and measured counter-clockwise from the positive x-axis.
"""

from . import linalg
from .primitives import FloatScalar
from .vector import Vector


class Vector2D(Vector[2]):
    """
    2D vector with named x/y components.

    ``Vector2D(x, y)`` or ``Vector2D(x=..., y=...)`` builds from components,
    ``Vector2D()`` is the zero vector and ``Vector2D(v)`` copies any 2D vector.
    """

    component_names = ("x", "y")

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

    def angle(self) -> FloatScalar:
        """Signed angle from the positive x-axis in (-pi, pi]."""
        return linalg.planar_angle(self._components)

    def rotate(self, angle: FloatScalar) -> "Vector2D":
        """
        Rotate counter-clockwise about the origin.

        Parameters
        ----------
        angle : FloatScalar
            Rotation angle [rad], any real value.

        Returns
        -------
        rotated : Vector2D
            New rotated vector, ``self`` is left unchanged.
        """
        return type(self)._wrap(linalg.rotate_planar(self._components, angle))
