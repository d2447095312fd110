"""Reference axis tags for 3D angles and rotations."""

from enum import Enum


class AngleDir(Enum):
    """
    Reference axis of a 3D direction angle or axis rotation.

    ALPHA is the x-axis, BETA the y-axis and GAMMA the z-axis.
    """

    ALPHA = 0
    BETA = 1
    GAMMA = 2

    @property
    def index(self) -> int:
        """Component index of the reference axis."""
        return self.value


ALPHA = AngleDir.ALPHA
BETA = AngleDir.BETA
GAMMA = AngleDir.GAMMA
