"""simplevectors - fixed-dimension JAX vectors for geometry code."""

from simplevectors.core.config import VectorConfig, configure, get_config, set_config
from simplevectors.core.errors import (
    DimensionMismatchError,
    OutOfRangeError,
    SimpleVectorsError,
)
from simplevectors.core.functions import (
    alpha,
    angle,
    beta,
    cross,
    dot,
    gamma,
    is_zero,
    magn,
    make_vector,
    normalize,
    rotate,
    rotate_alpha,
    rotate_beta,
    rotate_gamma,
    vector_class,
    x,
    y,
    z,
)
from simplevectors.core.ordering import compare, sort_key
from simplevectors.core.units import ALPHA, BETA, GAMMA, AngleDir
from simplevectors.core.vector import Vector
from simplevectors.core.vector2d import Vector2D
from simplevectors.core.vector3d import Vector3D

__version__ = "0.3.9"

__all__ = [
    # Vector types
    "Vector",
    "Vector2D",
    "Vector3D",
    "AngleDir",
    "ALPHA",
    "BETA",
    "GAMMA",
    # Construction
    "make_vector",
    "vector_class",
    # Operations
    "dot",
    "cross",
    "magn",
    "normalize",
    "is_zero",
    "x",
    "y",
    "z",
    "angle",
    "alpha",
    "beta",
    "gamma",
    "rotate",
    "rotate_alpha",
    "rotate_beta",
    "rotate_gamma",
    # Experimental ordering
    "compare",
    "sort_key",
    # Configuration
    "VectorConfig",
    "configure",
    "get_config",
    "set_config",
    # Errors
    "SimpleVectorsError",
    "OutOfRangeError",
    "DimensionMismatchError",
]
