"""
Generic fixed-dimension vector.

``Vector[D]`` is a class whose instances hold exactly ``D`` components of one
numeric dtype (``float32`` unless given as ``Vector[D, dtype]``). The dimension
is part of the class, so two vectors can only be combined when their classes
agree on dimension and dtype.

Component storage is a one-dimensional ``jnp`` array. Every vector class is a
registered JAX pytree, so vectors can be passed through ``jax.jit`` and
``jax.vmap`` like any other array container.

Indexing with ``v[i]`` adds no bounds check of its own and follows plain ``jnp``
indexing, including negative indices. ``v.at(i)`` and ``v.set_at(i, s)`` are
the checked forms and raise ``OutOfRangeError``.
"""

import logging
import operator
from typing import Any, Callable, Iterator, Optional

import jax
import jax.numpy as jnp
import numpy as np

from . import linalg
from .config import get_config
from .errors import DimensionMismatchError, OutOfRangeError
from .ordering import compare
from .primitives import FLOAT_DTYPE, BoolScalar, FloatScalar, NumScalar, resolve_dtype

logger = logging.getLogger(__name__)

_parametrized: dict = {}


class Vector:
    """
    A vector with a fixed number of numeric components.

    Instantiate through a parametrised class: ``Vector[3](1, 2, 3)``. Missing
    trailing components are zero and excess values are ignored, so
    ``Vector[5](3, 5, 2)`` is ``<3, 5, 2, 0, 0>``. A single vector argument of
    the same dimension is copied.
    """

    dimensions: Optional[int] = None
    """Number of components, fixed by the parametrised class."""

    dtype: Optional[jnp.dtype] = None
    """Scalar dtype of every component."""

    component_names: tuple = ()
    """Keyword names accepted by the constructor, in component order."""

    def __class_getitem__(cls, params) -> type:
        if cls is not Vector:
            raise TypeError(f"{cls.__name__} is already parametrised")

        if not isinstance(params, tuple):
            params = (params,)
        if len(params) == 1:
            dimensions, dtype = params[0], FLOAT_DTYPE
        elif len(params) == 2:
            dimensions, dtype = params
        else:
            raise TypeError("Vector takes Vector[D] or Vector[D, dtype]")

        dimensions = operator.index(dimensions)
        if dimensions < 0:
            raise TypeError(f"Vector dimension must be non-negative, got {dimensions}")
        dtype = resolve_dtype(dtype)

        key = (dimensions, dtype)
        if key not in _parametrized:
            if dtype == jnp.dtype(FLOAT_DTYPE):
                name = f"Vector[{dimensions}]"
            else:
                name = f"Vector[{dimensions}, {dtype.name}]"
            _parametrized[key] = type(
                name,
                (Vector,),
                {
                    "dimensions": dimensions,
                    "dtype": dtype,
                    "__module__": __name__,
                    "__qualname__": name,
                },
            )
            logger.debug("created vector class %s", name)
        return _parametrized[key]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        jax.tree_util.register_pytree_node(cls, cls._tree_flatten, cls._tree_unflatten)

    def __init__(self, *values, **named) -> None:
        if self.dimensions is None:
            raise TypeError("Vector needs a dimension, e.g. Vector[3](1.0, 2.0, 3.0)")

        if named:
            unknown = set(named) - set(self.component_names)
            if unknown:
                raise TypeError(
                    f"{type(self).__name__} got unexpected components {sorted(unknown)}"
                )
            if values:
                raise TypeError("pass components either by position or by name, not both")
            values = tuple(named.get(name, 0) for name in self.component_names)

        if len(values) == 1 and isinstance(values[0], Vector):
            other = values[0]
            if other.dimensions != self.dimensions:
                raise DimensionMismatchError(type(self).__name__, type(other).__name__)
            self._components = jnp.asarray(other._components, dtype=self.dtype)
            return

        values = values[: self.dimensions]
        padding = (0,) * (self.dimensions - len(values))
        self._components = jnp.array([*values, *padding], dtype=self.dtype)

    @classmethod
    def _wrap(cls, components) -> "Vector":
        obj = object.__new__(cls)
        obj._components = jnp.asarray(components, dtype=cls.dtype)
        return obj

    def _tree_flatten(self):
        return (self._components,), None

    @classmethod
    def _tree_unflatten(cls, aux, children) -> "Vector":
        obj = object.__new__(cls)
        (obj._components,) = children
        return obj

    def _check_operand(self, other: "Vector") -> None:
        if not isinstance(other, Vector):
            raise TypeError(f"expected a vector operand, got {type(other).__name__}")
        if other.dimensions != self.dimensions or other.dtype != self.dtype:
            raise DimensionMismatchError(type(self).__name__, type(other).__name__)

    def _scalar(self, scalar) -> jax.Array:
        # Scalars take the vector dtype before the operation
        return jnp.asarray(scalar, dtype=self.dtype)

    def _checked_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < self.dimensions:
            raise OutOfRangeError(index, self.dimensions)
        return index

    @property
    def array(self) -> jax.Array:
        """Underlying component array of shape (D,)."""
        return self._components

    def num_dimensions(self) -> int:
        """Number of dimensions of the vector."""
        return self.dimensions

    # Component access

    def __getitem__(self, index):
        return self._components[index]

    def __setitem__(self, index, value) -> None:
        self._components = self._components.at[index].set(value)

    def at(self, index: int) -> NumScalar:
        """
        Checked read of one component.

        Raises
        ------
        OutOfRangeError
            If ``index`` is negative or not smaller than the dimension.
        """
        return self._components[self._checked_index(index)]

    def set_at(self, index: int, value) -> None:
        """
        Checked write of one component.

        Raises
        ------
        OutOfRangeError
            If ``index`` is negative or not smaller than the dimension.
        """
        self._components = self._components.at[self._checked_index(index)].set(value)

    def __len__(self) -> int:
        return self.dimensions

    def __iter__(self) -> Iterator[NumScalar]:
        return iter(self._components)

    def __reversed__(self) -> Iterator[NumScalar]:
        return iter(self._components[::-1])

    # Arithmetic

    def __neg__(self) -> "Vector":
        return type(self)._wrap(-self._components)

    def __pos__(self) -> "Vector":
        return type(self)._wrap(+self._components)

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_operand(other)
        return type(self)._wrap(self._components + other._components)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_operand(other)
        return type(self)._wrap(self._components - other._components)

    def __mul__(self, scalar) -> "Vector":
        if isinstance(scalar, Vector):
            return NotImplemented
        return type(self)._wrap(self._components * self._scalar(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar) -> "Vector":
        if isinstance(scalar, Vector):
            return NotImplemented
        return type(self)._wrap(self._components / self._scalar(scalar))

    def __iadd__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_operand(other)
        self._components = (self._components + other._components).astype(self.dtype)
        return self

    def __isub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_operand(other)
        self._components = (self._components - other._components).astype(self.dtype)
        return self

    def __imul__(self, scalar) -> "Vector":
        if isinstance(scalar, Vector):
            return NotImplemented
        self._components = (self._components * self._scalar(scalar)).astype(self.dtype)
        return self

    def __itruediv__(self, scalar) -> "Vector":
        if isinstance(scalar, Vector):
            return NotImplemented
        self._components = (self._components / self._scalar(scalar)).astype(self.dtype)
        return self

    # Comparison

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_operand(other)
        return bool(jnp.array_equal(self._components, other._components))

    def __ne__(self, other) -> bool:
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return NotImplemented
        return not equal

    __hash__ = None

    def _ordered(self, other, op: Callable[[int, int], bool]) -> bool:
        # Ordering is opt-in, see ordering.compare
        if not isinstance(other, Vector) or not get_config().experimental_compare:
            return NotImplemented
        return op(compare(self, other), 0)

    def __lt__(self, other) -> bool:
        return self._ordered(other, operator.lt)

    def __le__(self, other) -> bool:
        return self._ordered(other, operator.le)

    def __gt__(self, other) -> bool:
        return self._ordered(other, operator.gt)

    def __ge__(self, other) -> bool:
        return self._ordered(other, operator.ge)

    # Derived quantities

    def dot(self, other: "Vector") -> NumScalar:
        """Dot product with a vector of the same dimension."""
        self._check_operand(other)
        return linalg.dot(self._components, other._components)

    def magn(self) -> FloatScalar:
        """Euclidean norm, exactly zero for the zero vector."""
        return linalg.magnitude(self._components)

    def normalize(self) -> "Vector":
        """
        Unit vector in the same direction.

        The zero vector is not guarded against and gives NaN components.
        """
        return type(self)._wrap(linalg.normalize(self._components))

    def is_zero(self) -> BoolScalar:
        """Whether the magnitude is exactly zero, always true for Vector[0]."""
        return self.magn() == 0

    def components_as(self, factory: Callable[..., Any]) -> Any:
        """Unpack the components into ``factory(c0, c1, ...)``."""
        return factory(*self._components)

    # Copying and formatting

    def __copy__(self) -> "Vector":
        return type(self)._wrap(self._components)

    def __deepcopy__(self, memo) -> "Vector":
        return self.__copy__()

    def _formatted_components(self) -> list:
        return [str(c) for c in np.asarray(self._components)]

    def __str__(self) -> str:
        return "<" + ", ".join(self._formatted_components()) + ">"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self._formatted_components())})"
