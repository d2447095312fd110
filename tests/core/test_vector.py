"""Tests for vector module."""

import copy

import jax
import jax.numpy as jnp
import pytest

from simplevectors.core.errors import DimensionMismatchError, OutOfRangeError
from simplevectors.core.primitives import EPS, FLOAT_DTYPE, INT_DTYPE
from simplevectors.core.vector import Vector
from simplevectors.core.vector2d import Vector2D


def test_parametrisation() -> None:
    """Test Vector[D] class creation."""
    # Standard case 1 - classes are cached
    assert Vector[3] is Vector[3]
    assert Vector[3] is Vector[3, FLOAT_DTYPE]
    assert Vector[3] is not Vector[4]
    assert Vector[3] is not Vector[3, INT_DTYPE]

    # Standard case 2 - dimension and dtype are class attributes
    assert Vector[5].dimensions == 5
    assert Vector[5].dtype == jnp.dtype(FLOAT_DTYPE)
    assert Vector[2, "int32"].dtype == jnp.dtype(INT_DTYPE)
    assert Vector[3].__name__ == "Vector[3]"
    assert issubclass(Vector[3], Vector)

    # Edge case 1 - unparametrised vector cannot be instantiated
    with pytest.raises(TypeError):
        Vector(1.0, 2.0)

    # Edge case 2 - invalid parameters
    with pytest.raises(TypeError):
        Vector[-1]
    with pytest.raises(TypeError):
        Vector[2.5]
    with pytest.raises(TypeError):
        Vector[3, bool]
    with pytest.raises(TypeError):
        Vector[3, FLOAT_DTYPE, 1]

    # Edge case 3 - parametrised classes cannot be parametrised again
    with pytest.raises(TypeError):
        Vector[3][2]


def test_construction() -> None:
    """Test zero-fill and truncation rules."""
    # Standard case 1 - zero vector
    v1 = Vector[4]()
    assert jnp.array_equal(v1.array, jnp.zeros(4, dtype=FLOAT_DTYPE))

    # Standard case 2 - exact number of values
    v2 = Vector[5](3, 5, 2, 3.5, 6)
    assert jnp.array_equal(v2.array, jnp.array([3.0, 5.0, 2.0, 3.5, 6.0]))

    # Edge case 1 - too few values are zero filled
    v3 = Vector[5](3, 5, 2)
    assert jnp.array_equal(v3.array, jnp.array([3.0, 5.0, 2.0, 0.0, 0.0]))

    # Edge case 2 - too many values are truncated
    v4 = Vector[5](3, 5, 2, 3.5, 6, 39, 2, 6)
    assert v4 == Vector[5](3, 5, 2, 3.5, 6)

    # Edge case 3 - zero-dimension vector
    v5 = Vector[0]()
    assert v5.array.shape == (0,)
    assert len(v5) == 0

    # Edge case 4 - integer dtype
    v6 = Vector[3, INT_DTYPE](1, 2, 3)
    assert v6.array.dtype == jnp.dtype(INT_DTYPE)


def test_copy() -> None:
    """Test copy construction and copies being independent."""
    # Standard case 1 - copy construction
    original = Vector[3](1.0, 2.0, 3.0)
    copied = Vector[3](original)
    assert copied == original
    copied[0] = 10.0
    assert original[0] == 1.0

    # Standard case 2 - copy module
    shallow = copy.copy(original)
    deep = copy.deepcopy(original)
    shallow[1] = -1.0
    deep[2] = -1.0
    assert original == Vector[3](1.0, 2.0, 3.0)

    # Standard case 3 - unary plus copies
    plus = +original
    plus += Vector[3](1.0, 1.0, 1.0)
    assert original == Vector[3](1.0, 2.0, 3.0)

    # Edge case 1 - copying across dimensions is rejected
    with pytest.raises(DimensionMismatchError):
        Vector[2](original)


def test_indexed_access() -> None:
    """Test unchecked and checked component access."""
    v = Vector[4](1.0, 2.0, 3.0, 4.0)

    # Standard case 1 - reads
    assert v[0] == 1.0
    assert v[3] == 4.0

    # Standard case 2 - writes
    v[1] = 20.0
    v.set_at(2, 30.0)
    assert v == Vector[4](1.0, 20.0, 30.0, 4.0)

    # Standard case 3 - checked and unchecked agree after mutations
    v *= 2.0
    v -= Vector[4](1.0, 1.0, 1.0, 1.0)
    for i in range(v.num_dimensions()):
        assert v.at(i) == v[i]

    # Edge case 1 - checked access at the dimension raises
    with pytest.raises(OutOfRangeError) as info:
        v.at(4)
    assert info.value.index == 4
    assert info.value.dimensions == 4
    with pytest.raises(IndexError):
        v.set_at(4, 1.0)

    # Edge case 2 - negative checked index raises
    with pytest.raises(OutOfRangeError):
        v.at(-1)

    # Edge case 3 - every index of an empty vector is out of range
    with pytest.raises(OutOfRangeError):
        Vector[0]().at(0)


def test_arithmetic() -> None:
    """Test vector and scalar arithmetic."""
    a = Vector[3](1.0, 2.0, 3.0)
    b = Vector[3](4.0, -5.0, 6.5)

    # Standard case 1 - addition and subtraction
    assert a + b == Vector[3](5.0, -3.0, 9.5)
    assert a - b == Vector[3](-3.0, 7.0, -3.5)
    assert a + b == b + a

    # Standard case 2 - unary operators
    assert -a == Vector[3](-1.0, -2.0, -3.0)
    assert +a == a
    assert +a is not a

    # Standard case 3 - scalar multiplication and division
    assert a * 2.0 == Vector[3](2.0, 4.0, 6.0)
    assert 2.0 * a == Vector[3](2.0, 4.0, 6.0)
    assert a / 2.0 == Vector[3](0.5, 1.0, 1.5)

    # Edge case 1 - division by zero is not guarded
    assert jnp.all(jnp.isinf((a / 0.0).array))

    # Edge case 2 - mismatched dimensions
    with pytest.raises(DimensionMismatchError):
        a + Vector[2](1.0, 2.0)
    with pytest.raises(DimensionMismatchError):
        a - Vector[3, INT_DTYPE](1, 2, 3)

    # Edge case 3 - unsupported operands
    with pytest.raises(TypeError):
        a + 1.0
    with pytest.raises(TypeError):
        a * b
    with pytest.raises(TypeError):
        1.0 / a

    # Edge case 4 - integer vectors keep their dtype
    n = Vector[2, INT_DTYPE](7, -7)
    assert (n / 2).array.dtype == jnp.dtype(INT_DTYPE)
    assert n / 2 == Vector[2, INT_DTYPE](3, -3)

    # Edge case 5 - scalars are converted to the vector dtype first
    m = Vector[2, INT_DTYPE](3, 7)
    assert m * 2.5 == Vector[2, INT_DTYPE](6, 14)
    assert 2.5 * m == Vector[2, INT_DTYPE](6, 14)
    assert m / 2.5 == Vector[2, INT_DTYPE](1, 3)
    m *= 2.5
    assert m == Vector[2, INT_DTYPE](6, 14)
    m /= 2.5
    assert m == Vector[2, INT_DTYPE](3, 7)


def test_in_place_arithmetic() -> None:
    """Test mutating operators return the same vector."""
    v = Vector[3](1.0, 2.0, 3.0)
    ident = id(v)

    # Standard case 1 - each operator mutates in place
    v += Vector[3](1.0, 1.0, 1.0)
    assert v == Vector[3](2.0, 3.0, 4.0)
    v -= Vector[3](2.0, 2.0, 2.0)
    assert v == Vector[3](0.0, 1.0, 2.0)
    v *= 4.0
    assert v == Vector[3](0.0, 4.0, 8.0)
    v /= 2.0
    assert v == Vector[3](0.0, 2.0, 4.0)
    assert id(v) == ident

    # Standard case 2 - chaining through the returned handle
    w = v.__iadd__(Vector[3](1.0, 1.0, 1.0)).__imul__(2.0)
    assert w is v
    assert v == Vector[3](2.0, 6.0, 10.0)

    # Edge case 1 - mismatched dimensions
    with pytest.raises(DimensionMismatchError):
        v += Vector[4]()


def test_equality() -> None:
    """Test structural equality."""
    a = Vector[3](1.0, 2.0, 3.0)

    # Standard case 1 - reflexive
    assert a == a
    assert not (a != a)

    # Standard case 2 - exact, not tolerance based
    assert a != Vector[3](1.0, 2.0, 3.0 + 1e-3)

    # Standard case 3 - specialisations compare with their base dimension
    assert Vector2D(1.0, 2.0) == Vector[2](1.0, 2.0)

    # Edge case 1 - non-vectors are never equal
    assert a != (1.0, 2.0, 3.0)
    assert not (a == "abc")

    # Edge case 2 - different dimensions are rejected
    with pytest.raises(DimensionMismatchError):
        a == Vector[2](1.0, 2.0)

    # Edge case 3 - empty vectors are equal
    assert Vector[0]() == Vector[0]()

    # Edge case 4 - vectors are unhashable
    with pytest.raises(TypeError):
        hash(a)


def test_dot() -> None:
    """Test dot product."""
    a = Vector[4](1.0, 2.0, 3.0, 4.0)
    b = Vector[4](-1.0, 0.5, 2.0, 0.0)

    # Standard case
    assert a.dot(b) == 6.0
    assert b.dot(a) == a.dot(b)

    # Edge case 1 - mismatched dimensions
    with pytest.raises(DimensionMismatchError):
        a.dot(Vector[3]())

    # Edge case 2 - non-vector operand
    with pytest.raises(TypeError):
        a.dot([1.0, 2.0, 3.0, 4.0])


def test_magnitude_and_normalize() -> None:
    """Test magnitude, normalize and is_zero."""
    # Standard case 1 - magnitude
    v = Vector[3](2.0, -3.0, -6.0)
    assert jnp.isclose(v.magn(), 7.0, atol=EPS)

    # Standard case 2 - normalize
    unit = v.normalize()
    assert isinstance(unit, Vector[3])
    assert jnp.allclose(unit.array, (v / v.magn()).array, atol=EPS)
    assert jnp.isclose(unit.magn(), 1.0, atol=EPS)

    # Standard case 3 - is_zero
    assert not Vector[5](2.0, 5.0, 3.0).is_zero()
    assert Vector[5](0.0).is_zero()
    assert Vector[5]().magn() == 0.0

    # Edge case 1 - empty vector is always zero
    assert Vector[0]().is_zero()

    # Edge case 2 - normalising the zero vector is not guarded
    assert jnp.all(jnp.isnan(Vector[3]().normalize().array))


def test_iteration() -> None:
    """Test forward and reverse iteration."""
    v = Vector[4](1.0, 2.0, 3.0, 4.0)

    # Standard case 1 - forward
    assert [float(c) for c in v] == [1.0, 2.0, 3.0, 4.0]

    # Standard case 2 - reverse
    assert [float(c) for c in reversed(v)] == [4.0, 3.0, 2.0, 1.0]

    # Standard case 3 - restartable
    assert [float(c) for c in v] == [float(c) for c in v]

    # Standard case 4 - writes through enumerate
    for i, c in enumerate(v):
        v[i] = c * 10.0
    assert v == Vector[4](10.0, 20.0, 30.0, 40.0)

    # Edge case 1 - empty vector yields nothing
    assert list(Vector[0]()) == []
    assert list(reversed(Vector[0]())) == []


def test_string_representation() -> None:
    """Test str and repr rendering."""
    # Standard case 1 - str
    assert str(Vector[3](1.0, 2.5, -3.0)) == "<1.0, 2.5, -3.0>"

    # Standard case 2 - repr
    assert repr(Vector[2](1.0, 2.0)) == "Vector[2](1.0, 2.0)"

    # Standard case 3 - default float formatting, not fixed precision
    assert str(Vector[2](0.1, 100.0)) == "<0.1, 100.0>"

    # Edge case 1 - integer components
    assert str(Vector[3, INT_DTYPE](1, 2, 3)) == "<1, 2, 3>"

    # Edge case 2 - empty vector
    assert str(Vector[0]()) == "<>"


def test_components_as() -> None:
    """Test exporting components into an external structure."""
    v = Vector[3](1.0, 2.0, 3.0)

    # Standard case 1 - tuple-like factory
    assert v.components_as(lambda *cs: tuple(float(c) for c in cs)) == (1.0, 2.0, 3.0)

    # Standard case 2 - keyword-less constructor with matching arity
    def point(a, b, c):
        return {"a": float(a), "b": float(b), "c": float(c)}

    assert v.components_as(point) == {"a": 1.0, "b": 2.0, "c": 3.0}

    # Edge case 1 - arity mismatch surfaces the factory's own error
    with pytest.raises(TypeError):
        v.components_as(lambda a, b: (a, b))


def test_pytree(jit_mode: str) -> None:
    """Test vectors as JAX pytrees."""
    v = Vector[3](1.0, 2.0, 3.0)

    # Standard case 1 - flatten and unflatten
    leaves, treedef = jax.tree_util.tree_flatten(v)
    assert len(leaves) == 1
    rebuilt = jax.tree_util.tree_unflatten(treedef, leaves)
    assert type(rebuilt) is Vector[3]
    assert rebuilt == v

    # Standard case 2 - through jit
    def scale_and_shift(u, s):
        return u * s + Vector[3](1.0, 1.0, 1.0)

    fn = jax.jit(scale_and_shift) if jit_mode == "jit" else scale_and_shift
    result = fn(v, 2.0)
    assert type(result) is Vector[3]
    assert result == Vector[3](3.0, 5.0, 7.0)

    # Standard case 3 - vmap over a stacked batch
    batch = jax.tree_util.tree_map(
        lambda *xs: jnp.stack(xs), v, Vector[3](3.0, 4.0, 0.0)
    )
    norms = jax.vmap(lambda u: u.magn())(batch)
    assert jnp.allclose(norms, jnp.array([jnp.sqrt(14.0), 5.0]), atol=EPS)
