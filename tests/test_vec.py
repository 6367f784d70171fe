"""Unit tests for the Vec value type.

Covers construction, checked element access, arithmetic, the usual vector
algebra laws, and the integer-truncation behavior of scalar operations.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from dumflite.vec import Vec

# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    """Test Vec creation and validation."""

    def test_from_values(self):
        """Values are stored in order and the dtype is inferred."""
        v = Vec([1, 2, 3])
        assert v.dim == 3
        assert len(v) == 3
        assert list(v) == [1, 2, 3]
        assert np.issubdtype(v.dtype, np.integer)

    def test_zeros(self):
        """Zero vector has the requested dimension and float dtype."""
        v = Vec.zeros(4)
        assert v.dim == 4
        assert v.dtype == np.float64
        assert list(v) == [0.0, 0.0, 0.0, 0.0]

    def test_zeros_integer_dtype(self):
        """Zero vector honors an explicit dtype."""
        v = Vec.zeros(3, dtype=np.int32)
        assert v.dtype == np.int32

    def test_explicit_dtype(self):
        """Integer values can be stored as floats."""
        v = Vec([1, 2, 3], dtype=np.float64)
        assert v.dtype == np.float64
        assert v[0] == 1.0

    def test_dimension_mismatch_raises(self):
        """A value list that does not match dim is rejected."""
        with pytest.raises(ValueError, match="Expected 3 values"):
            Vec([1.0, 2.0], dim=3)

    def test_nested_values_raise(self):
        """Only one-dimensional values are accepted."""
        with pytest.raises(ValueError, match="one-dimensional"):
            Vec([[1.0, 2.0], [3.0, 4.0]])

    def test_non_numeric_raises(self):
        """String elements are rejected."""
        with pytest.raises(TypeError, match="real numbers"):
            Vec(["a", "b"])

    def test_copy_is_independent(self):
        """Constructing from another Vec copies its elements."""
        a = Vec([1.0, 2.0, 3.0])
        b = Vec(a)
        b[0] = 10.0
        assert a[0] == 1.0

        c = a.copy()
        c[1] = 20.0
        assert a[1] == 2.0


# =============================================================================
# Element Access
# =============================================================================


class TestElementAccess:
    """Test checked indexing."""

    def test_read_write(self):
        """Elements can be read and written by position."""
        v = Vec.zeros(3)
        v[1] = 4.5
        assert v[1] == 4.5
        assert v[0] == 0.0

    def test_index_past_end_raises(self):
        """Index N is out of range."""
        v = Vec([1.0, 2.0, 3.0])
        with pytest.raises(IndexError, match="out of range"):
            v[3]

    def test_negative_index_raises(self):
        """Negative indices are not wrapped around."""
        v = Vec([1.0, 2.0, 3.0])
        with pytest.raises(IndexError):
            v[-1]
        with pytest.raises(IndexError):
            v[-1] = 0.0

    def test_numpy_integer_index(self):
        """numpy integers are valid indices."""
        v = Vec([1.0, 2.0, 3.0])
        assert v[np.int64(2)] == 3.0

    def test_view_is_live_and_read_only(self):
        """A view tracks the source but refuses writes."""
        v = Vec.zeros(3)
        view = v.view()

        v += Vec([1.0, 2.0, 3.0])
        assert view == Vec([1.0, 2.0, 3.0])

        with pytest.raises(ValueError):
            view[0] = 5.0

    def test_assign_overwrites_in_place(self):
        """assign() keeps identity and replaces elements."""
        v = Vec.zeros(3)
        view = v.view()
        v.assign(Vec([7.0, 8.0, 9.0]))
        assert view == Vec([7.0, 8.0, 9.0])


# =============================================================================
# Arithmetic
# =============================================================================


class TestArithmetic:
    """Test componentwise and scalar arithmetic."""

    def test_addition(self):
        """Addition is componentwise."""
        assert Vec([1, 2, 3]) + Vec([2, 4, 6]) == Vec([3, 6, 9])

    def test_subtraction(self):
        """Subtraction is componentwise."""
        assert Vec([5.0, 5.0]) - Vec([1.0, 2.0]) == Vec([4.0, 3.0])

    def test_addition_commutative(self):
        """a + b == b + a."""
        a = Vec([1, -7, 12])
        b = Vec([9, 3, -4])
        assert a + b == b + a

    def test_addition_associative(self):
        """(a + b) + c == a + (b + c)."""
        a = Vec([1, 2, 3])
        b = Vec([-4, 5, 6])
        c = Vec([7, -8, 9])
        assert (a + b) + c == a + (b + c)

    def test_in_place_addition_keeps_identity(self):
        """+= mutates the left operand."""
        v = Vec([1.0, 1.0, 1.0])
        before = v
        v += Vec([1.0, 2.0, 3.0])
        assert v is before
        assert v == Vec([2.0, 3.0, 4.0])

    def test_in_place_subtraction(self):
        """-= mutates the left operand."""
        v = Vec([1.0, 1.0])
        v -= Vec([0.5, 2.0])
        assert v == Vec([0.5, -1.0])

    def test_dimension_mismatch_raises(self):
        """Binary operations require equal dimensions."""
        with pytest.raises(ValueError, match="different dimensions"):
            Vec([1.0, 2.0]) + Vec([1.0, 2.0, 3.0])
        with pytest.raises(ValueError, match="different dimensions"):
            Vec([1.0, 2.0]).dot(Vec([1.0, 2.0, 3.0]))

    def test_add_non_vector_raises(self):
        """Adding a scalar is not supported."""
        with pytest.raises(TypeError):
            Vec([1.0, 2.0]) + 1.0

    def test_scalar_multiplication(self):
        """Scalars multiply from either side."""
        v = Vec([1.0, -2.0, 3.0])
        assert v * 2.0 == Vec([2.0, -4.0, 6.0])
        assert 2.0 * v == Vec([2.0, -4.0, 6.0])
        assert 3 * v == Vec([3.0, -6.0, 9.0])

    def test_numpy_scalar_multiplication(self):
        """numpy scalars on the left defer to Vec."""
        result = np.float64(2.0) * Vec([1.0, 2.0])
        assert isinstance(result, Vec)
        assert result == Vec([2.0, 4.0])

    def test_mixed_type_multiplication_keeps_element_type(self):
        """The scalar is converted to the element type before multiplying."""
        result = Vec([1, 2, 3]) * 2.7
        assert np.issubdtype(result.dtype, np.integer)
        assert result == Vec([2, 4, 6])

    def test_vector_times_vector_raises(self):
        """Vec * Vec is rejected in favor of dot() and cross()."""
        with pytest.raises(TypeError, match="dot"):
            Vec([1.0, 2.0]) * Vec([3.0, 4.0])

    def test_scalar_division(self):
        """Division by a scalar is componentwise."""
        assert Vec([2.0, 4.0, 8.0]) / 2.0 == Vec([1.0, 2.0, 4.0])

    def test_negation(self):
        """Unary minus negates every element."""
        assert -Vec([1.0, -2.0]) == Vec([-1.0, 2.0])


# =============================================================================
# Products and Geometry
# =============================================================================


class TestProducts:
    """Test dot and cross products."""

    def test_dot(self):
        """Dot product sums componentwise products in the element type."""
        result = Vec([1, 2, 3]).dot(Vec([4, 5, 6]))
        assert result == 32
        assert isinstance(result, int)

    def test_matmul_is_dot(self):
        """The @ operator computes the dot product."""
        assert Vec([1.0, 0.0, 2.0]) @ Vec([3.0, 4.0, 5.0]) == 13.0

    def test_dot_self_is_squared_magnitude(self):
        """v . v == |v|^2."""
        for values in ([3.0, 4.0, 12.0], [-1.5, 0.25, 7.0], [1e-3, 2e3, -5.0]):
            v = Vec(values)
            assert_allclose(v.dot(v), v.magnitude() ** 2, rtol=1e-12)

    def test_cross_basis(self):
        """x cross y is z."""
        x = Vec([1.0, 0.0, 0.0])
        y = Vec([0.0, 1.0, 0.0])
        assert x.cross(y) == Vec([0.0, 0.0, 1.0])
        assert y.cross(x) == Vec([0.0, 0.0, -1.0])

    def test_cross_self_is_zero(self):
        """v cross v is the zero vector."""
        v = Vec([2.5, -1.0, 4.0])
        assert v.cross(v) == Vec.zeros(3)

    def test_cross_is_orthogonal(self):
        """The cross product is orthogonal to both operands."""
        a = Vec([1.0, 2.0, 3.0])
        b = Vec([-4.0, 0.5, 2.0])
        c = a.cross(b)
        assert_allclose(c.dot(a), 0.0, atol=1e-12)
        assert_allclose(c.dot(b), 0.0, atol=1e-12)

    def test_cross_requires_three_dimensions(self):
        """Cross product is only defined for 3-vectors."""
        with pytest.raises(ValueError, match="3-vectors"):
            Vec([1.0, 0.0]).cross(Vec([0.0, 1.0]))


class TestGeometry:
    """Test magnitude, normalization, distance and angles."""

    def test_magnitude(self):
        """Magnitude of (3, 4) is 5, even for integer vectors."""
        m = Vec([3, 4]).magnitude()
        assert m == 5.0
        assert isinstance(m, float)

    def test_unit_vector_has_unit_length(self):
        """Normalizing any nonzero float vector gives length 1."""
        for values in ([3.0, 4.0, 0.0], [-1.0, -1.0, -1.0], [1e-8, 0.0, 2e-8], [1e6, -3e6, 2.0]):
            assert_allclose(Vec(values).unit_vector().magnitude(), 1.0, rtol=1e-12)

    def test_unit_vector_direction(self):
        """The unit vector points the same way."""
        u = Vec([0.0, 0.0, 5.0]).unit_vector()
        assert u == Vec([0.0, 0.0, 1.0])

    def test_unit_vector_of_zero_raises(self):
        """A zero vector has no direction."""
        with pytest.raises(ValueError, match="zero-length"):
            Vec.zeros(3).unit_vector()

    def test_unit_vector_integer_truncation(self):
        """Integer vectors divide in the element type and truncate."""
        u = Vec([3, 4]).unit_vector()
        assert np.issubdtype(u.dtype, np.integer)
        assert u == Vec([0, 0])

    def test_distance(self):
        """Distance is the magnitude of the difference."""
        assert Vec([1.0, 1.0, 1.0]).dist_to(Vec([4.0, 5.0, 1.0])) == 5.0

    def test_angle_between_orthogonal(self):
        """Perpendicular vectors are pi/2 apart."""
        angle = Vec([1.0, 0.0, 0.0]).angle_between(Vec([0.0, 2.0, 0.0]))
        assert_allclose(angle, math.pi / 2)

    def test_angle_between_parallel_and_opposite(self):
        """Parallel vectors are 0 apart and opposite ones pi apart."""
        v = Vec([0.1, 0.2, 0.3])
        assert_allclose(v.angle_between(v * 3.0), 0.0, atol=1e-7)
        assert_allclose(v.angle_between(-v), math.pi, atol=1e-7)

    def test_angle_between_zero_raises(self):
        """Angle to a zero vector is undefined."""
        with pytest.raises(ValueError, match="zero-length"):
            Vec([1.0, 0.0, 0.0]).angle_between(Vec.zeros(3))


# =============================================================================
# Comparison and Display
# =============================================================================


class TestComparison:
    """Test equality and string output."""

    def test_exact_equality(self):
        """Equality has no tolerance."""
        assert Vec([0.1 + 0.2]) != Vec([0.3])
        assert Vec([0.5, 0.25]) == Vec([0.5, 0.25])

    def test_different_dimensions_unequal(self):
        """Vectors of different dimension are never equal."""
        assert Vec([1.0, 2.0]) != Vec([1.0, 2.0, 0.0])

    def test_not_hashable(self):
        """Mutable vectors cannot be hashed."""
        with pytest.raises(TypeError):
            hash(Vec([1.0]))

    def test_str(self):
        """String form is <a, b, c>."""
        assert str(Vec([1, 2, 3])) == "<1, 2, 3>"
        assert str(Vec([0.5, -1.0])) == "<0.5, -1.0>"
