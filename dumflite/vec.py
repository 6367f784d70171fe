"""Fixed-length numeric vectors.

Vec is a small value type backed by a one-dimensional numpy array. Its length
(dimension) and element dtype are fixed when it is constructed, and every
arithmetic operation returns a new Vec with the left operand's element dtype.

Checked preconditions:
- index access outside 0..N-1 raises IndexError
- binary operations on vectors of different dimension raise ValueError
- unit_vector() and angle_between() on a zero-length vector raise ValueError

Precision note:
    Scalars are converted to the element dtype *before* multiplying, and
    unit_vector() divides by the magnitude converted to the element dtype.
    Integer vectors therefore truncate: ``Vec([1, 2]) * 2.7 == Vec([2, 4])``
    and ``Vec([3, 4]).unit_vector() == Vec([0, 0])``. Use float vectors for
    anything physical.

Example:
    >>> a = Vec([1, 2, 3])
    >>> b = Vec([2, 4, 6])
    >>> print(a + b)
    <3, 6, 9>
    >>> a.dot(b)
    28
    >>> Vec.zeros(3).dim
    3
"""

import numbers
import operator
from collections.abc import Iterable, Iterator
from typing import SupportsIndex

import numpy as np
from beartype import beartype
from numpy.typing import NDArray


@beartype
class Vec:
    """Fixed-dimension numeric vector with value semantics.

    Args:
        values: Ordered element values (sequence, numpy array, or another Vec)
        dtype: Element dtype; inferred from values when omitted
        dim: Expected dimension; a length mismatch raises ValueError
    """

    __slots__ = ("_data",)

    # Keeps numpy scalars from broadcasting over a Vec; `np.float64(2) * v`
    # falls through to Vec.__rmul__ instead.
    __array_ufunc__ = None

    def __init__(
        self,
        values: Iterable,
        dtype: type | np.dtype | str | None = None,
        dim: int | None = None,
    ) -> None:
        if isinstance(values, Vec):
            values = values._data
        elif not isinstance(values, np.ndarray):
            values = list(values)

        data = np.array(values, dtype=dtype)

        if data.ndim != 1:
            raise ValueError(f"Vec values must be one-dimensional, got shape {data.shape}")
        if dim is not None and data.shape[0] != dim:
            raise ValueError(f"Expected {dim} values, got {data.shape[0]}")
        if not (np.issubdtype(data.dtype, np.integer) or np.issubdtype(data.dtype, np.floating)):
            raise TypeError(f"Vec elements must be real numbers, got dtype {data.dtype}")

        self._data: NDArray = data

    @classmethod
    def zeros(cls, dim: int, dtype: type | np.dtype | str = np.float64) -> "Vec":
        """Create the zero vector of the given dimension."""
        if dim < 0:
            raise ValueError(f"Dimension must be non-negative, got {dim}")
        return cls._wrap(np.zeros(dim, dtype=dtype))

    @classmethod
    def _wrap(cls, data: NDArray) -> "Vec":
        vec = cls.__new__(cls)
        vec._data = data
        return vec

    # -------------------------------------------------------------------------
    # Shape and element access
    # -------------------------------------------------------------------------

    @property
    def dim(self) -> int:
        """Number of elements."""
        return int(self._data.shape[0])

    @property
    def dtype(self) -> np.dtype:
        """Element dtype."""
        return self._data.dtype

    def _check_index(self, index: SupportsIndex) -> int:
        i = operator.index(index)
        if not 0 <= i < self._data.shape[0]:
            raise IndexError(f"Vec index {i} out of range for dimension {self.dim}")
        return i

    def _check_dim(self, other: "Vec", op: str) -> None:
        if other._data.shape != self._data.shape:
            raise ValueError(
                f"Cannot {op} vectors of different dimensions: {self.dim} and {other.dim}"
            )

    def __getitem__(self, index: SupportsIndex) -> int | float:
        return self._data[self._check_index(index)].item()

    def __setitem__(self, index: SupportsIndex, value: int | float | np.number) -> None:
        self._data[self._check_index(index)] = value

    def __len__(self) -> int:
        return self.dim

    def __iter__(self) -> Iterator:
        return iter(self._data.tolist())

    # -------------------------------------------------------------------------
    # Copies and views
    # -------------------------------------------------------------------------

    def copy(self) -> "Vec":
        """Independent copy of this vector."""
        return Vec._wrap(self._data.copy())

    def view(self) -> "Vec":
        """Read-only Vec sharing this vector's storage.

        The view reflects later in-place updates to this vector; writing
        through it raises ValueError.
        """
        data = self._data.view()
        data.flags.writeable = False
        return Vec._wrap(data)

    def to_array(self) -> NDArray:
        """Copy of the elements as a numpy array."""
        return self._data.copy()

    def assign(self, other: "Vec") -> None:
        """Overwrite the elements in place with those of other."""
        self._check_dim(other, "assign")
        self._data[...] = other._data

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Vec":
        if not isinstance(other, Vec):
            raise TypeError(f"Cannot add Vec and {type(other).__name__}")
        self._check_dim(other, "add")
        return Vec._wrap((self._data + other._data).astype(self.dtype, copy=False))

    def __sub__(self, other: object) -> "Vec":
        if not isinstance(other, Vec):
            raise TypeError(f"Cannot subtract {type(other).__name__} from Vec")
        self._check_dim(other, "subtract")
        return Vec._wrap((self._data - other._data).astype(self.dtype, copy=False))

    def __iadd__(self, other: object) -> "Vec":
        if not isinstance(other, Vec):
            raise TypeError(f"Cannot add {type(other).__name__} to Vec")
        self._check_dim(other, "add")
        np.add(self._data, other._data, out=self._data, casting="unsafe")
        return self

    def __isub__(self, other: object) -> "Vec":
        if not isinstance(other, Vec):
            raise TypeError(f"Cannot subtract {type(other).__name__} from Vec")
        self._check_dim(other, "subtract")
        np.subtract(self._data, other._data, out=self._data, casting="unsafe")
        return self

    def __mul__(self, scalar: object) -> "Vec":
        if isinstance(scalar, Vec):
            raise TypeError("Vec * Vec is ambiguous; use dot() or cross()")
        if not isinstance(scalar, numbers.Real):
            raise TypeError(f"Cannot multiply Vec by {type(scalar).__name__}")
        return Vec._wrap(self._data * self._data.dtype.type(scalar))

    def __rmul__(self, scalar: object) -> "Vec":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> "Vec":
        if not isinstance(scalar, numbers.Real):
            raise TypeError(f"Cannot divide Vec by {type(scalar).__name__}")
        return Vec._wrap((self._data / scalar).astype(self.dtype, copy=False))

    def __neg__(self) -> "Vec":
        return Vec._wrap(-self._data)

    def __matmul__(self, other: object) -> int | float:
        if not isinstance(other, Vec):
            raise TypeError(f"Cannot take dot product of Vec and {type(other).__name__}")
        return self.dot(other)

    def dot(self, other: "Vec") -> int | float:
        """Sum of componentwise products."""
        self._check_dim(other, "dot")
        return np.dot(self._data, other._data).item()

    def cross(self, other: "Vec") -> "Vec":
        """Cross product; defined for 3-vectors only."""
        if self.dim != 3 or other.dim != 3:
            raise ValueError(
                f"Cross product requires 3-vectors, got {self.dim} and {other.dim}"
            )
        a, b = self._data, other._data
        return Vec._wrap(np.array([
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ], dtype=self.dtype))

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def magnitude(self) -> float:
        """Euclidean norm, always computed in float64."""
        d = self._data.astype(np.float64)
        return float(np.sqrt(np.dot(d, d)))

    def unit_vector(self) -> "Vec":
        """Vector divided by its magnitude, in the element dtype.

        Raises:
            ValueError: If the vector has zero length
        """
        magnitude = self.magnitude()
        if magnitude == 0.0:
            raise ValueError("Cannot normalize a zero-length vector")
        scale = self._data.dtype.type(magnitude)
        return Vec._wrap((self._data / scale).astype(self.dtype, copy=False))

    def dist_to(self, other: "Vec") -> float:
        """Euclidean distance to other."""
        self._check_dim(other, "measure distance between")
        return (self - other).magnitude()

    def angle_between(self, other: "Vec") -> float:
        """Angle to other in radians, in [0, pi].

        Raises:
            ValueError: If either vector has zero length
        """
        self._check_dim(other, "measure angle between")
        denominator = self.magnitude() * other.magnitude()
        if denominator == 0.0:
            raise ValueError("Angle is undefined for a zero-length vector")
        cosine = float(self.dot(other)) / denominator
        # Rounding can push |cosine| slightly past 1
        return float(np.arccos(np.clip(cosine, -1.0, 1.0)))

    # -------------------------------------------------------------------------
    # Comparison and display
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Exact componentwise equality (no tolerance)."""
        if not isinstance(other, Vec):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return "<" + ", ".join(str(x) for x in self._data.tolist()) + ">"

    def __repr__(self) -> str:
        return f"Vec({self._data.tolist()!r}, dtype={self.dtype.name})"
