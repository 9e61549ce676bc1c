# rtcore/vector.py
import math
import numbers

import numpy as np


class Vector3:
    """
    A 3D vector supporting arithmetic, dot and cross products,
    and normalization. Also used for points and RGB colors.

    Equality is exact componentwise float equality. Values produced by
    different rounding paths (0.1 + 0.2 vs 0.3) compare unequal.
    """
    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def from_array(cls, values) -> "Vector3":
        """
        Builds a vector from any length-3 sequence or numpy array.
        """
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"expected 3 components, got shape {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        # Scalar multiplication.
        if isinstance(other, numbers.Real):
            other = float(other)
            return Vector3(self.x * other, self.y * other, self.z * other)
        # Element-wise multiplication, used for color blending.
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        if not isinstance(t, numbers.Real):
            return NotImplemented
        # Division by zero and overflow give inf/nan instead of raising.
        with np.errstate(all="ignore"):
            t = np.float64(t)
            return Vector3(
                float(np.float64(self.x) / t),
                float(np.float64(self.y) / t),
                float(np.float64(self.z) / t)
            )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        """
        Returns the vector divided by its length. A zero vector
        gives NaN components.
        """
        return self / self.length()

    def __str__(self) -> str:
        return f"{_format_component(self.x)} {_format_component(self.y)} {_format_component(self.z)}"

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


# Same class, read as a location or as linear RGB.
Point3 = Vector3
Color = Vector3


def _format_component(value) -> str:
    """
    Shortest round-trip decimal, positional, with no trailing ".0".
    """
    value = np.float64(value)
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim="-")


def dot(u: Vector3, v: Vector3) -> float:
    return u.dot(v)


def cross(u: Vector3, v: Vector3) -> Vector3:
    return u.cross(v)


def unit_vector(v: Vector3) -> Vector3:
    return v.normalize()
