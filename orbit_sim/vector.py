"""
Orbit Simulator - Two-Dimensional Vectors and Points

PolarVector stores a 2-D vector as (magnitude, direction), with the direction
measured from the vertical (up) axis, positive to the right:

    x = magnitude * sin(direction)
    y = magnitude * cos(direction)

Every PolarVector is kept in canonical form: magnitude >= 0 and
direction in (-pi, pi]. The zero vector always has direction 0.
"""

from dataclasses import dataclass
from numbers import Real

import numpy as np

from . import constants as C
from .utils import simplify_angle


@dataclass(frozen=True)
class Point:
    """A point on the xy plane (m)."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        """Translate by a PolarVector, or add coordinates of another Point."""
        if isinstance(other, (PolarVector, Point)):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    @staticmethod
    def vector_between(origin: 'Point', end: 'Point') -> 'PolarVector':
        """Return the vector that translates origin onto end."""
        return PolarVector.from_cartesian(end.x - origin.x, end.y - origin.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f})"


@dataclass(frozen=True)
class PolarVector:
    """
    Immutable 2-D vector in magnitude/direction form.

    Attributes:
        magnitude: Length of the vector (never negative after construction)
        direction: Angle from the vertical axis in radians, in (-pi, pi]
    """
    magnitude: float = 0.0
    direction: float = 0.0

    def __post_init__(self):
        """Canonicalize magnitude and direction."""
        r = float(self.magnitude)
        phi = simplify_angle(self.direction)
        if r == 0.0:
            phi = 0.0
        elif r < 0.0:
            # Fold the sign into the direction
            r = -r
            if phi > 0.0:
                phi -= C.PI
            else:
                phi += C.PI
        object.__setattr__(self, 'magnitude', r)
        object.__setattr__(self, 'direction', phi)

    @classmethod
    def from_cartesian(cls, x: float, y: float) -> 'PolarVector':
        """
        Build a PolarVector from horizontal (x) and vertical (y) components.

        atan2 takes (x, y) rather than (y, x) so that the angle is measured
        from the vertical axis.
        """
        return cls(float(np.hypot(x, y)), float(np.arctan2(x, y)))

    @property
    def x(self) -> float:
        """Horizontal component."""
        return self.magnitude * float(np.sin(self.direction))

    @property
    def y(self) -> float:
        """Vertical component."""
        return self.magnitude * float(np.cos(self.direction))

    @property
    def is_downward(self) -> bool:
        """Whether the vector points below the horizontal."""
        return self.direction < -C.HALF_PI or self.direction > C.HALF_PI

    def scale(self, scalar: float) -> 'PolarVector':
        """Scale the magnitude; a negative scalar reverses the direction."""
        return PolarVector(scalar * self.magnitude, self.direction)

    def add(self, other: 'PolarVector') -> 'PolarVector':
        """Vector sum, computed in Cartesian form and re-canonicalized."""
        return PolarVector.from_cartesian(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar):
        if isinstance(scalar, Real):
            return self.scale(scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> 'PolarVector':
        return self.scale(-1.0)

    def __add__(self, other):
        if isinstance(other, PolarVector):
            return self.add(other)
        if isinstance(other, Point):
            return other + self
        return NotImplemented

    def to_array(self) -> np.ndarray:
        """Cartesian components [x, y]."""
        return np.array([self.x, self.y], dtype=np.float64)

    def __str__(self) -> str:
        return (
            f"PolarVector(r={self.magnitude:.2f}, phi={self.direction:.2f}, "
            f"x={self.x:.2f}, y={self.y:.2f})"
        )


ZERO_VECTOR = PolarVector(0.0, 0.0)
ORIGIN = Point(0.0, 0.0)
