"""Complex number value type used for 2D points and Fourier coefficients."""

import math
from dataclasses import dataclass
from numbers import Number
from typing import Iterator


@dataclass(frozen=True)
class Complex:
    """A 2D vector treated as a complex number ``re + i*im``.

    Instances are immutable; every operation returns a new value.
    """

    re: float = 0.0
    im: float = 0.0

    @classmethod
    def zero(cls) -> "Complex":
        """The origin."""
        return cls(0.0, 0.0)

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> "Complex":
        """Build a value from its magnitude and phase."""
        return cls(radius * math.cos(angle), radius * math.sin(angle))

    @classmethod
    def from_point(cls, point) -> "Complex":
        """Coerce a point-like value into a Complex.

        Accepts a Complex, a Python/numpy number, or any two-element
        sequence ``(x, y)``.

        Args:
            point: Value to convert

        Returns:
            Complex: The converted value
        """
        if isinstance(point, Complex):
            return point
        if isinstance(point, Number):
            value = complex(point)
            return cls(value.real, value.imag)
        x, y = point
        return cls(float(x), float(y))

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.re * self.re + self.im * self.im)

    def phase(self) -> float:
        """Angle of the vector in radians, in ``(-pi, pi]``.

        At the origin this is ``atan2(0, 0)``; do not rely on it there.
        """
        return math.atan2(self.im, self.re)

    def rotate(self, angle: float) -> "Complex":
        """Rotate counter-clockwise by ``angle`` radians (multiply by e^{i*angle})."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        return Complex(
            self.re * cos - self.im * sin,
            self.re * sin + self.im * cos,
        )

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.re + other.re, self.im + other.im)

    def scale(self, scalar: float) -> "Complex":
        return Complex(self.re * scalar, self.im * scalar)

    def multiply(self, other: "Complex") -> "Complex":
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def isclose(self, other, abs_tol: float = 1e-9) -> bool:
        """Check whether two values are within ``abs_tol`` of each other."""
        other = Complex.from_point(other)
        return math.hypot(self.re - other.re, self.im - other.im) <= abs_tol

    def __add__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Complex") -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.add(other.scale(-1.0))

    def __mul__(self, other) -> "Complex":
        if isinstance(other, Complex):
            return self.multiply(other)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    __rmul__ = __mul__

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __iter__(self) -> Iterator[float]:
        yield self.re
        yield self.im
