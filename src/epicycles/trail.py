"""Bounded, fading history of reconstructed points."""

from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from epicycles.models import Complex

# Number of trail points drawn before the fade reaches zero
DEFAULT_RENDER_CAP = 2000


@dataclass(frozen=True)
class TrailSegment:
    """A line between two consecutive trail points.

    Attributes:
        start: The newer point
        end: The older point
        alpha: Opacity, highest for the newest segment
    """

    start: Complex
    end: Complex
    alpha: float


class Trail:
    """Most-recent-first point history with a maximum length.

    Points live in a fixed-size ring buffer. New points are written just
    before the head, so prepending never shifts existing entries and the
    oldest point falls off once the cap is reached.
    """

    def __init__(self, max_length: int = DEFAULT_RENDER_CAP):
        """Initialize an empty trail.

        Args:
            max_length: Default cap on the number of stored points
        """
        self.max_length = max_length
        self._buffer = np.zeros((max(max_length, 1), 2))
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._buffer)

    def update(self, point, max_length: Optional[int] = None) -> None:
        """Prepend a point, dropping the oldest ones beyond the cap.

        Args:
            point: The newest point (anything :meth:`Complex.from_point` accepts)
            max_length: Cap for this update (default: the trail's own)
        """
        cap = self.max_length if max_length is None else max_length
        if cap > self.capacity:
            self._grow(cap)

        point = Complex.from_point(point)
        self._head = (self._head - 1) % self.capacity
        self._buffer[self._head] = (point.re, point.im)
        self._size = max(0, min(self._size + 1, cap))

    def clear(self) -> None:
        self._head = 0
        self._size = 0

    def as_array(self) -> np.ndarray:
        """Stored points as an ``(n, 2)`` array, newest first."""
        indices = (self._head + np.arange(self._size)) % self.capacity
        return self._buffer[indices].copy()

    def points(self) -> list[Complex]:
        return [Complex(float(x), float(y)) for x, y in self.as_array()]

    def render_weights(
        self,
        visual_cap: int = DEFAULT_RENDER_CAP,
        max_alpha: float = 1.0,
    ) -> list[TrailSegment]:
        """Segments between consecutive points with a linear fade.

        The fade spans ``L = min(len(self), visual_cap)`` points: segment
        ``i`` (joining points ``i - 1`` and ``i``) gets opacity
        ``(1 - i / L) * max_alpha``. Points past the visual cap are kept
        but not drawn.

        Args:
            visual_cap: Maximum number of points to draw
            max_alpha: Opacity scale

        Returns:
            list[TrailSegment]: Newest segment first; empty for fewer than
            two points
        """
        length = min(self._size, visual_cap)
        if length < 2:
            return []

        points = [Complex(float(x), float(y)) for x, y in self.as_array()[:length]]
        return [
            TrailSegment(
                start=points[i - 1],
                end=points[i],
                alpha=(1.0 - i / length) * max_alpha,
            )
            for i in range(1, length)
        ]

    def _grow(self, capacity: int) -> None:
        """Reallocate the ring buffer, keeping the stored points."""
        current = self.as_array()
        self._buffer = np.zeros((capacity, 2))
        self._buffer[: len(current)] = current
        self._head = 0

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> Complex:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("trail index out of range")
        x, y = self._buffer[(self._head + index) % self.capacity]
        return Complex(float(x), float(y))

    def __iter__(self) -> Iterator[Complex]:
        return iter(self.points())
