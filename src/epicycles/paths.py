"""Closed-path generators.

Each generator samples its curve at uniform parametric steps in ``[0, 1)``
and returns an ``(steps, 2)`` array. The first point is not repeated at
the end, since the Fourier series closes the loop by itself.
"""

import numpy as np

from epicycles import PathError


def square_path(size: float, steps: int = 200) -> np.ndarray:
    """Perimeter of an axis-aligned square centered on the origin.

    Args:
        size: Side length
        steps: Number of samples around the perimeter

    Returns:
        np.ndarray: Points traversed at constant speed, starting at the
        top-left corner
    """
    half = size / 2.0
    t = np.arange(steps) / steps
    # Distance travelled along the current side
    s = (t % 0.25) * 4.0 * size

    x = np.select(
        [t < 0.25, t < 0.5, t < 0.75],
        [-half + s, np.full_like(t, half), half - s],
        default=-half,
    )
    y = np.select(
        [t < 0.25, t < 0.5, t < 0.75],
        [np.full_like(t, -half), -half + s, np.full_like(t, half)],
        default=half - s,
    )
    return np.column_stack([x, y])


def circle_path(radius: float, steps: int = 200) -> np.ndarray:
    angle = 2 * np.pi * np.arange(steps) / steps
    return np.column_stack([radius * np.cos(angle), radius * np.sin(angle)])


def heart_path(scale: float, steps: int = 300) -> np.ndarray:
    """The classic parametric heart, point up in screen coordinates.

    Args:
        scale: Multiplier applied to the unit curve (about 32 units wide)
        steps: Number of samples

    Returns:
        np.ndarray: Heart outline
    """
    t = 2 * np.pi * np.arange(steps) / steps
    x = 16 * np.sin(t) ** 3
    y = -(13 * np.cos(t) - 5 * np.cos(2 * t) - 2 * np.cos(3 * t) - np.cos(4 * t))
    return np.column_stack([x * scale, y * scale])


GENERATORS = {
    "square": square_path,
    "circle": circle_path,
    "heart": heart_path,
}


def make_path(shape: str, size: float, steps: int | None = None) -> np.ndarray:
    """Build a path by shape name.

    Args:
        shape: One of ``square``, ``circle``, ``heart``
        size: Generator scale
        steps: Number of samples (default: the generator's own)

    Returns:
        np.ndarray: The sampled path

    Raises:
        PathError: If the shape is unknown
    """
    try:
        generator = GENERATORS[shape]
    except KeyError:
        raise PathError(
            f"Unknown shape '{shape}'. Choose from: {', '.join(GENERATORS)}"
        ) from None

    if steps is None:
        return generator(size)
    return generator(size, steps=steps)
