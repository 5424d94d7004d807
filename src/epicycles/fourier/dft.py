"""Discrete Fourier transform of closed 2D paths.

A path sampled at ``n`` uniform steps is treated as a complex signal
``z[i] = x[i] + i*y[i]``. Its DFT gives one rotating vector per integer
frequency; keeping only the largest ones yields a compact epicycle chain
that still traces the outline.
"""

import logging
from typing import Iterable, Sequence

import numpy as np

from epicycles import PathError
from epicycles.models import Complex, FourierComponent

logger = logging.getLogger(__name__)


def to_signal(points) -> list[Complex]:
    """Convert a path into a list of complex samples.

    Args:
        points: ``(n, 2)`` array, complex array, or iterable of points
            (Complex values, Python complex numbers or ``(x, y)`` pairs)

    Returns:
        list[Complex]: One value per sample, in path order

    Raises:
        PathError: If a numpy array has an unsupported shape
    """
    if isinstance(points, np.ndarray):
        if np.iscomplexobj(points) and points.ndim == 1:
            return [Complex(float(z.real), float(z.imag)) for z in points]
        if points.ndim == 2 and points.shape[1] == 2:
            return [Complex(float(x), float(y)) for x, y in points]
        raise PathError(f"Expected an (n, 2) or complex array, got shape {points.shape}")

    try:
        return [Complex.from_point(p) for p in points]
    except (TypeError, ValueError) as e:
        raise PathError(f"Could not interpret path points: {e}") from e


def center_signal(signal: Sequence[Complex]) -> tuple[list[Complex], Complex]:
    """Subtract the centroid from every sample.

    Centering leaves the frequency-0 coefficient near zero so that all of
    the motion is carried by the oscillating terms.

    Args:
        signal: Complex samples

    Returns:
        tuple: (centered samples, centroid). The centroid of an empty
        signal is the origin.
    """
    n = len(signal)
    if n == 0:
        return [], Complex.zero()

    centroid = Complex(
        sum(z.re for z in signal) / n,
        sum(z.im for z in signal) / n,
    )
    offset = centroid.scale(-1.0)
    return [z.add(offset) for z in signal], centroid


def fold_frequency(k: int, n: int) -> int:
    """Map DFT index ``k`` of an ``n``-sample signal to a signed frequency.

    Indices up to and including ``n // 2`` stay positive; the upper half
    becomes negative. For even ``n`` the Nyquist index ``n/2`` is positive,
    so every result lies in ``(-n/2, n/2]``.
    """
    return k if k <= n // 2 else k - n


def compute_dft(signal: Sequence[Complex], max_components: int) -> tuple[FourierComponent, ...]:
    """Compute the most significant Fourier components of a signal.

    Uses the direct O(n^2) transform: paths hold a few hundred samples and
    only a fraction of the coefficients is kept.

    Args:
        signal: Complex samples of a closed path, ideally centered
        max_components: How many components to keep

    Returns:
        tuple[FourierComponent, ...]: The ``max_components`` largest
        components (fewer for short signals), ordered by ascending
        frequency. Ties in magnitude keep their original index order.
    """
    n = len(signal)
    if n == 0 or max_components <= 0:
        return ()

    values = np.array([complex(z) for z in signal], dtype=complex)
    index = np.arange(n)
    kernel = np.exp(-2j * np.pi * np.outer(index, index) / n)
    coefficients = kernel @ values / n

    # Largest first; stable so equal magnitudes keep index order
    magnitudes = np.abs(coefficients)
    order = np.argsort(-magnitudes, kind="stable")
    keep = order[:max_components]

    components = [
        FourierComponent(
            frequency=fold_frequency(int(k), n),
            coefficient=Complex(float(coefficients[k].real), float(coefficients[k].imag)),
        )
        for k in keep
    ]
    components.sort(key=lambda c: c.frequency)

    logger.debug(
        "Kept %d of %d components (largest radius %.4g)",
        len(components),
        n,
        float(magnitudes[order[0]]),
    )
    return tuple(components)


def decompose_path(points: Iterable, max_components: int) -> tuple[tuple[FourierComponent, ...], Complex]:
    """Center a path and compute its Fourier components.

    Args:
        points: Path samples in any form accepted by :func:`to_signal`
        max_components: How many components to keep

    Returns:
        tuple: (components, centroid of the original path)
    """
    signal = to_signal(points)
    centered, centroid = center_signal(signal)
    return compute_dft(centered, max_components), centroid
