"""Evaluate truncated Fourier series as chains of rotating vectors."""

import math
from typing import Sequence

import numpy as np

from epicycles.models import Complex, Epicycle, FourierComponent


def _arm(component: FourierComponent, time: float) -> Complex:
    """The component's vector after ``time`` periods."""
    return component.coefficient.rotate(2.0 * math.pi * component.frequency * time)


def evaluate(components: Sequence[FourierComponent], time: float) -> Complex:
    """Reconstruct the point at parametric time ``time``.

    The series has period 1 in ``time`` because every frequency is an
    integer.

    Args:
        components: Fourier components of the path
        time: Parameter value, normally in ``[0, 1)``

    Returns:
        Complex: Sum of all rotated coefficients (origin if empty)
    """
    result = Complex.zero()
    for component in components:
        result = result.add(_arm(component, time))
    return result


def evaluate_chain(
    components: Sequence[FourierComponent], time: float
) -> list[tuple[Complex, Complex]]:
    """Compute the partial sums that form the epicycle chain.

    Starting from the origin, each component's rotated vector is added in
    the order given; every step is recorded as ``(previous_sum, new_sum)``.
    The last ``new_sum`` equals :func:`evaluate` for the same inputs.

    Args:
        components: Fourier components, in drawing order
        time: Parameter value

    Returns:
        list[tuple[Complex, Complex]]: One pair per component
    """
    chain = []
    current = Complex.zero()
    for component in components:
        previous = current
        current = current.add(_arm(component, time))
        chain.append((previous, current))
    return chain


def epicycles(
    components: Sequence[FourierComponent],
    time: float,
    offset: Complex = Complex(),
) -> list[Epicycle]:
    """Epicycle arms translated to screen space.

    Args:
        components: Fourier components, in drawing order
        time: Parameter value
        offset: Translation applied to every point

    Returns:
        list[Epicycle]: Arms with their circle radius
    """
    return [
        Epicycle(start=start.add(offset), end=end.add(offset), radius=component.radius)
        for component, (start, end) in zip(components, evaluate_chain(components, time))
    ]


def sample_curve(components: Sequence[FourierComponent], times) -> np.ndarray:
    """Evaluate the series at many times at once.

    Args:
        components: Fourier components of the path
        times: Array-like of parameter values

    Returns:
        np.ndarray: Complex array of reconstructed points, one per time
    """
    times = np.asarray(times, dtype=float)
    result = np.zeros(times.shape, dtype=complex)
    for component in components:
        coef = complex(component.coefficient)
        result += coef * np.exp(2j * np.pi * component.frequency * times)
    return result


def reconstruction_error(
    components: Sequence[FourierComponent], signal: Sequence[Complex]
) -> float:
    """Largest distance between a signal and its reconstruction.

    Sample ``i`` of an ``n``-sample signal is compared against the series
    at time ``i / n``.

    Args:
        components: Fourier components of the signal
        signal: The samples the components were computed from

    Returns:
        float: Maximum pointwise error (0.0 for an empty signal)
    """
    n = len(signal)
    if n == 0:
        return 0.0
    original = np.array([complex(z) for z in signal], dtype=complex)
    rebuilt = sample_curve(components, np.arange(n) / n)
    return float(np.max(np.abs(original - rebuilt)))
