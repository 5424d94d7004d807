"""Fourier component and epicycle value types."""

from dataclasses import dataclass

from epicycles.models.complex import Complex


@dataclass(frozen=True)
class FourierComponent:
    """One term of a truncated Fourier series.

    Attributes:
        frequency: Signed number of full turns per period
        coefficient: Amplitude (magnitude) and initial phase (angle)
    """

    frequency: int
    coefficient: Complex

    @property
    def radius(self) -> float:
        """Radius of the circle this component traces."""
        return self.coefficient.magnitude()

    @property
    def phase(self) -> float:
        """Initial angle of the rotating arm."""
        return self.coefficient.phase()


@dataclass(frozen=True)
class Epicycle:
    """One arm of the epicycle chain at a given instant.

    Attributes:
        start: Center of the circle (tip of the previous arm)
        end: Tip of this arm
        radius: Circle radius, the magnitude of the component's coefficient
    """

    start: Complex
    end: Complex
    radius: float
