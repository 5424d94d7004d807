"""Tests for the Fourier series evaluator."""

import math

import numpy as np
import pytest

from epicycles.fourier import compute_dft, epicycles, evaluate, evaluate_chain, sample_curve
from epicycles.models import Complex, FourierComponent


@pytest.fixture
def three_components():
    """A small hand-built component set."""
    return (
        FourierComponent(frequency=-2, coefficient=Complex(0.25, 0.1)),
        FourierComponent(frequency=1, coefficient=Complex(2.0, 0.0)),
        FourierComponent(frequency=3, coefficient=Complex(0.0, -0.5)),
    )


class TestEvaluate:
    """Tests for evaluate."""

    def test_empty_components_is_origin(self):
        """Test no components evaluate to the origin."""
        assert evaluate((), 0.37) == Complex(0, 0)

    def test_single_component_traces_circle(self):
        """Test one component spins its coefficient around the origin."""
        comp = (FourierComponent(frequency=1, coefficient=Complex(2, 0)),)
        assert evaluate(comp, 0.0).isclose(Complex(2, 0))
        assert evaluate(comp, 0.25).isclose(Complex(0, 2))
        assert evaluate(comp, 0.5).isclose(Complex(-2, 0))

    def test_negative_frequency_spins_clockwise(self):
        """Test negative frequencies rotate the other way."""
        comp = (FourierComponent(frequency=-1, coefficient=Complex(1, 0)),)
        assert evaluate(comp, 0.25).isclose(Complex(0, -1))

    def test_matches_closed_form(self, three_components):
        """Test against sum(c * exp(2*pi*i*f*t))."""
        t = 0.4242
        expected = sum(
            complex(c.coefficient) * np.exp(2j * np.pi * c.frequency * t)
            for c in three_components
        )
        assert evaluate(three_components, t).isclose(expected, abs_tol=1e-12)

    @pytest.mark.parametrize("t", [0.0, 0.13, 0.5, 0.999, -0.3, 2.7])
    def test_periodic(self, three_components, t):
        """Test the series repeats every 1.0."""
        assert evaluate(three_components, t).isclose(
            evaluate(three_components, t + 1.0), abs_tol=1e-9
        )

    def test_order_does_not_change_point(self, three_components):
        """Test reordering components leaves the sum unchanged."""
        reversed_components = tuple(reversed(three_components))
        assert evaluate(three_components, 0.3).isclose(
            evaluate(reversed_components, 0.3), abs_tol=1e-12
        )


class TestEvaluateChain:
    """Tests for evaluate_chain."""

    def test_empty(self):
        """Test an empty chain."""
        assert evaluate_chain((), 0.5) == []

    def test_starts_at_origin(self, three_components):
        """Test the first arm is anchored at the origin."""
        chain = evaluate_chain(three_components, 0.2)
        assert chain[0][0] == Complex(0, 0)

    def test_arms_are_connected(self, three_components):
        """Test every arm starts where the previous one ended."""
        chain = evaluate_chain(three_components, 0.6)
        for (_, end), (start, _) in zip(chain, chain[1:]):
            assert start == end

    @pytest.mark.parametrize("t", [0.0, 0.1, 0.55, 0.9])
    def test_last_end_equals_evaluate(self, irregular_signal, t):
        """Test the chain finishes at the reconstructed point."""
        components = compute_dft(irregular_signal, 6)
        chain = evaluate_chain(components, t)
        assert chain[-1][1].isclose(evaluate(components, t), abs_tol=1e-12)

    def test_arm_lengths_are_radii(self, three_components):
        """Test each arm is as long as its coefficient."""
        for comp, (start, end) in zip(three_components, evaluate_chain(three_components, 0.8)):
            assert (end - start).magnitude() == pytest.approx(comp.radius)


class TestEpicycles:
    """Tests for the translated epicycle triples."""

    def test_offset_and_radius(self, three_components):
        """Test arms are translated and carry their radius."""
        offset = Complex(100, -50)
        chain = evaluate_chain(three_components, 0.33)
        arms = epicycles(three_components, 0.33, offset=offset)

        assert len(arms) == len(three_components)
        for arm, (start, end), comp in zip(arms, chain, three_components):
            assert arm.start.isclose(start + offset)
            assert arm.end.isclose(end + offset)
            assert arm.radius == comp.radius

    def test_first_arm_starts_at_offset(self, three_components):
        """Test the chain is anchored at the offset."""
        arms = epicycles(three_components, 0.0, offset=Complex(7, 8))
        assert arms[0].start == Complex(7, 8)


class TestSampleCurve:
    """Tests for vectorised evaluation."""

    def test_matches_evaluate(self, three_components):
        """Test sample_curve agrees with evaluate point by point."""
        times = np.linspace(0, 1, 17)
        curve = sample_curve(three_components, times)
        for t, z in zip(times, curve):
            assert evaluate(three_components, t).isclose(z, abs_tol=1e-12)

    def test_empty_components(self):
        """Test no components give zeros."""
        assert np.all(sample_curve((), [0.0, 0.5]) == 0)

    def test_unit_circle_quarter_turns(self, unit_circle_signal):
        """Test the four-point circle is retraced at quarter turns."""
        components = compute_dft(unit_circle_signal, 4)
        curve = sample_curve(components, [0.0, 0.25, 0.5, 0.75])
        expected = np.array([complex(z) for z in unit_circle_signal])
        assert np.allclose(curve, expected, atol=1e-9)
        assert math.isclose(abs(curve[1]), 1.0)
