"""Tests for the trail accumulator."""

from unittest.mock import patch

import pytest

from epicycles.models import Complex
from epicycles.trail import Trail


class TestTrailUpdate:
    """Tests for Trail.update."""

    def test_starts_empty(self):
        """Test a new trail holds nothing."""
        trail = Trail(5)
        assert len(trail) == 0
        assert trail.points() == []

    def test_most_recent_first(self):
        """Test new points are prepended."""
        trail = Trail(5)
        for i in range(3):
            trail.update(Complex(i, -i))

        assert trail.points() == [Complex(2, -2), Complex(1, -1), Complex(0, 0)]
        assert trail[0] == Complex(2, -2)
        assert trail[-1] == Complex(0, 0)

    def test_bounded_length(self):
        """Test the trail never exceeds its cap and drops the oldest points."""
        trail = Trail(4)
        for i in range(11):
            trail.update((i, 0))
            assert len(trail) <= 4
            assert trail[0] == Complex(i, 0)

        assert [p.re for p in trail] == [10, 9, 8, 7]

    def test_per_call_cap(self):
        """Test a smaller cap passed to update trims the trail."""
        trail = Trail(10)
        for i in range(6):
            trail.update((i, i))
        trail.update((6, 6), max_length=3)

        assert [p.re for p in trail] == [6, 5, 4]

    def test_per_call_cap_larger_than_capacity(self):
        """Test the buffer grows when a larger cap is requested."""
        trail = Trail(2)
        for i in range(5):
            trail.update((i, 0), max_length=4)

        assert trail.capacity >= 4
        assert [p.re for p in trail] == [4, 3, 2, 1]

    def test_grow_preserves_order(self):
        """Test growing after the ring has wrapped keeps newest-first order."""
        trail = Trail(3)
        for i in range(7):
            trail.update((i, 0))
        trail.update((7, 0), max_length=6)
        trail.update((8, 0), max_length=6)

        assert [p.re for p in trail] == [8, 7, 6, 5, 4]

    def test_index_out_of_range(self):
        """Test indexing past the end raises IndexError."""
        trail = Trail(3)
        trail.update((1, 1))
        with pytest.raises(IndexError):
            trail[1]

    def test_clear(self):
        """Test clearing empties the trail."""
        trail = Trail(3)
        trail.update((1, 1))
        trail.clear()
        assert len(trail) == 0

    def test_as_array(self):
        """Test the array view is newest first."""
        trail = Trail(3)
        trail.update((1, 2))
        trail.update((3, 4))
        assert trail.as_array().tolist() == [[3.0, 4.0], [1.0, 2.0]]


class TestRenderWeights:
    """Tests for Trail.render_weights."""

    def test_fewer_than_two_points(self):
        """Test short trails produce no segments."""
        trail = Trail(5)
        assert trail.render_weights() == []
        trail.update((0, 0))
        assert trail.render_weights() == []

    def test_segments_join_consecutive_points(self):
        """Test segment i joins points i-1 and i."""
        trail = Trail(10)
        for i in range(4):
            trail.update((i, 0))

        segments = trail.render_weights()
        assert len(segments) == 3
        assert segments[0].start == Complex(3, 0)
        assert segments[0].end == Complex(2, 0)
        assert segments[-1].end == Complex(0, 0)

    def test_linear_fade(self):
        """Test opacity falls linearly from newest to oldest."""
        trail = Trail(10)
        for i in range(4):
            trail.update((i, 0))

        alphas = [s.alpha for s in trail.render_weights(max_alpha=255.0)]
        assert alphas == pytest.approx([255 * 0.75, 255 * 0.5, 255 * 0.25])
        assert alphas == sorted(alphas, reverse=True)

    def test_visual_cap(self):
        """Test the fade spans at most visual_cap points."""
        trail = Trail(100)
        for i in range(50):
            trail.update((i, 0))

        segments = trail.render_weights(visual_cap=10)
        assert len(segments) == 9
        assert segments[0].alpha == pytest.approx(0.9)
        assert segments[-1].alpha == pytest.approx(0.1)
        assert len(trail) == 50

    def test_visual_cap_skips_undrawn_points(self):
        """Test only the drawn points are converted."""
        trail = Trail(100)
        for i in range(50):
            trail.update((i, 0))

        with patch.object(trail, "points", wraps=trail.points) as points:
            segments = trail.render_weights(visual_cap=3)

        points.assert_not_called()
        assert [(s.start.re, s.end.re) for s in segments] == [(49, 48), (48, 47)]
