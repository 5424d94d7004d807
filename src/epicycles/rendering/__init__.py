"""Rendering of epicycle scenes."""

from epicycles.rendering.animator import EpicycleAnimator, Style

__all__ = ["EpicycleAnimator", "Style"]
