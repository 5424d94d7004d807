"""Data models for Epicycles."""

from epicycles.models.complex import Complex
from epicycles.models.component import Epicycle, FourierComponent
from epicycles.models.scene import PathSpec, Shape, default_specs

__all__ = [
    "Complex",
    "FourierComponent",
    "Epicycle",
    "PathSpec",
    "Shape",
    "default_specs",
]
