"""Declarative description of the paths in a scene."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


Shape = Literal["square", "circle", "heart"]


class PathSpec(BaseModel):
    """Everything needed to build one animated reconstruction.

    Attributes:
        shape: Which path generator to use
        size: Generator scale (side length, radius or heart scale)
        center: Screen position the reconstruction is translated to
        color: Display color, passed through to the renderer untouched
        num_components: Fourier components to keep (default: from config)
    """

    shape: Shape
    size: float = Field(gt=0.0)
    center: tuple[float, float] = (0.0, 0.0)
    color: str = "#58a6ff"
    num_components: Optional[int] = None

    @field_validator("num_components")
    @classmethod
    def validate_num_components(cls, v: Optional[int]) -> Optional[int]:
        """Validate the component count is not negative."""
        if v is not None and v < 0:
            raise ValueError(f"num_components must be >= 0, got {v}")
        return v


def default_specs() -> list[PathSpec]:
    """The classic two-row layout: square, circle and heart at two sizes."""
    return [
        PathSpec(shape="square", size=150.0, center=(300.0, 200.0), color="#00e430"),
        PathSpec(shape="circle", size=120.0, center=(600.0, 200.0), color="#0079f1"),
        PathSpec(shape="heart", size=6.0, center=(900.0, 200.0), color="#e62937"),
        PathSpec(shape="square", size=130.0, center=(300.0, 500.0), color="#fdf900"),
        PathSpec(shape="circle", size=110.0, center=(600.0, 500.0), color="#ff00ff"),
        PathSpec(shape="heart", size=5.5, center=(900.0, 500.0), color="#ffa100"),
    ]
