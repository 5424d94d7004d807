"""Scene composition: several Fourier reconstructions sharing one clock."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from epicycles.fourier import decompose_path, epicycles, evaluate, sample_curve
from epicycles.models import Complex, Epicycle, FourierComponent, PathSpec
from epicycles.paths import make_path
from epicycles.trail import DEFAULT_RENDER_CAP, Trail, TrailSegment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameState:
    """What the renderer needs to draw one reconstruction for one frame.

    Attributes:
        color: Display color of the reconstruction
        time: Parameter value the frame was evaluated at
        epicycles: Arms of the chain, translated by the center
        point: Reconstructed point, translated by the center
        trail: Fading trail segments, newest first
    """

    color: str
    time: float
    epicycles: list[Epicycle]
    point: Complex
    trail: list[TrailSegment]


class PathFourier:
    """A single path reconstructed by its epicycle chain.

    The component list is fixed at construction; only the trail changes
    from frame to frame.
    """

    def __init__(
        self,
        components: Iterable[FourierComponent],
        center=(0.0, 0.0),
        color: str = "#58a6ff",
        max_trail_length: int = DEFAULT_RENDER_CAP,
    ):
        """Initialize a reconstruction.

        Args:
            components: Fourier components, in drawing order
            center: Translation applied to every reconstructed point
            color: Display color, opaque to the core
            max_trail_length: Default trail cap
        """
        self.components: tuple[FourierComponent, ...] = tuple(components)
        self.center = Complex.from_point(center)
        self.color = color
        self.trail = Trail(max_trail_length)

    @classmethod
    def from_path(
        cls,
        points,
        center=(0.0, 0.0),
        color: str = "#58a6ff",
        num_components: int = 100,
        max_trail_length: int = DEFAULT_RENDER_CAP,
    ) -> "PathFourier":
        """Decompose a closed path and wrap it in a reconstruction.

        The path is centered on its own centroid first, so the drawing
        orbits ``center`` regardless of where the path was sampled.

        Args:
            points: Closed path samples
            center: Screen position of the reconstruction
            color: Display color
            num_components: Fourier components to keep
            max_trail_length: Default trail cap

        Returns:
            PathFourier: The reconstruction
        """
        components, _ = decompose_path(points, num_components)
        return cls(components, center=center, color=color, max_trail_length=max_trail_length)

    @classmethod
    def from_spec(
        cls,
        spec: PathSpec,
        num_components: int = 100,
        max_trail_length: int = DEFAULT_RENDER_CAP,
    ) -> "PathFourier":
        """Build a reconstruction from a declarative :class:`PathSpec`.

        ``num_components`` is used when the spec leaves it unset.
        """
        count = spec.num_components if spec.num_components is not None else num_components
        return cls.from_path(
            make_path(spec.shape, spec.size),
            center=spec.center,
            color=spec.color,
            num_components=count,
            max_trail_length=max_trail_length,
        )

    def evaluate(self, time: float) -> Complex:
        """Reconstructed point at ``time``, in screen space."""
        return evaluate(self.components, time).add(self.center)

    def epicycles(self, time: float) -> list[Epicycle]:
        return epicycles(self.components, time, offset=self.center)

    def outline(self, samples: int = 1000) -> np.ndarray:
        """The full reconstructed curve, in screen space.

        Args:
            samples: Number of points along one period

        Returns:
            np.ndarray: Complex array of points
        """
        times = np.arange(samples) / samples
        return sample_curve(self.components, times) + complex(self.center)

    def update(
        self,
        time: float,
        max_trail_length: Optional[int] = None,
        trail_render_cap: int = DEFAULT_RENDER_CAP,
    ) -> FrameState:
        """Advance this reconstruction by one frame.

        Args:
            time: Shared parameter value for this frame
            max_trail_length: Trail cap (default: the trail's own)
            trail_render_cap: Number of trail points the fade spans

        Returns:
            FrameState: Everything needed to draw the frame
        """
        point = self.evaluate(time)
        self.trail.update(point, max_trail_length)
        return FrameState(
            color=self.color,
            time=time,
            epicycles=self.epicycles(time),
            point=point,
            trail=self.trail.render_weights(trail_render_cap),
        )


def advance_time(time: float, step: float) -> float:
    """Move the clock forward, restarting the period at 1.0.

    Args:
        time: Current parameter value
        step: Amount to advance

    Returns:
        float: New parameter value in ``[0, 1)``
    """
    time += step
    if time >= 1.0:
        time = 0.0
    return time


class Scene:
    """Independent reconstructions driven by one shared clock."""

    def __init__(
        self,
        time_step: float = 0.0005,
        trail_length: int = DEFAULT_RENDER_CAP,
        trail_render_cap: int = DEFAULT_RENDER_CAP,
    ):
        """Initialize an empty scene.

        Args:
            time_step: Time advanced per frame
            trail_length: Trail cap applied to every reconstruction
            trail_render_cap: Number of trail points the fade spans
        """
        self.time_step = time_step
        self.trail_length = trail_length
        self.trail_render_cap = trail_render_cap
        self.time = 0.0
        self.paths: list[PathFourier] = []

    @classmethod
    def from_specs(
        cls,
        specs: Iterable[PathSpec],
        num_components: int = 100,
        time_step: float = 0.0005,
        trail_length: int = DEFAULT_RENDER_CAP,
        trail_render_cap: int = DEFAULT_RENDER_CAP,
    ) -> "Scene":
        """Build a scene with one reconstruction per spec.

        Args:
            specs: Path descriptions
            num_components: Component count for specs that leave it unset
            time_step: Time advanced per frame
            trail_length: Trail cap
            trail_render_cap: Number of trail points the fade spans

        Returns:
            Scene: The populated scene
        """
        scene = cls(time_step=time_step, trail_length=trail_length, trail_render_cap=trail_render_cap)
        for spec in specs:
            scene.add(
                PathFourier.from_spec(spec, num_components=num_components, max_trail_length=trail_length)
            )
        logger.debug("Built scene with %d paths", len(scene.paths))
        return scene

    def add(self, path: PathFourier) -> PathFourier:
        self.paths.append(path)
        return path

    def add_path(
        self,
        points,
        center=(0.0, 0.0),
        color: str = "#58a6ff",
        num_components: int = 100,
    ) -> PathFourier:
        """Decompose a path and add its reconstruction to the scene."""
        return self.add(
            PathFourier.from_path(
                points,
                center=center,
                color=color,
                num_components=num_components,
                max_trail_length=self.trail_length,
            )
        )

    def frame(self) -> list[FrameState]:
        """Update every reconstruction at the current time, then advance it.

        Returns:
            list[FrameState]: One state per reconstruction, in insertion order
        """
        states = [
            path.update(self.time, self.trail_length, self.trail_render_cap)
            for path in self.paths
        ]
        self.time = advance_time(self.time, self.time_step)
        return states

    def reset(self) -> None:
        """Rewind the clock and clear every trail."""
        self.time = 0.0
        for path in self.paths:
            path.trail.clear()
