"""matplotlib renderer for epicycle scenes."""

from pathlib import Path
from typing import Literal, Optional

import matplotlib.animation as animation
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection
from matplotlib.colors import to_rgba
from matplotlib.patches import Circle

from epicycles.scene import FrameState, Scene


Style = Literal["dark", "blueprint", "neon"]


class EpicycleAnimator:
    """Draw a :class:`Scene` frame by frame.

    Coordinates are screen pixels with the y axis pointing down, so
    reconstructions appear where their centers say they should.
    """

    # Color schemes
    STYLES = {
        "dark": {
            "bg": "#0d1117",
            "circle": "#969696",
            "arm": "#ffffff",
        },
        "blueprint": {
            "bg": "#1a237e",
            "circle": "#3949ab",
            "arm": "#ffffff",
        },
        "neon": {
            "bg": "#0a0a0a",
            "circle": "#333333",
            "arm": "#00ff88",
        },
    }

    def __init__(
        self,
        scene: Scene,
        style: Style = "dark",
        show_circles: bool = True,
        min_circle_radius: float = 0.1,
        width: int = 1200,
        height: int = 800,
        dpi: int = 100,
    ):
        """Initialize the animator and its figure.

        Args:
            scene: Scene to draw
            style: Color scheme
            show_circles: Draw a circle around every arm
            min_circle_radius: Circles at or below this radius are skipped
            width: Canvas width in pixels
            height: Canvas height in pixels
            dpi: Figure resolution
        """
        self.scene = scene
        self.colors = self.STYLES.get(style, self.STYLES["dark"])
        self.show_circles = show_circles
        self.min_circle_radius = min_circle_radius
        self.width = width
        self.height = height
        self._animation: Optional[animation.FuncAnimation] = None

        self.fig, self.ax = plt.subplots(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.fig.patch.set_facecolor(self.colors["bg"])
        self.fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
        self._reset_axes()

    def _reset_axes(self) -> None:
        self.ax.clear()
        self.ax.set_facecolor(self.colors["bg"])
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)
        self.ax.set_aspect("equal")
        self.ax.axis("off")

    def draw_frame(self, states: list[FrameState]) -> list:
        """Draw one frame's states onto the axes.

        Args:
            states: Output of :meth:`Scene.frame`

        Returns:
            list: The artists that were added
        """
        self._reset_axes()
        artists = []

        for state in states:
            artists.extend(self._draw_epicycles(state))
            artists.extend(self._draw_trail(state))

        return artists

    def _draw_epicycles(self, state: FrameState) -> list:
        if not state.epicycles:
            return []

        artists = []
        if self.show_circles:
            for epi in state.epicycles:
                if epi.radius > self.min_circle_radius:
                    circle = Circle(
                        (epi.start.re, epi.start.im),
                        epi.radius,
                        fill=False,
                        color=self.colors["circle"],
                        linewidth=0.8,
                        alpha=0.7,
                    )
                    self.ax.add_patch(circle)
                    artists.append(circle)

        # The arm runs from the origin of the first circle through every tip
        joints = [state.epicycles[0].start] + [epi.end for epi in state.epicycles]
        (arm,) = self.ax.plot(
            [p.re for p in joints],
            [p.im for p in joints],
            color=self.colors["arm"],
            linewidth=1.5,
            marker="o",
            markersize=1.5,
        )
        artists.append(arm)
        return artists

    def _draw_trail(self, state: FrameState) -> list:
        if not state.trail:
            return []

        segments = [
            [(seg.start.re, seg.start.im), (seg.end.re, seg.end.im)]
            for seg in state.trail
        ]
        colors = np.tile(to_rgba(state.color), (len(segments), 1))
        colors[:, 3] = [seg.alpha for seg in state.trail]

        lines = LineCollection(segments, colors=colors, linewidths=2.0)
        self.ax.add_collection(lines)
        return [lines]

    def _init(self) -> list:
        self._reset_axes()
        return []

    def _step(self, _frame_index: int) -> list:
        return self.draw_frame(self.scene.frame())

    def animate(self, n_frames: Optional[int] = None, interval: int = 16) -> animation.FuncAnimation:
        """Create the animation, advancing the scene once per frame.

        Args:
            n_frames: Number of frames (default: run forever)
            interval: Delay between frames in milliseconds

        Returns:
            animation.FuncAnimation: The running animation
        """
        return animation.FuncAnimation(
            self.fig,
            self._step,
            frames=n_frames,
            init_func=self._init,
            interval=interval,
            cache_frame_data=False,
        )

    def save(self, output_path: Path, n_frames: int = 300, fps: int = 30) -> Path:
        """Render a fixed number of frames to a GIF.

        Args:
            output_path: Where to save the animation
            n_frames: Number of frames to render
            fps: Playback speed

        Returns:
            Path: Path to saved animation
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        anim = self.animate(n_frames=n_frames, interval=int(1000 / fps))
        anim.save(
            output_path,
            writer=animation.PillowWriter(fps=fps),
            savefig_kwargs={"facecolor": self.colors["bg"]},
        )
        self.close()

        return output_path

    def show(self) -> None:
        """Open an interactive window and run until it is closed."""
        # The animation stops if it is garbage collected
        self._animation = self.animate()
        plt.show()

    def close(self) -> None:
        plt.close(self.fig)
