"""Command-line interface for Epicycles."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from epicycles import EpicyclesError, __version__
from epicycles.config import get_config
from epicycles.fourier import center_signal, compute_dft, reconstruction_error, to_signal
from epicycles.models import default_specs
from epicycles.paths import GENERATORS, make_path
from epicycles.scene import Scene

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@click.group()
@click.version_option(version=__version__)
def main():
    """Epicycles - Draw closed paths with chains of spinning circles.

    Every shape is a sum of rotating vectors.
    """
    pass


@main.command()
@click.option(
    "--components",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Fourier components per path (default: from config or 100)",
)
@click.option(
    "--time-step",
    type=click.FloatRange(min=0.0, max=1.0, min_open=True),
    default=None,
    help="Time advanced per frame (default: from config or 0.0005)",
)
@click.option(
    "--trail-length",
    type=click.IntRange(min=1),
    default=None,
    help="Points kept in each trail (default: from config or 2000)",
)
@click.option(
    "--no-circles",
    is_flag=True,
    help="Draw only the arms, not the circles",
)
@click.option(
    "--style",
    "-s",
    type=click.Choice(["dark", "blueprint", "neon"]),
    default=None,
    help="Color scheme (default: from config or dark)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Save a GIF here instead of opening a window",
)
@click.option(
    "--frames",
    type=click.IntRange(min=1),
    default=300,
    help="Frames to render when saving (default: 300)",
)
@click.option(
    "--fps",
    type=click.IntRange(min=1),
    default=30,
    help="Playback speed when saving (default: 30)",
)
def animate(
    components: Optional[int],
    time_step: Optional[float],
    trail_length: Optional[int],
    no_circles: bool,
    style: Optional[str],
    output: Optional[Path],
    frames: int,
    fps: int,
):
    """Animate the square, circle and heart scene.

    Examples:

        epicycles animate                         # Interactive window
        epicycles animate -n 10 --style neon      # Coarse, neon
        epicycles animate -o scene.gif --time-step 0.005
    """
    try:
        config = get_config()
        _setup_logging(config.log_level)

        # Override with CLI options
        num_components = components if components is not None else config.num_components
        step = time_step or config.time_step
        trail = trail_length or config.trail_length

        scene = Scene.from_specs(
            default_specs(),
            num_components=num_components,
            time_step=step,
            trail_length=trail,
            trail_render_cap=config.trail_render_cap,
        )

        from epicycles.rendering import EpicycleAnimator

        animator = EpicycleAnimator(
            scene,
            style=style or config.style,
            show_circles=config.show_circles and not no_circles,
            min_circle_radius=config.min_circle_radius,
            width=config.width,
            height=config.height,
        )

        console.print(
            Panel.fit(
                f"[bold cyan]Epicycles[/bold cyan] v{__version__}\n"
                f"Paths: [yellow]{len(scene.paths)}[/yellow]\n"
                f"Components: [yellow]{num_components}[/yellow]\n"
                f"Time step: [yellow]{step}[/yellow]",
                border_style="cyan",
            )
        )

        if output is None:
            animator.show()
            return

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            progress.add_task(f"[cyan]Rendering {frames} frames...", total=None)
            saved = animator.save(output, n_frames=frames, fps=fps)

        console.print(f"[green]✓[/green] Saved animation to [bold]{saved}[/bold]")

    except EpicyclesError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@main.command()
@click.argument("shape", type=click.Choice(sorted(GENERATORS)))
@click.option(
    "--size",
    type=click.FloatRange(min=0.0, min_open=True),
    default=100.0,
    help="Path scale (default: 100)",
)
@click.option(
    "--components",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Fourier components to keep (default: from config or 100)",
)
@click.option(
    "--top",
    type=click.IntRange(min=1),
    default=20,
    help="Rows to display, largest radius first (default: 20)",
)
def components(shape: str, size: float, components: Optional[int], top: int):
    """Show the Fourier components selected for a shape.

    SHAPE: Path to decompose
    """
    try:
        config = get_config()
        _setup_logging(config.log_level)
        num_components = components if components is not None else config.num_components

        points = make_path(shape, size)
        centered, centroid = center_signal(to_signal(points))
        selected = compute_dft(centered, num_components)
        error = reconstruction_error(selected, centered)

        table = Table(title=f"{shape} (size {size:g})", border_style="cyan")
        table.add_column("Frequency", justify="right")
        table.add_column("Radius", justify="right")
        table.add_column("Phase (rad)", justify="right")
        table.add_column("Coefficient", justify="right")

        for comp in sorted(selected, key=lambda c: c.radius, reverse=True)[:top]:
            table.add_row(
                str(comp.frequency),
                f"{comp.radius:.4f}",
                f"{comp.phase:+.4f}",
                f"{comp.coefficient.re:+.4f} {comp.coefficient.im:+.4f}i",
            )

        console.print(table)
        console.print(
            f"[cyan]Samples:[/cyan] {len(points)}  "
            f"[cyan]Kept:[/cyan] {len(selected)}  "
            f"[cyan]Centroid:[/cyan] ({centroid.re:.3f}, {centroid.im:.3f})  "
            f"[cyan]Max error:[/cyan] {error:.4f}"
        )

    except EpicyclesError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@main.command()
def config_show():
    """Show current configuration."""
    try:
        config = get_config()
        console.print(Panel.fit("[bold cyan]Epicycles Configuration[/bold cyan]", border_style="cyan"))
        console.print()
        console.print(f"[cyan]Components:[/cyan] {config.num_components}")
        console.print(f"[cyan]Time Step:[/cyan] {config.time_step}")
        console.print(f"[cyan]Trail Length:[/cyan] {config.trail_length}")
        console.print(f"[cyan]Trail Render Cap:[/cyan] {config.trail_render_cap}")
        console.print(f"[cyan]Show Circles:[/cyan] {config.show_circles}")
        console.print(f"[cyan]Min Circle Radius:[/cyan] {config.min_circle_radius}")
        console.print(f"[cyan]Style:[/cyan] {config.style}")
        console.print(f"[cyan]Window:[/cyan] {config.width}x{config.height}")
        console.print(f"[cyan]Log Level:[/cyan] {config.log_level}")
    except EpicyclesError as e:
        console.print(f"[red]Error loading config:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
