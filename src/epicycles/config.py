"""Configuration management for Epicycles."""

from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from epicycles import ConfigurationError


class EpicyclesConfig(BaseSettings):
    """Application configuration loaded from environment variables.

    Environment variables should be prefixed with EPICYCLES_
    Example: EPICYCLES_NUM_COMPONENTS=50

    Attributes:
        num_components: Fourier components kept per path
        time_step: Time advanced per frame (one period is 1.0)
        trail_length: Maximum number of points remembered per trail
        trail_render_cap: Maximum number of trail points drawn with fading
        show_circles: Draw the epicycle circles
        min_circle_radius: Circles at or below this radius are not drawn
        style: Color scheme for the renderer
        width: Window width in pixels
        height: Window height in pixels
        log_level: Logging level for the CLI
    """

    # Fourier Configuration
    num_components: int = Field(
        default=100,
        ge=0,
        description="Number of Fourier components kept per path",
    )

    # Animation Configuration
    time_step: float = Field(
        default=0.0005,
        gt=0.0,
        le=1.0,
        description="Time advanced per frame",
    )
    trail_length: int = Field(
        default=2000,
        ge=1,
        description="Maximum number of points kept in each trail",
    )
    trail_render_cap: int = Field(
        default=2000,
        ge=1,
        description="Maximum number of trail points drawn",
    )

    # Rendering Configuration
    show_circles: bool = Field(
        default=True,
        description="Draw the epicycle circles",
    )
    min_circle_radius: float = Field(
        default=0.1,
        ge=0.0,
        description="Circles at or below this radius are skipped",
    )
    style: Literal["dark", "blueprint", "neon"] = Field(
        default="dark",
        description="Renderer color scheme",
    )
    width: int = Field(default=1200, ge=100, description="Window width in pixels")
    height: int = Field(default=800, ge=100, description="Window height in pixels")

    log_level: str = Field(
        default="WARNING",
        description="Logging level used by the command-line interface",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="EPICYCLES_",
        case_sensitive=False,
        extra="ignore",
    )


# Global config instance (lazy-loaded)
_config: EpicyclesConfig | None = None


def get_config() -> EpicyclesConfig:
    """Get or create the global configuration instance.

    Returns:
        EpicyclesConfig: The configuration object

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    global _config
    if _config is None:
        try:
            _config = EpicyclesConfig()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
