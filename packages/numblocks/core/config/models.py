"""Configuration models for numblocks."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class CubeConfig(BaseModel):
    """Unit cube geometry shared by layout, collision and placement.

    Immutable after creation so layouts computed from it stay reproducible.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    size: float = Field(default=48.0, gt=0.0, description="Cube edge length in canvas units")
    gap: float = Field(default=2.0, ge=0.0, description="Gap between neighbouring cubes")
    face_size: float = Field(default=32.0, gt=0.0, description="Size of the face decoration")

    @property
    def step(self) -> float:
        """Distance between the origins of two adjacent cubes."""
        return self.size + self.gap


class CanvasConfig(BaseModel):
    """Visible canvas bounds used to clamp new blocks."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=1024.0, gt=0.0)
    height: float = Field(default=768.0, gt=0.0)
    margin: float = Field(default=10.0, ge=0.0, description="Margin kept on left/right/bottom")
    top_margin: float = Field(
        default=40.0, ge=0.0, description="Top margin (room for the value label)"
    )


class InteractionConfig(BaseModel):
    """Timing and spacing constants of the interaction state machine."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    cooldown_ms: float = Field(
        default=150.0, ge=0.0, description="Input-ignoring window after a block is created"
    )
    preview_throttle_ms: float = Field(
        default=50.0, ge=0.0, description="Minimum interval between preview overlap checks"
    )
    sneeze_delay_ms: float = Field(
        default=500.0, ge=0.0, description="Delay between the sneeze cue and the split"
    )
    split_gap: float = Field(default=10.0, ge=0.0, description="Gap between split results")
    split_offset: float = Field(
        default=30.0, description="Leftward shift of the first split result"
    )
    split_fit_gap: float = Field(
        default=20.0, ge=0.0, description="Gap assumed when testing whether a split fits"
    )
    indicator_offset: float = Field(
        default=40.0, description="Height of the '+' indicator above the overlapping pair"
    )
    spawn_drag_threshold: float = Field(
        default=0.05,
        ge=0.0,
        le=1.0,
        description="Fraction of canvas height a spawn drag must travel",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False
    filename: str | None = None


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    cube: CubeConfig = Field(default_factory=CubeConfig)
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    interaction: InteractionConfig = Field(default_factory=InteractionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("numblocks.yaml")
