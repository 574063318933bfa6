"""Configuration models for the footwork trainer."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from footwork.core.court.reference import DEFAULT_BASE_ID
from footwork.core.planning.models import (
    DEFAULT_REACTION_MS,
    MAX_SPEED_MULTIPLIER,
    MIN_SPEED_MULTIPLIER,
    Tempo,
)
from footwork.core.vocabulary import Hand, PlayMode


class ConfigBase(BaseModel):
    """Base class for file-backed configurations.

    Provides common functionality for loading from files with defaults.
    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type."""
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path, or defaults when the file does not exist.

        Args:
            path: Path to config file, or None to use default path

        Returns:
            Loaded config instance

        Raises:
            ValidationError: If config is invalid
        """
        from footwork.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        path = Path(path)
        if not path.exists():
            return cls()
        return cls.model_validate(load_config(path))


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit one JSON object per record")
    filename: str | None = Field(default=None, description="Log file; stdout when unset")


class TempoConfig(BaseModel):
    """Default tempo controls for new plans."""

    speed_multiplier: float = Field(
        default=1.0, ge=MIN_SPEED_MULTIPLIER, le=MAX_SPEED_MULTIPLIER
    )
    reaction_ms: float = Field(default=DEFAULT_REACTION_MS, ge=0.0, le=2000.0)

    def to_tempo(self) -> Tempo:
        return Tempo(speed_multiplier=self.speed_multiplier, reaction_ms=self.reaction_ms)


class PlaybackConfig(BaseModel):
    """Playback defaults."""

    hold_ms: float = Field(
        default=0.0, ge=0.0, description="Time each contact point is held before recovery"
    )


class DrillConfig(BaseModel):
    """Drill (queue) mode defaults."""

    queue_length: int = Field(default=5, ge=1, le=100)
    auto_advance: bool = Field(
        default=True, description="Move to the next queued landing when a run completes"
    )
    seed: int | None = Field(default=None, description="Seed for reproducible queues")


class PlayConfig(BaseModel):
    """Game format the catalog is resolved for."""

    mode: PlayMode = PlayMode.SINGLES
    hand: Hand = Hand.RIGHT
    base_id: str = DEFAULT_BASE_ID


class AppConfig(ConfigBase):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tempo: TempoConfig = Field(default_factory=TempoConfig)
    playback: PlaybackConfig = Field(default_factory=PlaybackConfig)
    drill: DrillConfig = Field(default_factory=DrillConfig)
    play: PlayConfig = Field(default_factory=PlayConfig)

    @classmethod
    def default_path(cls) -> Path:
        return Path("footwork.yaml")
