"""Configuration models for ChillFlow.

Durations are expressed in seconds so the cycle engine can use them
directly against wall-clock differences.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class CycleConfig(BaseModel):
    """Timings of the focus cycle."""

    focus_duration: int = Field(default=1500, description="Focus phase, seconds")
    rest_duration: int = Field(default=300, description="Short rest, seconds")
    long_rest_duration: int = Field(
        default=1800, description="Rest after the last session, seconds"
    )
    max_sessions: int = Field(default=3, description="Focus sessions per cycle")

    @field_validator("focus_duration", "rest_duration", "long_rest_duration")
    @classmethod
    def validate_duration(cls, v: int) -> int:
        """Durations must be positive."""
        if v <= 0:
            raise ValueError("duration must be greater than zero")
        return v

    @field_validator("max_sessions")
    @classmethod
    def validate_max_sessions(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_sessions must be at least 1")
        return v


class OutputConfig(BaseModel):
    """Output configuration."""

    bell: bool = Field(default=True, description="Ring the terminal bell on cues")


class AppConfig(BaseModel):
    """Main ChillFlow configuration."""

    cycle: CycleConfig = Field(default_factory=CycleConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    tick_interval: float = Field(default=1.0, description="Seconds between ticks")

    @field_validator("tick_interval")
    @classmethod
    def validate_tick_interval(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("tick_interval must be greater than zero")
        return v
