"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from animated_router.animation.easing import get_easing
from animated_router.animation.motion import MotionModel, Spring, Tween


class TransitionSettings(BaseSettings):
    """Motion parameters shared by every route transition."""

    model_config = SettingsConfigDict(
        env_prefix="ANIMATED_ROUTER_TRANSITION_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_parse_none_str="none",
        extra="ignore",
    )

    motion: Literal["tween", "spring"] = "tween"

    # Tween
    duration_ms: float = Field(default=500.0, ge=0.0)
    easing: str = "ease_in_out_cubic"

    # Spring (damping must be positive or the spring never settles)
    spring_stiffness: float = Field(default=160.0, gt=0.0)
    spring_damping: float = Field(default=20.0, gt=0.0)
    spring_mass: float = Field(default=1.5, gt=0.0)
    spring_velocity: float = 10.0

    # Force settle after this long; None (env value "none") waits forever
    max_transition_ms: Optional[float] = Field(default=3000.0, gt=0.0)

    # Log unmapped route pairs that fall back to the default variant
    warn_on_fallback: bool = True

    @field_validator("easing")
    @classmethod
    def _known_easing(cls, value: str) -> str:
        get_easing(value)
        return value.lower()

    def motion_model(self) -> MotionModel:
        """Build the configured motion model."""
        if self.motion == "spring":
            return Spring(
                stiffness=self.spring_stiffness,
                damping=self.spring_damping,
                mass=self.spring_mass,
                velocity=self.spring_velocity,
            )
        return Tween(duration_ms=self.duration_ms, easing=self.easing)


class SimulatorSettings(BaseSettings):
    """Preview window settings."""

    model_config = SettingsConfigDict(
        env_prefix="ANIMATED_ROUTER_SIMULATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    width: int = Field(default=960, gt=0)
    height: int = Field(default=600, gt=0)
    fps: int = Field(default=60, gt=0)
    title: str = "Animated Router"
    fullscreen: bool = False


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ANIMATED_ROUTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Demo path the simulator opens on
    initial_path: str = "/"

    # Nested settings
    transitions: TransitionSettings = Field(default_factory=TransitionSettings)
    simulator: SimulatorSettings = Field(default_factory=SimulatorSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
