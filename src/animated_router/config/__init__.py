"""Configuration for animated_router."""

from animated_router.config.settings import Settings, SimulatorSettings, TransitionSettings, get_settings

__all__ = ["Settings", "SimulatorSettings", "TransitionSettings", "get_settings"]
