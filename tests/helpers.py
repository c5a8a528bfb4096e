from __future__ import annotations

from animated_router.animation.interpolation import Interpolation
from animated_router.transitions.orchestrator import TransitionOrchestrator

# One frame at 60 ticks per second
FRAME_MS = 1000.0 / 60.0


def run_interpolation(interp: Interpolation, max_ticks: int = 600, dt: float = FRAME_MS) -> int:
    """Tick until the interpolation stops; return the number of ticks used."""
    for tick in range(1, max_ticks + 1):
        interp.tick(dt)
        if not interp.is_running:
            return tick
    raise AssertionError(f"{interp!r} still running after {max_ticks} ticks")


def drive_until_settled(orchestrator: TransitionOrchestrator, max_ticks: int = 600, dt: float = FRAME_MS) -> list:
    """Tick the orchestrator until it stops animating; return every frame produced."""
    frames = [orchestrator.tick(dt)]
    for _ in range(max_ticks):
        if not orchestrator.is_animating:
            return frames
        frames.append(orchestrator.tick(dt))
    raise AssertionError(f"transition still animating after {max_ticks} ticks")
