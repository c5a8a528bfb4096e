"""
Main entry point for the animated_router preview.

Opens the pygame preview window on the demo routes, with transitions
configured from ANIMATED_ROUTER_* environment variables (or .env).
"""

import asyncio
import logging
import sys

from animated_router.config.settings import Settings, get_settings
from animated_router.core.events import EventBus
from animated_router.core.state import NavigationStateMachine
from animated_router.demo import build_demo_policy, route_for_path
from animated_router.transitions.orchestrator import TransitionOrchestrator


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    # Per-interpolation start messages are too chatty even for debug runs
    logging.getLogger("animated_router.animation").setLevel(logging.INFO)


def build_orchestrator(settings: Settings, event_bus: EventBus) -> TransitionOrchestrator:
    """Wire state machine, demo policy and motion settings together."""
    state_machine = NavigationStateMachine(route_for_path(settings.initial_path))
    policy = build_demo_policy(warn_on_fallback=settings.transitions.warn_on_fallback)
    return TransitionOrchestrator.from_settings(
        state_machine,
        policy,
        settings.transitions,
        event_bus=event_bus,
    )


async def run_simulator(settings: Settings) -> None:
    """Run the preview window."""
    from animated_router.simulator.window import SimulatorWindow, WindowConfig

    event_bus = EventBus()
    orchestrator = build_orchestrator(settings, event_bus)

    window = SimulatorWindow(
        orchestrator=orchestrator,
        event_bus=event_bus,
        config=WindowConfig.from_settings(settings.simulator),
    )

    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("animated_router preview starting...")
    logger.info(
        f"Motion: {settings.transitions.motion}, "
        f"ceiling: {settings.transitions.max_transition_ms}ms"
    )

    try:
        asyncio.run(run_simulator(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("animated_router preview stopped")


if __name__ == "__main__":
    main()
