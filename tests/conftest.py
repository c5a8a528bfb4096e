import sys, os

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import pytest

from animated_router.core.events import EventBus
from animated_router.core.state import NavigationStateMachine
from animated_router.demo import DemoRoute, build_demo_policy


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def demo_machine() -> NavigationStateMachine:
    """State machine resting on the demo home page."""
    return NavigationStateMachine(DemoRoute.HOME)


@pytest.fixture
def demo_policy():
    return build_demo_policy()
