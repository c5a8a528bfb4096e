"""Demo route set: one page per built-in transition, plus a not-found page.

Leaving Home toward a page plays that page's transition; coming back plays
the reciprocal (slide left out, slide right back).
"""

from dataclasses import dataclass
from enum import Enum

from animated_router.transitions.policy import TransitionPolicy
from animated_router.transitions.variants import TransitionVariant


class DemoRoute(Enum):
    """Demo routes; the value is the path."""

    HOME = "/"
    SLIDE_LEFT = "/slide-left"
    SLIDE_RIGHT = "/slide-right"
    SLIDE_UP = "/slide-up"
    SLIDE_DOWN = "/slide-down"
    FADE = "/fade"
    SCALE = "/scale"
    PAGE_NOT_FOUND = "/404"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class PageInfo:
    """Presentational data for a demo page."""

    title: str
    description: str
    background: tuple[int, int, int]
    accent: tuple[int, int, int]


PAGES: dict[DemoRoute, PageInfo] = {
    DemoRoute.HOME: PageInfo(
        "Welcome",
        "Explore different transition animations between routes",
        (224, 231, 255), (37, 99, 235),
    ),
    DemoRoute.SLIDE_LEFT: PageInfo(
        "Slide Left",
        "Smooth horizontal sliding transition from right to left",
        (252, 231, 243), (220, 38, 38),
    ),
    DemoRoute.SLIDE_RIGHT: PageInfo(
        "Slide Right",
        "Elegant horizontal sliding transition from left to right",
        (209, 250, 229), (5, 150, 105),
    ),
    DemoRoute.SLIDE_UP: PageInfo(
        "Slide Up",
        "Vertical sliding transition moving upwards",
        (207, 250, 254), (8, 145, 178),
    ),
    DemoRoute.SLIDE_DOWN: PageInfo(
        "Slide Down",
        "Vertical sliding transition moving downwards",
        (254, 243, 199), (217, 119, 6),
    ),
    DemoRoute.FADE: PageInfo(
        "Fade",
        "Smooth opacity transition between routes",
        (250, 232, 255), (192, 38, 211),
    ),
    DemoRoute.SCALE: PageInfo(
        "Scale",
        "Zoom transition with smooth scaling effect",
        (255, 228, 230), (225, 29, 72),
    ),
    DemoRoute.PAGE_NOT_FOUND: PageInfo(
        "Page not found",
        "We are terribly sorry, but the page you requested doesn't exist.",
        (243, 244, 246), (220, 38, 38),
    ),
}

# Variant each page plays when entered from anywhere without a pair entry
ROUTE_DEFAULTS: dict[DemoRoute, TransitionVariant] = {
    DemoRoute.HOME: TransitionVariant.FADE,
    DemoRoute.SLIDE_LEFT: TransitionVariant.SLIDE_LEFT,
    DemoRoute.SLIDE_RIGHT: TransitionVariant.SLIDE_RIGHT,
    DemoRoute.SLIDE_UP: TransitionVariant.SLIDE_UP,
    DemoRoute.SLIDE_DOWN: TransitionVariant.SLIDE_DOWN,
    DemoRoute.FADE: TransitionVariant.FADE,
    DemoRoute.SCALE: TransitionVariant.SCALE,
}

# Home <-> page, outbound variant; the way back plays the reciprocal
HOME_LINKS: dict[DemoRoute, TransitionVariant] = {
    DemoRoute.SLIDE_LEFT: TransitionVariant.SLIDE_LEFT,
    DemoRoute.SLIDE_RIGHT: TransitionVariant.SLIDE_RIGHT,
    DemoRoute.SLIDE_UP: TransitionVariant.SLIDE_UP,
    DemoRoute.SLIDE_DOWN: TransitionVariant.SLIDE_DOWN,
    DemoRoute.FADE: TransitionVariant.FADE,
    DemoRoute.SCALE: TransitionVariant.SCALE,
}

# Order used by the navigation bar (keys 1-7)
NAV_ORDER: list[DemoRoute] = [
    DemoRoute.HOME,
    DemoRoute.SLIDE_LEFT,
    DemoRoute.SLIDE_RIGHT,
    DemoRoute.SLIDE_UP,
    DemoRoute.SLIDE_DOWN,
    DemoRoute.FADE,
    DemoRoute.SCALE,
]


def build_demo_policy(warn_on_fallback: bool = True) -> TransitionPolicy:
    """Transition table for the demo routes."""
    policy = TransitionPolicy(warn_on_fallback=warn_on_fallback)
    for route, variant in HOME_LINKS.items():
        policy.add_reciprocal(DemoRoute.HOME, route, variant)
    for route, variant in ROUTE_DEFAULTS.items():
        policy.set_route_default(route, variant)
    return policy


def route_for_path(path: str) -> DemoRoute:
    """Match a path to a demo route; unknown paths go to PAGE_NOT_FOUND."""
    normalized = "/" + path.strip().strip("/")
    try:
        return DemoRoute(normalized)
    except ValueError:
        return DemoRoute.PAGE_NOT_FOUND
