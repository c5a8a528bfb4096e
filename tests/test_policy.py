import logging

from animated_router.demo import HOME_LINKS, DemoRoute, build_demo_policy
from animated_router.transitions.policy import TransitionPolicy
from animated_router.transitions.variants import TransitionVariant


def test_registered_pair_wins():
    policy = TransitionPolicy().add("a", "b", TransitionVariant.SLIDE_UP)
    assert policy.resolve("a", "b") == TransitionVariant.SLIDE_UP
    assert len(policy) == 1


def test_lookup_is_ordered():
    policy = TransitionPolicy(warn_on_fallback=False).add("a", "b", TransitionVariant.SLIDE_UP)
    assert policy.resolve("b", "a") == TransitionVariant.FADE


def test_reciprocal_registration():
    policy = TransitionPolicy().add_reciprocal("home", "page", TransitionVariant.SLIDE_LEFT)
    assert policy.resolve("home", "page") == TransitionVariant.SLIDE_LEFT
    assert policy.resolve("page", "home") == TransitionVariant.SLIDE_RIGHT


def test_route_default_used_before_policy_default():
    policy = TransitionPolicy().set_route_default("page", TransitionVariant.SCALE)
    assert policy.resolve("anywhere", "page") == TransitionVariant.SCALE
    assert policy.resolve_target("page") == TransitionVariant.SCALE
    assert policy.resolve_target("elsewhere") == TransitionVariant.FADE


def test_resolution_is_total(caplog):
    policy = TransitionPolicy()
    with caplog.at_level(logging.WARNING):
        assert policy.resolve("x", "y") == TransitionVariant.FADE
        assert policy.resolve("x", "x") == TransitionVariant.FADE
        assert policy.resolve(None, 42) == TransitionVariant.FADE


def test_fallback_warns_once_per_pair(caplog):
    policy = TransitionPolicy()
    with caplog.at_level(logging.WARNING, logger="animated_router.transitions.policy"):
        for _ in range(3):
            policy.resolve("x", "y")
        policy.resolve("y", "x")

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert "x -> y" in warnings[0].getMessage()


def test_fallback_warning_can_be_disabled(caplog):
    policy = TransitionPolicy(warn_on_fallback=False)
    with caplog.at_level(logging.WARNING):
        policy.resolve("x", "y")
    assert caplog.records == []


def test_custom_default():
    policy = TransitionPolicy(default=TransitionVariant.SCALE, warn_on_fallback=False)
    assert policy.resolve("x", "y") == TransitionVariant.SCALE


def test_from_table():
    policy = TransitionPolicy.from_table(
        {("a", "b"): TransitionVariant.SLIDE_DOWN},
        route_defaults={"c": TransitionVariant.SCALE},
    )
    assert policy.resolve("a", "b") == TransitionVariant.SLIDE_DOWN
    assert policy.resolve("a", "c") == TransitionVariant.SCALE
    assert policy.routes() == {"a", "b", "c"}
    assert dict(policy.pairs()) == {("a", "b"): TransitionVariant.SLIDE_DOWN}


def test_demo_home_links_play_reciprocal_on_return():
    policy = build_demo_policy()
    for route, variant in HOME_LINKS.items():
        assert policy.resolve(DemoRoute.HOME, route) == variant
        assert policy.resolve(route, DemoRoute.HOME) == variant.reciprocal()


def test_demo_page_to_page_uses_destination_default():
    policy = build_demo_policy()
    assert policy.resolve(DemoRoute.SLIDE_LEFT, DemoRoute.SCALE) == TransitionVariant.SCALE
    assert policy.resolve(DemoRoute.FADE, DemoRoute.SLIDE_UP) == TransitionVariant.SLIDE_UP


def test_demo_not_found_falls_back_to_fade(caplog):
    policy = build_demo_policy()
    with caplog.at_level(logging.WARNING):
        assert policy.resolve(DemoRoute.HOME, DemoRoute.PAGE_NOT_FOUND) == TransitionVariant.FADE
    assert "PAGE_NOT_FOUND" in caplog.text
