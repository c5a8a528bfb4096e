import pytest

from animated_router.animation.motion import Spring, Tween
from animated_router.animation.transform import Transform
from animated_router.transitions.variants import (
    DEFAULT_MOTION,
    VARIANT_TABLE,
    TransitionVariant,
    VariantKind,
    variant_to_config,
)


def test_every_built_in_kind_has_table_entry():
    for kind in VariantKind:
        if kind is VariantKind.CUSTOM:
            continue
        assert kind in VARIANT_TABLE


@pytest.mark.parametrize(
    "variant, final_from, initial_to",
    [
        (TransitionVariant.SLIDE_LEFT, Transform(x=-100.0), Transform(x=100.0)),
        (TransitionVariant.SLIDE_RIGHT, Transform(x=100.0), Transform(x=-100.0)),
        (TransitionVariant.SLIDE_UP, Transform(y=-100.0), Transform(y=100.0)),
        (TransitionVariant.SLIDE_DOWN, Transform(y=100.0), Transform(y=-100.0)),
    ],
)
def test_slides_move_both_layers_one_viewport(variant, final_from, initial_to):
    config = variant_to_config(variant)
    assert config.initial_from.is_identity
    assert config.final_from == final_from
    assert config.initial_to == initial_to
    assert config.final_to.is_identity
    assert config.opacity_from == (1.0, 1.0)
    assert config.opacity_to == (1.0, 1.0)


def test_fade_only_changes_opacity():
    config = variant_to_config(TransitionVariant.FADE)
    for transform in (config.initial_from, config.final_from, config.initial_to, config.final_to):
        assert transform.is_identity
    assert config.opacity_from == (1.0, 0.0)
    assert config.opacity_to == (0.0, 1.0)


def test_scale_shrinks_departing_layer():
    config = variant_to_config(TransitionVariant.SCALE)
    assert config.final_from.scale == 0.5
    assert config.final_to.is_identity
    assert config.opacity_from == (1.0, 0.0)


def test_default_motion_is_half_second_tween():
    config = variant_to_config(TransitionVariant.FADE)
    assert config.motion == DEFAULT_MOTION
    assert isinstance(config.motion, Tween)
    assert config.motion.duration_ms == 500.0


def test_motion_override_leaves_table_untouched():
    spring = Spring(velocity=10.0)
    config = variant_to_config(TransitionVariant.SLIDE_LEFT, motion=spring)
    assert config.motion is spring
    assert VARIANT_TABLE[VariantKind.SLIDE_LEFT].motion == DEFAULT_MOTION


def test_custom_variant_moves_departing_layer_to_its_transform():
    target = Transform(x=20.0, scale=0.8, rotation=15.0)
    variant = TransitionVariant.custom(target)
    config = variant_to_config(variant)

    assert variant.is_custom
    assert config.initial_from.is_identity
    assert config.final_from == target
    assert config.final_to.is_identity
    assert config.opacity_to == (0.0, 1.0)
    assert "custom" in str(variant)


def test_reciprocal_swaps_slide_direction():
    assert TransitionVariant.SLIDE_LEFT.reciprocal() == TransitionVariant.SLIDE_RIGHT
    assert TransitionVariant.SLIDE_RIGHT.reciprocal() == TransitionVariant.SLIDE_LEFT
    assert TransitionVariant.SLIDE_UP.reciprocal() == TransitionVariant.SLIDE_DOWN
    assert TransitionVariant.SLIDE_DOWN.reciprocal() == TransitionVariant.SLIDE_UP
    assert TransitionVariant.FADE.reciprocal() == TransitionVariant.FADE
    assert TransitionVariant.SCALE.reciprocal() == TransitionVariant.SCALE


def test_lookup_by_name():
    assert TransitionVariant.from_name("Slide_Left") == TransitionVariant.SLIDE_LEFT
    assert str(TransitionVariant.FADE) == "fade"
    with pytest.raises(ValueError):
        TransitionVariant.from_name("custom")
    with pytest.raises(ValueError):
        TransitionVariant.from_name("spin")
