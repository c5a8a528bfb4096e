"""Route transition policy and orchestration."""

from animated_router.transitions.variants import (
    TransitionConfig,
    TransitionVariant,
    VariantKind,
    variant_to_config,
)
from animated_router.transitions.policy import TransitionPolicy
from animated_router.transitions.orchestrator import (
    Frame,
    LayerState,
    PassThrough,
    TransitionFrame,
    TransitionOrchestrator,
)

__all__ = [
    # Variants
    "TransitionConfig",
    "TransitionVariant",
    "VariantKind",
    "variant_to_config",
    # Policy
    "TransitionPolicy",
    # Orchestration
    "Frame",
    "LayerState",
    "PassThrough",
    "TransitionFrame",
    "TransitionOrchestrator",
]
