"""Transition policy: which variant plays for a given navigation."""

from typing import Iterable, Mapping, Optional
import logging

from animated_router.core.state import RouteId
from animated_router.transitions.variants import TransitionVariant

logger = logging.getLogger(__name__)


class TransitionPolicy:
    """Lookup table from ordered route pairs to transition variants.

    Resolution order for resolve(from_route, to_route):
        1. the exact ordered pair (from_route, to_route)
        2. the destination route's own default variant
        3. the policy default (FADE unless configured otherwise)

    Resolution is total: any pair of hashable routes resolves to a variant.
    """

    def __init__(
        self,
        default: TransitionVariant = TransitionVariant.FADE,
        warn_on_fallback: bool = True,
    ):
        self.default = default
        self.warn_on_fallback = warn_on_fallback
        self._pairs: dict[tuple[RouteId, RouteId], TransitionVariant] = {}
        self._route_defaults: dict[RouteId, TransitionVariant] = {}
        self._warned: set[tuple[RouteId, RouteId]] = set()

    @classmethod
    def from_table(
        cls,
        pairs: Mapping[tuple[RouteId, RouteId], TransitionVariant],
        route_defaults: Optional[Mapping[RouteId, TransitionVariant]] = None,
        default: TransitionVariant = TransitionVariant.FADE,
        warn_on_fallback: bool = True,
    ) -> "TransitionPolicy":
        """Build a policy from a pair table and optional per-route defaults."""
        policy = cls(default=default, warn_on_fallback=warn_on_fallback)
        for (from_route, to_route), variant in pairs.items():
            policy.add(from_route, to_route, variant)
        for route, variant in (route_defaults or {}).items():
            policy.set_route_default(route, variant)
        return policy

    # Registration
    def add(self, from_route: RouteId, to_route: RouteId, variant: TransitionVariant) -> "TransitionPolicy":
        """Register the variant for one direction of travel."""
        self._pairs[(from_route, to_route)] = variant
        return self

    def add_reciprocal(self, route_a: RouteId, route_b: RouteId, variant: TransitionVariant) -> "TransitionPolicy":
        """Register a -> b as variant and b -> a as its reciprocal."""
        self.add(route_a, route_b, variant)
        self.add(route_b, route_a, variant.reciprocal())
        return self

    def set_route_default(self, route: RouteId, variant: TransitionVariant) -> "TransitionPolicy":
        """Variant used when arriving at route from a pair with no entry."""
        self._route_defaults[route] = variant
        return self

    # Resolution
    def resolve(self, from_route: RouteId, to_route: RouteId) -> TransitionVariant:
        """Variant for travelling from from_route to to_route. Never fails."""
        variant = self._pairs.get((from_route, to_route))
        if variant is not None:
            return variant

        variant = self._route_defaults.get(to_route)
        if variant is not None:
            return variant

        self._note_fallback(from_route, to_route)
        return self.default

    def resolve_target(self, to_route: RouteId) -> TransitionVariant:
        """Variant for arriving at to_route regardless of origin."""
        return self._route_defaults.get(to_route, self.default)

    def routes(self) -> set[RouteId]:
        """Every route mentioned by the table."""
        found: set[RouteId] = set(self._route_defaults)
        for from_route, to_route in self._pairs:
            found.add(from_route)
            found.add(to_route)
        return found

    def pairs(self) -> Iterable[tuple[tuple[RouteId, RouteId], TransitionVariant]]:
        return self._pairs.items()

    def _note_fallback(self, from_route: RouteId, to_route: RouteId) -> None:
        if not self.warn_on_fallback:
            return
        key = (from_route, to_route)
        if key in self._warned:
            return
        self._warned.add(key)
        logger.warning(
            f"No transition registered for {from_route} -> {to_route}, using {self.default}"
        )

    def __len__(self) -> int:
        return len(self._pairs)
