"""Hit location component.

One body region of a character with its own wound capacity. Wounds are kept
as an ordered persistent vector; resolvers append to it (and remove healed
entries) by producing a new ``HitLocation`` rather than mutating this one.
"""

from dataclasses import dataclass, field
from typing import Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from rqg_wounds.types import (
    ActorHealthState,
    HitLocationHealthState,
    HitLocationType,
    TERMINAL_LOCATION_STATES,
)


def _no_wounds() -> PVector[int]:
    return pvector()


@dataclass(frozen=True)
class HitLocation:
    """Wound bookkeeping for a single body region.

    Attributes:
        name: Identifier shown to players (``"leftLeg"``, ``"head"``...).
        location_type: Rule branch used when classifying wounds.
        hit_points_max: Wound capacity; thresholds are multiples of this.
        wounds: Recorded damage applications, oldest first.
        health_state: Current condition of the location.
        actor_health_impact: Character-level condition this location currently
            imposes. Aggregated by :func:`rqg_wounds.systems.health.combined_health`.
        connected_to: Name of the location this one is attached to. Limbs
            connected to the abdomen are legs.
        die_from: Lowest d20 result that hits this location.
        die_to: Highest d20 result that hits this location.
    """

    name: str
    location_type: HitLocationType
    hit_points_max: int
    wounds: PVector[int] = field(default_factory=_no_wounds)
    health_state: HitLocationHealthState = HitLocationHealthState.HEALTHY
    actor_health_impact: ActorHealthState = ActorHealthState.HEALTHY
    connected_to: Optional[str] = None
    die_from: int = 0
    die_to: int = 0

    @property
    def is_limb(self) -> bool:
        return self.location_type == HitLocationType.LIMB

    @property
    def is_terminal(self) -> bool:
        """True once the location is severed or gone (cannot be hit again)."""
        return self.health_state in TERMINAL_LOCATION_STATES

    @property
    def wound_total(self) -> int:
        return sum(self.wounds)
