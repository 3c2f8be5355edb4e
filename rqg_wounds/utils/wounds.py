"""Wound classification helpers.

A location's condition depends on how many multiples of its ``hit_points_max``
it has accumulated in wounds (the *tier*, 0..3) and on its
:class:`~rqg_wounds.types.HitLocationType`. The tables below map each
``(type, tier)`` to the location state and the character-level impact.
"""

from typing import Dict, List, Tuple

from rqg_wounds.state import Character
from rqg_wounds.types import (
    ActorHealthState,
    HitLocationHealthState,
    HitLocationType,
    LocationID,
)


WoundClass = Tuple[HitLocationHealthState, ActorHealthState]

_W = HitLocationHealthState.WOUNDED
_U = HitLocationHealthState.USELESS

MAX_TIER = 3

WOUND_TABLE: Dict[HitLocationType, Tuple[WoundClass, ...]] = {
    HitLocationType.LIMB: (
        (_W, ActorHealthState.WOUNDED),
        (_U, ActorHealthState.WOUNDED),
        (_U, ActorHealthState.SHOCK),
        (_U, ActorHealthState.SHOCK),
    ),
    HitLocationType.HEAD: (
        (_W, ActorHealthState.WOUNDED),
        (_W, ActorHealthState.UNCONSCIOUS),
        (_W, ActorHealthState.UNCONSCIOUS),
        (_W, ActorHealthState.DEAD),
    ),
    HitLocationType.CHEST: (
        (_W, ActorHealthState.WOUNDED),
        (_W, ActorHealthState.SHOCK),
        (_W, ActorHealthState.UNCONSCIOUS),
        (_W, ActorHealthState.DEAD),
    ),
    HitLocationType.ABDOMEN: (
        (_W, ActorHealthState.WOUNDED),
        (_W, ActorHealthState.WOUNDED),
        (_W, ActorHealthState.UNCONSCIOUS),
        (_W, ActorHealthState.DEAD),
    ),
    HitLocationType.OTHER: ((_W, ActorHealthState.WOUNDED),) * (MAX_TIER + 1),
}


def wound_tier(wound_total: int, hit_points_max: int) -> int:
    """Return how many whole multiples of ``hit_points_max`` are wounded (0..3)."""
    if hit_points_max <= 0:
        raise ValueError(f"Hit location needs a positive max HP: {hit_points_max}")
    return min(max(wound_total, 0) // hit_points_max, MAX_TIER)


def classify_wounds(
    location_type: HitLocationType, wound_total: int, hit_points_max: int
) -> WoundClass:
    """Return ``(location_state, actor_impact)`` for a cumulative wound total.

    A location without wounds is healthy and imposes nothing.
    """
    tier = wound_tier(wound_total, hit_points_max)
    if wound_total <= 0:
        return HitLocationHealthState.HEALTHY, ActorHealthState.HEALTHY
    return WOUND_TABLE[location_type][tier]


def leg_ids(character: Character) -> List[LocationID]:
    """Return ids of limbs attached to an abdomen location, in id order."""
    abdomen_names = {
        location.name
        for location in character.locations.values()
        if location.location_type == HitLocationType.ABDOMEN
    }
    return [
        location_id
        for location_id, location in character.iter_locations()
        if location.is_limb and location.connected_to in abdomen_names
    ]


def is_held_down_by_abdomen(character: Character, location_id: LocationID) -> bool:
    """True for a leg whose abdomen carries at least its max HP in wounds."""
    leg = character.locations[location_id]
    if not leg.is_limb:
        return False
    return any(
        location.location_type == HitLocationType.ABDOMEN
        and location.name == leg.connected_to
        and location.wound_total >= location.hit_points_max
        for location in character.locations.values()
    )
