"""Aggregate health system.

:func:`combined_health` re-derives a character's health from its whole state
instead of from a single event, so several sequential hits (or a heal) leave
``Character.health`` consistent.
"""

from dataclasses import replace

from rqg_wounds.state import Character
from rqg_wounds.types import ActorHealthState
from rqg_wounds.utils.severity import most_severe_actor_health


def combined_health(character: Character) -> ActorHealthState:
    """Return the character's health implied by hit points and locations.

    * No hit points left means dead.
    * Otherwise the worst ``actor_health_impact`` of any location, but at
      least wounded while hit points are below max.
    """
    hit_points = character.hit_points
    if hit_points.value <= 0:
        return ActorHealthState.DEAD
    health = most_severe_actor_health(
        *(location.actor_health_impact for location in character.locations.values())
    )
    if hit_points.value < hit_points.max:
        health = most_severe_actor_health(health, ActorHealthState.WOUNDED)
    return health


def health_system(character: Character) -> Character:
    """Return ``character`` with ``health`` recomputed (same object if unchanged)."""
    health = combined_health(character)
    if health == character.health:
        return character
    return replace(character, health=health)
