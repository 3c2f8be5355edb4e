"""Healing system.

Reduces one recorded wound and reclassifies the location from what is left.
Unlike damage, healing may lower a location's state; the character's
aggregate health is left to :func:`rqg_wounds.systems.health.combined_health`
once the result is committed.
"""

import logging

from pyrsistent import pmap

from rqg_wounds import notifications
from rqg_wounds.components import HitPoints
from rqg_wounds.config import DEFAULT_CONFIG, RulesConfig
from rqg_wounds.state import Character
from rqg_wounds.systems.damage import get_hit_location
from rqg_wounds.types import HitLocationHealthState, LocationID
from rqg_wounds.updates import Changes, HealResult
from rqg_wounds.utils.severity import most_severe_location_health
from rqg_wounds.utils.wounds import classify_wounds, is_held_down_by_abdomen

logger = logging.getLogger(__name__)


def heal_wound(
    heal_points: int,
    wound_index: int,
    location_id: LocationID,
    character: Character,
    config: RulesConfig = DEFAULT_CONFIG,
) -> HealResult:
    """Heal ``heal_points`` of the wound at ``wound_index`` of a location.

    A severed limb keeps its state unless a single heal of at least
    ``config.severed_limb_heal_points`` is applied; the wound itself heals
    either way. Legs stay useless while their abdomen holds at least its max
    HP in wounds, and a zero-point heal changes nothing.

    Raises:
        ValueError: On negative ``heal_points``, a location the character does
            not own, or a wound index out of range.
    """
    if heal_points < 0:
        raise ValueError(f"Heal points must not be negative: {heal_points}")
    location = get_hit_location(character, location_id)

    if location.health_state == HitLocationHealthState.GONE:
        return HealResult(
            location_id,
            notification=notifications.location_cannot_be_healed(location.name),
        )
    if not 0 <= wound_index < len(location.wounds):
        raise ValueError(
            f"{location.name} has no wound #{wound_index} "
            f"(wounds: {list(location.wounds)})"
        )
    if heal_points == 0:
        return HealResult(location_id)

    wound = location.wounds[wound_index]
    healed = min(heal_points, wound)
    remaining = wound - healed
    if remaining:
        wounds = location.wounds.set(wound_index, remaining)
    else:
        wounds = location.wounds.delete(wound_index)

    location_state, impact = classify_wounds(
        location.location_type, sum(wounds), location.hit_points_max
    )
    if is_held_down_by_abdomen(character, location_id):
        location_state = most_severe_location_health(
            location_state, HitLocationHealthState.USELESS
        )
    notification = ""
    if (
        location.health_state == HitLocationHealthState.SEVERED
        and heal_points < config.severed_limb_heal_points
    ):
        location_state = HitLocationHealthState.SEVERED
        impact = location.actor_health_impact
        notification = notifications.limb_still_severed(
            character.name, location.name, config.severed_limb_heal_points
        )

    hit_location_updates: Changes = pmap()
    for name, value in (
        ("wounds", wounds),
        ("health_state", location_state),
        ("actor_health_impact", impact),
    ):
        if getattr(location, name) != value:
            hit_location_updates = hit_location_updates.set(name, value)

    actor_updates: Changes = pmap()
    hit_points = character.hit_points
    new_value = min(hit_points.max, hit_points.value + healed)
    if new_value != hit_points.value:
        actor_updates = actor_updates.set(
            "hit_points", HitPoints(value=new_value, max=hit_points.max)
        )

    logger.debug(
        "%s: healed %d of wound #%d on %s (%s -> %s)",
        character.name,
        healed,
        wound_index,
        location.name,
        location.health_state,
        location_state,
    )
    return HealResult(
        location_id=location_id,
        hit_location_updates=hit_location_updates,
        actor_updates=actor_updates,
        notification=notification,
    )
