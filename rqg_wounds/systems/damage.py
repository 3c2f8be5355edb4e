"""Damage resolution system.

Turns one damage event against one hit location into partial updates for the
location, the character, and (for abdomen trauma) the character's legs. The
function is pure: the caller commits the returned :class:`DamageResult`,
and must serialize calls per character because every threshold depends on the
wounds already recorded.
"""

import logging
from typing import List

from pyrsistent import pmap, pvector

from rqg_wounds import notifications
from rqg_wounds.components import HitLocation, HitPoints
from rqg_wounds.config import DEFAULT_CONFIG, RulesConfig
from rqg_wounds.state import Character
from rqg_wounds.types import (
    ActorHealthState,
    DISABLED_LOCATION_STATES,
    HitLocationHealthState,
    HitLocationType,
    LocationID,
)
from rqg_wounds.updates import Changes, DamageResult, LocationUpdate
from rqg_wounds.utils.severity import (
    most_severe_actor_health,
    most_severe_location_health,
)
from rqg_wounds.utils.wounds import classify_wounds, leg_ids, wound_tier

logger = logging.getLogger(__name__)


def get_hit_location(character: Character, location_id: LocationID) -> HitLocation:
    location = character.locations.get(location_id)
    if location is None:
        raise ValueError(
            f"Hit location {location_id} does not belong to {character.name}"
        )
    if location.hit_points_max <= 0:
        raise ValueError(
            f"Hit location {location.name} has no max HP: {location.hit_points_max}"
        )
    return location


def recorded_wound(location: HitLocation, damage: int) -> int:
    """Return the part of ``damage`` written to the location's wound list.

    Limbs take at most twice their max HP in one wound; the rest of the
    damage only counts towards severing.
    """
    if not location.is_limb:
        return damage
    return min(damage, 2 * location.hit_points_max)


def is_severing(location: HitLocation, damage: int) -> bool:
    """True if ``damage`` (uncapped) takes a limb to three times its max HP."""
    return (
        location.is_limb
        and location.wound_total + damage >= 3 * location.hit_points_max
    )


def get_disabled_leg_updates(character: Character) -> List[LocationUpdate]:
    """Updates making every still-functional leg useless."""
    updates: List[LocationUpdate] = []
    for location_id in leg_ids(character):
        if character.locations[location_id].health_state in DISABLED_LOCATION_STATES:
            continue
        updates.append(
            LocationUpdate(
                location_id, pmap({"health_state": HitLocationHealthState.USELESS})
            )
        )
    return updates


def _changed(location: HitLocation, **values: object) -> Changes:
    changes: Changes = pmap()
    for name, value in values.items():
        if getattr(location, name) != value:
            changes = changes.set(name, value)
    return changes


def apply_damage(
    damage: int,
    damage_applies_to_total_hp: bool,
    location_id: LocationID,
    character: Character,
    config: RulesConfig = DEFAULT_CONFIG,
) -> DamageResult:
    """Resolve ``damage`` against one of ``character``'s hit locations.

    Args:
        damage (int): Damage that got through armour. Must be >= 0.
        damage_applies_to_total_hp (bool): If False the wound is recorded on
            the location but the total hit point pool is untouched.
        location_id (LocationID): Id of the location hit, within
            ``character.locations``.
        character (Character): Current state of the character.
        config (RulesConfig): Rules options.

    Returns:
        DamageResult: Partial updates for the location, the character and any
            legs disabled as a side effect, plus a notification. Hitting a
            severed or gone location yields empty updates and a "reroll"
            notification.

    Raises:
        ValueError: If ``damage`` is negative or the location does not belong
            to ``character``.
    """
    if damage < 0:
        raise ValueError(f"Damage must not be negative: {damage}")
    location = get_hit_location(character, location_id)

    if location.is_terminal:
        logger.debug(
            "%s: %s is %s, hit ignored",
            character.name,
            location.name,
            location.health_state,
        )
        return DamageResult(
            location_id, notification=notifications.location_gone(location.name)
        )
    if damage == 0:
        return DamageResult(location_id)

    hp_max = location.hit_points_max
    previous_total = location.wound_total
    wound = recorded_wound(location, damage)
    total = previous_total + wound
    tier = wound_tier(total, hp_max)
    location_state, event_impact = classify_wounds(
        location.location_type, total, hp_max
    )

    leg_updates: List[LocationUpdate] = []
    if is_severing(location, damage):
        location_state = HitLocationHealthState.SEVERED
        event_impact = ActorHealthState.SHOCK
        notification = notifications.limb_severed(
            character.name, location.name, config.severed_limb_heal_points
        )
    else:
        legs_collapse = (
            location.location_type == HitLocationType.ABDOMEN
            and previous_total < hp_max <= total
            and event_impact != ActorHealthState.DEAD
        )
        if legs_collapse:
            leg_updates = get_disabled_leg_updates(character)
        notification = notifications.wound_notification(
            character.name, location.name, location.location_type, tier, legs_collapse
        )

    hit_location_updates = _changed(
        location,
        wounds=location.wounds.append(wound) if wound else location.wounds,
        health_state=most_severe_location_health(
            location.health_state, location_state
        ),
        actor_health_impact=most_severe_actor_health(
            location.actor_health_impact, event_impact
        ),
    )

    actor_updates: Changes = pmap()
    hit_points = character.hit_points
    if damage_applies_to_total_hp and wound:
        new_value = max(0, hit_points.value - wound)
        if new_value != hit_points.value:
            actor_updates = actor_updates.set(
                "hit_points", HitPoints(value=new_value, max=hit_points.max)
            )
    health = most_severe_actor_health(character.health, event_impact)
    if health != character.health:
        actor_updates = actor_updates.set("health", health)

    logger.debug(
        "%s: %d damage to %s recorded as %d (total %d/%d, %s, impact %s)",
        character.name,
        damage,
        location.name,
        wound,
        total,
        hp_max,
        location_state,
        event_impact,
    )
    return DamageResult(
        location_id=location_id,
        hit_location_updates=hit_location_updates,
        actor_updates=actor_updates,
        notification=notification,
        affected_leg_updates=pvector(leg_updates),
    )
