"""Character reducer.

Convenience entry points that resolve an event, commit its updates and
re-derive the character's health in one go. Each returns the new
:class:`~rqg_wounds.state.Character` together with the resolver result so the
caller can still show the notification or persist the partial updates.

Order of operations for every event:

1. Resolve the event against the current character (pure).
2. Commit the location, leg and character updates (:func:`commit`).
3. Recompute ``health`` from the full state (:func:`health_system`).

Events against one character must go through these functions one at a time;
each event builds on the wounds the previous one recorded.
"""

import random
from typing import Optional, Tuple

from rqg_wounds.config import DEFAULT_CONFIG, RulesConfig
from rqg_wounds.hit_table import roll_hit_location
from rqg_wounds.state import Character
from rqg_wounds.systems.damage import apply_damage
from rqg_wounds.systems.healing import heal_wound
from rqg_wounds.systems.health import health_system
from rqg_wounds.types import LocationID
from rqg_wounds.updates import DamageResult, HealResult, commit


def take_damage(
    character: Character,
    location_id: LocationID,
    damage: int,
    damage_applies_to_total_hp: bool = True,
    config: RulesConfig = DEFAULT_CONFIG,
) -> Tuple[Character, DamageResult]:
    """Apply ``damage`` to a location and return the updated character."""
    result = apply_damage(
        damage, damage_applies_to_total_hp, location_id, character, config
    )
    if result.is_empty:
        return character, result
    return health_system(commit(character, result)), result


def take_random_hit(
    character: Character,
    damage: int,
    damage_applies_to_total_hp: bool = True,
    rng: Optional[random.Random] = None,
    config: RulesConfig = DEFAULT_CONFIG,
) -> Tuple[Character, DamageResult]:
    """Roll a hit location (rerolling lost ones) and apply ``damage`` to it."""
    location_id = roll_hit_location(character, rng, config)
    return take_damage(
        character, location_id, damage, damage_applies_to_total_hp, config
    )


def heal(
    character: Character,
    location_id: LocationID,
    wound_index: int,
    heal_points: int,
    config: RulesConfig = DEFAULT_CONFIG,
) -> Tuple[Character, HealResult]:
    """Heal one wound of a location and return the updated character."""
    result = heal_wound(heal_points, wound_index, location_id, character, config)
    if result.is_empty:
        return character, result
    return health_system(commit(character, result)), result
