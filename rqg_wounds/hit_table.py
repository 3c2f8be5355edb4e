"""Hit-location table.

Each hit location owns an inclusive range on the hit-location die (a d20 by
default). A roll landing on a severed or gone location is rerolled, since
those locations can no longer be hit.
"""

import logging
import random
from typing import Optional

from rqg_wounds.config import DEFAULT_CONFIG, RulesConfig
from rqg_wounds.state import Character
from rqg_wounds.types import LocationID

logger = logging.getLogger(__name__)


def location_for_roll(character: Character, roll: int) -> LocationID:
    """Return the id of the location whose die range contains ``roll``."""
    for location_id, location in character.iter_locations():
        if location.die_from <= roll <= location.die_to:
            return location_id
    raise ValueError(f"No hit location of {character.name} covers a roll of {roll}")


def roll_hit_location(
    character: Character,
    rng: Optional[random.Random] = None,
    config: RulesConfig = DEFAULT_CONFIG,
) -> LocationID:
    """Roll the hit-location die until a location that can be hit comes up.

    Raises:
        ValueError: If no location on the table can be hit anymore.
    """
    if rng is None:
        rng = random.Random()
    die = config.hit_location_die
    hittable = {
        roll
        for roll in range(1, die + 1)
        for location in character.locations.values()
        if location.die_from <= roll <= location.die_to and not location.is_terminal
    }
    if not hittable:
        raise ValueError(f"{character.name} has no hit location left to hit")

    while True:
        roll = rng.randint(1, die)
        if roll in hittable:
            location_id = location_for_roll(character, roll)
            logger.debug(
                "%s: hit location roll %d -> %s",
                character.name,
                roll,
                character.locations[location_id].name,
            )
            return location_id
        logger.debug("%s: hit location roll %d rerolled", character.name, roll)
