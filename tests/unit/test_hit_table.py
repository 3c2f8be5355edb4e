import random

import pytest

from rqg_wounds.hit_table import location_for_roll, roll_hit_location
from rqg_wounds.types import HitLocationHealthState
from tests.test_utils import (
    ABDOMEN,
    CHEST,
    HEAD,
    LEFT_ARM,
    LEFT_LEG,
    RIGHT_ARM,
    RIGHT_LEG,
    make_dummy,
    set_location_state,
)


@pytest.mark.parametrize(
    "roll, expected",
    [
        (1, RIGHT_LEG),
        (4, RIGHT_LEG),
        (5, LEFT_LEG),
        (8, LEFT_LEG),
        (9, ABDOMEN),
        (11, ABDOMEN),
        (12, CHEST),
        (13, RIGHT_ARM),
        (15, RIGHT_ARM),
        (16, LEFT_ARM),
        (18, LEFT_ARM),
        (19, HEAD),
        (20, HEAD),
    ],
)
def test_location_for_roll(roll: int, expected: int) -> None:
    assert location_for_roll(make_dummy(), roll) == expected


@pytest.mark.parametrize("roll", [0, 21])
def test_roll_outside_the_table_is_rejected(roll: int) -> None:
    with pytest.raises(ValueError):
        location_for_roll(make_dummy(), roll)


def test_roll_hit_location_is_deterministic_with_seed() -> None:
    character = make_dummy()
    first = roll_hit_location(character, random.Random(42))
    second = roll_hit_location(character, random.Random(42))
    assert first == second
    assert first in character.locations


def test_roll_hit_location_skips_severed_locations() -> None:
    character = make_dummy()
    for location_id in (RIGHT_LEG, LEFT_LEG, ABDOMEN, RIGHT_ARM, LEFT_ARM, HEAD):
        character = set_location_state(
            character, location_id, HitLocationHealthState.SEVERED
        )
    rng = random.Random(0)
    assert {roll_hit_location(character, rng) for _ in range(20)} == {CHEST}


def test_roll_hit_location_without_targets_is_rejected() -> None:
    character = make_dummy()
    for location_id in character.locations:
        character = set_location_state(
            character, location_id, HitLocationHealthState.GONE
        )
    with pytest.raises(ValueError):
        roll_hit_location(character, random.Random(0))
