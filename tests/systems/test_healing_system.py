from typing import Tuple

import pytest
from pyrsistent import pmap, pvector

from rqg_wounds import notifications
from rqg_wounds.components import HitPoints
from rqg_wounds.config import RulesConfig
from rqg_wounds.state import Character
from rqg_wounds.systems.damage import apply_damage
from rqg_wounds.systems.healing import heal_wound
from rqg_wounds.types import ActorHealthState, HitLocationHealthState
from rqg_wounds.updates import commit
from tests.test_utils import (
    ABDOMEN,
    DUMMY_NAME,
    LEFT_LEG,
    make_dummy,
    set_location_state,
)


def make_wounded_dummy(
    damage: int, applies_to_total_hp: bool = True
) -> Tuple[Character, int]:
    """Dummy with one committed wound on the left leg."""
    character = make_dummy()
    character = commit(
        character, apply_damage(damage, applies_to_total_hp, LEFT_LEG, character)
    )
    return character, LEFT_LEG


def test_fully_healed_wound_is_removed() -> None:
    character, leg = make_wounded_dummy(4)
    result = heal_wound(4, 0, leg, character)
    assert result.hit_location_updates == pmap(
        {
            "wounds": pvector(),
            "health_state": HitLocationHealthState.HEALTHY,
            "actor_health_impact": ActorHealthState.HEALTHY,
        }
    )
    assert result.actor_updates == pmap({"hit_points": HitPoints(value=15, max=15)})
    assert result.notification == ""


def test_partially_healed_wound_shrinks() -> None:
    character, leg = make_wounded_dummy(4)
    result = heal_wound(2, 0, leg, character)
    assert result.hit_location_updates == pmap({"wounds": pvector([2])})
    assert result.actor_updates == pmap({"hit_points": HitPoints(value=13, max=15)})


def test_healing_below_max_restores_useless_limb() -> None:
    character, leg = make_wounded_dummy(5)
    result = heal_wound(1, 0, leg, character)
    assert result.hit_location_updates == pmap(
        {
            "wounds": pvector([4]),
            "health_state": HitLocationHealthState.WOUNDED,
        }
    )


def test_overhealing_only_heals_the_wound() -> None:
    character, leg = make_wounded_dummy(4)
    result = heal_wound(10, 0, leg, character)
    assert result.actor_updates["hit_points"] == HitPoints(value=15, max=15)


def test_hit_points_do_not_exceed_max() -> None:
    character, leg = make_wounded_dummy(4, applies_to_total_hp=False)
    result = heal_wound(4, 0, leg, character)
    assert "hit_points" not in result.actor_updates


def test_small_heal_leaves_severed_limb_severed() -> None:
    character, leg = make_wounded_dummy(15)
    result = heal_wound(3, 0, leg, character)
    assert result.hit_location_updates == pmap({"wounds": pvector([7])})
    assert result.notification == notifications.limb_still_severed(
        DUMMY_NAME, "leftLeg", 6
    )
    assert result.actor_updates == pmap({"hit_points": HitPoints(value=8, max=15)})


def test_six_point_heal_restores_severed_limb() -> None:
    character, leg = make_wounded_dummy(15)
    result = heal_wound(6, 0, leg, character)
    assert result.hit_location_updates == pmap(
        {
            "wounds": pvector([4]),
            "health_state": HitLocationHealthState.WOUNDED,
            "actor_health_impact": ActorHealthState.WOUNDED,
        }
    )
    assert result.notification == ""


def test_severed_heal_threshold_is_configurable() -> None:
    character, leg = make_wounded_dummy(15)
    result = heal_wound(3, 0, leg, character, RulesConfig(severed_limb_heal_points=3))
    assert result.hit_location_updates["health_state"] == HitLocationHealthState.USELESS


def test_gone_location_cannot_be_healed() -> None:
    character, leg = make_wounded_dummy(4)
    character = set_location_state(character, leg, HitLocationHealthState.GONE)
    result = heal_wound(4, 0, leg, character)
    assert result.is_empty
    assert result.notification == "leftLeg is gone and cannot be healed."


@pytest.mark.parametrize("heal_points, wound_index", [(-1, 0), (1, 1), (1, -1)])
def test_invalid_heals_are_rejected(heal_points: int, wound_index: int) -> None:
    character, leg = make_wounded_dummy(4)
    with pytest.raises(ValueError):
        heal_wound(heal_points, wound_index, leg, character)


def test_zero_point_heal_changes_nothing() -> None:
    character, leg = make_wounded_dummy(5)
    result = heal_wound(0, 0, leg, character)
    assert result.is_empty
    assert result.notification == ""


def test_healing_a_leg_keeps_it_useless_while_the_abdomen_is_down() -> None:
    character, leg = make_wounded_dummy(2)
    character = commit(character, apply_damage(5, True, ABDOMEN, character))
    assert character.locations[leg].health_state == HitLocationHealthState.USELESS

    result = heal_wound(1, 0, leg, character)
    assert result.hit_location_updates == pmap({"wounds": pvector([1])})
    healed = commit(character, result)
    assert healed.locations[leg].health_state == HitLocationHealthState.USELESS

    result = heal_wound(1, 0, leg, healed)
    assert result.hit_location_updates == pmap(
        {"wounds": pvector(), "actor_health_impact": ActorHealthState.HEALTHY}
    )


def test_legs_recover_once_the_abdomen_is_healed_below_max() -> None:
    character, leg = make_wounded_dummy(2)
    character = commit(character, apply_damage(5, True, ABDOMEN, character))
    character = commit(character, heal_wound(1, 0, ABDOMEN, character))
    result = heal_wound(1, 0, leg, character)
    assert result.hit_location_updates["health_state"] == HitLocationHealthState.WOUNDED
