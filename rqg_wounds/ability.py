"""Ability roll evaluation.

A d100 roll against an effective chance is graded from hyper critical down to
fumble. Special and hyper criticals are an optional rule; whether they apply
is part of the :class:`~rqg_wounds.config.RulesConfig` handed to
:func:`roll_ability`, never global state.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from rqg_wounds.config import DEFAULT_CONFIG, RulesConfig
from rqg_wounds.types import AbilityResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AbilityRoll:
    """A graded ability roll.

    Attributes:
        chance: Effective chance (base plus modifier, not clamped).
        roll: The d100 result.
        result: Grade of the roll.
        gains_experience: True if the roll earned the ability an experience
            check (a success or better on an ability that can be learned by
            doing and has no check yet).
    """

    chance: int
    roll: int
    result: AbilityResult
    gains_experience: bool = False


def is_success(result: AbilityResult) -> bool:
    """True for a success or anything better."""
    order = list(AbilityResult)
    return order.index(result) <= order.index(AbilityResult.SUCCESS)


def gains_experience(
    result: AbilityResult, can_get_experience: bool, has_experience: bool = False
) -> bool:
    return can_get_experience and not has_experience and is_success(result)


def result_limits(
    chance: int, special_crit: bool = False
) -> Tuple[Tuple[float, AbilityResult], ...]:
    """Return ``(highest roll, result)`` pairs, best result first."""
    chance = max(0, chance)  # -50% counts as 0%

    hyper_critical = math.ceil(chance / 500) if special_crit and chance >= 100 else 0
    special_critical = math.ceil(chance / 100) if special_crit and chance >= 100 else 0
    critical = max(1, math.ceil((chance - 29) / 20) + 1)
    if chance in (6, 7):
        special = 2
    else:
        special = min(95, max(1, math.ceil((chance - 7) / 5) + 1))
    fumble = min(100, 100 - math.ceil((100 - chance - 9) / 20) + 1)
    success = min(95, max(chance, 5))
    failure = 95 if fumble == 96 else max(96, fumble - 1)
    return (
        (hyper_critical, AbilityResult.HYPER_CRITICAL),
        (special_critical, AbilityResult.SPECIAL_CRITICAL),
        (critical, AbilityResult.CRITICAL),
        (special, AbilityResult.SPECIAL),
        (success, AbilityResult.SUCCESS),
        (failure, AbilityResult.FAILURE),
        (math.inf, AbilityResult.FUMBLE),
    )


def evaluate_result(chance: int, roll: int, special_crit: bool = False) -> AbilityResult:
    """Grade a d100 ``roll`` against ``chance``."""
    for limit, result in result_limits(chance, special_crit):
        if roll <= limit:
            return result
    return AbilityResult.FUMBLE


def roll_ability(
    chance: int,
    modifier: int = 0,
    rng: Optional[random.Random] = None,
    config: RulesConfig = DEFAULT_CONFIG,
    can_get_experience: bool = False,
    has_experience: bool = False,
) -> AbilityRoll:
    """Roll 1d100 against ``chance + modifier``.

    ``can_get_experience`` and ``has_experience`` describe the ability rolled
    for; a success then marks the roll as earning an experience check.
    """
    if rng is None:
        rng = random.Random()
    effective = chance + modifier
    roll = rng.randint(1, 100)
    result = evaluate_result(effective, roll, config.special_crit)
    experience = gains_experience(result, can_get_experience, has_experience)
    logger.debug(
        "ability roll %d vs %d%%: %s%s",
        roll,
        effective,
        result,
        " (experience check)" if experience else "",
    )
    return AbilityRoll(
        chance=effective, roll=roll, result=result, gains_experience=experience
    )

