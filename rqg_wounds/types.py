"""Common type aliases and enumerations.

The health enumerations are *ordered*: member declaration order is severity
order (least to most severe). :mod:`rqg_wounds.utils.severity` relies on this
to pick the worst of several states.
"""

from enum import StrEnum, auto


LocationID = int


class HitLocationType(StrEnum):
    """Body region category; selects the wound rule branch."""

    LIMB = auto()
    HEAD = auto()
    CHEST = auto()
    ABDOMEN = auto()
    OTHER = auto()


class HitLocationHealthState(StrEnum):
    """Condition of a single hit location (least to most severe)."""

    HEALTHY = auto()
    WOUNDED = auto()
    USELESS = auto()
    SEVERED = auto()
    GONE = auto()


class ActorHealthState(StrEnum):
    """Aggregate condition of a character (least to most severe)."""

    HEALTHY = auto()
    WOUNDED = auto()
    SHOCK = auto()
    UNCONSCIOUS = auto()
    DEAD = auto()


class AbilityResult(StrEnum):
    """Outcome of a d100 ability roll (best to worst)."""

    HYPER_CRITICAL = auto()
    SPECIAL_CRITICAL = auto()
    CRITICAL = auto()
    SPECIAL = auto()
    SUCCESS = auto()
    FAILURE = auto()
    FUMBLE = auto()


TERMINAL_LOCATION_STATES = frozenset(
    {HitLocationHealthState.SEVERED, HitLocationHealthState.GONE}
)
DISABLED_LOCATION_STATES = TERMINAL_LOCATION_STATES | {HitLocationHealthState.USELESS}
