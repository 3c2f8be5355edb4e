"""Severity ordering for health states.

Both health enumerations declare their members from least to most severe, so
a member's declaration index is its rank. Resolvers combine states with
``most_severe_*`` instead of comparing ad hoc flags, which keeps the
"never downgrade" rule in one place.
"""

from typing import Tuple

from rqg_wounds.types import ActorHealthState, HitLocationHealthState


ACTOR_HEALTH_ORDER: Tuple[ActorHealthState, ...] = tuple(ActorHealthState)
LOCATION_HEALTH_ORDER: Tuple[HitLocationHealthState, ...] = tuple(
    HitLocationHealthState
)


def actor_health_rank(state: ActorHealthState) -> int:
    """Return the severity rank of ``state`` (0 is healthy)."""
    return ACTOR_HEALTH_ORDER.index(state)


def location_health_rank(state: HitLocationHealthState) -> int:
    """Return the severity rank of ``state`` (0 is healthy)."""
    return LOCATION_HEALTH_ORDER.index(state)


def most_severe_actor_health(*states: ActorHealthState) -> ActorHealthState:
    """Return the worst of ``states``; ``HEALTHY`` when called without any."""
    return max(states, key=actor_health_rank, default=ActorHealthState.HEALTHY)


def most_severe_location_health(
    *states: HitLocationHealthState,
) -> HitLocationHealthState:
    """Return the worst of ``states``; ``HEALTHY`` when called without any."""
    return max(
        states, key=location_health_rank, default=HitLocationHealthState.HEALTHY
    )
