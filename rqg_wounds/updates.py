"""Resolver results and how to commit them.

Resolvers never touch the :class:`~rqg_wounds.state.Character` they are
given. They return *partial updates*: persistent maps from dataclass field
name to new value, holding only the fields that changed. An empty map means
nothing changed. :func:`commit` folds a result into a new ``Character``; a
host application that persists characters elsewhere can instead translate the
same payloads into its own document updates.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Union

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from rqg_wounds.state import Character
from rqg_wounds.types import LocationID


Changes = PMap[str, Any]


def _no_changes() -> Changes:
    return pmap()


def _no_location_updates() -> PVector["LocationUpdate"]:
    return pvector()


@dataclass(frozen=True)
class LocationUpdate:
    """Partial update of one hit location, addressed by id."""

    location_id: LocationID
    changes: Changes


@dataclass(frozen=True)
class DamageResult:
    """Outcome of :func:`rqg_wounds.systems.damage.apply_damage`.

    Attributes:
        location_id: The location that was hit.
        hit_location_updates: Changes to the hit location.
        actor_updates: Changes to the character (``hit_points`` / ``health``).
        notification: Message for the players; may be empty.
        affected_leg_updates: Side-effect updates of legs disabled by
            abdomen trauma.
    """

    location_id: LocationID
    hit_location_updates: Changes = field(default_factory=_no_changes)
    actor_updates: Changes = field(default_factory=_no_changes)
    notification: str = ""
    affected_leg_updates: PVector[LocationUpdate] = field(
        default_factory=_no_location_updates
    )

    @property
    def location_updates(self) -> PMap[LocationID, Changes]:
        """All non-empty location changes of this result keyed by location id."""
        updates: PMap[LocationID, Changes] = pmap()
        if self.hit_location_updates:
            updates = updates.set(self.location_id, self.hit_location_updates)
        for leg_update in self.affected_leg_updates:
            updates = updates.set(leg_update.location_id, leg_update.changes)
        return updates

    @property
    def is_empty(self) -> bool:
        return not self.location_updates and not self.actor_updates


@dataclass(frozen=True)
class HealResult:
    """Outcome of :func:`rqg_wounds.systems.healing.heal_wound`."""

    location_id: LocationID
    hit_location_updates: Changes = field(default_factory=_no_changes)
    actor_updates: Changes = field(default_factory=_no_changes)
    notification: str = ""

    @property
    def location_updates(self) -> PMap[LocationID, Changes]:
        if not self.hit_location_updates:
            return pmap()
        return pmap({self.location_id: self.hit_location_updates})

    @property
    def is_empty(self) -> bool:
        return not self.hit_location_updates and not self.actor_updates


Result = Union[DamageResult, HealResult]


def commit(character: Character, result: Result) -> Character:
    """Return ``character`` with every update of ``result`` applied.

    ``health`` is only changed if the result carries it; call
    :func:`rqg_wounds.systems.health.combined_health` afterwards to re-derive
    it from the full state.

    Raises:
        ValueError: If an update addresses a location the character lacks.
    """
    locations = character.locations
    for location_id, changes in result.location_updates.items():
        if location_id not in locations:
            raise ValueError(
                f"Hit location {location_id} does not belong to {character.name}"
            )
        locations = locations.set(
            location_id, replace(locations[location_id], **changes)
        )
    return replace(character, locations=locations, **result.actor_updates)
