"""Core immutable character health ``Character`` dataclass.

A :class:`Character` is a snapshot of everything the wound rules need to know
about one character: the total hit point pool, the aggregate health state and
the character's hit locations. Resolvers are pure functions that read a
``Character`` and return *update payloads*; committing those payloads produces
a new ``Character`` (see :mod:`rqg_wounds.updates`). No mutation happens
in-place.

Design notes:

* Hit locations live in a **persistent map** (``pyrsistent.PMap``) keyed by
    ``LocationID``. Cross-location effects (abdomen trauma disabling legs) are
    expressed as updates addressed by id, never as object references.
* ``health`` is derived. It is recomputed from hit points and every location's
    ``actor_health_impact`` by :func:`rqg_wounds.systems.health.combined_health`
    after each committed change.
* Locations are never removed. Severed or gone locations stay in the map as
    terminal records.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from pyrsistent.typing import PMap

from rqg_wounds.components import HitLocation, HitPoints
from rqg_wounds.types import ActorHealthState, LocationID


@dataclass(frozen=True)
class Character:
    """Immutable health snapshot of one character.

    Attributes:
        name (str): Display name used in notifications.
        hit_points (HitPoints): Total hit point pool.
        locations (PMap[LocationID, HitLocation]): Hit locations owned
            exclusively by this character.
        health (ActorHealthState): Aggregate health state (derived).
    """

    name: str
    hit_points: HitPoints
    locations: PMap[LocationID, HitLocation]
    health: ActorHealthState = ActorHealthState.HEALTHY

    def location_id_by_name(self, name: str) -> Optional[LocationID]:
        """Return the id of the location called ``name`` (or ``None``)."""
        for location_id, location in self.locations.items():
            if location.name == name:
                return location_id
        return None

    def iter_locations(self) -> Iterator[Tuple[LocationID, HitLocation]]:
        """Yield ``(location_id, location)`` pairs in id order."""
        for location_id in sorted(self.locations):
            yield location_id, self.locations[location_id]

    @property
    def description(self) -> str:
        """Return a compact human readable summary."""
        lines = [
            f"{self.name}: {self.hit_points.value}/{self.hit_points.max} HP ({self.health})"
        ]
        for _, location in self.iter_locations():
            wounds = ", ".join(str(w) for w in location.wounds) or "-"
            lines.append(
                f"  {location.name:<10} {location.wound_total:>3}/{location.hit_points_max:<3}"
                f" {location.health_state:<8} wounds: {wounds}"
            )
        return "\n".join(lines)
