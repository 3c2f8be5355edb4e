from __future__ import annotations

from typing import Dict, Optional, Sequence

from pyrsistent import pmap

from rqg_wounds.components import HitLocation, HitPoints
from rqg_wounds.state import Character
from rqg_wounds.types import LocationID
from rqg_wounds.species.location_spec import CharacterSpec, HitLocationSpec


def to_hit_location(spec: HitLocationSpec) -> HitLocation:
    """Materialize one blueprint as an unwounded ``HitLocation``."""
    if spec.hit_points_max <= 0:
        raise ValueError(
            f"Hit location {spec.name} needs a positive max HP: {spec.hit_points_max}"
        )
    if spec.die_from > spec.die_to:
        raise ValueError(
            f"Hit location {spec.name} has an empty die range: "
            f"{spec.die_from}-{spec.die_to}"
        )
    return HitLocation(
        name=spec.name,
        location_type=spec.location_type,
        hit_points_max=spec.hit_points_max,
        connected_to=spec.connected_to,
        die_from=spec.die_from,
        die_to=spec.die_to,
    )


def check_die_ranges(spec: CharacterSpec) -> None:
    """Reject templates where one hit-location roll would land on two locations."""
    ranges = sorted(
        (location.die_from, location.die_to, location.name)
        for location in spec.locations
    )
    for (_, low_to, low_name), (high_from, _, high_name) in zip(ranges, ranges[1:]):
        if high_from <= low_to:
            raise ValueError(
                f"Hit locations {low_name} and {high_name} of {spec.name} "
                f"share die results"
            )


def to_character(
    spec: CharacterSpec,
    location_ids: Optional[Sequence[LocationID]] = None,
    first_id: LocationID = 0,
) -> Character:
    """
    Convert an authoring-time CharacterSpec into an immutable Character.

    - Numbers locations in blueprint order from ``first_id`` unless
      ``location_ids`` is given (one id per location, in blueprint order).
    - Starts at full hit points with healthy, unwounded locations.
    """
    names = [location.name for location in spec.locations]
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate hit location names in {spec.name}: {names}")
    check_die_ranges(spec)
    if location_ids is None:
        location_ids = range(first_id, first_id + len(spec.locations))
    elif len(location_ids) != len(spec.locations) or len(set(location_ids)) != len(
        location_ids
    ):
        raise ValueError(
            f"Need {len(spec.locations)} distinct location ids, got {list(location_ids)}"
        )

    locations: Dict[LocationID, HitLocation] = {
        location_id: to_hit_location(location)
        for location_id, location in zip(location_ids, spec.locations)
    }
    return Character(
        name=spec.name,
        hit_points=HitPoints(value=spec.hit_points, max=spec.hit_points),
        locations=pmap(locations),
    )


__all__ = ["check_die_ranges", "to_character", "to_hit_location"]
