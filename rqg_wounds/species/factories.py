"""Convenience factory functions for authoring ``CharacterSpec`` objects.

Each helper returns a preconfigured blueprint for a species hit-location
template. Blueprints are mutable so a template can be tweaked (extra
locations, odd hit points) before ``species.convert.to_character`` turns it
into an immutable :class:`~rqg_wounds.state.Character`.
"""

from __future__ import annotations

from typing import Dict, Tuple

from rqg_wounds.types import HitLocationType
from .location_spec import CharacterSpec, HitLocationSpec


# Location hit points at the lowest bracket (1-6 total HP).
HUMANOID_BASE_HIT_POINTS: Dict[str, int] = {
    "leg": 2,
    "abdomen": 2,
    "chest": 3,
    "arm": 1,
    "head": 2,
}

# (name, hit point kind, type, d20 range, connected to)
HUMANOID_LOCATIONS: Tuple[
    Tuple[str, str, HitLocationType, Tuple[int, int], str | None], ...
] = (
    ("rightLeg", "leg", HitLocationType.LIMB, (1, 4), "abdomen"),
    ("leftLeg", "leg", HitLocationType.LIMB, (5, 8), "abdomen"),
    ("abdomen", "abdomen", HitLocationType.ABDOMEN, (9, 11), None),
    ("chest", "chest", HitLocationType.CHEST, (12, 12), "abdomen"),
    ("rightArm", "arm", HitLocationType.LIMB, (13, 15), "chest"),
    ("leftArm", "arm", HitLocationType.LIMB, (16, 18), "chest"),
    ("head", "head", HitLocationType.HEAD, (19, 20), "chest"),
)


def hit_point_bracket(total_hit_points: int) -> int:
    """Return how many +1 steps locations get for ``total_hit_points``.

    1-6 HP is bracket 0, then every further 3 HP adds one (7-9 is 1, 10-12 is 2...).
    """
    return max(0, (total_hit_points - 4) // 3)


def humanoid_location_hit_points(total_hit_points: int, kind: str) -> int:
    """Max HP of a humanoid location of ``kind`` for a character's total HP."""
    return HUMANOID_BASE_HIT_POINTS[kind] + hit_point_bracket(total_hit_points)


def create_humanoid(name: str, hit_points: int) -> CharacterSpec:
    """Humanoid: two legs, abdomen, chest, two arms and a head on a d20."""
    if hit_points <= 0:
        raise ValueError(f"A character needs positive hit points: {hit_points}")
    spec = CharacterSpec(name=name, hit_points=hit_points)
    for location_name, kind, location_type, (low, high), parent in HUMANOID_LOCATIONS:
        spec.add(
            HitLocationSpec(
                name=location_name,
                location_type=location_type,
                hit_points_max=humanoid_location_hit_points(hit_points, kind),
                die_from=low,
                die_to=high,
                connected_to=parent,
            )
        )
    return spec


def create_location(
    name: str,
    location_type: HitLocationType,
    hit_points_max: int,
    die_range: Tuple[int, int],
    connected_to: str | None = None,
) -> HitLocationSpec:
    """A single hit location blueprint (for non-humanoid templates)."""
    low, high = die_range
    return HitLocationSpec(
        name=name,
        location_type=location_type,
        hit_points_max=hit_points_max,
        die_from=low,
        die_to=high,
        connected_to=connected_to,
    )
