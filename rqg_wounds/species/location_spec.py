from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from rqg_wounds.types import HitLocationType


@dataclass
class HitLocationSpec:
    """
    Mutable authoring blueprint of one hit location.
    Converted into an immutable ``HitLocation`` by ``species.convert.to_character``;
    wounds always start empty.
    """

    name: str
    location_type: HitLocationType
    hit_points_max: int
    die_from: int
    die_to: int
    connected_to: Optional[str] = None


def _empty_locations() -> List[HitLocationSpec]:
    return []


@dataclass
class CharacterSpec:
    """
    Mutable authoring blueprint of a character: name, total hit points and the
    hit locations of its species template.
    """

    name: str
    hit_points: int
    locations: List[HitLocationSpec] = field(default_factory=_empty_locations)

    def add(self, location: HitLocationSpec) -> "CharacterSpec":
        self.locations.append(location)
        return self


__all__ = ["HitLocationSpec", "CharacterSpec"]
