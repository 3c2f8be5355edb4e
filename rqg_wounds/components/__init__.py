"""Component aggregates.

Re-exports the immutable record types that make up a character's health
state. Changing a component means building a new instance (usually with
``dataclasses.replace``); nothing here mutates in place.

Importing::

    from rqg_wounds.components import HitLocation, HitPoints

"""

from .hit_location import HitLocation
from .hit_points import HitPoints

__all__ = [
    "HitLocation",
    "HitPoints",
]
