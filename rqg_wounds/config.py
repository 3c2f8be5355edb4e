"""Rules configuration.

Table-wide options that change how rolls and healing resolve. A
:class:`RulesConfig` is passed explicitly to the functions that need it; the
engine keeps no process-wide settings.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RulesConfig:
    """Optional rules switches.

    Attributes:
        special_crit: Enable special and hyper criticals for abilities of 100%
            or more.
        severed_limb_heal_points: Smallest single heal that can restore a
            severed limb.
        hit_location_die: Die size of the hit-location table.
    """

    special_crit: bool = False
    severed_limb_heal_points: int = 6
    hit_location_die: int = 20


DEFAULT_CONFIG = RulesConfig()
