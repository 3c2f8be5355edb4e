from dataclasses import dataclass


@dataclass(frozen=True)
class HitPoints:
    """A character's total hit points, separate from any single location.

    Damage that applies to total HP lowers ``value`` (never below 0) and
    healing raises it again (never above ``max``). ``value == 0`` is death,
    whatever the locations say.
    """

    value: int
    max: int
