"""Player-facing notification texts.

Each helper renders one message for the host application to show (chat card,
log line...). Resolvers pick the message; nothing here decides rules.
"""

from rqg_wounds.types import HitLocationType


def location_gone(location_name: str) -> str:
    return (
        f"{location_name} is gone and cannot be hit anymore, "
        "reroll to get a new hit location!"
    )


def location_cannot_be_healed(location_name: str) -> str:
    return f"{location_name} is gone and cannot be healed."


def limb_useless(actor_name: str, location_name: str) -> str:
    return (
        f"{actor_name}'s {location_name} is useless and cannot hold anything / "
        f"support standing. {actor_name} can fight with whatever limbs are still "
        "functional."
    )


def incapacitated(actor_name: str) -> str:
    return (
        f"{actor_name} is functionally incapacitated: can no longer fight until "
        "healed and is in shock. Self-healing may be attempted."
    )


def limb_severed(actor_name: str, location_name: str, heal_points: int) -> str:
    return (
        f"{actor_name}'s {location_name} is severed or irrevocably maimed. "
        f"Only a {heal_points} point heal applied within ten minutes can restore "
        "a severed limb, assuming all parts are available. "
        + incapacitated(actor_name)
    )


def limb_still_severed(actor_name: str, location_name: str, heal_points: int) -> str:
    return (
        f"{actor_name}'s {location_name} remains severed. "
        f"Only a {heal_points} point heal can restore it."
    )


def unconscious_five_minutes(actor_name: str) -> str:
    return (
        f"{actor_name} is unconscious and must be healed or treated with "
        "First Aid within five minutes (one full turn) or die."
    )


def unconscious_bleeding(actor_name: str) -> str:
    return (
        f"{actor_name} becomes unconscious and begins to lose 1 hit point per "
        "melee round from bleeding unless healed or treated with First Aid."
    )


def chest_shock(actor_name: str) -> str:
    return (
        f"{actor_name} falls and is too busy coughing blood to do anything. "
        "Will bleed to death in ten minutes unless the bleeding is stopped by "
        "First Aid, and cannot take any action, including healing."
    )


def legs_collapse(actor_name: str) -> str:
    return (
        f"Both legs are useless and {actor_name} falls to the ground. "
        f"{actor_name} may fight from the ground in subsequent melee rounds. "
        "Will bleed to death, if not healed or treated with First Aid within "
        "ten minutes."
    )


def dies_instantly(actor_name: str) -> str:
    return f"{actor_name} dies instantly."


def wound_notification(
    actor_name: str,
    location_name: str,
    location_type: HitLocationType,
    tier: int,
    legs_collapsed: bool = False,
) -> str:
    """Return the message for a non-severing wound at ``tier``.

    ``legs_collapsed`` is only meaningful for the abdomen: its first tier is
    announced when the legs give way, not on every later scratch.
    """
    if tier == 0 or location_type == HitLocationType.OTHER:
        return ""
    if location_type == HitLocationType.LIMB:
        if tier == 1:
            return limb_useless(actor_name, location_name)
        return incapacitated(actor_name)
    if tier >= 3:
        return dies_instantly(actor_name)
    if tier == 2:
        return unconscious_bleeding(actor_name)
    if location_type == HitLocationType.HEAD:
        return unconscious_five_minutes(actor_name)
    if location_type == HitLocationType.CHEST:
        return chest_shock(actor_name)
    if legs_collapsed:
        return legs_collapse(actor_name)
    return ""
