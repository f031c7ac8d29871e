"""Conversion of grenade records into the primordial schema."""
from __future__ import annotations

from typing import Mapping

from nadeconv.core.types import Payload
from nadeconv.domain.angles import normalize_yaw
from nadeconv.domain.grenade import Grenade
from nadeconv.domain.rejections import RejectionCode
from nadeconv.services.errors import MappingRejectedError

AVAILABILITY_WEAPONS: Mapping[str, frozenset[str]] = {
    "explosive": frozenset({"weapon_hegrenade"}),
    "fire": frozenset({"weapon_molotov", "weapon_incgrenade"}),
    "flash": frozenset({"weapon_flashbang"}),
    "smoke": frozenset({"weapon_smokegrenade"}),
}


def availability_for(weapon: str) -> dict[str, bool]:
    """Return the four availability flags, exactly one of them set."""
    flags = {category: weapon in weapons for category, weapons in AVAILABILITY_WEAPONS.items()}
    if sum(flags.values()) != 1:
        raise MappingRejectedError(RejectionCode.UNKNOWN_WEAPON)
    return flags


def throw_delay_ticks(grenade: Grenade) -> int:
    """Ticks from the start of the run until the throw is released."""
    if grenade.delay == 0:
        return grenade.run
    return grenade.run + grenade.delay - 1


def to_primordial(grenade: Grenade) -> Payload:
    """Map a record to a primordial lineup or raise MappingRejectedError."""
    if grenade.run == 0:
        raise MappingRejectedError(RejectionCode.STANDING_THROW_UNSUPPORTED)
    if grenade.run_speed:
        raise MappingRejectedError(RejectionCode.RUN_SPEED_UNSUPPORTED)
    if grenade.jump and grenade.delay == 0:
        raise MappingRejectedError(RejectionCode.JUMP_WITHOUT_DELAY)
    if grenade.duck:
        raise MappingRejectedError(RejectionCode.DUCK_UNSUPPORTED)
    availability = availability_for(grenade.weapon)

    return {
        "angle": {"x": grenade.pitch, "y": grenade.yaw},
        "availability": availability,
        "delay throw ticks": throw_delay_ticks(grenade),
        "jump throw": grenade.jump,
        "jump throw delay ticks": grenade.run,
        "name": grenade.display_name,
        "pos": {"x": grenade.x, "y": grenade.y, "z": grenade.z},
        "run direction": normalize_yaw(grenade.yaw + grenade.run_yaw),
        "run ticks": grenade.run,
        "throw strength": grenade.strength * 100,
    }
