"""Conversion of grenade records into the mono playback schema."""
from __future__ import annotations

from typing import Mapping

from nadeconv.core.types import Payload
from nadeconv.domain.angles import format_number, is_near_integer
from nadeconv.domain.grenade import TICKS_PER_SECOND, Grenade
from nadeconv.domain.rejections import RejectionCode
from nadeconv.services.errors import MappingRejectedError

RUN_YAW_TOLERANCE = 1e-6

# Mono only understands these movement angles; anything else is rejected.
YAW_TO_DIRECTION: Mapping[int, str] = {
    0: "f",
    90: "r",
    180: "b",
    -90: "l",
    -180: "b",
}

MONO_WEAPON_CODES: Mapping[str, str] = {
    "weapon_molotov": "fire",
    "weapon_hegrenade": "he",
}


def mono_weapon_code(weapon: str) -> str | None:
    """Return the mono group for a weapon, or None when mono has no such group."""
    return MONO_WEAPON_CODES.get(weapon)


def yaw_to_direction(yaw: float) -> str:
    """Look up the direction code for a movement yaw offset, truncated to degrees."""
    direction = YAW_TO_DIRECTION.get(int(yaw))
    if direction is None:
        raise MappingRejectedError(RejectionCode.UNKNOWN_RUN_DIRECTION, format_number(yaw))
    return direction


def to_mono(grenade: Grenade) -> Payload:
    """Map a record to a mono lineup or raise MappingRejectedError."""
    if grenade.run_speed:
        raise MappingRejectedError(RejectionCode.RUN_SPEED_UNSUPPORTED)
    if not is_near_integer(grenade.run_yaw, RUN_YAW_TOLERANCE):
        raise MappingRejectedError(RejectionCode.RUN_YAW_NON_INTEGER)

    movement = yaw_to_direction(grenade.run_yaw)
    recovery = yaw_to_direction(grenade.recovery_yaw)
    if grenade.jump:
        movement += "j"
    if grenade.duck:
        movement += "d"
    if grenade.recovery_jump:
        recovery += "j"

    return {
        "n": grenade.display_name,
        "x": grenade.x,
        "y": grenade.y,
        "z": grenade.z,
        "yaw": grenade.yaw,
        "pitch": grenade.pitch,
        "st": int(grenade.strength * 2),
        "tr": grenade.run / TICKS_PER_SECOND,
        "jtt": grenade.delay / TICKS_PER_SECOND,
        "rt": 0.0 if recovery == "f" else 0.5,
        "m": movement,
        "r": recovery,
    }
