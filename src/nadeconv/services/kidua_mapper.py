"""Conversion of grenade records into the kidua schema (instant throws only)."""
from __future__ import annotations

from nadeconv.core.types import Payload
from nadeconv.domain.grenade import Grenade
from nadeconv.domain.rejections import RejectionCode
from nadeconv.services.errors import MappingRejectedError

# Position in this tuple is the kidua ``nade`` code.
KIDUA_WEAPONS: tuple[str, ...] = (
    "weapon_flashbang",
    "weapon_hegrenade",
    "weapon_smokegrenade",
    "weapon_molotov",
)


def kidua_weapon_code(weapon: str) -> int:
    try:
        return KIDUA_WEAPONS.index(weapon)
    except ValueError as exc:
        raise MappingRejectedError(RejectionCode.WEAPON, weapon) from exc


def to_kidua(grenade: Grenade) -> Payload:
    """Map a record to a kidua lineup or raise MappingRejectedError."""
    if grenade.run != 0:
        raise MappingRejectedError(RejectionCode.RUN)
    if grenade.delay != 0:
        raise MappingRejectedError(RejectionCode.DELAY)
    nade = kidua_weapon_code(grenade.weapon)
    return {
        "spot": grenade.display_name,
        "origin": {"x": grenade.x, "y": grenade.y, "z": grenade.z},
        "view": {"x": grenade.pitch, "y": grenade.yaw, "z": 0},
        "nade": nade,
    }
