"""Domain model exports."""

from .angles import format_number, is_near_integer, normalize_yaw
from .grenade import TICKS_PER_SECOND, Grenade, deduplicate_grenades
from .rejections import Rejection, RejectionCode

__all__ = [
    "Grenade",
    "Rejection",
    "RejectionCode",
    "TICKS_PER_SECOND",
    "deduplicate_grenades",
    "format_number",
    "is_near_integer",
    "normalize_yaw",
]
