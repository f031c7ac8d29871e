"""Closed set of reasons a lineup can be dropped."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RejectionCode(Enum):
    """Every reason a source entry or a record can be rejected."""

    # parse tier
    NO_FROM = "no from"
    NO_TO = "no to"
    NO_WEAPON = "no weapon"
    NO_X = "no x"
    NO_Y = "no y"
    NO_Z = "no z"
    NO_YAW = "no yaw"
    NO_PITCH = "no pitch"
    RUN_NOT_INTEGER = "run is not an integer"
    RUN_NEGATIVE = "run is negative"
    DELAY_NOT_INTEGER = "delay is not an integer"
    DELAY_NEGATIVE = "delay is negative"

    # mapping tier
    RUN_SPEED_UNSUPPORTED = "run speed is not supported"
    RUN_YAW_NON_INTEGER = "run yaw is non-integer"
    UNKNOWN_RUN_DIRECTION = "unknown run direction"
    STANDING_THROW_UNSUPPORTED = "nades not thrown while running are unsupported"
    JUMP_WITHOUT_DELAY = "jumping without delay unsupported"
    DUCK_UNSUPPORTED = "ducking is unsupported"
    UNKNOWN_WEAPON = "unknown weapon"
    RUN = "run is not supported"
    DELAY = "delay is not supported"
    WEAPON = "unsupported weapon"


@dataclass(frozen=True, slots=True)
class Rejection:
    """A rejection code plus the offending value, when one is reported."""

    code: RejectionCode
    detail: str | None = None

    @property
    def message(self) -> str:
        if self.detail is None:
            return self.code.value
        return f"{self.code.value}: {self.detail}"

    def __str__(self) -> str:
        return self.message
