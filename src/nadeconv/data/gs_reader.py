"""Reads gs-style lineup documents into validated grenade records."""
from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Mapping

from nadeconv.data.errors import DataValidationError, RecordRejectedError
from nadeconv.data.json_loader import parse_json
from nadeconv.domain.angles import is_near_integer
from nadeconv.domain.grenade import Grenade, deduplicate_grenades
from nadeconv.domain.rejections import Rejection, RejectionCode

TICK_TOLERANCE = 1e-7


@dataclass(frozen=True, slots=True)
class RecordRejection:
    """A source entry that was dropped while reading a map."""

    map_name: str
    index: int
    rejection: Rejection


@dataclass(frozen=True, slots=True)
class GrenadeCollection:
    """Validated, deduplicated records grouped by map in document order."""

    maps: dict[str, tuple[Grenade, ...]]
    rejections: tuple[RecordRejection, ...] = field(default=())

    @property
    def counts(self) -> dict[str, int]:
        return {map_name: len(grenades) for map_name, grenades in self.maps.items()}

    @property
    def total(self) -> int:
        return sum(len(grenades) for grenades in self.maps.values())

    @property
    def rejection_tally(self) -> Counter:
        """Occurrences of each parse rejection message across all maps."""
        return Counter(rejected.rejection.message for rejected in self.rejections)


def parse_grenade(entry: object) -> Grenade:
    """Build a Grenade from one source entry or raise RecordRejectedError."""
    data = entry if isinstance(entry, dict) else {}
    name = data.get("name")
    from_name = _require_str(_index(name, 0), RejectionCode.NO_FROM)
    to_name = _require_str(_index(name, 1), RejectionCode.NO_TO)
    description = _optional_str(data.get("description"), "")
    weapon = _require_str(data.get("weapon"), RejectionCode.NO_WEAPON)

    position = data.get("position")
    x = _require_number(_index(position, 0), RejectionCode.NO_X)
    y = _require_number(_index(position, 1), RejectionCode.NO_Y)
    z = _require_number(_index(position, 2), RejectionCode.NO_Z)

    # viewangles are stored as [pitch, yaw]
    viewangles = data.get("viewangles")
    yaw = _require_number(_index(viewangles, 1), RejectionCode.NO_YAW)
    pitch = _require_number(_index(viewangles, 0), RejectionCode.NO_PITCH)
    duck = _optional_bool(data.get("duck"), False)

    throw = data.get("grenade")
    if not isinstance(throw, dict):
        throw = {}
    strength = _optional_number(throw.get("strength"), 1.0)
    jump = _optional_bool(throw.get("jump"), False)
    run = _require_ticks(
        _optional_number(throw.get("run"), 0.0),
        RejectionCode.RUN_NOT_INTEGER,
        RejectionCode.RUN_NEGATIVE,
    )
    run_yaw = _optional_number(throw.get("run_yaw"), 0.0)
    run_speed = _optional_bool(throw.get("run_speed"), False)
    recovery_yaw = _optional_number(throw.get("recovery_yaw"), run_yaw - 180.0)
    recovery_jump = _optional_bool(throw.get("recovery_jump"), False)
    delay = _require_ticks(
        _optional_number(throw.get("delay"), 0.0),
        RejectionCode.DELAY_NOT_INTEGER,
        RejectionCode.DELAY_NEGATIVE,
    )

    return Grenade(
        from_name=from_name,
        to_name=to_name,
        weapon=weapon,
        x=x,
        y=y,
        z=z,
        yaw=yaw,
        pitch=pitch,
        description=description,
        duck=duck,
        strength=strength,
        jump=jump,
        run=run,
        run_yaw=run_yaw,
        run_speed=run_speed,
        recovery_yaw=recovery_yaw,
        recovery_jump=recovery_jump,
        delay=delay,
    )


def read_gs_document(data: str | bytes) -> GrenadeCollection:
    """Decode a gs lineup document and read every map in it.

    Invalid JSON raises DataLoadError and a non-object top level raises
    DataValidationError; malformed entries are only collected as rejections.
    """
    return read_gs_mapping(parse_json(data))


def read_gs_mapping(document: object) -> GrenadeCollection:
    """Read an already decoded gs document."""
    if not isinstance(document, Mapping):
        raise DataValidationError("Expected top-level object mapping map names to lineups.")
    maps: dict[str, tuple[Grenade, ...]] = {}
    rejections: list[RecordRejection] = []
    for map_name, entries in document.items():
        if not isinstance(map_name, str):
            raise DataValidationError("Map names must be strings.")
        parsed: list[Grenade] = []
        if isinstance(entries, list):
            for index, entry in enumerate(entries):
                try:
                    parsed.append(parse_grenade(entry))
                except RecordRejectedError as exc:
                    rejections.append(RecordRejection(map_name, index, exc.rejection))
        maps[map_name] = tuple(deduplicate_grenades(parsed))
    return GrenadeCollection(maps=maps, rejections=tuple(rejections))


def _index(value: object, position: int) -> object:
    if isinstance(value, list) and position < len(value):
        return value[position]
    return None


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _require_str(value: object, code: RejectionCode) -> str:
    if not isinstance(value, str):
        raise RecordRejectedError(Rejection(code))
    return value


def _require_number(value: object, code: RejectionCode) -> float:
    if not _is_number(value):
        raise RecordRejectedError(Rejection(code))
    return float(value)


def _optional_str(value: object, default: str) -> str:
    return value if isinstance(value, str) else default


def _optional_bool(value: object, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _optional_number(value: object, default: float) -> float:
    return float(value) if _is_number(value) else default


def _require_ticks(
    value: float, not_integer: RejectionCode, negative: RejectionCode
) -> int:
    if not is_near_integer(value, TICK_TOLERANCE):
        raise RecordRejectedError(Rejection(not_integer))
    if value < 0:
        raise RecordRejectedError(Rejection(negative))
    return int(round(value))
