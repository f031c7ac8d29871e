"""Folds mapper output into per-target documents and counts."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from nadeconv.core.types import TARGET_FORMATS, Payload, TargetFormat
from nadeconv.data.gs_reader import GrenadeCollection
from nadeconv.services.errors import MappingRejectedError, UnknownTargetError
from nadeconv.services.kidua_mapper import to_kidua
from nadeconv.services.mono_mapper import mono_weapon_code, to_mono
from nadeconv.services.primordial_mapper import to_primordial

KIDUA_LINEUPS_KEY = "lineups"


@dataclass(frozen=True, slots=True)
class MappingFailure:
    """One record a target format refused, kept for debug output."""

    map_name: str
    message: str


@dataclass(slots=True)
class ConversionResult:
    """A target document plus the counts reported alongside it."""

    target: TargetFormat
    document: Payload
    counts: Dict[str, int] = field(default_factory=dict)
    rejections: Counter = field(default_factory=Counter)
    failures: List[MappingFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def record_rejection(self, map_name: str, exc: MappingRejectedError) -> None:
        message = exc.rejection.message
        self.rejections[message] += 1
        self.failures.append(MappingFailure(map_name=map_name, message=message))


def convert_to_mono(collection: GrenadeCollection) -> ConversionResult:
    """Group mono lineups by map, then by mono weapon code.

    Every map of the collection is present in the document even when it ends
    up empty. Weapons mono has no group for are skipped without counting.
    """
    result = ConversionResult(target="mono", document={})
    for map_name, grenades in collection.maps.items():
        by_weapon: Dict[str, List[Payload]] = {}
        for grenade in grenades:
            code = mono_weapon_code(grenade.weapon)
            if code is None:
                continue
            try:
                payload = to_mono(grenade)
            except MappingRejectedError as exc:
                result.record_rejection(map_name, exc)
                continue
            by_weapon.setdefault(code, []).append(payload)
        result.document[map_name] = by_weapon
        result.counts[map_name] = sum(len(payloads) for payloads in by_weapon.values())
    return result


def convert_to_primordial(collection: GrenadeCollection) -> ConversionResult:
    """Index primordial lineups per map as "0".."N-1"; empty maps are left out."""
    result = ConversionResult(target="primordial", document={})
    for map_name, grenades in collection.maps.items():
        payloads: List[Payload] = []
        for grenade in grenades:
            try:
                payloads.append(to_primordial(grenade))
            except MappingRejectedError as exc:
                result.record_rejection(map_name, exc)
        if not payloads:
            continue
        result.document[map_name] = {str(index): payload for index, payload in enumerate(payloads)}
        result.counts[map_name] = len(payloads)
    return result


def convert_to_kidua(collection: GrenadeCollection) -> ConversionResult:
    """Collect every map's kidua lineups into one list; map names are not kept."""
    lineups: List[Payload] = []
    result = ConversionResult(target="kidua", document={KIDUA_LINEUPS_KEY: lineups})
    for map_name, grenades in collection.maps.items():
        count = 0
        for grenade in grenades:
            try:
                lineups.append(to_kidua(grenade))
            except MappingRejectedError as exc:
                result.record_rejection(map_name, exc)
                continue
            count += 1
        if count:
            result.counts[map_name] = count
    return result


_CONVERTERS: Dict[str, Callable[[GrenadeCollection], ConversionResult]] = {
    "mono": convert_to_mono,
    "primordial": convert_to_primordial,
    "kidua": convert_to_kidua,
}


def convert(collection: GrenadeCollection, target: TargetFormat) -> ConversionResult:
    """Convert a collection into the requested target format."""
    try:
        converter = _CONVERTERS[target]
    except KeyError as exc:
        raise UnknownTargetError(
            f"Unknown target format '{target}'. Expected one of: {', '.join(TARGET_FORMATS)}."
        ) from exc
    return converter(collection)
