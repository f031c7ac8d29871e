"""Validated grenade lineup record."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

TICKS_PER_SECOND = 64


@dataclass(frozen=True, slots=True)
class Grenade:
    """One documented grenade throw.

    ``run`` and ``delay`` are tick counts (64 ticks per second). ``run_yaw``
    and ``recovery_yaw`` are offsets in degrees from the look yaw that give
    the movement direction before and after the throw.
    """

    from_name: str
    to_name: str
    weapon: str
    x: float
    y: float
    z: float
    yaw: float
    pitch: float
    description: str = ""
    duck: bool = False
    strength: float = 1.0
    jump: bool = False
    run: int = 0
    run_yaw: float = 0.0
    run_speed: bool = False
    recovery_yaw: float = -180.0
    recovery_jump: bool = False
    delay: int = 0

    def __post_init__(self) -> None:
        if self.run < 0:
            raise ValueError("run must be non-negative.")
        if self.delay < 0:
            raise ValueError("delay must be non-negative.")

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def display_name(self) -> str:
        """Destination label, with the description in parentheses when present."""
        if self.description:
            return f"{self.to_name} ({self.description})"
        return self.to_name


def deduplicate_grenades(grenades: Iterable[Grenade]) -> list[Grenade]:
    """Drop exact duplicates, keeping the first occurrence in input order."""
    seen: set[Grenade] = set()
    unique: list[Grenade] = []
    for grenade in grenades:
        if grenade in seen:
            continue
        seen.add(grenade)
        unique.append(grenade)
    return unique
