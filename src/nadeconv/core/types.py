"""Shared type aliases for the core and domain layers."""
from typing import Any, Dict, Literal

TargetFormat = Literal["mono", "primordial", "kidua"]
TARGET_FORMATS: tuple[TargetFormat, ...] = ("mono", "primordial", "kidua")

Payload = Dict[str, Any]

__all__ = ["Payload", "TARGET_FORMATS", "TargetFormat"]
