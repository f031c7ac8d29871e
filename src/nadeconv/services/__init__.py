"""Service layer exports."""

from .conversion_service import (
    ConversionResult,
    MappingFailure,
    convert,
    convert_to_kidua,
    convert_to_mono,
    convert_to_primordial,
)
from .errors import MappingRejectedError, UnknownTargetError
from .kidua_mapper import to_kidua
from .mono_mapper import to_mono
from .primordial_mapper import to_primordial

__all__ = [
    "ConversionResult",
    "MappingFailure",
    "MappingRejectedError",
    "UnknownTargetError",
    "convert",
    "convert_to_kidua",
    "convert_to_mono",
    "convert_to_primordial",
    "to_kidua",
    "to_mono",
    "to_primordial",
]
