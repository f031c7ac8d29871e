"""Data layer utilities for reading lineup documents and writing outputs."""

from .errors import (
    DataError,
    DataLoadError,
    DataValidationError,
    DataWriteError,
    RecordRejectedError,
)
from .gs_reader import (
    GrenadeCollection,
    RecordRejection,
    parse_grenade,
    read_gs_document,
    read_gs_mapping,
)

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "DataWriteError",
    "GrenadeCollection",
    "RecordRejectedError",
    "RecordRejection",
    "parse_grenade",
    "read_gs_document",
    "read_gs_mapping",
]
