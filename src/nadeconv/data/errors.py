"""Custom exceptions for document loading, parsing and writing."""
from __future__ import annotations

from nadeconv.domain.rejections import Rejection


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a JSON document is missing, unreadable or invalid."""


class DataValidationError(DataError):
    """Raised when a document fails structural validation."""


class DataWriteError(DataError):
    """Raised when an output document cannot be persisted."""


class RecordRejectedError(DataError):
    """Raised when a single source entry cannot become a grenade record."""

    def __init__(self, rejection: Rejection) -> None:
        super().__init__(rejection.message)
        self.rejection = rejection
