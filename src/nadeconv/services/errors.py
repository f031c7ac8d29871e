"""Service-layer exceptions."""
from __future__ import annotations

from nadeconv.domain.rejections import Rejection, RejectionCode


class MappingRejectedError(Exception):
    """Raised when a valid record cannot be expressed in a target schema."""

    def __init__(self, code: RejectionCode, detail: str | None = None) -> None:
        self.rejection = Rejection(code, detail)
        super().__init__(self.rejection.message)


class UnknownTargetError(ValueError):
    """Raised when a conversion is requested for an unsupported target format."""
