"""Exceptions raised by romid."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .identifiers.cnp import CnpReason


class RomidError(ValueError):
    """Base class for every error raised by this package."""


class InvalidCnpError(RomidError):
    """
    Raised by `parse_cnp` when the candidate is not a valid CNP.

    The `reason` attribute carries the same code `validate_cnp` would report.
    """

    def __init__(self, reason: "CnpReason") -> None:
        self.reason = reason
        super().__init__(f"invalid CNP: {reason.value}")


class UnknownCheckError(RomidError):
    """Raised when a verdict is requested for an identifier kind we don't know."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"unknown check kind: {kind!r}")
