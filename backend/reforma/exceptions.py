"""Custom exception hierarchy for the reforma estimation engine."""

from __future__ import annotations


class ReformaError(Exception):
    """Base exception for all reforma errors."""


class ConfigurationError(ReformaError):
    """Raised when a category label has no entry in its multiplier table.

    Carries the offending ``category`` and ``label`` so callers can report
    exactly which selection did not match the pricing data.
    """

    def __init__(self, category: str, label: str, message: str | None = None) -> None:
        self.category = category
        self.label = label
        if message is None:
            message = f"Unrecognized {category} label {label!r}"
        super().__init__(message)


class InvalidInputError(ReformaError):
    """Raised when project input fails validation."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
