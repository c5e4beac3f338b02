"""Custom exceptions for tunnel update handling."""

from typing import Any, NamedTuple


class Violation(NamedTuple):
    """A single field-level validation failure."""

    field: str
    message: str


class TunnelUpdateError(Exception):
    """Base exception for all tunnel update errors."""

    pass


class ValidationError(TunnelUpdateError):
    """Raised when an update request fails validation.

    Carries every violation found, never just the first one.
    """

    def __init__(self, violations: list[Violation]) -> None:
        if not violations:
            raise ValueError("ValidationError requires at least one violation")
        self.violations = list(violations)
        super().__init__(
            "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        )

    @property
    def fields(self) -> list[str]:
        """Names of the offending fields, in report order."""
        return [v.field for v in self.violations]

    def to_dict(self) -> dict[str, Any]:
        """Structured error body for the caller.

        Returns:
            Dictionary with a summary message and the violation list
        """
        return {
            "message": "tunnel update request is invalid",
            "violations": [v._asdict() for v in self.violations],
        }


class ConfigurationError(TunnelUpdateError):
    """Raised when validator configuration is invalid."""

    pass


class TunnelMismatchError(TunnelUpdateError):
    """Raised when a request is applied to a record of another tunnel."""

    pass
