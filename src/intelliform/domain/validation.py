"""Result type for field validation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking a raw answer against a field definition."""

    accepted: bool
    normalized_value: str | None = None
    reason: str | None = None

    @classmethod
    def accept(cls, value: str) -> "ValidationResult":
        return cls(accepted=True, normalized_value=value)

    @classmethod
    def reject(cls, reason: str) -> "ValidationResult":
        return cls(accepted=False, reason=reason)
