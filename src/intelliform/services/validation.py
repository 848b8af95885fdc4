"""Field answer validation and normalization."""

import re

from intelliform.domain.forms import FieldDefinition, FieldType
from intelliform.domain.validation import ValidationResult

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_MOBILE_RE = re.compile(r"[6-9]\d{9}", re.ASCII)
_DATE_RE = re.compile(r"\d{2}/\d{2}/\d{4}", re.ASCII)
_NON_DIGIT_RE = re.compile(r"\D", re.ASCII)


def validate(field: FieldDefinition, raw_input: str) -> ValidationResult:
    """Check a raw answer against a field and return the normalized value.

    Pure and idempotent: re-validating an accepted normalized value accepts it
    again with the same value.
    """
    trimmed = raw_input.strip()
    if not field.required and not trimmed:
        return ValidationResult.accept("")

    if field.type is FieldType.EMAIL:
        if _EMAIL_RE.fullmatch(trimmed):
            return ValidationResult.accept(trimmed)
        return ValidationResult.reject("not a valid email address")

    if field.type is FieldType.PHONE:
        digits = _NON_DIGIT_RE.sub("", raw_input)
        if _MOBILE_RE.fullmatch(digits):
            return ValidationResult.accept(digits)
        return ValidationResult.reject("not a valid 10-digit mobile number")

    if field.type is FieldType.DATE:
        if _DATE_RE.fullmatch(trimmed):
            return ValidationResult.accept(trimmed)
        return ValidationResult.reject("expected date in DD/MM/YYYY format")

    if field.type is FieldType.CHOICE:
        if _matches_option(trimmed, field.options):
            return ValidationResult.accept(raw_input)
        return ValidationResult.reject(f"must be one of: {', '.join(field.options)}")

    if trimmed:
        return ValidationResult.accept(trimmed)
    return ValidationResult.reject("this field is required")


def _matches_option(answer: str, options: tuple[str, ...]) -> bool:
    """Loose, case-insensitive match in either containment direction."""
    if not answer:
        return False
    lowered = answer.lower()
    for option in options:
        candidate = option.lower()
        if lowered == candidate or lowered in candidate or candidate in lowered:
            return True
    return False
