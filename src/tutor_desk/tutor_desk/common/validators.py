from __future__ import annotations

from typing import Optional

from ..core.exceptions import ParseError, ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_number(value, field_name: str) -> float:
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        raise ParseError(f"{field_name} must be a number") from None
    if number != number or number in (float("inf"), float("-inf")):
        raise ParseError(f"{field_name} must be a number")
    return number


def parse_amount(value, field_name: str = "Amount") -> float:
    """Parse a strictly positive money amount from form input."""

    number = _parse_number(value, field_name)
    if number <= 0:
        raise ValidationError(f"Invalid {field_name.lower()}")
    return round(number, 2)


def parse_optional_rate(value, field_name: str = "Hourly rate") -> Optional[float]:
    """Blank clears the rate; anything else must be a non-negative number."""

    if value is None or not str(value).strip():
        return None
    number = _parse_number(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return round(number, 2)


def parse_rate(value, field_name: str = "Hourly rate") -> float:
    """Blank counts as 0, matching the invoice form."""

    rate = parse_optional_rate(value, field_name)
    return rate if rate is not None else 0.0
