"""Shared parsing helpers for configuration value normalization."""

from __future__ import annotations


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_non_negative_int(value: object, field_name: str) -> int:
    """Parse a non-negative integer from an int or a numeric text token.

    Args:
        value: Integer or text value to parse.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the value is not a whole number or is negative.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a non-negative integer.")
    if isinstance(value, int):
        parsed = value
    else:
        normalized = normalize_optional_string(value)
        if normalized is None or not normalized.isdigit():
            raise ValueError(f"`{field_name}` must be a non-negative integer.")
        parsed = int(normalized)

    if parsed < 0:
        raise ValueError(f"`{field_name}` must be a non-negative integer.")
    return parsed
