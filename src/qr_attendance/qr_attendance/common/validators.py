from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str, *, max_length: Optional[int] = None) -> str:
    """Reject missing or blank values; the value itself is returned unchanged.

    Identifiers are matched exactly, so surrounding whitespace is kept.
    """
    if value is None or isinstance(value, bool) or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    text = str(value)
    check_max_length(text, field_name, max_length)
    return text


def optional_text(value: Any, field_name: str = "value", *, max_length: Optional[int] = None) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    check_max_length(text, field_name, max_length)
    return text or None


def optional_int(value: Any, field_name: str) -> Optional[int]:
    """Return None for absent/falsy input, otherwise the value as an int.

    Falsy values (None, 0, "") mean "use the default", matching how clients omit the field.
    """
    if not value:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number")
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be a whole number") from None
    if isinstance(value, float) and value != number:
        raise ValidationError(f"{field_name} must be a whole number")
    return number


def check_max_length(text: str, field_name: str, max_length: Optional[int]) -> None:
    if max_length is not None and len(text) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
