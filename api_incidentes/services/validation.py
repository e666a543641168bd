"""Field validation helpers shared by the entity services.

Every helper raises :class:`~.errors.ValidationError` with a message that
is returned to the client as-is, so messages stay in Spanish like the rest
of the public API.
"""

from __future__ import annotations

from typing import Any, Optional

from .errors import ValidationError

# Largest house number: five decimal digits.
MAX_HOUSE_NUMBER = 99999


def require_text(value: Optional[str], max_length: int, required_message: str, too_long_message: str) -> str:
    """Check a mandatory string field.

    ``None``, empty and whitespace-only values are rejected with
    ``required_message``; values longer than ``max_length`` with
    ``too_long_message``.
    """
    if value is None or not str(value).strip():
        raise ValidationError(required_message)
    limit_text(value, max_length, too_long_message)
    return value


def limit_text(value: Optional[str], max_length: int, too_long_message: str) -> Optional[str]:
    """Check an optional string field: ``None`` passes, longer than ``max_length`` fails."""
    if value is not None and len(value) > max_length:
        raise ValidationError(too_long_message)
    return value


def require_house_number(value: Any) -> int:
    """House numbers must be positive integers of at most five digits."""
    if value is None or isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError("La numeración debe ser un número positivo")
    if value > MAX_HOUSE_NUMBER:
        raise ValidationError("El valor de la Numeración excede máximo de caracteres (5)")
    return value


# Primary keys are signed 64-bit integers.
MAX_ROW_ID = 2**63 - 1


def is_row_id(value: Any) -> bool:
    """True when ``value`` can be a primary key; larger ids cannot exist."""
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= MAX_ROW_ID
