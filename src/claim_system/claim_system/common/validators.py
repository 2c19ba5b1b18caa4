from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from ..core.exceptions import ValidationError

Number = Union[Decimal, int, float, str]


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required", field=field_name)
    return value.strip()


def require_max_length(value: Optional[str], field_name: str, max_len: int) -> Optional[str]:
    """Strip the value and fail if it is longer than max_len; blank becomes None."""
    text = (value or "").strip()
    if len(text) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters", field=field_name)
    return text or None


def parse_decimal(value: Optional[Number], field_name: str) -> Decimal:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required", field=field_name)
    try:
        # str() first so floats keep their printed value instead of binary noise
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number", field=field_name)
    if not result.is_finite():
        raise ValidationError(f"{field_name} must be a number", field=field_name)
    return result


def require_in_range(
    value: Optional[Number],
    field_name: str,
    minimum: Decimal,
    maximum: Decimal,
    *,
    quantum: Optional[Decimal] = None,
) -> Decimal:
    """Parse and range-check; with quantum, round half-up first so the check sees the stored value."""
    number = parse_decimal(value, field_name)
    if quantum is not None:
        number = number.quantize(quantum, rounding=ROUND_HALF_UP)
    if number < minimum or number > maximum:
        raise ValidationError(f"{field_name} must be between {minimum} and {maximum}", field=field_name)
    return number
