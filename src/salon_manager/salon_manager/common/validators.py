from __future__ import annotations

import math
import re
from typing import Any

from ..core.exceptions import ValidationError

_HHMM = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d$")


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} es obligatorio")
    return str(value).strip()


def require_number(value: Any, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} debe ser numérico") from e
    if math.isnan(number):
        raise ValidationError(f"{field_name} debe ser numérico")
    return number


def require_positive_number(value: Any, field_name: str) -> float:
    number = require_number(value, field_name)
    if number <= 0:
        raise ValidationError(f"{field_name} debe ser mayor que 0")
    return number


def require_non_negative_int(value: Any, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} debe ser un número entero") from e
    if number < 0:
        raise ValidationError(f"{field_name} no puede ser negativo")
    return number


def require_time_hhmm(value: Any, field_name: str) -> str:
    """Zero-padded 24h ``HH:MM``; agenda views sort times as plain strings."""
    text = require_non_empty(value, field_name)
    if not _HHMM.match(text):
        raise ValidationError(f"{field_name} debe tener el formato HH:MM")
    return text
