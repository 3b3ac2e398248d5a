"""Record <-> JSON codec.

Records are frozen dataclasses with snake_case attributes; the stored shape
uses camelCase field names (``minStock``, ``isActive``...).  Dates are
ISO-8601 strings, enums their tag string, and optional fields holding
``None`` are left out entirely.  Decoding is driven by the dataclass type
hints so every model shares one implementation; a ``None`` for a field
that is not ``Optional`` is rejected rather than stored.
"""

from __future__ import annotations

import dataclasses
import json
import re
from datetime import date, datetime
from enum import Enum
from functools import lru_cache
from typing import Any, Iterable, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from ..common.datetime_utils import parse_iso_datetime, to_date
from ..core.exceptions import ValidationError

T = TypeVar("T")

_SNAKE_PART = re.compile(r"_([a-z0-9])")


def to_camel(name: str) -> str:
    return _SNAKE_PART.sub(lambda m: m.group(1).upper(), name)


@lru_cache(maxsize=None)
def _type_hints(cls: type) -> dict[str, Any]:
    return get_type_hints(cls)


@lru_cache(maxsize=None)
def _field_names(cls: type) -> dict[str, str]:
    """Map accepted input keys (camelCase and snake_case) to attribute names."""
    names: dict[str, str] = {}
    for f in dataclasses.fields(cls):
        names[f.name] = f.name
        names[to_camel(f.name)] = f.name
    return names


def encode_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return encode_record(value)
    if isinstance(value, (list, tuple)):
        return [encode_value(v) for v in value]
    if isinstance(value, dict):
        return {k: encode_value(v) for k, v in value.items()}
    return value


def encode_record(record: Any) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for f in dataclasses.fields(record):
        value = getattr(record, f.name)
        if value is None:
            continue
        out[to_camel(f.name)] = encode_value(value)
    return out


def _is_optional(hint: Any) -> bool:
    return hint is Any or (get_origin(hint) is Union and type(None) in get_args(hint))


def decode_value(hint: Any, raw: Any) -> Any:
    if raw is None:
        if _is_optional(hint):
            return None
        raise TypeError("Missing value for a required field")

    origin = get_origin(hint)
    if origin is Union:
        args = [a for a in get_args(hint) if a is not type(None)]
        return decode_value(args[0], raw) if len(args) == 1 else raw

    if origin in (list, tuple):
        if not isinstance(raw, (list, tuple)):
            raise TypeError(f"Expected a list, got {raw!r}")
        args = get_args(hint)
        item_hint = args[0] if args else Any
        return [decode_value(item_hint, v) for v in raw]

    if not isinstance(hint, type):
        return raw

    if issubclass(hint, Enum):
        return hint(raw)
    if issubclass(hint, datetime):
        return raw if isinstance(raw, datetime) else parse_iso_datetime(str(raw))
    if issubclass(hint, date):
        return to_date(raw)
    if dataclasses.is_dataclass(hint):
        if not isinstance(raw, dict):
            raise TypeError(f"Expected an object for {hint.__name__}, got {raw!r}")
        return decode_record(hint, raw)
    if hint is bool:
        if not isinstance(raw, bool):
            raise TypeError(f"Expected bool, got {raw!r}")
        return raw
    if hint is int:
        if isinstance(raw, bool):
            raise TypeError(f"Expected int, got {raw!r}")
        if isinstance(raw, float):
            if not raw.is_integer():
                raise TypeError(f"Expected a whole number, got {raw!r}")
            return int(raw)
        return raw if isinstance(raw, int) else int(raw)
    if hint is float:
        return raw if isinstance(raw, (int, float)) and not isinstance(raw, bool) else float(raw)
    if hint is str:
        if not isinstance(raw, str):
            raise TypeError(f"Expected str, got {raw!r}")
        return raw
    return raw


def decode_record(cls: Type[T], data: dict[str, Any]) -> T:
    """Build a full record from its stored shape. Unknown keys are ignored."""

    hints = _type_hints(cls)
    names = _field_names(cls)
    kwargs: dict[str, Any] = {}
    for key, raw in data.items():
        name = names.get(key)
        if name is None:
            continue
        kwargs[name] = decode_value(hints[name], raw)
    return cls(**kwargs)


def decode_fields(cls: type, data: dict[str, Any]) -> dict[str, Any]:
    """Decode a partial payload into attribute-name -> value pairs.

    Used for external input, so unknown keys, nulls for required fields and
    malformed values are reported as ``ValidationError`` instead of being
    skipped or stored.
    """

    hints = _type_hints(cls)
    names = _field_names(cls)
    out: dict[str, Any] = {}
    for key, raw in data.items():
        name = names.get(key)
        if name is None:
            raise ValidationError(f"Campo desconocido: {key}")
        if raw is None and not _is_optional(hints[name]):
            raise ValidationError(f"{key} es obligatorio")
        try:
            out[name] = decode_value(hints[name], raw)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Valor inválido para {key}") from e
    return out


def dumps_records(records: Iterable[Any]) -> str:
    return json.dumps([encode_record(r) for r in records], ensure_ascii=False)


def loads_records(cls: Type[T], text: str) -> list[T]:
    payload = json.loads(text)
    if not isinstance(payload, list):
        raise ValueError(f"Expected a JSON array for {cls.__name__}, got {type(payload).__name__}")
    return [decode_record(cls, item) for item in payload]
