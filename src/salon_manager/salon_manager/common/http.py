from __future__ import annotations

import dataclasses
from datetime import date
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from flask import jsonify, request

from .datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from ..persistence.codec import decode_fields, encode_value, to_camel

E = TypeVar("E", bound=Enum)


def json_payload() -> dict[str, Any]:
    """Request body as a dict; anything else is a 400."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Se esperaba un objeto JSON")
    return data


def to_json(value: Any) -> Any:
    """Encode records and read-models with the persisted (camelCase) shape.

    Read-models also expose their computed properties (``MonthlySummary.net``).
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        out: dict[str, Any] = {}
        for f in dataclasses.fields(value):
            item = getattr(value, f.name)
            if item is not None:
                out[to_camel(f.name)] = to_json(item)
        for name, attr in vars(type(value)).items():
            if isinstance(attr, property):
                out[to_camel(name)] = to_json(getattr(value, name))
        return out
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    return encode_value(value)


def respond(value: Any, status: int = 200):
    return jsonify(to_json(value)), status


def record_fields(model: type, payload: dict[str, Any]) -> dict[str, Any]:
    """Decode a create/update body; ids are assigned by the store, never by clients."""
    if "id" in payload:
        raise ValidationError("El id de un registro no se puede asignar ni modificar")
    return decode_fields(model, payload)


def query_date(name: str) -> Optional[date]:
    raw = request.args.get(name)
    if not raw:
        return None
    try:
        return parse_iso_date(raw)
    except ValueError as e:
        raise ValidationError(f"Fecha inválida: {raw}") from e


def query_enum(enum_cls: Type[E], name: str) -> Optional[E]:
    raw = request.args.get(name)
    if not raw:
        return None
    try:
        return enum_cls(raw)
    except ValueError as e:
        raise ValidationError(f"Valor inválido para {name}: {raw}") from e
