from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Service:
    """Servicio del catálogo. Services are toggled inactive, never deleted."""

    id: str
    name: str
    category: str
    price: float
    duration: int
    description: str = ""
    is_active: bool = True
