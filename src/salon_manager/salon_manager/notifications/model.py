from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import NotificationType


@dataclass(frozen=True)
class Notification:
    """Aviso del sistema; only its ``read`` flag is ever mutated."""

    id: str
    type: NotificationType
    title: str
    message: str
    date: datetime
    read: bool = False
