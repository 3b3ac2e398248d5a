from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Movimiento de caja.

    ``amount`` is always positive; the sign is carried by ``type``.
    """

    id: str
    date: date
    type: TransactionType
    amount: float
    category: str
    description: str
    client_id: Optional[str] = None
    appointment_id: Optional[str] = None


@dataclass(frozen=True)
class MonthlySummary:
    """Read-model: income/expense roll-up for one calendar month."""

    month_start: date
    month_end: date
    income: float
    expense: float

    @property
    def net(self) -> float:
        return self.income - self.expense


@dataclass(frozen=True)
class TrendPoint:
    label: str
    year: int
    month: int
    income: float
    expense: float
    net: float
