from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import DateLike, to_date, today_local
from ..core.enums import TransactionType
from ..store.record_store import RecordStore
from . import queries
from .model import MonthlySummary, Transaction, TrendPoint

logger = logging.getLogger(__name__)


class FinanceService:
    """Use case: cash movements and monthly reporting."""

    def __init__(self, store: RecordStore):
        self._transactions = store.transactions

    def list_transactions(self, *, month: Optional[DateLike] = None) -> list[Transaction]:
        rows = self._transactions.all()
        if month is not None:
            rows = queries.transactions_in_month(rows, month)
        return queries.newest_first(rows)

    def add_transaction(
        self,
        *,
        date: DateLike,
        type: TransactionType,
        amount: float,
        category: str,
        description: str,
        client_id: Optional[str] = None,
        appointment_id: Optional[str] = None,
    ) -> Transaction:
        tx = self._transactions.add(
            date=to_date(date),
            type=TransactionType(type),
            amount=amount,
            category=category,
            description=description,
            client_id=client_id,
            appointment_id=appointment_id,
        )
        logger.info("Transaction %s recorded: %s %s (%s)", tx.id, tx.type.value, tx.amount, tx.category)
        return tx

    def monthly_summary(self, month: Optional[DateLike] = None) -> MonthlySummary:
        return queries.monthly_summary(self._transactions.all(), month or today_local())

    def trend(self, *, today: Optional[date] = None) -> list[TrendPoint]:
        return queries.monthly_trend(self._transactions.all(), today or today_local())

    def category_breakdown(
        self,
        month: Optional[DateLike] = None,
        *,
        tx_type: Optional[TransactionType] = TransactionType.EXPENSE,
    ) -> dict[str, float]:
        return queries.month_breakdown(self._transactions.all(), month or today_local(), tx_type=tx_type)
