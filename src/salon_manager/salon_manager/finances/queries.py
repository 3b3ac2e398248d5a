from __future__ import annotations

from typing import Iterable, Optional

from ..common.datetime_utils import DateLike, month_bounds, shift_months, to_date
from ..core.constants import MONTH_ABBREVIATIONS, TREND_MONTHS
from ..core.enums import TransactionType
from .model import MonthlySummary, Transaction, TrendPoint


def month_label(value: DateLike) -> str:
    return MONTH_ABBREVIATIONS[to_date(value).month - 1]


def transactions_in_month(transactions: Iterable[Transaction], month: DateLike) -> list[Transaction]:
    """Transactions dated within [first day, last day] of ``month``, inclusive."""
    start, end = month_bounds(month)
    return [t for t in transactions if start <= t.date <= end]


def total_by_type(transactions: Iterable[Transaction], tx_type: TransactionType) -> float:
    return sum((t.amount for t in transactions if t.type == tx_type), 0)


def monthly_summary(transactions: Iterable[Transaction], month: DateLike) -> MonthlySummary:
    start, end = month_bounds(month)
    rows = transactions_in_month(transactions, month)
    return MonthlySummary(
        month_start=start,
        month_end=end,
        income=total_by_type(rows, TransactionType.INCOME),
        expense=total_by_type(rows, TransactionType.EXPENSE),
    )


def monthly_trend(transactions: Iterable[Transaction], today: DateLike, *, months: int = TREND_MONTHS) -> list[TrendPoint]:
    """Monthly summaries for the ``months`` months ending at ``today``'s month, oldest first."""
    snapshot = list(transactions)
    points: list[TrendPoint] = []
    for offset in range(months - 1, -1, -1):
        month = shift_months(today, -offset)
        summary = monthly_summary(snapshot, month)
        points.append(
            TrendPoint(
                label=month_label(month),
                year=month.year,
                month=month.month,
                income=summary.income,
                expense=summary.expense,
                net=summary.net,
            )
        )
    return points


def category_breakdown(transactions: Iterable[Transaction]) -> dict[str, float]:
    """Sum of ``amount`` per category over the given subset."""
    totals: dict[str, float] = {}
    for t in transactions:
        totals[t.category] = totals.get(t.category, 0) + t.amount
    return totals


def month_breakdown(
    transactions: Iterable[Transaction],
    month: DateLike,
    *,
    tx_type: Optional[TransactionType] = TransactionType.EXPENSE,
) -> dict[str, float]:
    rows = transactions_in_month(transactions, month)
    if tx_type is not None:
        rows = [t for t in rows if t.type == tx_type]
    return category_breakdown(rows)


def newest_first(transactions: Iterable[Transaction]) -> list[Transaction]:
    return sorted(transactions, key=lambda t: t.date, reverse=True)
