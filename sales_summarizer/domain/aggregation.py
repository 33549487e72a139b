"""Per-day and per-month accumulation of parsed records"""

from typing import Dict, Iterable

from sales_summarizer.domain.models import PeriodTotals, Record

MONTH_KEY_LENGTH = 7  # "YYYY-MM"


def month_key(day: str) -> str:
    """Month bucket for a day key; shorter keys are used whole"""
    return day[:MONTH_KEY_LENGTH]


def _add(totals: Dict[str, float], key: str, amount: float) -> None:
    totals[key] = totals.get(key, 0.0) + amount


def aggregate_records(records: Iterable[Record]) -> PeriodTotals:
    """
    Accumulate running totals plus sales and profit by day and by month.

    Repeated keys sum every contribution; nothing is overwritten.
    """
    total_sales = 0.0
    total_cost = 0.0
    record_count = 0
    day_sales: Dict[str, float] = {}
    day_profit: Dict[str, float] = {}
    month_sales: Dict[str, float] = {}
    month_profit: Dict[str, float] = {}

    for record in records:
        total_sales += record.sales
        total_cost += record.cost
        record_count += 1

        month = month_key(record.date)
        _add(day_sales, record.date, record.sales)
        _add(day_profit, record.date, record.profit)
        _add(month_sales, month, record.sales)
        _add(month_profit, month, record.profit)

    return PeriodTotals(
        total_sales=total_sales,
        total_cost=total_cost,
        record_count=record_count,
        day_sales=day_sales,
        day_profit=day_profit,
        month_sales=month_sales,
        month_profit=month_profit,
    )
