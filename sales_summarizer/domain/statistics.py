"""Summary statistics - core business logic for sales summaries"""

import math
import operator
from typing import Callable, Dict, Optional, Tuple

from sales_summarizer.domain.aggregation import aggregate_records
from sales_summarizer.domain.models import AnalysisResult, DaySales, MonthProfit
from sales_summarizer.domain.parsing import parse_records


def _extreme_entry(
    totals: Dict[str, float],
    better: Callable[[float, float], bool],
) -> Optional[Tuple[str, float]]:
    best: Optional[Tuple[str, float]] = None
    for key in sorted(totals):
        value = totals[key]
        if math.isnan(value):  # nan never compares as better
            continue
        if best is None or better(value, best[1]):
            best = (key, value)
    return best


def highest_entry(totals: Dict[str, float]) -> Optional[Tuple[str, float]]:
    """
    Key/value pair with the largest value.

    Keys are scanned in ascending lexical order and the first key reaching the
    maximum wins ties. Returns None when there is nothing to compare.
    """
    return _extreme_entry(totals, operator.gt)


def lowest_entry(totals: Dict[str, float]) -> Optional[Tuple[str, float]]:
    """Key/value pair with the smallest value, same tie-break as highest_entry"""
    return _extreme_entry(totals, operator.lt)


def calculate_profit_margin(profit: float, total_sales: float) -> Optional[float]:
    """Profit as a percentage of sales; None when there were no sales"""
    if total_sales == 0:
        return None
    return profit / total_sales * 100


def summarize(raw_text: str, strict_numbers: bool = False) -> AnalysisResult:
    """
    Main entry point: parse pasted sales data and derive summary statistics.

    Raises an AnalysisError subclass (EmptyInputError, MalformedLineError,
    InvalidNumberError) instead of returning a partial result. Holds no state
    between calls.
    """
    records = parse_records(raw_text, strict_numbers=strict_numbers)
    totals = aggregate_records(records)

    profit = totals.total_sales - totals.total_cost

    highest_day = highest_entry(totals.day_sales)
    lowest_day = lowest_entry(totals.day_sales)
    best_month = highest_entry(totals.month_profit)
    worst_month = lowest_entry(totals.month_profit)

    return AnalysisResult(
        total_sales=totals.total_sales,
        total_cost=totals.total_cost,
        profit=profit,
        profit_margin=calculate_profit_margin(profit, totals.total_sales),
        highest_selling_day=DaySales(*highest_day) if highest_day else None,
        lowest_selling_day=DaySales(*lowest_day) if lowest_day else None,
        most_profitable_month=MonthProfit(*best_month) if best_month else None,
        least_profitable_month=MonthProfit(*worst_month) if worst_month else None,
        record_count=totals.record_count,
    )
