"""Display formatting for summary values"""

import math
from typing import Dict, Optional

from sales_summarizer.domain.models import AnalysisResult

NOT_APPLICABLE = "N/A"


def format_amount(value: Optional[float]) -> str:
    """Two decimal places with thousands grouping, e.g. 1234.5 -> "1,234.50" """
    if value is None or not math.isfinite(value):
        return NOT_APPLICABLE
    return f"{value:,.2f}"


def format_percent(value: Optional[float]) -> str:
    """Percentage with two decimal places, e.g. 71.2121 -> "71.21%" """
    formatted = format_amount(value)
    return formatted if formatted == NOT_APPLICABLE else f"{formatted}%"


def format_result(result: AnalysisResult) -> Dict[str, str]:
    """Render every numeric field of a result as a display string"""
    highest = result.highest_selling_day
    lowest = result.lowest_selling_day
    best = result.most_profitable_month
    worst = result.least_profitable_month

    return {
        "total_sales": format_amount(result.total_sales),
        "total_cost": format_amount(result.total_cost),
        "profit": format_amount(result.profit),
        "profit_margin": format_percent(result.profit_margin),
        "highest_selling_day": format_amount(highest.sales if highest else None),
        "lowest_selling_day": format_amount(lowest.sales if lowest else None),
        "most_profitable_month": format_amount(best.profit if best else None),
        "least_profitable_month": format_amount(worst.profit if worst else None),
        "record_count": f"{result.record_count:,}",
    }
