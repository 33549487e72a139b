"""Pydantic schemas for API request/response validation"""

import math
from pydantic import BaseModel, Field
from typing import Dict, Optional

from sales_summarizer.domain.models import AnalysisResult


def _finite(value: Optional[float]) -> Optional[float]:
    """JSON has no nan/inf; non-finite values go out as null"""
    if value is None or not math.isfinite(value):
        return None
    return value


class SummaryRequest(BaseModel):
    """Request body for POST /v1/summary"""

    raw_text: str = Field(..., description="Newline-delimited rows of date<TAB>sales<TAB>cost")


class DaySalesSchema(BaseModel):
    """Sales total for one day"""

    date: str
    sales: Optional[float]


class MonthProfitSchema(BaseModel):
    """Profit total for one month"""

    month: str
    profit: Optional[float]


class SummaryResponse(BaseModel):
    """Response for POST /v1/summary"""

    total_sales: Optional[float]
    total_cost: Optional[float]
    profit: Optional[float]
    profit_margin: Optional[float] = Field(None, description="Percentage; null when total sales is zero")
    highest_selling_day: Optional[DaySalesSchema] = None
    lowest_selling_day: Optional[DaySalesSchema] = None
    most_profitable_month: Optional[MonthProfitSchema] = None
    least_profitable_month: Optional[MonthProfitSchema] = None
    record_count: int
    formatted: Dict[str, str]

    @classmethod
    def from_result(cls, result: AnalysisResult, formatted: Dict[str, str]) -> "SummaryResponse":
        highest = result.highest_selling_day
        lowest = result.lowest_selling_day
        best = result.most_profitable_month
        worst = result.least_profitable_month

        return cls(
            total_sales=_finite(result.total_sales),
            total_cost=_finite(result.total_cost),
            profit=_finite(result.profit),
            profit_margin=_finite(result.profit_margin),
            highest_selling_day=DaySalesSchema(date=highest.date, sales=_finite(highest.sales)) if highest else None,
            lowest_selling_day=DaySalesSchema(date=lowest.date, sales=_finite(lowest.sales)) if lowest else None,
            most_profitable_month=MonthProfitSchema(month=best.month, profit=_finite(best.profit)) if best else None,
            least_profitable_month=MonthProfitSchema(month=worst.month, profit=_finite(worst.profit)) if worst else None,
            record_count=result.record_count,
            formatted=formatted,
        )


class ExampleResponse(BaseModel):
    """Response for GET /v1/summary/example"""

    raw_text: str
