"""Domain models - pure Python dataclasses representing sales summary entities"""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class Record:
    """One parsed line of pasted sales data"""

    date: str  # day key, used verbatim (expected "YYYY-MM-DD")
    sales: float
    cost: float
    line_number: int = 0

    @property
    def profit(self) -> float:
        return self.sales - self.cost


@dataclass(frozen=True)
class PeriodTotals:
    """Running totals plus per-day and per-month accumulated totals"""

    total_sales: float = 0.0
    total_cost: float = 0.0
    record_count: int = 0
    day_sales: Dict[str, float] = field(default_factory=dict)
    day_profit: Dict[str, float] = field(default_factory=dict)
    month_sales: Dict[str, float] = field(default_factory=dict)
    month_profit: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class DaySales:
    """Sales total for a single day"""

    date: str
    sales: float


@dataclass(frozen=True)
class MonthProfit:
    """Profit total for a single month"""

    month: str
    profit: float


@dataclass(frozen=True)
class AnalysisResult:
    """Output of a summary run. None marks a statistic that does not apply."""

    total_sales: float
    total_cost: float
    profit: float
    profit_margin: Optional[float]
    highest_selling_day: Optional[DaySales]
    lowest_selling_day: Optional[DaySales]
    most_profitable_month: Optional[MonthProfit]
    least_profitable_month: Optional[MonthProfit]
    record_count: int
