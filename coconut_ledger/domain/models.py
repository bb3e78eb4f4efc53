"""Domain models - pure Python dataclasses representing ledger entities"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List


class FilterMode(str, Enum):
    """Time window applied before display or aggregation"""

    ALL = "all"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Record:
    """One ledger entry as read back from the record store"""

    id: str
    date: date
    purchase_price: float
    sold_quantity: int
    sell_price: float

    @property
    def total_cost(self) -> float:
        return self.sold_quantity * self.purchase_price

    @property
    def total_revenue(self) -> float:
        return self.sold_quantity * self.sell_price

    @property
    def profit(self) -> float:
        return self.total_revenue - self.total_cost

    @property
    def profit_per_unit(self) -> float:
        return self.sell_price - self.purchase_price


@dataclass
class MonthlyBucket:
    """Monthly rollup built per request for the dashboard charts"""

    year: int
    month: int  # 1-12
    label: str
    month_start: date
    total_qty: int = 0
    total_cost: float = 0.0
    total_revenue: float = 0.0
    net_profit: float = 0.0


@dataclass
class Summary:
    """KPI totals over a filtered record set"""

    total_revenue: float = 0.0
    total_profit: float = 0.0
    total_qty: int = 0
    total_cost: float = 0.0


@dataclass
class PricePoint:
    """Single point of the purchase/sell price trend"""

    date: date
    purchase_price: float
    sell_price: float
    profit_per_unit: float


@dataclass
class Page:
    """One slice of a sorted, filtered record sequence"""

    items: List[Record]
    page_number: int
    total_pages: int
    total_items: int


@dataclass(frozen=True)
class SortConfig:
    key: str = "date"
    direction: SortDirection = SortDirection.DESC
