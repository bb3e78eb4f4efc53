"""Aggregation engine - monthly rollups and chart series for the dashboard"""

from typing import Callable, Dict, List, Tuple

from coconut_ledger.domain.models import MonthlyBucket, PricePoint, Record
from coconut_ledger.utils.date_utils import format_month_label, month_start


def aggregate_by_month(
    records: List[Record],
    label_for: Callable[[int, int], str] = format_month_label,
) -> List[MonthlyBucket]:
    """
    Group records into calendar-month buckets.

    Requirements:
    - Bucket key is (year, month) with 1-based months
    - Net profit accumulates revenue - cost per record, not from bucket totals
    - Output ascending by month start regardless of input order
    - Only months that have records are emitted

    Example:
        Jan 5 (10 -> 15, qty 100) + Jan 20 (12 -> 16, qty 50)
        -> Jan 2024 {qty 150, cost 1600, revenue 2300, profit 700}
    """
    buckets: Dict[Tuple[int, int], MonthlyBucket] = {}

    for record in records:
        key = (record.date.year, record.date.month)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = MonthlyBucket(
                year=key[0],
                month=key[1],
                label=label_for(key[0], key[1]),
                month_start=month_start(record.date),
            )
            buckets[key] = bucket

        cost = record.total_cost
        revenue = record.total_revenue
        bucket.total_qty += record.sold_quantity
        bucket.total_cost += cost
        bucket.total_revenue += revenue
        bucket.net_profit += revenue - cost

    return sorted(buckets.values(), key=lambda b: b.month_start)


def price_trend(records: List[Record]) -> List[PricePoint]:
    """Purchase/sell price per record, oldest first (same-day records keep input order)"""
    return [
        PricePoint(
            date=r.date,
            purchase_price=r.purchase_price,
            sell_price=r.sell_price,
            profit_per_unit=r.profit_per_unit,
        )
        for r in sorted(records, key=lambda r: r.date)
    ]


def available_years(records: List[Record]) -> List[int]:
    """Distinct years that have data, newest first"""
    return sorted({r.date.year for r in records}, reverse=True)
