"""Summary engine - KPI totals for the table and dashboard"""

from typing import List

from coconut_ledger.domain.models import Record, Summary


def summarize(records: List[Record]) -> Summary:
    """
    Reduce a filtered record set to revenue, profit, quantity and cost totals.

    Empty input yields an all-zero Summary.
    """
    summary = Summary()
    for record in records:
        cost = record.total_cost
        revenue = record.total_revenue
        summary.total_revenue += revenue
        summary.total_cost += cost
        summary.total_profit += revenue - cost
        summary.total_qty += record.sold_quantity
    return summary
