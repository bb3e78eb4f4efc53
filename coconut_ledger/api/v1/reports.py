"""GET /v1/reports/table and /v1/reports/dashboard - computed ledger views"""

import time
import logging
from datetime import date
from typing import List, Optional, Tuple
from fastapi import APIRouter, Depends, Query, Request

from coconut_ledger.api.v1.schemas import (
    DashboardReport,
    MonthlyBucketSchema,
    PricePointSchema,
    RecordRow,
    SummarySchema,
    TableQuery,
    TableReport,
)
from coconut_ledger.api.dependencies import get_record_store_client, get_request_id
from coconut_ledger.config import settings
from coconut_ledger.infrastructure.clients.record_store import RecordStoreClient
from coconut_ledger.domain.models import FilterMode, Record, SortConfig, SortDirection, Summary
from coconut_ledger.domain.table import TableState
from coconut_ledger.domain.filtering import filter_by_period, filter_records
from coconut_ledger.domain.sorting import sort_records
from coconut_ledger.domain.pagination import clamp_page, paginate, total_pages_for
from coconut_ledger.domain.aggregation import aggregate_by_month, available_years, price_trend
from coconut_ledger.domain.summary import summarize
from coconut_ledger.domain.exceptions import RecordStoreError
from coconut_ledger.infrastructure.observability.metrics import record_report, record_store_fetch_failures_counter
from coconut_ledger.infrastructure.observability.logging import log_report

router = APIRouter()


async def _load_records(client: RecordStoreClient, request_id: str) -> Tuple[List[Record], bool]:
    """Fetch the record set; a failed fetch degrades to an empty report instead of an error"""
    try:
        return await client.fetch_records(), True
    except RecordStoreError as e:
        record_store_fetch_failures_counter.inc()
        logging.error(f"Record store error: {e}", extra={"request_id": request_id})
        return [], False


def _summary_schema(summary: Summary) -> SummarySchema:
    return SummarySchema(
        total_revenue=summary.total_revenue,
        total_profit=summary.total_profit,
        total_qty=summary.total_qty,
        total_cost=summary.total_cost,
    )


@router.get("/reports/table", response_model=TableReport)
async def get_table_report(
    request: Request,
    mode: FilterMode = Query(FilterMode.ALL, description="Time window: all, day, month or year"),
    reference_date: Optional[date] = Query(None, alias="date", description="Day the window is anchored on (default today)"),
    sort_key: str = Query("date", description="date, quantity, purchasePrice, sellPrice, totalCost, totalRevenue or profit"),
    direction: SortDirection = Query(SortDirection.DESC),
    page: int = Query(1, description="1-based page, clamped into range"),
    page_size: Optional[int] = Query(None, ge=1, le=settings.max_page_size),
    client: RecordStoreClient = Depends(get_record_store_client),
):
    """
    Filtered, sorted, paginated line items with derived metrics.

    Flow:
    1. Fetch the full record set from the record store
    2. Filter to the requested time window
    3. Sort (stable) by the requested key
    4. Clamp the page into range and slice it
    5. Summarize the whole filtered set, not just the page
    """
    start_time = time.time()
    request_id = get_request_id(request)
    size = page_size or settings.default_page_size

    state = TableState(
        mode=mode,
        reference_date=reference_date or date.today(),
        sort=SortConfig(key=sort_key, direction=direction),
        page_number=page,
    )

    records, available = await _load_records(client, request_id)

    filtered = filter_records(records, state.mode, state.reference_date)
    ordered = sort_records(filtered, state.sort.key, state.sort.direction)
    state = state.with_page(clamp_page(state.page_number, total_pages_for(len(ordered), size)))
    result = paginate(ordered, size, state.page_number)
    summary = summarize(filtered)

    rows = [
        RecordRow(
            id=r.id,
            date=r.date,
            purchase_price=r.purchase_price,
            sold_quantity=r.sold_quantity,
            sell_price=r.sell_price,
            total_cost=r.total_cost,
            total_revenue=r.total_revenue,
            profit=r.profit,
        )
        for r in result.items
    ]

    duration_ms = (time.time() - start_time) * 1000
    record_report("table", available)
    log_report(request_id, "table", available, len(filtered), duration_ms)

    return TableReport(
        available=available,
        query=TableQuery(
            mode=state.mode,
            date=state.reference_date,
            sort_key=state.sort.key,
            direction=state.sort.direction,
            page=result.page_number,
            page_size=size,
        ),
        rows=rows,
        summary=_summary_schema(summary),
        total_pages=result.total_pages,
        total_items=result.total_items,
    )


@router.get("/reports/dashboard", response_model=DashboardReport)
async def get_dashboard_report(
    request: Request,
    year: Optional[int] = Query(None, description="Calendar year, omit for all years"),
    month: Optional[int] = Query(None, ge=1, le=12, description="Calendar month 1-12, omit for all months"),
    client: RecordStoreClient = Depends(get_record_store_client),
):
    """
    Monthly buckets, KPI totals and price trend for the selected period.

    The year list is built from the unfiltered record set so the period
    selector always offers every year with data.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    records, available = await _load_records(client, request_id)
    filtered = filter_by_period(records, year=year, month=month)

    monthly = [
        MonthlyBucketSchema(
            year=b.year,
            month=b.month,
            label=b.label,
            total_qty=b.total_qty,
            total_cost=b.total_cost,
            total_revenue=b.total_revenue,
            net_profit=b.net_profit,
        )
        for b in aggregate_by_month(filtered)
    ]
    trend = [
        PricePointSchema(
            date=p.date,
            purchase_price=p.purchase_price,
            sell_price=p.sell_price,
            profit_per_unit=p.profit_per_unit,
        )
        for p in price_trend(filtered)
    ]

    duration_ms = (time.time() - start_time) * 1000
    record_report("dashboard", available)
    log_report(request_id, "dashboard", available, len(filtered), duration_ms)

    return DashboardReport(
        available=available,
        year=year,
        month=month,
        available_years=available_years(records),
        summary=_summary_schema(summarize(filtered)),
        monthly=monthly,
        price_trend=trend,
    )
