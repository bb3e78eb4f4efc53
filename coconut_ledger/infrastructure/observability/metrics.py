"""Prometheus metrics for monitoring ledger writes, report traffic and record store health"""

from prometheus_client import Counter, Histogram

# Write metrics
records_created_counter = Counter(
    "coconut_ledger_records_created_total",
    "Ledger records created",
)

# Report metrics
report_counter = Counter(
    "coconut_ledger_reports_total",
    "Reports served",
    ["report", "outcome"],  # table | dashboard, ok | empty_state
)

# Record store metrics
record_store_fetch_failures_counter = Counter(
    "record_store_fetch_failures_total",
    "Failed record store API calls",
)

malformed_records_counter = Counter(
    "malformed_records_total",
    "Stored records skipped because they could not be parsed",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_report(report: str, available: bool) -> None:
    """Count a served report, split by whether it fell back to the empty state"""
    outcome = "ok" if available else "empty_state"
    report_counter.labels(report=report, outcome=outcome).inc()
