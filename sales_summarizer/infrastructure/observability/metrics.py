"""Prometheus metrics for monitoring summary outcomes and input sizes"""

from prometheus_client import Counter, Histogram

# Summary metrics
summary_counter = Counter(
    "sales_summary_total",
    "Total summary requests processed",
    ["outcome"],  # ok | empty_input | malformed_line | invalid_number | too_large | error
)

summary_records_histogram = Histogram(
    "sales_summary_records",
    "Parsed records per successful summary",
    buckets=[1, 5, 10, 50, 100, 500, 1000, 5000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_summary(outcome: str, record_count: int = 0) -> None:
    """Record summary outcome and, for successful runs, the record count"""
    summary_counter.labels(outcome=outcome).inc()
    if outcome == "ok":
        summary_records_histogram.observe(record_count)
