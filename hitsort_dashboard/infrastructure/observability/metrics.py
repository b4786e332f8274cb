"""Prometheus metrics for record store health, form submissions and dashboard totals"""

from prometheus_client import Counter, Histogram, Gauge

from hitsort_dashboard.domain.models import Dashboard

# Record store metrics
record_store_latency_histogram = Histogram(
    "record_store_latency_seconds",
    "Record store response time",
    ["operation"],  # get_cards | get_expenditures | update_card | update_expenditure
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

record_store_failures_counter = Counter(
    "record_store_failures_total",
    "Failed record store calls",
    ["operation"],
)

# Form metrics
form_submission_counter = Counter(
    "hitsort_form_submissions_total",
    "Card and expenditure form submissions",
    ["form", "outcome"],  # card | expenditure | settlement, accepted | failed
)

# Dashboard totals as of the last build
sold_cards_gauge = Gauge(
    "hitsort_sold_cards",
    "Cards sold in the last fetched snapshot",
)

total_revenue_gauge = Gauge(
    "hitsort_total_revenue_rupees",
    "Total card revenue in the last fetched snapshot",
)

outstanding_balance_gauge = Gauge(
    "hitsort_outstanding_balance_rupees",
    "Revenue not yet submitted back by sellers",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_dashboard(dashboard: Dashboard) -> None:
    """Publish headline totals of a freshly built dashboard"""
    sold_cards_gauge.set(dashboard.stats.sold_cards)
    total_revenue_gauge.set(dashboard.stats.total_revenue)
    outstanding_balance_gauge.set(sum(row.balance for row in dashboard.sellers))


def record_form_submission(form: str, accepted: bool) -> None:
    outcome = "accepted" if accepted else "failed"
    form_submission_counter.labels(form=form, outcome=outcome).inc()
