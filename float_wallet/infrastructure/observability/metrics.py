"""Prometheus metrics for recommendations, ledger activity and wallet utilization"""

from prometheus_client import Counter, Histogram, Gauge

# Recommendation metrics
recommendation_counter = Counter(
    "float_wallet_recommendation_total",
    "Card recommendations served",
    ["outcome"],  # recommended | empty_wallet
)

days_until_due_histogram = Histogram(
    "float_wallet_days_until_due",
    "Interest-free days of the recommended card",
    buckets=[0, 10, 20, 30, 40, 50, 60],
)

# Ledger metrics
transactions_applied_counter = Counter(
    "float_wallet_transactions_applied_total",
    "Transactions charged to a card",
    ["category"],
)

rejected_mutations_counter = Counter(
    "float_wallet_rejected_mutations_total",
    "Wallet mutations rejected by domain validation",
    ["reason"],  # orphan_reference | invalid_transaction | invalid_card | card_not_found | duplicate_card
)

# Wallet state
utilization_gauge = Gauge(
    "float_wallet_utilization_pct",
    "Wallet-wide credit utilization at last summary",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_recommendation(days_until_due: int | None) -> None:
    """Record a recommendation outcome and, when a card was picked, its float"""
    if days_until_due is None:
        recommendation_counter.labels(outcome="empty_wallet").inc()
        return

    recommendation_counter.labels(outcome="recommended").inc()
    days_until_due_histogram.observe(days_until_due)
