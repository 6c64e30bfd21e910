"""Unit tests for usage aggregation"""

from float_wallet.domain.models import Card
from float_wallet.domain.usage import aggregate_usage, card_utilization_pct, usage_breakdown, utilization_pct


def test_aggregate_usage_empty_wallet():
    summary = aggregate_usage([])

    assert summary.total_usage_cents == 0
    assert summary.total_limit_cents == 0
    assert summary.utilization_pct == 0
    assert summary.remaining_limit_cents == 0


def test_aggregate_usage_sums_exactly(wallet_cards):
    summary = aggregate_usage(wallet_cards)

    assert summary.total_usage_cents == sum(c.current_usage_cents for c in wallet_cards)
    assert summary.total_usage_cents == 12_800_000
    assert summary.total_limit_cents == 43_000_000
    assert summary.remaining_limit_cents == 30_200_000


def test_aggregate_usage_utilization_two_decimals(wallet_cards):
    """128000 / 430000 = 29.7674... -> 29.77"""
    assert aggregate_usage(wallet_cards).utilization_pct == 29.77


def test_utilization_zero_limit_guard():
    assert utilization_pct(5_000, 0) == 0.0


def test_over_limit_wallet():
    """Usage past the limit is reported as-is, remaining limit floors at zero"""
    card = Card(
        id="maxed",
        bank_name="Over Bank",
        card_name="Maxed",
        last_four_digits="9999",
        credit_limit_cents=1_000,
        current_usage_cents=1_500,
        statement_date=1,
        due_date=20,
    )
    summary = aggregate_usage([card])

    assert summary.utilization_pct == 150.0
    assert summary.remaining_limit_cents == 0
    assert card_utilization_pct(card) == 150.0


def test_usage_breakdown_rows(wallet_cards):
    rows = usage_breakdown(wallet_cards)

    assert [r.label for r in rows] == ["Apex", "Meridian", "Nexus"]
    assert [r.card_id for r in rows] == ["obsidian", "solaris", "quantum"]
    assert [r.utilization_pct for r in rows] == [27.5, 40.67, 22.5]
    assert rows[0].usage_cents == 2_200_000
    assert rows[0].limit_cents == 8_000_000
