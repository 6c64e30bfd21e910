"""Usage aggregation across the wallet"""

from typing import List, Sequence

from float_wallet.domain.models import Card, CardUsage, UsageSummary


def utilization_pct(usage_cents: int, limit_cents: int) -> float:
    """Usage as a percentage of limit, 2 decimals; 0.0 when there is no limit"""
    if limit_cents <= 0:
        return 0.0
    return round(usage_cents / limit_cents * 100, 2)


def card_utilization_pct(card: Card) -> float:
    return utilization_pct(card.current_usage_cents, card.credit_limit_cents)


def aggregate_usage(cards: Sequence[Card]) -> UsageSummary:
    """
    Sum usage and limit over all cards and derive utilization.

    Sums are exact integers. Over-limit cards push utilization past 100.
    """
    total_usage = sum(card.current_usage_cents for card in cards)
    total_limit = sum(card.credit_limit_cents for card in cards)

    return UsageSummary(
        total_usage_cents=total_usage,
        total_limit_cents=total_limit,
        utilization_pct=utilization_pct(total_usage, total_limit),
    )


def usage_breakdown(cards: Sequence[Card]) -> List[CardUsage]:
    """Per-card usage rows in wallet order, labelled by the first word of the bank name"""
    return [
        CardUsage(
            card_id=card.id,
            label=card.bank_name.split(" ")[0],
            usage_cents=card.current_usage_cents,
            limit_cents=card.credit_limit_cents,
            utilization_pct=card_utilization_pct(card),
        )
        for card in cards
    ]
