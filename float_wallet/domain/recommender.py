"""Card recommendation - pick the card with the longest interest-free float"""

from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from float_wallet.domain.billing_cycle import project_cycle
from float_wallet.domain.models import Card, Recommendation
from float_wallet.utils.date_utils import DayOverflowPolicy, days_until


def recommend_card(
    card: Card,
    purchase_date: Union[date, datetime],
    overflow: DayOverflowPolicy = DayOverflowPolicy.ROLLOVER,
) -> Recommendation:
    """Float for a single card: days from purchase until its next payment is due"""
    cycle = project_cycle(card, purchase_date, overflow)
    return Recommendation(
        card=card,
        days_until_due=days_until(cycle.due_date, purchase_date),
        payment_due_date=cycle.due_date,
        statement_date=cycle.statement_date,
    )


def select_best_card(
    cards: Sequence[Card],
    purchase_date: Union[date, datetime],
    overflow: DayOverflowPolicy = DayOverflowPolicy.ROLLOVER,
) -> Optional[Recommendation]:
    """
    Main entry point: choose the card whose payment falls due latest.

    Returns None for an empty wallet. When several cards share the longest
    float the first one in input order wins.
    """
    best: Optional[Recommendation] = None
    for card in cards:
        candidate = recommend_card(card, purchase_date, overflow)
        # Strictly greater keeps the earliest card on ties
        if best is None or candidate.days_until_due > best.days_until_due:
            best = candidate
    return best


def rank_cards(
    cards: Sequence[Card],
    purchase_date: Union[date, datetime],
    overflow: DayOverflowPolicy = DayOverflowPolicy.ROLLOVER,
) -> List[Recommendation]:
    """All cards ordered by float, longest first; equal floats keep input order"""
    recommendations = [recommend_card(card, purchase_date, overflow) for card in cards]
    return sorted(recommendations, key=lambda r: -r.days_until_due)
