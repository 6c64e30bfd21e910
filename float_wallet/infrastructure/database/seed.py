"""Starter wallet inserted into an empty card store"""

import logging
from typing import List
from sqlalchemy.orm import Session

from float_wallet.domain.models import Card
from float_wallet.domain.transactions import new_id
from float_wallet.infrastructure.database.repositories import CardRepository

logger = logging.getLogger(__name__)


def demo_cards() -> List[Card]:
    """Three sample cards with staggered billing cycles (amounts in paise)"""
    return [
        Card(
            id=new_id(),
            bank_name="Apex Financial",
            card_name="Obsidian Tier",
            last_four_digits="4242",
            credit_limit_cents=8_000_000,
            current_usage_cents=2_200_000,
            statement_date=20,
            due_date=10,
            color="from-slate-700 to-slate-900",
        ),
        Card(
            id=new_id(),
            bank_name="Meridian Trust",
            card_name="Solaris",
            last_four_digits="8931",
            credit_limit_cents=15_000_000,
            current_usage_cents=6_100_000,
            statement_date=5,
            due_date=25,
            color="from-amber-500 to-red-700",
        ),
        Card(
            id=new_id(),
            bank_name="Nexus Bank",
            card_name="Quantum",
            last_four_digits="1121",
            credit_limit_cents=20_000_000,
            current_usage_cents=4_500_000,
            statement_date=15,
            due_date=5,
            color="from-sky-600 to-indigo-800",
        ),
    ]


def seed_demo_wallet(db: Session) -> int:
    """Insert the demo cards if the store has none. Returns the number inserted."""
    repo = CardRepository(db)
    if repo.list_cards():
        return 0

    cards = demo_cards()
    for card in cards:
        repo.add_card(card)
    db.commit()

    logger.info("Seeded demo wallet", extra={"card_count": len(cards)})
    return len(cards)
