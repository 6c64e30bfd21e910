"""Transaction application - charge a purchase to a card and record it in the ledger"""

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, Tuple

from float_wallet.domain.exceptions import InvalidTransactionDataError, OrphanReferenceError
from float_wallet.domain.models import Card, NewTransaction, Transaction


def new_id() -> str:
    return str(uuid.uuid4())


def apply_transaction(
    cards: Sequence[Card],
    transactions: Sequence[Transaction],
    new_transaction: NewTransaction,
    now: Optional[datetime] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> Tuple[List[Card], List[Transaction]]:
    """
    Record a purchase and raise the matching card's usage by its amount.

    Neither input is modified. The returned card list shares every Card object
    except the charged one, which is replaced by an updated copy. Both results
    are built before returning, so a failure leaves the caller with exactly
    what it passed in.

    Args:
        cards: Wallet cards
        transactions: Ledger so far
        new_transaction: Card id, amount and category of the purchase
        now: Creation timestamp (default: current UTC time)
        id_factory: Produces the ledger entry id (default: uuid4 text)

    Returns:
        (updated cards, ledger with the new entry appended)

    Raises:
        InvalidTransactionDataError: amount is not positive
        OrphanReferenceError: no card in the wallet has the given id
    """
    if new_transaction.amount_cents <= 0:
        raise InvalidTransactionDataError(f"amount_cents must be positive, got {new_transaction.amount_cents}")

    index = next((i for i, card in enumerate(cards) if card.id == new_transaction.card_id), None)
    if index is None:
        raise OrphanReferenceError(new_transaction.card_id)

    charged = cards[index]
    updated_card = replace(charged, current_usage_cents=charged.current_usage_cents + new_transaction.amount_cents)

    entry = Transaction(
        id=(id_factory or new_id)(),
        card_id=new_transaction.card_id,
        amount_cents=new_transaction.amount_cents,
        category=new_transaction.category,
        date=now or datetime.now(timezone.utc),
    )

    updated_cards = list(cards)
    updated_cards[index] = updated_card
    return updated_cards, [*transactions, entry]
