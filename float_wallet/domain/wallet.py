"""Versioned wallet snapshot - cards and ledger passed by value between mutations"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from float_wallet.domain.exceptions import CardNotFoundError, DuplicateCardError
from float_wallet.domain.models import Card, LedgerEntry, NewTransaction, Transaction
from float_wallet.domain.transactions import apply_transaction

UNKNOWN_BANK = "N/A"


@dataclass(frozen=True)
class WalletSnapshot:
    """
    Immutable view of a wallet at one version.

    Each mutation returns a new snapshot with version + 1 and leaves this one
    untouched, so a reader holding an older snapshot never sees partial state.
    Deleting a card keeps its transactions; the ledger labels them "N/A".
    """

    cards: Tuple[Card, ...] = ()
    transactions: Tuple[Transaction, ...] = ()
    version: int = 0

    def __post_init__(self):
        object.__setattr__(self, "cards", tuple(self.cards))
        object.__setattr__(self, "transactions", tuple(self.transactions))

    def find_card(self, card_id: str) -> Optional[Card]:
        return next((card for card in self.cards if card.id == card_id), None)

    def add_card(self, card: Card) -> "WalletSnapshot":
        if self.find_card(card.id) is not None:
            raise DuplicateCardError(card.id)
        return WalletSnapshot(self.cards + (card,), self.transactions, self.version + 1)

    def delete_card(self, card_id: str) -> "WalletSnapshot":
        if self.find_card(card_id) is None:
            raise CardNotFoundError(card_id)
        remaining = tuple(card for card in self.cards if card.id != card_id)
        return WalletSnapshot(remaining, self.transactions, self.version + 1)

    def apply_transaction(
        self,
        new_transaction: NewTransaction,
        now: Optional[datetime] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> "WalletSnapshot":
        cards, transactions = apply_transaction(self.cards, self.transactions, new_transaction, now, id_factory)
        return WalletSnapshot(cards, transactions, self.version + 1)

    def ledger(self) -> List[LedgerEntry]:
        """Newest first; entries with equal timestamps stay in insertion order"""
        bank_names = {card.id: card.bank_name for card in self.cards}
        newest_first = sorted(self.transactions, key=lambda t: t.date, reverse=True)
        return [LedgerEntry(transaction=t, bank_name=bank_names.get(t.card_id, UNKNOWN_BANK)) for t in newest_first]
