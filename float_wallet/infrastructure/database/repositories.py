"""Data access layer for the card store and transaction store"""

from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import update
from sqlalchemy.orm import Session
from float_wallet.infrastructure.database.models import CardRecord, TransactionRecord
from float_wallet.domain.models import Card, Transaction, TransactionCategory
from float_wallet.domain.wallet import WalletSnapshot


class CardRepository:
    """Repository for wallet cards"""

    def __init__(self, db: Session):
        self.db = db

    def list_cards(self) -> List[Card]:
        """All cards in the order they were added"""
        records = self.db.query(CardRecord).order_by(CardRecord.position).all()
        return [self._to_domain(record) for record in records]

    def add_card(self, card: Card) -> CardRecord:
        """Persist a new card"""
        record = CardRecord(
            id=card.id,
            bank_name=card.bank_name,
            card_name=card.card_name,
            last_four_digits=card.last_four_digits,
            credit_limit_cents=card.credit_limit_cents,
            current_usage_cents=card.current_usage_cents,
            statement_date=card.statement_date,
            due_date=card.due_date,
            color=card.color,
        )
        self.db.add(record)
        self.db.flush()
        return record

    def increment_usage(self, card_id: str, amount_cents: int) -> Optional[int]:
        """
        Add amount_cents to a card's balance and return the new balance,
        or None when no card has that id.

        The increment runs in SQL against the stored value, so concurrent
        charges to the same card each land instead of the last commit winning.
        """
        self.db.execute(
            update(CardRecord)
            .where(CardRecord.id == card_id)
            .values(current_usage_cents=CardRecord.current_usage_cents + amount_cents)
            .execution_options(synchronize_session=False)
        )
        return (
            self.db.query(CardRecord.current_usage_cents)
            .filter(CardRecord.id == card_id)
            .scalar()
        )

    def delete_card(self, card_id: str) -> None:
        """Remove a card; its transactions stay in the ledger"""
        record = self._get_record(card_id)
        self.db.delete(record)
        self.db.flush()

    def _get_record(self, card_id: str) -> Optional[CardRecord]:
        return self.db.query(CardRecord).filter(CardRecord.id == card_id).first()

    @staticmethod
    def _to_domain(record: CardRecord) -> Card:
        return Card(
            id=record.id,
            bank_name=record.bank_name,
            card_name=record.card_name,
            last_four_digits=record.last_four_digits,
            credit_limit_cents=record.credit_limit_cents,
            current_usage_cents=record.current_usage_cents,
            statement_date=record.statement_date,
            due_date=record.due_date,
            color=record.color,
        )


class TransactionRepository:
    """Repository for ledger entries"""

    def __init__(self, db: Session):
        self.db = db

    def list_transactions(self) -> List[Transaction]:
        """All transactions in insertion order"""
        records = self.db.query(TransactionRecord).order_by(TransactionRecord.position).all()
        return [
            Transaction(
                id=record.id,
                card_id=record.card_id,
                amount_cents=record.amount_cents,
                category=TransactionCategory(record.category),
                date=_as_utc(record.date),
            )
            for record in records
        ]

    def add_transaction(self, transaction: Transaction) -> TransactionRecord:
        """Append an entry to the ledger"""
        record = TransactionRecord(
            id=transaction.id,
            card_id=transaction.card_id,
            amount_cents=transaction.amount_cents,
            category=transaction.category.value,
            date=_as_utc(transaction.date),
        )
        self.db.add(record)
        self.db.flush()
        return record


def _as_utc(value: datetime) -> datetime:
    """Timestamps are stored as UTC; SQLite hands them back without an offset"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def load_wallet(db: Session) -> WalletSnapshot:
    """Read both stores into a snapshot for the domain layer"""
    return WalletSnapshot(
        cards=CardRepository(db).list_cards(),
        transactions=TransactionRepository(db).list_transactions(),
    )
