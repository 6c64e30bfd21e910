"""SQLAlchemy ORM models for the card store and transaction store"""

import uuid
from sqlalchemy import Column, String, BigInteger, Integer, DateTime, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


class CardRecord(Base):
    """Credit card in the wallet"""

    __tablename__ = "card"

    # Autoincrement position keeps cards in the order they were added
    position = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True, default=_new_id)
    bank_name = Column(Text, nullable=False)
    card_name = Column(Text, nullable=False)
    last_four_digits = Column(String(4), nullable=False)
    credit_limit_cents = Column(BigInteger, nullable=False)
    current_usage_cents = Column(BigInteger, nullable=False, default=0)
    statement_date = Column(Integer, nullable=False)
    due_date = Column(Integer, nullable=False)
    color = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class TransactionRecord(Base):
    """Ledger entry; card_id is a plain lookup key so entries outlive deleted cards"""

    __tablename__ = "card_transaction"

    position = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True, default=_new_id)
    card_id = Column(String(36), nullable=False, index=True)
    amount_cents = Column(BigInteger, nullable=False)
    category = Column(Text, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
