"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import List, Optional

from float_wallet.domain.models import Card, CardUsage, LedgerEntry, Recommendation, TransactionCategory
from float_wallet.domain.usage import card_utilization_pct


class CardCreate(BaseModel):
    """Request body for POST /v1/cards"""

    bank_name: str = Field(..., min_length=1)
    card_name: str = Field(..., min_length=1)
    last_four_digits: str = Field(..., pattern=r"^\d{4}$")
    credit_limit_cents: int = Field(..., gt=0, description="Credit limit in minor units")
    current_usage_cents: int = Field(0, ge=0, description="Outstanding balance in minor units")
    statement_date: int = Field(..., ge=1, le=31, description="Day of month the statement closes")
    due_date: int = Field(..., ge=1, le=31, description="Day of month payment is due")
    color: str = "from-emerald-600 to-teal-800"


class CardResponse(BaseModel):
    """Card as stored, with its utilization"""

    id: str
    bank_name: str
    card_name: str
    last_four_digits: str
    credit_limit_cents: int
    current_usage_cents: int
    statement_date: int
    due_date: int
    color: str
    utilization_pct: float

    @classmethod
    def from_domain(cls, card: Card) -> "CardResponse":
        return cls(
            id=card.id,
            bank_name=card.bank_name,
            card_name=card.card_name,
            last_four_digits=card.last_four_digits,
            credit_limit_cents=card.credit_limit_cents,
            current_usage_cents=card.current_usage_cents,
            statement_date=card.statement_date,
            due_date=card.due_date,
            color=card.color,
            utilization_pct=card_utilization_pct(card),
        )


class CardListResponse(BaseModel):
    """Response for GET /v1/cards"""

    cards: List[CardResponse]


class TransactionCreate(BaseModel):
    """Request body for POST /v1/transactions"""

    card_id: str = Field(..., min_length=1)
    amount_cents: int = Field(..., gt=0, description="Purchase amount in minor units")
    category: TransactionCategory = TransactionCategory.GROCERIES


class TransactionResponse(BaseModel):
    """Response for POST /v1/transactions"""

    id: str
    card_id: str
    amount_cents: int
    category: TransactionCategory
    date: datetime
    card_usage_cents: int


class LedgerItem(BaseModel):
    """Single ledger row"""

    id: str
    card_id: str
    bank_name: str  # "N/A" once the card is deleted
    amount_cents: int
    category: TransactionCategory
    date: datetime

    @classmethod
    def from_domain(cls, entry: LedgerEntry) -> "LedgerItem":
        txn = entry.transaction
        return cls(
            id=txn.id,
            card_id=txn.card_id,
            bank_name=entry.bank_name,
            amount_cents=txn.amount_cents,
            category=txn.category,
            date=txn.date,
        )


class LedgerResponse(BaseModel):
    """Response for GET /v1/transactions"""

    transactions: List[LedgerItem]


class CategoriesResponse(BaseModel):
    categories: List[str]


class RecommendedCard(BaseModel):
    """Card with its float for a purchase date"""

    card: CardResponse
    days_until_due: int
    payment_due_date: date
    statement_date: date

    @classmethod
    def from_domain(cls, recommendation: Recommendation) -> "RecommendedCard":
        return cls(
            card=CardResponse.from_domain(recommendation.card),
            days_until_due=recommendation.days_until_due,
            payment_due_date=recommendation.payment_due_date,
            statement_date=recommendation.statement_date,
        )


class RecommendationResponse(BaseModel):
    """Response for GET /v1/recommendation"""

    purchase_date: date
    recommendation: Optional[RecommendedCard] = None


class RankingResponse(BaseModel):
    """Response for GET /v1/recommendation/ranking"""

    purchase_date: date
    ranking: List[RecommendedCard]


class CardUsageSchema(BaseModel):
    """Per-card usage row"""

    card_id: str
    label: str
    usage_cents: int
    limit_cents: int
    utilization_pct: float

    @classmethod
    def from_domain(cls, row: CardUsage) -> "CardUsageSchema":
        return cls(
            card_id=row.card_id,
            label=row.label,
            usage_cents=row.usage_cents,
            limit_cents=row.limit_cents,
            utilization_pct=row.utilization_pct,
        )


class SummaryResponse(BaseModel):
    """Response for GET /v1/summary"""

    total_usage_cents: int
    total_limit_cents: int
    remaining_limit_cents: int
    utilization_pct: float
    cards: List[CardUsageSchema]
