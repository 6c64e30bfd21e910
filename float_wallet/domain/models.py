"""Domain models - pure Python dataclasses representing wallet entities"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from float_wallet.domain.exceptions import InvalidCardConfigError, InvalidTransactionDataError

MIN_BILLING_DAY = 1
MAX_BILLING_DAY = 31


class TransactionCategory(str, Enum):
    GROCERIES = "Groceries"
    DINING = "Dining"
    TRAVEL = "Travel"
    SHOPPING = "Shopping"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    OTHER = "Other"


def check_billing_day(name: str, value: int) -> None:
    """Raise InvalidCardConfigError unless value is a day-of-month in [1, 31]"""
    if isinstance(value, bool) or not isinstance(value, int) or not MIN_BILLING_DAY <= value <= MAX_BILLING_DAY:
        raise InvalidCardConfigError(
            f"{name} must be a day of month between {MIN_BILLING_DAY} and {MAX_BILLING_DAY}, got {value!r}"
        )


@dataclass(frozen=True)
class Card:
    """A credit line in the wallet"""

    id: str
    bank_name: str
    card_name: str
    last_four_digits: str
    credit_limit_cents: int
    current_usage_cents: int
    statement_date: int  # day of month the statement closes
    due_date: int  # day of month payment is owed
    color: str = ""

    def __post_init__(self):
        check_billing_day("statement_date", self.statement_date)
        check_billing_day("due_date", self.due_date)
        if self.credit_limit_cents <= 0:
            raise InvalidCardConfigError(f"credit_limit_cents must be positive, got {self.credit_limit_cents}")
        # Over-limit usage is allowed, negative is not
        if self.current_usage_cents < 0:
            raise InvalidCardConfigError(f"current_usage_cents cannot be negative, got {self.current_usage_cents}")


@dataclass(frozen=True)
class NewTransaction:
    """Purchase submitted by a caller, before id and timestamp are assigned"""

    card_id: str
    amount_cents: int
    category: TransactionCategory = TransactionCategory.GROCERIES

    def __post_init__(self):
        if isinstance(self.category, str) and not isinstance(self.category, TransactionCategory):
            try:
                object.__setattr__(self, "category", TransactionCategory(self.category))
            except ValueError as e:
                raise InvalidTransactionDataError(f"Unknown category {self.category!r}") from e
        if self.amount_cents <= 0:
            raise InvalidTransactionDataError(f"amount_cents must be positive, got {self.amount_cents}")


@dataclass(frozen=True)
class Transaction:
    """Ledger entry charged to a card"""

    id: str
    card_id: str  # lookup key only, the card may since have been deleted
    amount_cents: int
    category: TransactionCategory
    date: datetime


@dataclass(frozen=True)
class BillingCycle:
    """Next statement close and the payment due date that follows it"""

    statement_date: date
    due_date: date


@dataclass(frozen=True)
class Recommendation:
    """Card to use for a purchase and how long the float lasts"""

    card: Card
    days_until_due: int
    payment_due_date: date
    statement_date: date


@dataclass(frozen=True)
class UsageSummary:
    """Wallet-wide usage against combined credit limit"""

    total_usage_cents: int
    total_limit_cents: int
    utilization_pct: float

    @property
    def remaining_limit_cents(self) -> int:
        return max(0, self.total_limit_cents - self.total_usage_cents)


@dataclass(frozen=True)
class CardUsage:
    """Per-card usage row for reports"""

    card_id: str
    label: str
    usage_cents: int
    limit_cents: int
    utilization_pct: float


@dataclass(frozen=True)
class LedgerEntry:
    """Transaction joined with the bank name of its card"""

    transaction: Transaction
    bank_name: str
