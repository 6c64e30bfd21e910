"""Billing cycle projection - next statement and payment due dates for a card"""

from datetime import date, datetime
from typing import Union

from float_wallet.domain.models import BillingCycle, Card, check_billing_day
from float_wallet.utils.date_utils import DayOverflowPolicy, add_months, as_date, compose_date


def project_cycle(
    card: Card,
    anchor_date: Union[date, datetime],
    overflow: DayOverflowPolicy = DayOverflowPolicy.ROLLOVER,
) -> BillingCycle:
    """
    Project the next statement date and payment due date from an anchor date.

    Rules:
    - Anchor day after the statement day: the next statement closes next month,
      otherwise it closes this month (on the statement day itself counts).
    - Due day earlier than statement day: payment is due the month after the
      statement closes, otherwise in the statement's month.
    - Months are resolved before days, so a day the month lacks is handled by
      the overflow policy (ROLLOVER spills into the next month, CLAMP pins to
      the last day).

    Example:
        statement 20, due 10, anchor 2025-01-21
        → statement 2025-02-20, due 2025-03-10

    Raises:
        InvalidCardConfigError: statement or due day outside [1, 31]
    """
    check_billing_day("statement_date", card.statement_date)
    check_billing_day("due_date", card.due_date)

    anchor = as_date(anchor_date)

    statement_year, statement_month = anchor.year, anchor.month
    if anchor.day > card.statement_date:
        statement_year, statement_month = add_months(statement_year, statement_month, 1)

    due_year, due_month = statement_year, statement_month
    if card.due_date < card.statement_date:
        due_year, due_month = add_months(due_year, due_month, 1)

    return BillingCycle(
        statement_date=compose_date(statement_year, statement_month, card.statement_date, overflow),
        due_date=compose_date(due_year, due_month, card.due_date, overflow),
    )
