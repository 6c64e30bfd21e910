"""GET /v1/summary - wallet usage against combined limit"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from float_wallet.api.v1.schemas import CardUsageSchema, SummaryResponse
from float_wallet.infrastructure.database.session import get_db
from float_wallet.infrastructure.database.repositories import CardRepository
from float_wallet.domain.usage import aggregate_usage, usage_breakdown
from float_wallet.infrastructure.observability.metrics import utilization_gauge

router = APIRouter()


@router.get("/summary", response_model=SummaryResponse)
def get_summary(db: Session = Depends(get_db)):
    """Totals, utilization and per-card usage rows"""
    cards = CardRepository(db).list_cards()
    summary = aggregate_usage(cards)
    utilization_gauge.set(summary.utilization_pct)

    return SummaryResponse(
        total_usage_cents=summary.total_usage_cents,
        total_limit_cents=summary.total_limit_cents,
        remaining_limit_cents=summary.remaining_limit_cents,
        utilization_pct=summary.utilization_pct,
        cards=[CardUsageSchema.from_domain(row) for row in usage_breakdown(cards)],
    )
