"""GET /v1/recommendation - which card to use for a purchase"""

import time
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from float_wallet.api.v1.schemas import RankingResponse, RecommendationResponse, RecommendedCard
from float_wallet.api.dependencies import get_overflow_policy, get_request_id, get_today
from float_wallet.infrastructure.database.session import get_db
from float_wallet.infrastructure.database.repositories import CardRepository
from float_wallet.domain.recommender import rank_cards, select_best_card
from float_wallet.infrastructure.observability.metrics import record_recommendation
from float_wallet.infrastructure.observability.logging import log_recommendation
from float_wallet.utils.date_utils import DayOverflowPolicy

router = APIRouter()


@router.get("/recommendation", response_model=RecommendationResponse)
def get_recommendation(
    request: Request,
    purchase_date: Optional[date] = Query(None, description="Purchase date (default: today)"),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
    overflow: DayOverflowPolicy = Depends(get_overflow_policy),
):
    """
    Recommend the card with the longest interest-free float.

    Returns:
        The best card with its payment due date, or a null recommendation
        when the wallet is empty
    """
    start_time = time.time()
    purchase_date = purchase_date or today
    cards = CardRepository(db).list_cards()

    best = select_best_card(cards, purchase_date, overflow)

    duration_ms = (time.time() - start_time) * 1000
    record_recommendation(best.days_until_due if best else None)
    log_recommendation(
        get_request_id(request),
        purchase_date.isoformat(),
        best.card.id if best else None,
        best.days_until_due if best else None,
        len(cards),
        duration_ms,
    )

    return RecommendationResponse(
        purchase_date=purchase_date,
        recommendation=RecommendedCard.from_domain(best) if best else None,
    )


@router.get("/recommendation/ranking", response_model=RankingResponse)
def get_ranking(
    purchase_date: Optional[date] = Query(None, description="Purchase date (default: today)"),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
    overflow: DayOverflowPolicy = Depends(get_overflow_policy),
):
    """Every card ordered by float, longest first"""
    purchase_date = purchase_date or today
    ranking = rank_cards(CardRepository(db).list_cards(), purchase_date, overflow)
    return RankingResponse(
        purchase_date=purchase_date,
        ranking=[RecommendedCard.from_domain(r) for r in ranking],
    )
