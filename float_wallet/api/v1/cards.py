"""/v1/cards - manage the cards in the wallet"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from float_wallet.api.v1.schemas import CardCreate, CardListResponse, CardResponse
from float_wallet.api.dependencies import get_request_id
from float_wallet.infrastructure.database.session import get_db
from float_wallet.infrastructure.database.repositories import CardRepository, load_wallet
from float_wallet.domain.models import Card
from float_wallet.domain.transactions import new_id
from float_wallet.domain.exceptions import CardNotFoundError, DuplicateCardError, InvalidCardConfigError
from float_wallet.infrastructure.observability.metrics import rejected_mutations_counter

router = APIRouter()


@router.get("/cards", response_model=CardListResponse)
def list_cards(db: Session = Depends(get_db)):
    """List wallet cards in the order they were added"""
    cards = CardRepository(db).list_cards()
    return CardListResponse(cards=[CardResponse.from_domain(card) for card in cards])


@router.post("/cards", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
def add_card(request_body: CardCreate, request: Request, db: Session = Depends(get_db)):
    """Add a card to the wallet"""
    request_id = get_request_id(request)

    try:
        card = Card(id=new_id(), **request_body.model_dump())
        load_wallet(db).add_card(card)
        CardRepository(db).add_card(card)
        db.commit()

    except InvalidCardConfigError as e:
        db.rollback()
        rejected_mutations_counter.labels(reason="invalid_card").inc()
        logging.warning(f"Invalid card: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except DuplicateCardError as e:
        db.rollback()
        rejected_mutations_counter.labels(reason="duplicate_card").inc()
        logging.warning(f"Duplicate card: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail=str(e))

    logging.info("Card added", extra={"request_id": request_id, "card_id": card.id})
    return CardResponse.from_domain(card)


@router.delete("/cards/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_card(card_id: str, request: Request, db: Session = Depends(get_db)):
    """
    Remove a card from the wallet.

    Transactions charged to it are kept; the ledger shows their bank as "N/A".
    """
    request_id = get_request_id(request)

    try:
        load_wallet(db).delete_card(card_id)
        CardRepository(db).delete_card(card_id)
        db.commit()

    except CardNotFoundError as e:
        db.rollback()
        rejected_mutations_counter.labels(reason="card_not_found").inc()
        logging.warning(f"Delete rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    logging.info("Card deleted", extra={"request_id": request_id, "card_id": card_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
