"""/v1/transactions - the purchase ledger"""

import time
import logging
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from float_wallet.api.v1.schemas import CategoriesResponse, LedgerItem, LedgerResponse, TransactionCreate, TransactionResponse
from float_wallet.api.dependencies import get_request_id, utc_now
from float_wallet.infrastructure.database.session import get_db
from float_wallet.infrastructure.database.repositories import CardRepository, TransactionRepository, load_wallet
from float_wallet.domain.models import NewTransaction, TransactionCategory
from float_wallet.domain.exceptions import InvalidTransactionDataError, OrphanReferenceError
from float_wallet.infrastructure.observability.metrics import rejected_mutations_counter, transactions_applied_counter
from float_wallet.infrastructure.observability.logging import log_transaction_applied

router = APIRouter()


@router.get("/transactions", response_model=LedgerResponse)
def list_transactions(db: Session = Depends(get_db)):
    """Ledger, newest first, with the bank of each card"""
    ledger = load_wallet(db).ledger()
    return LedgerResponse(transactions=[LedgerItem.from_domain(entry) for entry in ledger])


@router.get("/transactions/categories", response_model=CategoriesResponse)
def list_categories():
    return CategoriesResponse(categories=[category.value for category in TransactionCategory])


@router.post("/transactions", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
def create_transaction(
    request_body: TransactionCreate,
    request: Request,
    db: Session = Depends(get_db),
    now: datetime = Depends(utc_now),
):
    """
    Charge a purchase to a card.

    Flow:
    1. Load the wallet snapshot from both stores
    2. Apply the transaction in the domain layer (new snapshot, inputs untouched)
    3. Add the amount to the stored balance in SQL and append the ledger entry,
       committing both together
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        snapshot = load_wallet(db)
        updated = snapshot.apply_transaction(
            NewTransaction(
                card_id=request_body.card_id,
                amount_cents=request_body.amount_cents,
                category=request_body.category,
            ),
            now=now,
        )

        entry = updated.transactions[-1]

        card_usage_cents = CardRepository(db).increment_usage(entry.card_id, entry.amount_cents)
        if card_usage_cents is None:
            # Card deleted after the snapshot was read
            raise OrphanReferenceError(entry.card_id)
        TransactionRepository(db).add_transaction(entry)
        db.commit()

    except OrphanReferenceError as e:
        db.rollback()
        rejected_mutations_counter.labels(reason="orphan_reference").inc()
        logging.warning(f"Orphan transaction: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except InvalidTransactionDataError as e:
        db.rollback()
        rejected_mutations_counter.labels(reason="invalid_transaction").inc()
        logging.warning(f"Invalid transaction: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    transactions_applied_counter.labels(category=entry.category.value).inc()
    log_transaction_applied(request_id, entry.id, entry.card_id, entry.amount_cents, entry.category.value, duration_ms)

    return TransactionResponse(
        id=entry.id,
        card_id=entry.card_id,
        amount_cents=entry.amount_cents,
        category=entry.category,
        date=entry.date,
        card_usage_cents=card_usage_cents,
    )
