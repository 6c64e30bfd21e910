"""Structured JSON logging for production observability"""

import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from float_wallet.config import settings

# Set per request by the API middleware
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    """Stamp records with the current request id unless the caller passed one"""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get()
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(RequestIdFilter())
    logger.addHandler(handler)


def log_recommendation(
    request_id: str,
    purchase_date: str,
    card_id: Optional[str],
    days_until_due: Optional[int],
    card_count: int,
    duration_ms: float,
) -> None:
    """Log structured recommendation outcome"""
    logging.info(
        "Recommendation completed",
        extra={
            "request_id": request_id,
            "step": "recommendation_complete",
            "outcome": "recommended" if card_id else "empty_wallet",
            "purchase_date": purchase_date,
            "card_id": card_id,
            "days_until_due": days_until_due,
            "card_count": card_count,
            "duration_ms": duration_ms,
        },
    )


def log_transaction_applied(
    request_id: str,
    transaction_id: str,
    card_id: str,
    amount_cents: int,
    category: str,
    duration_ms: float,
) -> None:
    """Log a transaction charged to a card"""
    logging.info(
        "Transaction applied",
        extra={
            "request_id": request_id,
            "step": "transaction_applied",
            "transaction_id": transaction_id,
            "card_id": card_id,
            "amount_cents": amount_cents,
            "category": category,
            "duration_ms": duration_ms,
        },
    )
