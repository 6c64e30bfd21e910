"""Dependency injection for FastAPI endpoints"""

from datetime import date, datetime, timezone
from fastapi import Request
from float_wallet.config import settings
from float_wallet.utils.date_utils import DayOverflowPolicy


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_today() -> date:
    """Clock: default purchase date for recommendations"""
    return date.today()


def utc_now() -> datetime:
    """Clock: creation timestamp for new transactions"""
    return datetime.now(timezone.utc)


def get_overflow_policy() -> DayOverflowPolicy:
    return settings.day_overflow_policy
