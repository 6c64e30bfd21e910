"""Unit tests for wallet snapshots, card validation and the ledger view"""

import pytest
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from float_wallet.domain.exceptions import (
    CardNotFoundError,
    DuplicateCardError,
    InvalidCardConfigError,
    OrphanReferenceError,
)
from float_wallet.domain.models import NewTransaction
from float_wallet.domain.wallet import WalletSnapshot

NOW = datetime(2025, 1, 21, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def snapshot(wallet_cards) -> WalletSnapshot:
    return WalletSnapshot(cards=wallet_cards)


@pytest.mark.parametrize(
    "changes",
    [
        {"statement_date": 0},
        {"statement_date": True},
        {"statement_date": 32},
        {"due_date": 0},
        {"due_date": 32},
        {"credit_limit_cents": 0},
        {"current_usage_cents": -1},
    ],
)
def test_card_rejects_invalid_config(wallet_cards, changes):
    with pytest.raises(InvalidCardConfigError):
        replace(wallet_cards[0], **changes)


def test_card_allows_over_limit_usage(wallet_cards):
    card = replace(wallet_cards[0], current_usage_cents=wallet_cards[0].credit_limit_cents * 2)
    assert card.current_usage_cents == 16_000_000


def test_add_card_bumps_version(snapshot, wallet_cards):
    extra = replace(wallet_cards[0], id="extra")
    updated = snapshot.add_card(extra)

    assert updated.version == snapshot.version + 1
    assert updated.cards[-1] is extra
    assert len(snapshot.cards) == 3


def test_add_duplicate_card(snapshot, wallet_cards):
    with pytest.raises(DuplicateCardError):
        snapshot.add_card(wallet_cards[0])


def test_delete_card(snapshot):
    updated = snapshot.delete_card("solaris")

    assert [c.id for c in updated.cards] == ["obsidian", "quantum"]
    assert updated.version == 1
    assert snapshot.find_card("solaris") is not None


def test_delete_unknown_card(snapshot):
    with pytest.raises(CardNotFoundError):
        snapshot.delete_card("missing")


def test_apply_transaction_new_snapshot(snapshot):
    updated = snapshot.apply_transaction(NewTransaction("quantum", 10_000), now=NOW)

    assert updated.version == 1
    assert updated.find_card("quantum").current_usage_cents == 4_510_000
    assert snapshot.find_card("quantum").current_usage_cents == 4_500_000
    assert len(updated.transactions) == 1
    assert snapshot.transactions == ()


def test_apply_orphan_leaves_snapshot_intact(snapshot):
    with pytest.raises(OrphanReferenceError):
        snapshot.apply_transaction(NewTransaction("gone", 10_000), now=NOW)

    assert snapshot.version == 0
    assert snapshot.transactions == ()


def test_deleted_card_transactions_show_na(snapshot):
    """Deleting a card keeps its transactions; the ledger labels them N/A"""
    charged = snapshot.apply_transaction(NewTransaction("solaris", 5_000), now=NOW)
    deleted = charged.delete_card("solaris")

    assert len(deleted.transactions) == 1
    assert deleted.ledger()[0].bank_name == "N/A"
    assert charged.ledger()[0].bank_name == "Meridian Trust"


def test_ledger_newest_first_and_stable(snapshot):
    wallet = snapshot
    wallet = wallet.apply_transaction(NewTransaction("obsidian", 1), now=NOW, id_factory=lambda: "t1")
    wallet = wallet.apply_transaction(NewTransaction("obsidian", 2), now=NOW + timedelta(hours=1), id_factory=lambda: "t2")
    wallet = wallet.apply_transaction(NewTransaction("quantum", 3), now=NOW + timedelta(hours=1), id_factory=lambda: "t3")

    assert [e.transaction.id for e in wallet.ledger()] == ["t2", "t3", "t1"]
    assert wallet.version == 3
