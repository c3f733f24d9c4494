# tests/test_store.py
import pytest

from ticketdesk.ticket.models import TicketStatus
from ticketdesk.ticket.store import TicketStore


@pytest.fixture
def store():
    return TicketStore()


def test_add_assigns_sequential_ids(store):
    a = store.add("A", "")
    b = store.add("B", "")
    c = store.add("C", "")
    assert [a.id, b.id, c.id] == [1, 2, 3]
    assert len(store) == 3


def test_failed_add_does_not_consume_an_id(store):
    store.add("A", "")
    with pytest.raises(ValueError):
        store.add("   ", "")
    assert store.add("B", "").id == 2
    assert len(store) == 2


def test_get_all_keeps_insertion_order(store):
    store.add("first", "")
    store.add("second", "")
    assert [t.title for t in store.get_all()] == ["first", "second"]


def test_get_all_returns_a_snapshot(store):
    store.add("A", "")
    items = store.get_all()
    items.clear()
    items.append("junk")
    assert [t.title for t in store.get_all()] == ["A"]


def test_get_by_id(store):
    store.add("A", "")
    b = store.add("B", "")
    assert store.get_by_id(2) is b
    assert store.get_by_id(99) is None


def test_change_status_missing_id(store):
    store.add("A", "")
    assert store.change_status(42, TicketStatus.CLOSED) is False
    assert store.get_by_id(1).status == TicketStatus.OPEN


def test_change_status_touches_only_target(store):
    a = store.add("A", "")
    b = store.add("B", "")
    created = a.created_at
    assert store.change_status(b.id, TicketStatus.CLOSED) is True
    assert b.status == TicketStatus.CLOSED
    assert a.status == TicketStatus.OPEN
    assert a.created_at == created
