from __future__ import annotations

import pytest

from dualstore.composite import boolean_check, has_children, merge_count
from tests.helpers.spies import Spy


def test_boolean_check_short_circuits_on_declarative_true() -> None:
    declarative = Spy(result=True)
    primary = Spy(result=False)

    assert boolean_check(declarative, primary) is True
    assert primary.call_count == 0


def test_boolean_check_falls_through_to_runtime_store() -> None:
    declarative = Spy(result=False)
    primary = Spy(result=True)

    assert boolean_check(declarative, primary) is True
    assert declarative.call_count == 1
    assert primary.call_count == 1


def test_boolean_check_returns_false_when_both_negative() -> None:
    assert boolean_check(Spy(result=False), Spy(result=False)) is False


def test_boolean_check_propagates_declarative_error_without_runtime_call() -> None:
    declarative = Spy[bool](error=OSError("unreadable"))
    primary = Spy(result=True)

    with pytest.raises(OSError, match="unreadable"):
        boolean_check(declarative, primary)

    assert primary.call_count == 0


def test_boolean_check_propagates_runtime_error() -> None:
    primary = Spy[bool](error=ConnectionError("db down"))

    with pytest.raises(ConnectionError):
        boolean_check(Spy(result=False), primary)


def test_has_children_uses_declarative_store_first() -> None:
    declarative = Spy(result=True)
    primary = Spy(result=False)

    assert has_children(declarative, primary) is True
    assert primary.call_count == 0


@pytest.mark.parametrize(("primary_count", "declarative_count"), [(0, 0), (3, 2), (600, 700)])
def test_merge_count_sums_both_stores(primary_count: int, declarative_count: int) -> None:
    total = merge_count(Spy(result=primary_count), Spy(result=declarative_count))

    assert total == primary_count + declarative_count


def test_merge_count_stops_at_runtime_store_error() -> None:
    declarative = Spy(result=5)

    with pytest.raises(ConnectionError):
        merge_count(Spy[int](error=ConnectionError("db down")), declarative)

    assert declarative.call_count == 0


def test_merge_count_propagates_declarative_error() -> None:
    with pytest.raises(OSError, match="unreadable"):
        merge_count(Spy(result=5), Spy[int](error=OSError("unreadable")))


def test_merge_count_handles_counts_beyond_native_width() -> None:
    assert merge_count(Spy(result=2**63), Spy(result=2**63)) == 2**64
