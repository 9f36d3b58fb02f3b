# tests/test_unique_list.py

from __future__ import annotations

import pytest

from questbook.model import DuplicateEntityError, EntityNotFoundError, Student
from questbook.model.unique_list import UniqueItemList


def test_add_then_contains_and_remove_restores_contents() -> None:
    items: UniqueItemList[Student] = UniqueItemList([Student("Alice")])
    before = list(items)

    carl = Student("Carl")
    items.add(carl)
    assert items.contains(carl)
    # Sameness is by name, not by every field.
    assert items.contains(Student("Carl", email="other@example.com"))

    assert items.remove(carl) is True
    assert list(items) == before


def test_add_does_not_check_duplicates() -> None:
    items: UniqueItemList[Student] = UniqueItemList()
    items.add(Student("Alice"))
    items.add(Student("Alice"))
    assert len(items) == 2


def test_remove_missing_is_a_no_op() -> None:
    items: UniqueItemList[Student] = UniqueItemList([Student("Alice")])
    assert items.remove(Student("Nobody")) is False
    assert [s.name for s in items] == ["Alice"]


def test_none_arguments_are_rejected() -> None:
    items: UniqueItemList[Student] = UniqueItemList()
    with pytest.raises(ValueError):
        items.contains(None)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        items.add(None)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        items.set_all([Student("A"), None])  # type: ignore[list-item]


def test_set_all_replaces_in_order_and_keeps_backing_list() -> None:
    items: UniqueItemList[Student] = UniqueItemList([Student("Old")])
    backing = items.backing_list()

    items.set_all([Student("B"), Student("A")])

    assert [s.name for s in items] == ["B", "A"]
    assert items.backing_list() is backing
    assert [s.name for s in backing] == ["B", "A"]


def test_set_all_rejects_duplicates_and_keeps_previous_contents() -> None:
    items: UniqueItemList[Student] = UniqueItemList([Student("Keep")])
    with pytest.raises(DuplicateEntityError):
        items.set_all([Student("A"), Student("A", email="x@y.z")])
    assert [s.name for s in items] == ["Keep"]


def test_replace() -> None:
    items: UniqueItemList[Student] = UniqueItemList([Student("A"), Student("B")])

    items.replace(Student("A"), Student("A", email="new@example.com"))
    assert items.as_tuple()[0].email == "new@example.com"

    with pytest.raises(DuplicateEntityError):
        items.replace(Student("A"), Student("B"))
    with pytest.raises(EntityNotFoundError):
        items.replace(Student("Z"), Student("Y"))
