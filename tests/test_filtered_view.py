# tests/test_filtered_view.py

from __future__ import annotations

import pytest

from questbook.model import PREDICATE_SHOW_ALL, FilteredView, Mission


def test_default_predicate_shows_everything() -> None:
    source = [1, 2, 3]
    view = FilteredView(source)
    assert list(view) == [1, 2, 3]
    assert view.predicate is PREDICATE_SHOW_ALL


def test_view_is_live_not_a_snapshot() -> None:
    source = [1, 2, 3, 4]
    view = FilteredView(source, lambda n: n % 2 == 0)

    assert list(view) == [2, 4]
    source.append(6)
    source.remove(2)
    assert list(view) == [4, 6]
    assert len(view) == 2
    assert view[0] == 4
    assert view[-1] == 6
    assert view[:1] == [4]


def test_set_predicate_applies_to_current_contents_regardless_of_prior_reads() -> None:
    source = ["a", "bb", "ccc"]
    view = FilteredView(source)
    for _ in range(3):
        assert len(view) == 3

    view.set_predicate(lambda s: len(s) > 1)
    assert view == ["bb", "ccc"]

    source.insert(0, "dddd")
    assert view == ["dddd", "bb", "ccc"]


def test_set_predicate_rejects_none() -> None:
    view = FilteredView([1])
    with pytest.raises(ValueError):
        view.set_predicate(None)  # type: ignore[arg-type]
    assert list(view) == [1]


def test_in_place_entity_changes_are_visible() -> None:
    m = Mission("Recon")
    view = FilteredView([m], lambda x: not x.is_completed)
    assert view == [m]
    m.mark_completed()
    assert view == []


def test_equality_between_views_and_sequences() -> None:
    a = FilteredView([1, 2, 3], lambda n: n > 1)
    b = FilteredView([2, 3])
    assert a == b
    assert a == (2, 3)
    assert a != [3, 2]
    assert 2 in a
    assert 1 not in a
