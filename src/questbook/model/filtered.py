# src/questbook/model/filtered.py

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any, Generic, TypeVar, overload

T = TypeVar("T")

Predicate = Callable[[T], bool]


def PREDICATE_SHOW_ALL(_: Any) -> bool:
    return True


PREDICATE_SHOW_ALL_STUDENTS = PREDICATE_SHOW_ALL
PREDICATE_SHOW_ALL_MISSIONS = PREDICATE_SHOW_ALL
PREDICATE_SHOW_ALL_QUESTS = PREDICATE_SHOW_ALL
PREDICATE_SHOW_ALL_TASKS = PREDICATE_SHOW_ALL
PREDICATE_SHOW_ALL_CONSULTATIONS = PREDICATE_SHOW_ALL


class FilteredView(Sequence[T], Generic[T]):
    """
    Read-only, live view of ``source`` restricted by a predicate.

    Nothing is cached: every access re-applies the current predicate to the
    current contents of ``source``, so the view follows store mutations and
    predicate changes immediately. Entities mutated in place are re-evaluated
    on the next read as well.
    """

    __slots__ = ("_source", "_predicate")

    def __init__(self, source: list[T], predicate: Predicate[T] = PREDICATE_SHOW_ALL) -> None:
        if source is None:
            raise ValueError("source is required")
        self._source = source
        self._predicate: Predicate[T] = PREDICATE_SHOW_ALL
        self.set_predicate(predicate)

    @property
    def predicate(self) -> Predicate[T]:
        return self._predicate

    def set_predicate(self, predicate: Predicate[T]) -> None:
        if predicate is None:
            raise ValueError("predicate is required")
        self._predicate = predicate

    def _current(self) -> list[T]:
        pred = self._predicate
        return [item for item in self._source if pred(item)]

    def __iter__(self) -> Iterator[T]:
        pred = self._predicate
        return (item for item in self._source if pred(item))

    def __len__(self) -> int:
        return len(self._current())

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        return self._current()[index]

    def __contains__(self, item: object) -> bool:
        return any(x == item for x in self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilteredView):
            return self._current() == other._current()
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._current() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FilteredView({self._current()!r})"
