# src/questbook/model/unique_list.py

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, Protocol, TypeVar

from .errors import DuplicateEntityError, EntityNotFoundError, require_non_null


class SupportsSameness(Protocol):
    def is_same(self, other: object) -> bool: ...


T = TypeVar("T", bound=SupportsSameness)


class UniqueItemList(Generic[T]):
    """
    Insertion-ordered collection whose members are unique under ``is_same``.

    ``add`` does not check for duplicates; callers are expected to ask
    ``contains`` first. Bulk and replace operations do validate.

    The backing list object is never rebound, so views created from
    ``backing_list()`` stay live across ``set_all``.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        self.set_all(items)

    def contains(self, item: T) -> bool:
        require_non_null(item, names=("item",))
        return any(existing.is_same(item) for existing in self._items)

    def add(self, item: T) -> None:
        require_non_null(item, names=("item",))
        self._items.append(item)

    def remove(self, item: T) -> bool:
        """Remove the first element same as ``item``. Returns False if none matched."""
        require_non_null(item, names=("item",))
        for i, existing in enumerate(self._items):
            if existing.is_same(item):
                del self._items[i]
                return True
        return False

    def replace(self, target: T, edited: T) -> None:
        require_non_null(target, edited, names=("target", "edited"))
        idx = next((i for i, e in enumerate(self._items) if e.is_same(target)), None)
        if idx is None:
            raise EntityNotFoundError(f"{target!r} is not in the list")
        if not target.is_same(edited) and self.contains(edited):
            raise DuplicateEntityError(f"{edited!r} already exists in the list")
        self._items[idx] = edited

    def validated(self, items: Iterable[T]) -> list[T]:
        """Copy ``items`` into a list, rejecting None and duplicate entries."""
        new_items = list(items)
        for i, a in enumerate(new_items):
            require_non_null(a, names=(f"items[{i}]",))
            for b in new_items[i + 1:]:
                if a.is_same(b):
                    raise DuplicateEntityError(f"duplicate entries for {a!r}")
        return new_items

    def assign(self, validated: list[T]) -> None:
        """Install a list already returned by ``validated``."""
        # In-place slice assignment keeps live views attached.
        self._items[:] = validated

    def set_all(self, items: Iterable[T]) -> None:
        self.assign(self.validated(items))

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        return next((e for e in self._items if predicate(e)), None)

    def backing_list(self) -> list[T]:
        """The live internal list. Only FilteredView should hold on to this."""
        return self._items

    def as_tuple(self) -> tuple[T, ...]:
        return tuple(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueItemList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"UniqueItemList({self._items!r})"
