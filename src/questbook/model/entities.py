# src/questbook/model/entities.py

"""
Domain entities held by the address book.

Every entity type has two notions of equality:
- ``==`` (dataclass equality): all fields equal, used for store comparison.
- ``is_same(other)``: the weaker "same entity" notion used for duplicate
  detection inside a collection (e.g. two students with the same name).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar


class CompletionStatus(StrEnum):
    """Progress of a mission or quest."""

    PENDING = "pending"
    COMPLETED = "completed"


class TaskKind(StrEnum):
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"


@dataclass(slots=True)
class Student:
    name: str
    email: str | None = None
    telegram: str | None = None
    tags: list[str] = field(default_factory=list)

    def is_same(self, other: object) -> bool:
        return isinstance(other, Student) and other.name == self.name


@dataclass(slots=True)
class Mission:
    title: str
    description: str = ""
    status: CompletionStatus = CompletionStatus.PENDING

    @property
    def is_completed(self) -> bool:
        return self.status is CompletionStatus.COMPLETED

    def mark_completed(self) -> None:
        self.status = CompletionStatus.COMPLETED

    def is_same(self, other: object) -> bool:
        return isinstance(other, Mission) and other.title == self.title


@dataclass(slots=True)
class Quest:
    title: str
    description: str = ""
    status: CompletionStatus = CompletionStatus.PENDING

    @property
    def is_completed(self) -> bool:
        return self.status is CompletionStatus.COMPLETED

    def mark_completed(self) -> None:
        self.status = CompletionStatus.COMPLETED

    def is_same(self, other: object) -> bool:
        return isinstance(other, Quest) and other.title == self.title


# ---- tasks (closed set of variants sharing one collection) ----


@dataclass(slots=True)
class Todo:
    kind: ClassVar[TaskKind] = TaskKind.TODO

    description: str
    done: bool = False

    def is_same(self, other: object) -> bool:
        return isinstance(other, Todo) and other.description == self.description


@dataclass(slots=True)
class Deadline:
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    description: str
    by: datetime
    done: bool = False

    def is_same(self, other: object) -> bool:
        return (
            isinstance(other, Deadline)
            and other.description == self.description
            and other.by == self.by
        )


@dataclass(slots=True)
class Event:
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    description: str
    start: datetime
    end: datetime
    done: bool = False

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("event end must not be before its start")

    def is_same(self, other: object) -> bool:
        return (
            isinstance(other, Event)
            and other.description == self.description
            and other.start == self.start
            and other.end == self.end
        )


Task = Todo | Deadline | Event


@dataclass(slots=True)
class Consultation:
    student_name: str
    at: datetime
    topic: str = ""

    def is_same(self, other: object) -> bool:
        return (
            isinstance(other, Consultation)
            and other.student_name == self.student_name
            and other.at == self.at
        )
