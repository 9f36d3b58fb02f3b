# src/questbook/model/ports.py

"""
Ports (interfaces) at the edge of the model layer.

Persistence hands the model read-only snapshots and receives the live objects
back (as these read-only views) when saving.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .entities import Consultation, Mission, Quest, Student, Task
    from .user_prefs import GuiSettings


class ReadOnlyAddressBook(Protocol):
    @property
    def student_list(self) -> Sequence[Student]: ...
    @property
    def mission_list(self) -> Sequence[Mission]: ...
    @property
    def quest_list(self) -> Sequence[Quest]: ...
    @property
    def task_list(self) -> Sequence[Task]: ...
    @property
    def consultation_list(self) -> Sequence[Consultation]: ...


class ReadOnlyUserPrefs(Protocol):
    @property
    def gui_settings(self) -> GuiSettings: ...
    @property
    def address_book_file_path(self) -> Path: ...


class ReadOnlyUserLogin(Protocol):
    @property
    def username(self) -> str | None: ...
    @property
    def password(self) -> str | None: ...
