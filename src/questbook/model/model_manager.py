# src/questbook/model/model_manager.py

"""
ModelManager: the in-memory model handed to command handlers and the UI.

It owns the address book, the user preferences and the session state, and
exposes one live FilteredView per entity category. Every method validates its
arguments before touching any state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .address_book import AddressBook
from .entities import Consultation, Deadline, Event, Mission, Quest, Student, Task, Todo
from .errors import require_non_null
from .events import PropertyChangeListener
from .filtered import PREDICATE_SHOW_ALL_STUDENTS, FilteredView, Predicate
from .ports import ReadOnlyAddressBook, ReadOnlyUserLogin, ReadOnlyUserPrefs
from .user_login import UserLogin
from .user_prefs import GuiSettings, UserPrefs

logger = logging.getLogger(__name__)


class ModelManager:
    def __init__(
        self,
        address_book: ReadOnlyAddressBook | None = None,
        user_prefs: ReadOnlyUserPrefs | None = None,
        user_login: ReadOnlyUserLogin | None = None,
    ) -> None:
        logger.debug("Initializing with address book: %r and user prefs %r", address_book, user_prefs)

        self._address_book = AddressBook(address_book)
        self._user_prefs = UserPrefs.copy_of(user_prefs) if user_prefs is not None else UserPrefs()
        self._user_login = UserLogin(user_login)

        self._filtered_students: FilteredView[Student] = FilteredView(self._address_book.live_students())
        self._filtered_missions: FilteredView[Mission] = FilteredView(self._address_book.live_missions())
        self._filtered_quests: FilteredView[Quest] = FilteredView(self._address_book.live_quests())
        self._filtered_tasks: FilteredView[Task] = FilteredView(self._address_book.live_tasks())
        self._filtered_consultations: FilteredView[Consultation] = FilteredView(
            self._address_book.live_consultations()
        )

    # ---- user prefs ----

    def set_user_prefs(self, user_prefs: ReadOnlyUserPrefs) -> None:
        require_non_null(user_prefs, names=("user_prefs",))
        self._user_prefs.reset_data(user_prefs)

    def get_user_prefs(self) -> UserPrefs:
        return self._user_prefs

    def get_gui_settings(self) -> GuiSettings:
        return self._user_prefs.gui_settings

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        require_non_null(gui_settings, names=("gui_settings",))
        self._user_prefs.set_gui_settings(gui_settings)

    def get_address_book_file_path(self) -> Path:
        return self._user_prefs.address_book_file_path

    def set_address_book_file_path(self, path: Path) -> None:
        require_non_null(path, names=("path",))
        self._user_prefs.set_address_book_file_path(path)

    # ---- user login ----

    def get_user_login(self) -> UserLogin:
        return self._user_login

    def set_user_login(self, user_login: ReadOnlyUserLogin) -> None:
        require_non_null(user_login, names=("user_login",))
        self._user_login.reset_data(user_login)

    def has_username(self) -> bool:
        return self._user_login.has_username()

    def has_password(self) -> bool:
        return self._user_login.has_password()

    def add_property_change_listener(self, listener: PropertyChangeListener) -> None:
        require_non_null(listener, names=("listener",))
        self._user_login.add_property_change_listener(listener)

    def remove_property_change_listener(self, listener: PropertyChangeListener) -> bool:
        return self._user_login.remove_property_change_listener(listener)

    # ---- address book ----

    def set_address_book(self, address_book: ReadOnlyAddressBook) -> None:
        require_non_null(address_book, names=("address_book",))
        self._address_book.reset_data(address_book)

    def get_address_book(self) -> AddressBook:
        return self._address_book

    # ---- students ----

    def has_person(self, student: Student) -> bool:
        require_non_null(student, names=("student",))
        return self._address_book.has_student(student)

    def delete_person(self, target: Student) -> None:
        require_non_null(target, names=("target",))
        self._address_book.remove_student(target)

    def add_person(self, student: Student) -> None:
        require_non_null(student, names=("student",))
        self._address_book.add_student(student)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL_STUDENTS)

    def set_students(self, students: Iterable[Student]) -> None:
        require_non_null(students, names=("students",))
        self._address_book.set_students(students)

    def set_person(self, target: Student, edited_student: Student) -> None:
        require_non_null(target, edited_student, names=("target", "edited_student"))
        self._address_book.set_student(target, edited_student)

    def has_students(self) -> bool:
        return self._address_book.has_students()

    def get_filtered_student_list(self) -> FilteredView[Student]:
        return self._filtered_students

    def update_filtered_person_list(self, predicate: Predicate[Student]) -> None:
        require_non_null(predicate, names=("predicate",))
        self._filtered_students.set_predicate(predicate)

    # ---- missions ----

    def add_mission(self, mission: Mission) -> None:
        require_non_null(mission, names=("mission",))
        self._address_book.add_mission(mission)

    def set_missions(self, missions: Iterable[Mission]) -> None:
        require_non_null(missions, names=("missions",))
        self._address_book.set_missions(missions)

    def is_mission_in_list(self, title: str) -> bool:
        assert title, "No mission title provided"
        return self._address_book.is_mission_in_list(title)

    def update_mission(self, title: str) -> bool:
        assert title, "No mission title provided"
        return self._address_book.update_mission(title)

    def get_filtered_mission_list(self) -> FilteredView[Mission]:
        return self._filtered_missions

    def update_missions_list(self, predicate: Predicate[Mission]) -> None:
        require_non_null(predicate, names=("predicate",))
        self._filtered_missions.set_predicate(predicate)

    # ---- quests ----

    def add_quest(self, quest: Quest) -> None:
        require_non_null(quest, names=("quest",))
        self._address_book.add_quest(quest)

    def set_quests(self, quests: Iterable[Quest]) -> None:
        require_non_null(quests, names=("quests",))
        self._address_book.set_quests(quests)

    def is_quest_in_list(self, title: str) -> bool:
        assert title, "No quest title provided"
        return self._address_book.is_quest_in_list(title)

    def update_quest(self, title: str) -> bool:
        assert title, "No quest title provided"
        return self._address_book.update_quest(title)

    def get_filtered_quest_list(self) -> FilteredView[Quest]:
        return self._filtered_quests

    def update_quests_list(self, predicate: Predicate[Quest]) -> None:
        require_non_null(predicate, names=("predicate",))
        self._filtered_quests.set_predicate(predicate)

    # ---- tasks ----

    def has_todo(self, todo: Todo) -> bool:
        require_non_null(todo, names=("todo",))
        return self._address_book.has_todo(todo)

    def add_todo(self, todo: Todo) -> None:
        require_non_null(todo, names=("todo",))
        self._address_book.add_todo(todo)

    def has_event(self, event: Event) -> bool:
        require_non_null(event, names=("event",))
        return self._address_book.has_event(event)

    def add_event(self, event: Event) -> None:
        require_non_null(event, names=("event",))
        self._address_book.add_event(event)

    def has_deadline(self, deadline: Deadline) -> bool:
        require_non_null(deadline, names=("deadline",))
        return self._address_book.has_deadline(deadline)

    def add_deadline(self, deadline: Deadline) -> None:
        require_non_null(deadline, names=("deadline",))
        self._address_book.add_deadline(deadline)

    def delete_task(self, target: Task) -> None:
        require_non_null(target, names=("target",))
        self._address_book.remove_task(target)

    def get_filtered_task_list(self) -> FilteredView[Task]:
        return self._filtered_tasks

    def update_filtered_task_list(self, predicate: Predicate[Task]) -> None:
        require_non_null(predicate, names=("predicate",))
        self._filtered_tasks.set_predicate(predicate)

    # ---- consultations ----

    def has_consultation(self, consultation: Consultation) -> bool:
        require_non_null(consultation, names=("consultation",))
        return self._address_book.has_consultation(consultation)

    def add_consultation(self, consultation: Consultation) -> None:
        require_non_null(consultation, names=("consultation",))
        self._address_book.add_consultation(consultation)

    def get_filtered_consultations_list(self) -> FilteredView[Consultation]:
        return self._filtered_consultations

    def update_filtered_consultations_list(self, predicate: Predicate[Consultation]) -> None:
        require_non_null(predicate, names=("predicate",))
        self._filtered_consultations.set_predicate(predicate)

    # ---- equality ----

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ModelManager):
            return NotImplemented
        # Session state and the non-student views are not part of equality.
        return (
            self._address_book == other._address_book
            and self._user_prefs == other._user_prefs
            and self._filtered_students == other._filtered_students
        )

    __hash__ = None  # type: ignore[assignment]
