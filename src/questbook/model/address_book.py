# src/questbook/model/address_book.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from .entities import Consultation, Deadline, Event, Mission, Quest, Student, Task, Todo
from .errors import require_non_null
from .ports import ReadOnlyAddressBook
from .unique_list import UniqueItemList

logger = logging.getLogger(__name__)


class AddressBook:
    """
    Entity store: one unique, insertion-ordered collection per category.

    Only ModelManager mutates an AddressBook. Persistence sees it through the
    ReadOnlyAddressBook properties, which return tuples.
    """

    def __init__(self, to_be_copied: ReadOnlyAddressBook | None = None) -> None:
        self._students: UniqueItemList[Student] = UniqueItemList()
        self._missions: UniqueItemList[Mission] = UniqueItemList()
        self._quests: UniqueItemList[Quest] = UniqueItemList()
        self._tasks: UniqueItemList[Task] = UniqueItemList()
        self._consultations: UniqueItemList[Consultation] = UniqueItemList()
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    # ---- bulk ----

    def reset_data(self, new_data: ReadOnlyAddressBook) -> None:
        require_non_null(new_data, names=("new_data",))
        # Validate every collection before touching any of them.
        students = self._students.validated(new_data.student_list)
        missions = self._missions.validated(new_data.mission_list)
        quests = self._quests.validated(new_data.quest_list)
        tasks = self._tasks.validated(new_data.task_list)
        consultations = self._consultations.validated(new_data.consultation_list)

        self._students.assign(students)
        self._missions.assign(missions)
        self._quests.assign(quests)
        self._tasks.assign(tasks)
        self._consultations.assign(consultations)
        logger.debug(
            "Address book reset: students=%d missions=%d quests=%d tasks=%d consultations=%d",
            len(self._students),
            len(self._missions),
            len(self._quests),
            len(self._tasks),
            len(self._consultations),
        )

    def set_students(self, students: Iterable[Student]) -> None:
        self._students.set_all(students)

    def set_missions(self, missions: Iterable[Mission]) -> None:
        self._missions.set_all(missions)

    def set_quests(self, quests: Iterable[Quest]) -> None:
        self._quests.set_all(quests)

    def set_tasks(self, tasks: Iterable[Task]) -> None:
        self._tasks.set_all(tasks)

    def set_consultations(self, consultations: Iterable[Consultation]) -> None:
        self._consultations.set_all(consultations)

    # ---- students ----

    def has_student(self, student: Student) -> bool:
        return self._students.contains(student)

    def has_students(self) -> bool:
        return bool(self._students)

    def add_student(self, student: Student) -> None:
        self._students.add(student)

    def remove_student(self, student: Student) -> None:
        self._students.remove(student)

    def set_student(self, target: Student, edited: Student) -> None:
        self._students.replace(target, edited)

    # ---- missions ----

    def has_mission(self, mission: Mission) -> bool:
        return self._missions.contains(mission)

    def add_mission(self, mission: Mission) -> None:
        self._missions.add(mission)

    def remove_mission(self, mission: Mission) -> None:
        self._missions.remove(mission)

    def is_mission_in_list(self, title: str) -> bool:
        return self._missions.find(lambda m: m.title == title) is not None

    def update_mission(self, title: str) -> bool:
        mission = self._missions.find(lambda m: m.title == title)
        if mission is None:
            return False
        mission.mark_completed()
        logger.debug("Mission marked completed title=%s", title)
        return True

    # ---- quests ----

    def has_quest(self, quest: Quest) -> bool:
        return self._quests.contains(quest)

    def add_quest(self, quest: Quest) -> None:
        self._quests.add(quest)

    def remove_quest(self, quest: Quest) -> None:
        self._quests.remove(quest)

    def is_quest_in_list(self, title: str) -> bool:
        return self._quests.find(lambda q: q.title == title) is not None

    def update_quest(self, title: str) -> bool:
        quest = self._quests.find(lambda q: q.title == title)
        if quest is None:
            return False
        quest.mark_completed()
        logger.debug("Quest marked completed title=%s", title)
        return True

    # ---- tasks ----

    def has_task(self, task: Task) -> bool:
        return self._tasks.contains(task)

    def has_todo(self, todo: Todo) -> bool:
        return self._tasks.contains(todo)

    def has_deadline(self, deadline: Deadline) -> bool:
        return self._tasks.contains(deadline)

    def has_event(self, event: Event) -> bool:
        return self._tasks.contains(event)

    def add_task(self, task: Task) -> None:
        self._tasks.add(task)

    def add_todo(self, todo: Todo) -> None:
        self._tasks.add(todo)

    def add_deadline(self, deadline: Deadline) -> None:
        self._tasks.add(deadline)

    def add_event(self, event: Event) -> None:
        self._tasks.add(event)

    def remove_task(self, task: Task) -> None:
        self._tasks.remove(task)

    # ---- consultations ----

    def has_consultation(self, consultation: Consultation) -> bool:
        return self._consultations.contains(consultation)

    def add_consultation(self, consultation: Consultation) -> None:
        self._consultations.add(consultation)

    def remove_consultation(self, consultation: Consultation) -> None:
        self._consultations.remove(consultation)

    # ---- read-only views (ReadOnlyAddressBook) ----

    @property
    def student_list(self) -> tuple[Student, ...]:
        return self._students.as_tuple()

    @property
    def mission_list(self) -> tuple[Mission, ...]:
        return self._missions.as_tuple()

    @property
    def quest_list(self) -> tuple[Quest, ...]:
        return self._quests.as_tuple()

    @property
    def task_list(self) -> tuple[Task, ...]:
        return self._tasks.as_tuple()

    @property
    def consultation_list(self) -> tuple[Consultation, ...]:
        return self._consultations.as_tuple()

    # Live backing lists for FilteredView construction.

    def live_students(self) -> list[Student]:
        return self._students.backing_list()

    def live_missions(self) -> list[Mission]:
        return self._missions.backing_list()

    def live_quests(self) -> list[Quest]:
        return self._quests.backing_list()

    def live_tasks(self) -> list[Task]:
        return self._tasks.backing_list()

    def live_consultations(self) -> list[Consultation]:
        return self._consultations.backing_list()

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, AddressBook):
            return NotImplemented
        return (
            self._students == other._students
            and self._missions == other._missions
            and self._quests == other._quests
            and self._tasks == other._tasks
            and self._consultations == other._consultations
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"AddressBook(students={len(self._students)}, missions={len(self._missions)}, "
            f"quests={len(self._quests)}, tasks={len(self._tasks)}, "
            f"consultations={len(self._consultations)})"
        )
