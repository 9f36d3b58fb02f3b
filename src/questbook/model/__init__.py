# src/questbook/model/__init__.py

from .address_book import AddressBook
from .entities import (
    CompletionStatus,
    Consultation,
    Deadline,
    Event,
    Mission,
    Quest,
    Student,
    Task,
    TaskKind,
    Todo,
)
from .errors import DuplicateEntityError, EntityNotFoundError, ModelError
from .events import ChangeSupport, PropertyChangeEvent
from .filtered import (
    PREDICATE_SHOW_ALL,
    PREDICATE_SHOW_ALL_CONSULTATIONS,
    PREDICATE_SHOW_ALL_MISSIONS,
    PREDICATE_SHOW_ALL_QUESTS,
    PREDICATE_SHOW_ALL_STUDENTS,
    PREDICATE_SHOW_ALL_TASKS,
    FilteredView,
)
from .model_manager import ModelManager
from .user_login import UserLogin
from .user_prefs import GuiSettings, UserPrefs

__all__ = [
    "AddressBook",
    "ChangeSupport",
    "CompletionStatus",
    "Consultation",
    "Deadline",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "Event",
    "FilteredView",
    "GuiSettings",
    "Mission",
    "ModelError",
    "ModelManager",
    "PREDICATE_SHOW_ALL",
    "PREDICATE_SHOW_ALL_CONSULTATIONS",
    "PREDICATE_SHOW_ALL_MISSIONS",
    "PREDICATE_SHOW_ALL_QUESTS",
    "PREDICATE_SHOW_ALL_STUDENTS",
    "PREDICATE_SHOW_ALL_TASKS",
    "PropertyChangeEvent",
    "Quest",
    "Student",
    "Task",
    "TaskKind",
    "Todo",
    "UserLogin",
    "UserPrefs",
]
