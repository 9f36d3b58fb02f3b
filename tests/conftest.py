# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from questbook.model import (
    Consultation,
    Deadline,
    Event,
    Mission,
    ModelManager,
    Quest,
    Student,
    Todo,
)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and UserPrefs.

    We use a SimpleNamespace rather than the real config module so tests do not
    depend on the developer's environment or .env file.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="questbook-test",
        log_level="DEBUG",
        data_dir=data_dir,
        log_dir=data_dir / "logs",
        address_book_path=data_dir / "book.json",
        window_width=1024,
        window_height=768,
        window_x=10,
        window_y=20,
    )


@pytest.fixture()
def model() -> ModelManager:
    return ModelManager()


@pytest.fixture()
def alice() -> Student:
    return Student(name="Alice", email="alice@example.com")


@pytest.fixture()
def bob() -> Student:
    return Student(name="Bob", telegram="@bob")


@pytest.fixture()
def recon() -> Mission:
    return Mission(title="Recon", description="Scout the area")


@pytest.fixture()
def reading_quest() -> Quest:
    return Quest(title="Reading", description="Read chapter 3")


@pytest.fixture()
def todo() -> Todo:
    return Todo(description="Mark scripts")


@pytest.fixture()
def deadline() -> Deadline:
    return Deadline(description="Submit grades", by=datetime(2024, 3, 1, 23, 59))


@pytest.fixture()
def event() -> Event:
    return Event(
        description="Tutorial",
        start=datetime(2024, 3, 2, 10, 0),
        end=datetime(2024, 3, 2, 12, 0),
    )


@pytest.fixture()
def consultation() -> Consultation:
    return Consultation(student_name="Alice", at=datetime(2024, 3, 4, 15, 0), topic="Recursion")
