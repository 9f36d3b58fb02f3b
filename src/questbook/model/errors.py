# src/questbook/model/errors.py

from __future__ import annotations


class ModelError(Exception):
    """Base class for structural errors raised by the model layer."""


class DuplicateEntityError(ModelError, ValueError):
    """An operation would leave two same entities in one collection."""


class EntityNotFoundError(ModelError, LookupError):
    """The entity to replace does not exist in the collection."""


def require_non_null(*values: object, names: tuple[str, ...] = ()) -> None:
    """Raise ValueError if any of ``values`` is None."""
    for i, v in enumerate(values):
        if v is None:
            name = names[i] if i < len(names) else f"argument {i}"
            raise ValueError(f"{name} is required")
