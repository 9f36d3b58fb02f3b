# src/questbook/bootstrap.py

"""
Composition root.

- loads settings once (unless injected),
- ensures the local data directory exists,
- builds the ModelManager that is then passed explicitly to whoever needs it.

There is no global model instance; callers keep the returned object.
"""

from __future__ import annotations

import logging

from .config import Settings, get_settings
from .logging_setup import setup_logging
from .model.model_manager import ModelManager
from .model.ports import ReadOnlyAddressBook, ReadOnlyUserLogin, ReadOnlyUserPrefs
from .model.user_prefs import UserPrefs

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.address_book_path.parent.mkdir(parents=True, exist_ok=True)


def create_model(
    *,
    settings: Settings | None = None,
    address_book: ReadOnlyAddressBook | None = None,
    user_prefs: ReadOnlyUserPrefs | None = None,
    user_login: ReadOnlyUserLogin | None = None,
    configure_logging: bool = False,
) -> ModelManager:
    """
    Create a ModelManager.

    ``address_book`` and ``user_prefs`` are what the storage layer loaded, if
    anything. Missing preferences fall back to defaults derived from settings.
    With ``configure_logging`` the log file goes to ``settings.log_dir`` and the
    console uses ``settings.log_level``.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)
    if configure_logging:
        setup_logging(log_dir=settings.log_dir, console_level=settings.log_level)

    if user_prefs is None:
        user_prefs = UserPrefs.from_settings(settings)

    model = ModelManager(address_book, user_prefs, user_login)
    logger.info(
        "Model ready app=%s address_book=%s",
        settings.app_name,
        model.get_address_book_file_path(),
    )
    return model
