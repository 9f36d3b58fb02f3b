# src/questbook/model/user_prefs.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import require_non_null
from .ports import ReadOnlyUserPrefs

if TYPE_CHECKING:
    from ..config import Settings

DEFAULT_ADDRESS_BOOK_PATH = Path("data") / "addressbook.json"


@dataclass(frozen=True, slots=True)
class GuiSettings:
    """Window size and (optional) position."""

    window_width: int = 740
    window_height: int = 600
    window_x: int | None = None
    window_y: int | None = None


@dataclass(slots=True)
class UserPrefs:
    gui_settings: GuiSettings = field(default_factory=GuiSettings)
    address_book_file_path: Path = DEFAULT_ADDRESS_BOOK_PATH

    @classmethod
    def copy_of(cls, other: ReadOnlyUserPrefs) -> UserPrefs:
        prefs = cls()
        prefs.reset_data(other)
        return prefs

    @classmethod
    def from_settings(cls, settings: Settings) -> UserPrefs:
        """Default preferences for a fresh install, taken from app settings."""
        return cls(
            gui_settings=GuiSettings(
                window_width=settings.window_width,
                window_height=settings.window_height,
                window_x=settings.window_x,
                window_y=settings.window_y,
            ),
            address_book_file_path=Path(settings.address_book_path),
        )

    def reset_data(self, new_prefs: ReadOnlyUserPrefs) -> None:
        require_non_null(new_prefs, names=("new_prefs",))
        self.set_gui_settings(new_prefs.gui_settings)
        self.set_address_book_file_path(new_prefs.address_book_file_path)

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        require_non_null(gui_settings, names=("gui_settings",))
        self.gui_settings = gui_settings

    def set_address_book_file_path(self, path: Path) -> None:
        require_non_null(path, names=("path",))
        self.address_book_file_path = Path(path)
