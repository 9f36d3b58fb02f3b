# src/questbook/model/user_login.py

from __future__ import annotations

import logging

from .errors import require_non_null
from .events import ChangeSupport, PropertyChangeListener
from .ports import ReadOnlyUserLogin

logger = logging.getLogger(__name__)

LOGIN_DETAILS_PROPERTY = "login_details"


class UserLogin:
    """
    Session state: the current username and password, if any.

    Listeners registered here are told about every reset_data() call *before*
    the fields change. The old value they receive is a detached copy.
    """

    def __init__(self, to_be_copied: ReadOnlyUserLogin | None = None) -> None:
        self._username: str | None = None
        self._password: str | None = None
        self._support = ChangeSupport(self)
        if to_be_copied is not None:
            self._username = to_be_copied.username
            self._password = to_be_copied.password

    @classmethod
    def of(cls, username: str | None = None, password: str | None = None) -> UserLogin:
        login = cls()
        login._username = username
        login._password = password
        return login

    @property
    def username(self) -> str | None:
        return self._username

    @property
    def password(self) -> str | None:
        return self._password

    def has_username(self) -> bool:
        return bool(self._username)

    def has_password(self) -> bool:
        return bool(self._password)

    def snapshot(self) -> UserLogin:
        """A listener-free copy of the current credentials."""
        return UserLogin.of(self._username, self._password)

    def reset_data(self, new_login: ReadOnlyUserLogin) -> None:
        require_non_null(new_login, names=("new_login",))
        self._support.fire(LOGIN_DETAILS_PROPERTY, self.snapshot(), new_login)
        self._username = new_login.username
        self._password = new_login.password
        logger.info(
            "Login details updated has_username=%s has_password=%s",
            self.has_username(),
            self.has_password(),
        )

    def add_property_change_listener(self, listener: PropertyChangeListener) -> None:
        self._support.add_listener(listener)

    def remove_property_change_listener(self, listener: PropertyChangeListener) -> bool:
        return self._support.remove_listener(listener)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserLogin):
            return NotImplemented
        return self._username == other._username and self._password == other._password

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        # Never print the password itself.
        return f"UserLogin(username={self._username!r}, has_password={self.has_password()})"
