# tests/test_user_login.py

from __future__ import annotations

import pytest

from questbook.model import ChangeSupport, PropertyChangeEvent, UserLogin


def test_presence_predicates() -> None:
    login = UserLogin()
    assert not login.has_username()
    assert not login.has_password()

    login.reset_data(UserLogin.of("tutor", "s3cret"))
    assert login.has_username()
    assert login.has_password()

    login.reset_data(UserLogin.of("tutor", None))
    assert login.has_username()
    assert not login.has_password()

    # Empty strings count as absent.
    login.reset_data(UserLogin.of("", ""))
    assert not login.has_username()
    assert not login.has_password()


def test_listeners_fire_once_with_old_and_new_before_fields_change() -> None:
    login = UserLogin.of("old-user", None)
    seen: list[tuple[str | None, str | None, bool]] = []

    def listener(event: PropertyChangeEvent) -> None:
        # Fields are still the old ones while listeners run.
        seen.append((event.old_value.username, event.new_value.username, login.username == "old-user"))

    login.add_property_change_listener(listener)
    new = UserLogin.of("new-user", "pw")
    login.reset_data(new)

    assert seen == [("old-user", "new-user", True)]
    assert login.username == "new-user"


def test_old_value_is_a_detached_snapshot() -> None:
    login = UserLogin.of("a", "1")
    events: list[PropertyChangeEvent] = []
    login.add_property_change_listener(events.append)

    login.reset_data(UserLogin.of("b", "2"))

    assert events[0].old_value == UserLogin.of("a", "1")
    assert events[0].old_value is not login
    assert events[0].property_name == "login_details"
    assert events[0].source is login


def test_listeners_are_called_in_registration_order_and_can_be_removed() -> None:
    login = UserLogin()
    calls: list[str] = []

    def first(_: PropertyChangeEvent) -> None:
        calls.append("first")

    def second(_: PropertyChangeEvent) -> None:
        calls.append("second")

    login.add_property_change_listener(first)
    login.add_property_change_listener(second)
    login.reset_data(UserLogin.of("x"))
    assert calls == ["first", "second"]

    assert login.remove_property_change_listener(first) is True
    assert login.remove_property_change_listener(first) is False
    login.reset_data(UserLogin.of("y"))
    assert calls == ["first", "second", "second"]


def test_reset_with_none_fails_without_notifying() -> None:
    login = UserLogin.of("keep")
    events: list[PropertyChangeEvent] = []
    login.add_property_change_listener(events.append)

    with pytest.raises(ValueError):
        login.reset_data(None)  # type: ignore[arg-type]

    assert events == []
    assert login.username == "keep"


def test_listener_error_propagates() -> None:
    support = ChangeSupport(source="src")

    def boom(_: PropertyChangeEvent) -> None:
        raise RuntimeError("listener failed")

    support.add_listener(boom)
    with pytest.raises(RuntimeError):
        support.fire("p", 1, 2)


def test_change_support_rejects_none_listener() -> None:
    with pytest.raises(ValueError):
        ChangeSupport(source=None).add_listener(None)  # type: ignore[arg-type]


def test_repr_hides_password() -> None:
    assert "s3cret" not in repr(UserLogin.of("tutor", "s3cret"))
