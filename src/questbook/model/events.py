# src/questbook/model/events.py

"""
Property change notification.

A small synchronous observer registry: listeners are plain callables, called
in registration order with a PropertyChangeEvent. Delivery is not re-entrant;
a listener must not trigger another change on the same source.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PropertyChangeEvent:
    source: object
    property_name: str
    old_value: Any
    new_value: Any


PropertyChangeListener = Callable[[PropertyChangeEvent], None]


class ChangeSupport:
    """Manages listener registration and dispatch for one source object."""

    def __init__(self, source: object) -> None:
        self._source = source
        self._listeners: list[PropertyChangeListener] = []

    def add_listener(self, listener: PropertyChangeListener) -> None:
        """
        Add a listener.

        Args:
            listener: Callback invoked with each PropertyChangeEvent.
        """
        if listener is None:
            raise ValueError("listener is required")
        self._listeners.append(listener)

    def remove_listener(self, listener: PropertyChangeListener) -> bool:
        """
        Remove the first registration of ``listener``.

        Returns:
            True if the listener was registered.
        """
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def listener_count(self) -> int:
        return len(self._listeners)

    def fire(self, property_name: str, old_value: Any, new_value: Any) -> None:
        """
        Dispatch a change to every listener, in registration order.

        Exceptions raised by a listener propagate to the caller and stop
        delivery to the remaining listeners.
        """
        event = PropertyChangeEvent(self._source, property_name, old_value, new_value)
        logger.debug("Firing %s to %d listener(s)", property_name, len(self._listeners))
        # Snapshot so a listener unsubscribing itself does not skip its neighbour.
        for listener in list(self._listeners):
            listener(event)
