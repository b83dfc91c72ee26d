from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class KeyValueStore:
    """JSON-style values keyed by name (the settings table)."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        value = self._values.get(key)
        return copy.deepcopy(value)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = copy.deepcopy(value)

    def clear(self) -> None:
        self._values.clear()


class SettingsRepository(Generic[T]):
    """Typed settings stored under one key, with change notification.

    ``get()`` merges whatever is stored over the model defaults, so settings
    saved by an older version still load. ``save()`` is last-write-wins and
    every subscriber sees the new value before ``save()`` returns.
    """

    def __init__(self, key: str, model: type[T], store: KeyValueStore) -> None:
        self.key = key
        self.model = model
        self._store = store
        self._subscribers: list[Callable[[T], None]] = []

    def get(self) -> T:
        stored = self._store.get(self.key)
        if not stored:
            return self.model()
        defaults = self.model().model_dump()
        try:
            return self.model.model_validate({**defaults, **stored})
        except ValueError:
            logger.warning("Ignoring invalid stored settings for %s", self.key, exc_info=True)
            return self.model()

    def save(self, settings: T) -> T:
        self._store.set(self.key, settings.model_dump(mode="json"))
        for callback in list(self._subscribers):
            callback(settings)
        return settings

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register *callback*; the returned function unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe
