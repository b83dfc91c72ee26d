from __future__ import annotations

from ..content.instagram import InstagramSettings
from .background import BackgroundSettings
from .repository import KeyValueStore, SettingsRepository

_store = KeyValueStore()

background_settings: SettingsRepository[BackgroundSettings] = SettingsRepository(
    "backgroundSettings", BackgroundSettings, _store,
)
instagram_settings: SettingsRepository[InstagramSettings] = SettingsRepository(
    "instagramSettings", InstagramSettings, _store,
)


def clear_settings() -> None:
    _store.clear()
