"""
Site-wide settings.

Responsibilities:
- Persist settings objects in a key-value table.
- Notify subscribers synchronously whenever settings are saved.
- Turn background settings into CSS properties.
"""
