"""
Site copy.

Responsibilities:
- Store editable page text per (page, section, key).
- Provide the en/es/fr interface strings.
- Serve the demo Instagram feed.
"""
