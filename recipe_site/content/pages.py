from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_PAGE_CONTENT: dict[str, dict[str, dict[str, str]]] = {
    "home": {
        "hero": {
            "title": "Discover Amazing Recipes",
            "subtitle": "From quick weeknight dinners to special occasion treats",
        },
        "featured": {
            "title": "Featured Recipes",
            "subtitle": "Hand-picked recipes that change daily",
        },
        "game": {
            "title": "Test Your Cooking Knowledge!",
            "subtitle": "Challenge yourself with our fun recipe guessing game",
        },
    },
    "all-recipes": {
        "hero": {
            "title": "All Our Delicious Recipes",
            "subtitle": "Browse through our complete collection of recipes",
        },
    },
}


class PageContent(BaseModel):
    page_name: str
    section_name: str
    content_key: str
    content_text: str
    content_type: str = "text"


class PageContentUpdate(BaseModel):
    page_name: str = Field(..., min_length=1)
    section_name: str = Field(..., min_length=1)
    content_key: str = Field(..., min_length=1)
    content_text: str


class PageContentStore:
    """Editable page copy, unique per (page, section, key)."""

    def __init__(self, seed: dict[str, dict[str, dict[str, str]]] | None = None) -> None:
        self._rows: dict[tuple[str, str, str], PageContent] = {}
        for page, sections in (DEFAULT_PAGE_CONTENT if seed is None else seed).items():
            for section, entries in sections.items():
                for key, text in entries.items():
                    self.update(page, section, key, text)

    def get_page(self, page_name: str) -> list[PageContent]:
        rows = [row for (page, _, _), row in self._rows.items() if page == page_name]
        return sorted(rows, key=lambda r: (r.section_name, r.content_key))

    def section_map(self, page_name: str) -> dict[str, dict[str, str]]:
        """``{section: {key: text}}`` for a page, or the default copy if empty."""
        rows = self.get_page(page_name)
        if not rows:
            return {s: dict(e) for s, e in DEFAULT_PAGE_CONTENT.get(page_name, {}).items()}
        sections: dict[str, dict[str, str]] = {}
        for row in rows:
            sections.setdefault(row.section_name, {})[row.content_key] = row.content_text
        return sections

    def update(self, page_name: str, section_name: str, content_key: str, content_text: str) -> PageContent:
        row = PageContent(
            page_name=page_name,
            section_name=section_name,
            content_key=content_key,
            content_text=content_text,
        )
        self._rows[(page_name, section_name, content_key)] = row
        return row


_store: PageContentStore | None = None


def get_page_store() -> PageContentStore:
    global _store
    if _store is None:
        _store = PageContentStore()
    return _store


def reset_page_store() -> None:
    global _store
    _store = None
