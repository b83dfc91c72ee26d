from __future__ import annotations

DEFAULT_LANGUAGE = "en"

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "site.title": "Delicious Recipes",
        "site.subtitle": "Cooking Made Easy",
        "nav.home": "Home",
        "nav.recipes": "Recipes",
        "nav.about": "About Us",
        "nav.faq": "FAQ",
        "nav.disclaimer": "Disclaimer",
        "hero.title": "Discover Amazing Recipes",
        "hero.subtitle": "From quick weeknight dinners to special occasion treats",
        "featured.title": "Featured Recipes",
        "featured.subtitle": "Hand-picked recipes that change daily",
        "search.placeholder": "Search recipes...",
        "filter.categories": "Categories",
        "filter.difficulty": "Difficulty",
        "filter.time": "Time",
        "footer.rights": "All rights reserved",
    },
    "es": {
        "site.title": "Recetas Deliciosas",
        "site.subtitle": "Cocinar Hecho Fácil",
        "nav.home": "Inicio",
        "nav.recipes": "Recetas",
        "nav.about": "Acerca de",
        "nav.faq": "Preguntas",
        "nav.disclaimer": "Descargo",
        "hero.title": "Descubre Recetas Increíbles",
        "hero.subtitle": "Desde cenas rápidas hasta delicias especiales",
        "featured.title": "Recetas Destacadas",
        "featured.subtitle": "Recetas seleccionadas que cambian diariamente",
        "search.placeholder": "Buscar recetas...",
        "filter.categories": "Categorías",
        "filter.difficulty": "Dificultad",
        "filter.time": "Tiempo",
        "footer.rights": "Todos los derechos reservados",
    },
    "fr": {
        "site.title": "Recettes Délicieuses",
        "site.subtitle": "Cuisine Facile",
        "nav.home": "Accueil",
        "nav.recipes": "Recettes",
        "nav.about": "À Propos",
        "nav.faq": "FAQ",
        "nav.disclaimer": "Avertissement",
        "hero.title": "Découvrez des Recettes Incroyables",
        "hero.subtitle": "Des dîners rapides aux délices spéciaux",
        "featured.title": "Recettes Vedettes",
        "featured.subtitle": "Recettes sélectionnées qui changent quotidiennement",
        "search.placeholder": "Rechercher des recettes...",
        "filter.categories": "Catégories",
        "filter.difficulty": "Difficulté",
        "filter.time": "Temps",
        "footer.rights": "Tous droits réservés",
    },
}

SUPPORTED_LANGUAGES: list[str] = list(TRANSLATIONS)


def translate(key: str, language: str = DEFAULT_LANGUAGE, fallback: str | None = None) -> str:
    """Look up *key* for *language*; fall back to *fallback*, then the key itself."""
    text = TRANSLATIONS.get(language, {}).get(key)
    if text is not None:
        return text
    return fallback if fallback is not None else key
