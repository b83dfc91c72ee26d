"""
Recipe publishing site backend.

Responsibilities:
- Serve the public recipe catalogue with search, filtering and sorting.
- Let the admin manage recipes, featured picks, page copy and site settings.
- Run the ingredient-guessing cooking game.
"""
