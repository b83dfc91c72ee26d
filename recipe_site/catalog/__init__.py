"""
Recipe catalogue.

Responsibilities:
- Load the recipe collection and keep it in an in-memory store.
- Filter and sort the collection for the browsing views.
- Track featured recipes and admin dashboard stats.
"""
