"""
Cooking game.

Responsibilities:
- Load the fixed game recipe dataset and its ingredient vocabulary.
- Pick rounds, build the ingredient pool and score ingredient guesses.
- Drive the one-second countdown and the pause between rounds.
"""
