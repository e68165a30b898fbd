"""A console detective game: explore a mansion, collect clues, accuse a suspect."""

__version__ = "0.1.0"
__all__ = ["mansion", "clues", "novice", "adventurer", "master"]