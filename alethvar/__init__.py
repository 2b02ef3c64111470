"""A turn-based text role-playing game set around the village of Alethvar."""

__version__ = "0.1.0"
__all__ = ["abilities", "creature", "monster", "player", "ally", "battle", "game"]