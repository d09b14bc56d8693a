"""A text-driven cave exploration adventure with a console front end."""

__version__ = "0.1.0"
__all__ = ["cli", "field", "game", "inventory", "item", "level", "player", "signals", "states"]