"""Reaction, mood and personality engine for companion robots, with touch, user, message and question helpers."""

__version__ = "1.0.0"
__all__ = [
    "config",
    "reactions",
    "rewards",
    "personality",
    "generator",
    "gemini",
    "touch",
    "users",
    "link",
]