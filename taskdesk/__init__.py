"""Small terminal tools: task manager, to-do list, guessing game and basic examples."""

__version__ = "0.1.0"