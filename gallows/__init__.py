"""A console Hangman game with a Caesar-encrypted word list."""

__version__ = "0.1.0"
__all__ = ["cipher", "words", "console", "game", "cli"]