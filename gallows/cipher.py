"""Caesar cipher used to store the word list on disk."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from string import ascii_lowercase, ascii_uppercase

DEFAULT_SHIFT = 3


@lru_cache(maxsize=64)
def _table(offset: int) -> dict[int, int]:
    k = offset % 26
    lower = ascii_lowercase[k:] + ascii_lowercase[:k]
    upper = ascii_uppercase[k:] + ascii_uppercase[:k]
    return str.maketrans(ascii_lowercase + ascii_uppercase, lower + upper)


def caesar_decrypt(word: str, shift: int = DEFAULT_SHIFT) -> str:
    """Shift every ASCII letter of ``word`` back by ``shift`` places, keeping case."""
    return word.translate(_table(-shift))


def caesar_encrypt(word: str, shift: int = DEFAULT_SHIFT) -> str:
    """Shift every ASCII letter of ``word`` forward by ``shift`` places, keeping case."""
    return word.translate(_table(shift))


def decrypt_words(words: Iterable[str], shift: int = DEFAULT_SHIFT) -> list[str]:
    """Decrypt each word in ``words``."""
    return [caesar_decrypt(word, shift) for word in words]