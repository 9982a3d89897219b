"""Word list loaded from an encrypted JSON file."""

from __future__ import annotations

import json
import random
import sys
from os import PathLike
from pathlib import Path

from .cipher import DEFAULT_SHIFT, decrypt_words


class WordList:
    """Words read from a JSON file of the form ``{"words": [...]}``, stored encrypted."""

    def __init__(self, path: str | PathLike[str], shift: int = DEFAULT_SHIFT) -> None:
        self.path = Path(path)
        self.shift = shift
        self.words: list[str] = []
        self.load()

    def load(self) -> None:
        """Read and decrypt the words; an unreadable file leaves the list as it was."""
        try:
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except OSError:
            print(f"Error opening file: {self.path}", file=sys.stderr)
            return
        encrypted = data["words"]
        if not isinstance(encrypted, list) or not all(isinstance(w, str) for w in encrypted):
            raise TypeError("'words' must be a list of strings")
        self.words = decrypt_words(encrypted, self.shift)

    def random_word(self, rng: random.Random | None = None) -> str:
        """Return a word chosen at random."""
        if not self.words:
            raise RuntimeError("No words available in the list.")
        chooser = rng if rng is not None else random
        return chooser.choice(self.words)