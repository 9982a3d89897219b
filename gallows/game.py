"""Hangman game state and its text display."""

from __future__ import annotations

import string
import sys
import time
from collections.abc import Callable
from typing import Protocol, TextIO

MAX_ATTEMPTS = 6
VOWELS = "aeiou"

_BASE_FIGURE = (
    "  +---+",
    "  |   |",
    "      |",
    "      |",
    "      |",
    "      |",
    "=========",
)

# attempts left -> (row, column, character) drawn at that point
_PARTS = {
    5: (2, 2, "O"),
    4: (3, 2, "|"),
    3: (3, 1, "/"),
    2: (3, 3, "\\"),
    1: (4, 1, "/"),
    0: (4, 3, "\\"),
}


class _WordSource(Protocol):
    def random_word(self) -> str: ...


class HangmanGame:
    """One hangman game: the hidden word, the guesses and the drawn figure."""

    def __init__(
        self,
        words: _WordSource,
        out: TextIO | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._out = out
        self._clock = clock
        self.current_word = words.random_word()
        self.attempts_left = MAX_ATTEMPTS
        self.guessed_letters = ""
        self.tries = 0
        self._start_time = clock()
        self._figure = [list(row) for row in _BASE_FIGURE]

    def _say(self, *lines: str, end: str = "\n") -> None:
        out = self._out or sys.stdout
        for line in lines:
            out.write(line + end)
        out.flush()

    def start(self) -> None:
        """Greet the player and start the timer."""
        self._say(
            "Welcome to the Hangman Game!",
            "You will have to guess the word by suggesting letters.",
            "You have a six attempts.",
            "Let's start timer!",
        )
        self._start_time = self._clock()
        self.tries += 1

    def reset(self, words: _WordSource) -> None:
        """Start over with a new word."""
        self.current_word = words.random_word()
        self.attempts_left = MAX_ATTEMPTS
        self.guessed_letters = ""
        self._start_time = self._clock()
        self._figure = [list(row) for row in _BASE_FIGURE]
        self.tries += 1

    def guess_letter(self, letter: str) -> None:
        """Try one letter; a wrong one costs an attempt and draws a part."""
        if len(letter) != 1 or letter not in string.ascii_letters:
            self._say("Please enter a valid English letter.")
            return
        letter = letter.lower()
        if letter in self.guessed_letters:
            self._say(f"You already guessed the letter: {letter}")
            return
        self.guessed_letters += letter
        if letter not in self.current_word:
            self.attempts_left -= 1
            self._say(
                f"Wrong guess! Letter {letter} doesn`t belong to this word.\n"
                f"Attempts left: {self.attempts_left}"
            )
            part = _PARTS.get(self.attempts_left)
            if part is not None:
                row, col, char = part
                self._figure[row][col] = char
        else:
            self._say("Good guess!")

    def is_game_over(self) -> bool:
        return self.attempts_left <= 0

    def is_word_guessed(self) -> bool:
        return all(c in self.guessed_letters for c in self.current_word)

    def open_two_letters(self) -> None:
        """Reveal the first two vowels of the word."""
        if len(self.current_word) < 2:
            self._say("The word is too short to open two letters.")
            return
        opened = [c for c in self.current_word if c in VOWELS][:2]
        if not opened:
            self._say("There are no vowels to open.")
        else:
            self.guessed_letters += "".join(opened)
            self._say("Two letters opened: " + " and ".join(opened))
        self.show_current_state()

    def figure(self) -> list[str]:
        """The gallows drawing as lines of text."""
        return ["".join(row) for row in self._figure]

    def masked_word(self) -> str:
        """The word with unguessed letters shown as underscores."""
        return " ".join(c if c in self.guessed_letters else "_" for c in self.current_word)

    def show_hangman(self) -> None:
        self._say(*self.figure())

    def show_current_state(self) -> None:
        self._say(f"Current word: {self.masked_word()} ", end="")
        self.show_guessed_letters()

    def show_guessed_letters(self) -> None:
        self._say("Your guessed letters: " + ", ".join(self.guessed_letters))

    def show_statistics(self) -> None:
        duration = int(self._clock() - self._start_time)
        self._say(
            f"Game time: {duration} seconds.",
            f"Attempts: {self.tries}",
            f"The word was: {self.current_word}",
        )
        self.show_guessed_letters()

    def finish(self) -> None:
        """Show the final drawing, the outcome and the statistics."""
        self.show_hangman()
        if self.is_word_guessed():
            self._say(f"Congratulations! You guessed the word: {self.current_word}")
        else:
            self._say("Game Over!", "You ran out of attempts!")
        self.show_statistics()