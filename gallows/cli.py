"""Command-line entry point for the hangman game."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable
from typing import TextIO

from .cipher import DEFAULT_SHIFT
from .console import clear_screen, read_key, show_menu
from .game import HangmanGame
from .words import WordList

OPEN_OPTIONS = ["Don't open letters", "Open two letters"]
PLAY_AGAIN_OPTIONS = ["Play again", "Exit"]


def run(
    words: WordList,
    read: Callable[[], int] | None = None,
    out: TextIO | None = None,
    clear: Callable[[], None] | None = None,
    delay: float = 1.0,
) -> None:
    """Play rounds until the player chooses to exit."""
    read = read or read_key
    out = out or sys.stdout
    clear = clear or clear_screen
    game = HangmanGame(words, out)
    while True:
        game.start()
        if show_menu(OPEN_OPTIONS, "Do you want to open two letters?", read, out, clear) == 1:
            game.open_two_letters()

        while not game.is_game_over() and not game.is_word_guessed():
            clear()
            game.show_hangman()
            game.show_current_state()
            out.write("Enter a letter: ")
            out.flush()
            game.guess_letter(chr(read()))
            time.sleep(delay)

        clear()
        game.finish()
        out.write("Press any key to continue . . .\n")
        out.flush()
        read()

        if show_menu(PLAY_AGAIN_OPTIONS, "Do you want to play again?", read, out, clear) == 1:
            out.write("Thank you for playing!\n")
            out.flush()
            return
        game.reset(words)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="gallows", description="Console hangman.")
    parser.add_argument("path", nargs="?", default="words.json", help="encrypted word list")
    parser.add_argument("--shift", type=int, default=DEFAULT_SHIFT, help="cipher shift")
    args = parser.parse_args(argv)
    try:
        run(WordList(args.path, args.shift))
    except Exception as exc:  # noqa: BLE001 - report any failure and exit non-zero
        print(f"Error loading words: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())