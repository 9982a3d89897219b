"""Console helpers: raw key reading, screen clearing and an arrow-key menu."""

from __future__ import annotations

import os
import subprocess
import sys
from collections import deque
from collections.abc import Callable, Sequence
from enum import IntEnum
from typing import TextIO


class Key(IntEnum):
    """Key codes as delivered by the raw key reader."""

    UP = 72
    DOWN = 80
    LEFT = 75
    RIGHT = 77
    ENTER = 13
    EXTENDED = 224


_pending: deque[int] = deque()
_ARROWS = {"A": Key.UP, "B": Key.DOWN, "C": Key.RIGHT, "D": Key.LEFT}


def _read_posix_key() -> int:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = os.read(fd, 1)
        if ch == b"\x1b":
            seq = os.read(fd, 2)
            if len(seq) == 2 and seq[:1] == b"[" and chr(seq[1]) in _ARROWS:
                _pending.append(_ARROWS[chr(seq[1])])
                return Key.EXTENDED
            return ch[0]
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    if not ch:
        raise EOFError("end of input")
    if ch == b"\x03":
        raise KeyboardInterrupt
    if ch in (b"\n", b"\r"):
        return Key.ENTER
    return ch[0]


def read_key() -> int:
    """Read one key press without echo; arrows come as EXTENDED followed by their code."""
    if _pending:
        return _pending.popleft()
    if os.name == "nt":
        import msvcrt

        return ord(msvcrt.getch())
    return _read_posix_key()


def clear_screen() -> None:
    """Clear the terminal."""
    subprocess.run("cls" if os.name == "nt" else "clear", shell=True, check=False)


def pause() -> None:
    """Wait for any key."""
    print("Press any key to continue . . .", flush=True)
    read_key()


def show_menu(
    options: Sequence[str],
    prompt: str,
    read: Callable[[], int] | None = None,
    out: TextIO | None = None,
    clear: Callable[[], None] | None = None,
) -> int:
    """Let the user pick an option with the up/down arrows and Enter; return its index."""
    if not options:
        raise ValueError("menu needs at least one option")
    read = read or read_key
    clear = clear or clear_screen
    out = out or sys.stdout
    selected = 0
    while True:
        clear()
        out.write(f"{prompt}\n")
        for index, option in enumerate(options):
            if index == selected:
                out.write(f" > {option} <\n")
            else:
                out.write(f"   {option}\n")
        out.flush()
        ch = read()
        if ch == Key.EXTENDED:
            ch = read()
            if ch == Key.UP and selected > 0:
                selected -= 1
            elif ch == Key.DOWN and selected < len(options) - 1:
                selected += 1
        elif ch == Key.ENTER:
            return selected