"""
Positional argument handling for proton-call.

    proton-call <version> <program> [args...]
    proton-call -c <proton path> <program> [args...]
    proton-call -h | -v | --setup
"""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import MissingArgument


class Mode(enum.Enum):
    HELP = "-h"
    VERSION = "-v"
    CUSTOM = "-c"
    SETUP = "--setup"
    NORMAL = "normal"


# Modes that never reach environment resolution.
TERMINAL_MODES = (Mode.HELP, Mode.VERSION, Mode.SETUP)


@dataclass(frozen=True)
class ArgumentSlots:
    """The positional tokens, by slot. ``extra`` is forwarded to the program."""

    slot1: str
    slot2: Optional[str] = None
    slot3: Optional[str] = None
    extra: Tuple[str, ...] = ()


def select_mode(slot1):
    """Pick the mode from the first token; anything unknown is a version."""
    for mode in TERMINAL_MODES + (Mode.CUSTOM,):
        if slot1 == mode.value:
            return mode
    return Mode.NORMAL


def _token(tokens, index):
    if index < len(tokens):
        return tokens[index]
    return None


def parse_args(tokens):
    """Resolve argv (without the program name) into a mode and slots.

    Args:
        tokens: Command line tokens following the executable name.

    Returns:
        A ``(Mode, ArgumentSlots)`` pair.

    Raises:
        MissingArgument: No tokens, no program, or custom mode without
            a program after the Proton path.
    """
    tokens = list(tokens)
    if not tokens:
        raise MissingArgument("You must supply argument. View help (-h).")

    slot1 = tokens[0]
    mode = select_mode(slot1)
    if mode in TERMINAL_MODES:
        return mode, ArgumentSlots(slot1=slot1)

    slot2 = _token(tokens, 1)
    if slot2 is None:
        raise MissingArgument("What program?")

    slot3 = _token(tokens, 2)
    if mode is Mode.CUSTOM:
        if slot3 is None:
            raise MissingArgument("Custom mode needs a program to run.")
        extra = tuple(tokens[3:])
    else:
        extra = tuple(tokens[2:])

    return mode, ArgumentSlots(slot1=slot1, slot2=slot2, slot3=slot3, extra=extra)
