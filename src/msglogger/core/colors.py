"""Terminal colors and their ANSI escape sequences.

Every ``Color`` maps to one fixed foreground sequence and one fixed
background sequence. Bright colors are also rendered bold; the base colors
explicitly cancel bold so switching from bright to base never leaves a
heavy font behind.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict
import os
import re

from colorama import Style, just_fix_windows_console
from colorama.ansi import CSI, code_to_chars

just_fix_windows_console()

COLOR_DISABLED_ENV = "MSGLOGGER_COLOR_DISABLED"

class Color(Enum):
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15
    DEFAULT = 16   # whatever the terminal is configured with

    @property
    def is_bright(self) -> bool:
        return 8 <= self.value <= 15

    @property
    def rich_name(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: "Color | str") -> "Color":
        """Accept a member or its name in any case ('bright_red', 'Bright-Red')."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_").replace(" ", "_")
            if key in cls.__members__:
                return cls[key]
        raise ValueError(f"Unknown color: {value!r}")


class ResetTarget(Enum):
    TEXT = "text"
    BACKGROUND = "background"
    BOTH = "both"


# Erase from the cursor to the end of the line. Terminals extend the active
# background over the rest of a freshly created line, so every background
# change is followed by this.
CLEAR_LINE = CSI + "K"
RESET_ALL = Style.RESET_ALL

TEXT_CODES: Dict[Color, str] = {
    c: code_to_chars(f"{1 if c.is_bright else 22};38;5;{c.value}")
    for c in Color if c is not Color.DEFAULT
}
TEXT_CODES[Color.DEFAULT] = code_to_chars("22;39")

BACKGROUND_CODES: Dict[Color, str] = {
    c: code_to_chars(f"48;5;{c.value}")
    for c in Color if c is not Color.DEFAULT
}
BACKGROUND_CODES[Color.DEFAULT] = code_to_chars(49)

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def text_sequence(color: Color) -> str:
    return TEXT_CODES[color]

def background_sequence(color: Color) -> str:
    return BACKGROUND_CODES[color] + CLEAR_LINE

def reset_sequence(target: ResetTarget = ResetTarget.BOTH) -> str:
    if target is ResetTarget.TEXT:
        return TEXT_CODES[Color.DEFAULT]
    if target is ResetTarget.BACKGROUND:
        return background_sequence(Color.DEFAULT)
    return RESET_ALL + CLEAR_LINE

def colors_disabled_by_env() -> bool:
    return os.environ.get(COLOR_DISABLED_ENV) == "1"

def strip_ansi(s: str) -> str:
    return ANSI_ESCAPE_RE.sub("", s)


@dataclass
class DisplayColors:
    text_color: Color = Color.DEFAULT
    background_color: Color = Color.DEFAULT

    def copy(self) -> "DisplayColors":
        return DisplayColors(self.text_color, self.background_color)

    def to_dict(self) -> Dict[str, str]:
        return {"text": self.text_color.rich_name,
                "background": self.background_color.rich_name}

    @classmethod
    def from_dict(cls, raw: Dict[str, str]) -> "DisplayColors":
        return cls(Color.parse(raw.get("text", "default")),
                   Color.parse(raw.get("background", "default")))
