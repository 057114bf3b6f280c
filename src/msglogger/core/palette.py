from __future__ import annotations
from enum import Enum
from typing import Dict, Tuple

from .colors import Color, DisplayColors

class MessageCategory(Enum):
    DEFAULT = "default"
    ERROR = "error"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"

class TagCategory(Enum):
    CONTEXT = "context"
    ERROR = "error"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"

DEFAULT_MESSAGE_COLORS: Dict[MessageCategory, DisplayColors] = {
    c: DisplayColors(Color.DEFAULT, Color.DEFAULT) for c in MessageCategory
}

DEFAULT_TAG_COLORS: Dict[TagCategory, DisplayColors] = {
    TagCategory.CONTEXT: DisplayColors(Color.BRIGHT_WHITE, Color.DEFAULT),
    TagCategory.ERROR: DisplayColors(Color.BRIGHT_RED, Color.DEFAULT),
    TagCategory.INFO: DisplayColors(Color.BRIGHT_BLUE, Color.DEFAULT),
    TagCategory.SUCCESS: DisplayColors(Color.BRIGHT_GREEN, Color.DEFAULT),
    TagCategory.WARNING: DisplayColors(Color.BRIGHT_YELLOW, Color.DEFAULT),
}

# The default category prints no tag.
MESSAGE_TAGS: Dict[MessageCategory, Tuple[TagCategory, str]] = {
    MessageCategory.ERROR: (TagCategory.ERROR, "(Error)"),
    MessageCategory.INFO: (TagCategory.INFO, "(Info)"),
    MessageCategory.SUCCESS: (TagCategory.SUCCESS, "(Success)"),
    MessageCategory.WARNING: (TagCategory.WARNING, "(Warning)"),
}


def parse_message_category(value) -> MessageCategory:
    if isinstance(value, MessageCategory):
        return value
    if isinstance(value, str):
        return MessageCategory(value.strip().lower())
    raise ValueError(f"Unknown message category: {value!r}")

def parse_tag_category(value) -> TagCategory:
    if isinstance(value, TagCategory):
        return value
    if isinstance(value, str):
        return TagCategory(value.strip().lower())
    raise ValueError(f"Unknown tag category: {value!r}")


class ColorPalette:
    """Display colors for every message and tag category.

    Slots are always fully populated and never share ``DisplayColors``
    instances with callers or with each other.
    """

    def __init__(self):
        self.message_colors: Dict[MessageCategory, DisplayColors] = {}
        self.tag_colors: Dict[TagCategory, DisplayColors] = {}
        self.reset()

    def reset(self):
        self.message_colors = {c: DEFAULT_MESSAGE_COLORS[c].copy() for c in MessageCategory}
        self.tag_colors = {c: DEFAULT_TAG_COLORS[c].copy() for c in TagCategory}

    def message(self, category: MessageCategory) -> DisplayColors:
        return self.message_colors[category].copy()

    def tag(self, category: TagCategory) -> DisplayColors:
        return self.tag_colors[category].copy()

    def set_message(self, category: MessageCategory, colors: DisplayColors):
        self.message_colors[category] = colors.copy()

    def set_tag(self, category: TagCategory, colors: DisplayColors):
        self.tag_colors[category] = colors.copy()

    def copy(self) -> "ColorPalette":
        other = ColorPalette()
        for c in MessageCategory:
            other.set_message(c, self.message_colors[c])
        for c in TagCategory:
            other.set_tag(c, self.tag_colors[c])
        return other
