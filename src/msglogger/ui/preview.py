"""Rich table showing the colors every category is currently printed with."""
from __future__ import annotations
from typing import Optional

from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table
from rich.text import Text

from msglogger import logger as default_logger
from msglogger.core.colors import DisplayColors
from msglogger.core.engine import LoggerState
from msglogger.core.palette import MESSAGE_TAGS, ColorPalette, MessageCategory, TagCategory

def _style(colors: DisplayColors) -> str:
    style = f"{colors.text_color.rich_name} on {colors.background_color.rich_name}"
    if colors.text_color.is_bright:
        style = "bold " + style
    return style

_TAG_SAMPLES = {tag: label for tag, label in MESSAGE_TAGS.values()}
_TAG_SAMPLES[TagCategory.CONTEXT] = "Context:"

def palette_table(palette: ColorPalette) -> Table:
    table = Table(
        title="[bold bright_white]LOGGER PALETTE[/bold bright_white]",
        box=ROUNDED,
        style="bright_white",
    )
    table.add_column("Category", style="bright_white", justify="left")
    table.add_column("Kind", justify="left")
    table.add_column("Text", justify="left")
    table.add_column("Background", justify="left")
    table.add_column("Sample", justify="left")

    rows = [(c.value, "message", palette.message_colors[c], f"A {c.value} message.") for c in MessageCategory]
    rows += [(c.value, "tag", palette.tag_colors[c], _TAG_SAMPLES[c]) for c in TagCategory]
    for name, kind, colors, sample in rows:
        table.add_row(
            name,
            kind,
            colors.text_color.rich_name,
            colors.background_color.rich_name,
            Text(sample, style=_style(colors)),
        )
    return table

def show_palette(state: Optional[LoggerState] = None, console: Optional[Console] = None):
    state = state or default_logger
    console = console or Console()
    console.print(palette_table(state.palette_snapshot()))
