import io

from rich.console import Console

from msglogger.core.colors import Color, DisplayColors
from msglogger.core.palette import ColorPalette, MessageCategory, TagCategory
from msglogger.ui.preview import palette_table, show_palette


def test_table_has_row_per_category():
    table = palette_table(ColorPalette())
    assert table.row_count == len(MessageCategory) + len(TagCategory)
    assert [c.header for c in table.columns] == ["Category", "Kind", "Text", "Background", "Sample"]


def test_show_palette_renders_current_colors(state):
    state.set_tag_colors(TagCategory.INFO, DisplayColors(Color.BRIGHT_MAGENTA, Color.CYAN))
    buf = io.StringIO()
    show_palette(state, Console(file=buf, width=120, color_system=None))
    out = buf.getvalue()
    assert "LOGGER PALETTE" in out
    assert "bright_magenta" in out
    assert "(Warning)" in out
    assert "A success message." in out
