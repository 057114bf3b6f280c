import pytest

from msglogger.core.colors import (
    Color, DisplayColors, ResetTarget, background_sequence, reset_sequence, strip_ansi, text_sequence,
)
from msglogger.core.engine import render_message
from msglogger.core.errors import InvalidArgumentError
from msglogger.core.palette import MessageCategory, TagCategory

RESET = reset_sequence(ResetTarget.BOTH)


def _paint(text, background):
    return text_sequence(text) + background_sequence(background)


def test_error_with_context_terminal_layout(state, stream):
    state.error("ctx", "bad %d", 7)
    expected = (
        _paint(Color.BRIGHT_WHITE, Color.DEFAULT) + "ctx: " + RESET
        + _paint(Color.BRIGHT_RED, Color.DEFAULT) + "(Error) " + RESET
        + _paint(Color.DEFAULT, Color.DEFAULT) + "bad 7" + RESET
    )
    assert stream.getvalue() == expected
    assert strip_ansi(stream.getvalue()) == "ctx: (Error) bad 7"


def test_message_has_no_tag(plain_state, stream):
    plain_state.message("ctx", "hello\n")
    assert stream.getvalue() == "ctx: hello\n"


@pytest.mark.parametrize("name,tag", [
    ("info", "(Info)"), ("success", "(Success)"), ("warning", "(Warning)"), ("error", "(Error)"),
])
def test_category_tags(plain_state, stream, name, tag):
    getattr(plain_state, name)(None, "body")
    assert stream.getvalue() == f"{tag} body"


def test_absent_or_empty_context_is_skipped(plain_state, stream):
    plain_state.info(None, "a")
    plain_state.info("", "b")
    assert stream.getvalue() == "(Info) a(Info) b"


def test_no_implicit_newline_and_verbatim_percent(plain_state, stream):
    plain_state.message(None, "100% done")
    assert stream.getvalue() == "100% done"


def test_custom_palette_used_for_body(state, stream):
    state.set_message_colors(MessageCategory.WARNING, DisplayColors(Color.CYAN, Color.MAGENTA))
    state.set_tag_colors(TagCategory.WARNING, DisplayColors(Color.BLACK, Color.YELLOW))
    state.warning(None, "careful")
    out = stream.getvalue()
    assert _paint(Color.BLACK, Color.YELLOW) + "(Warning) " + RESET in out
    assert out.endswith(_paint(Color.CYAN, Color.MAGENTA) + "careful" + RESET)


def test_colors_disabled_writes_plain_text(plain_state, stream):
    plain_state.paint_text(Color.RED)
    plain_state.paint_background(Color.BLUE)
    plain_state.reset_colors()
    plain_state.success("ctx", "ok\n")
    assert stream.getvalue() == "ctx: (Success) ok\n"


def test_paint_primitives(state, stream):
    state.paint_text("bright_green")
    state.paint_background(Color.RED)
    state.reset_colors("text")
    state.reset_colors(ResetTarget.BACKGROUND)
    assert stream.getvalue() == (
        "\x1b[1;38;5;10m" + "\x1b[48;5;1m\x1b[K" + "\x1b[22;39m" + "\x1b[49m\x1b[K"
    )


def test_emit_generic_category(plain_state, stream):
    plain_state.emit("success", "job", "%s of %s", 3, 4)
    assert stream.getvalue() == "job: (Success) 3 of 4"


def test_emit_unknown_category_reports_instead_of_raising(plain_state, stream):
    plain_state.emit("shout", None, "x")
    out = stream.getvalue()
    assert out.count("Logger module: (Error)") == 1
    assert "'shout' is not a valid MessageCategory" in out
    assert isinstance(plain_state.last_error, InvalidArgumentError)


def test_render_message():
    assert render_message("plain %", ()) == "plain %"
    assert render_message("%d-%s", (1, "a")) == "1-a"
    assert render_message("%(name)s!", ({"name": "bob"},)) == "bob!"
    with pytest.raises(TypeError):
        render_message("%d", ("x",))


def test_bad_format_is_one_diagnostic(plain_state, stream):
    plain_state.error("ctx", "%d %d", 1)
    out = stream.getvalue()
    assert out.startswith("Logger module: (Error) Could not format message '%d %d' with (1,)")
    assert out.count("(Error)") == 1
    assert "ctx:" not in out
    assert isinstance(plain_state.last_error, InvalidArgumentError)


def test_bad_format_logs_diagnostic_instead_of_message(plain_state, stream, tmp_path):
    log_path = tmp_path / "fmt.log"
    plain_state.set_time_format("T")
    plain_state.configure_log_file(log_path)
    plain_state.info("ctx", "%s and %s\n", "one")
    plain_state.info("ctx", "fine\n")
    plain_state.clean_up()
    lines = log_path.read_text().splitlines()
    assert lines[0].startswith("[T] Logger module: (Error) Could not format message")
    assert lines[1] == "[T] ctx: (Info) fine"


def test_no_log_file_means_no_file_io(plain_state, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    plain_state.error("ctx", "bad %d", 7)
    assert plain_state.log_file is None
    assert list(tmp_path.iterdir()) == []


def test_default_stream_is_resolved_per_call(capsys):
    from msglogger.core.engine import LoggerState
    log = LoggerState(colors_enabled=False)
    log.info("late", "bound\n")
    assert capsys.readouterr().out == "late: (Info) bound\n"
