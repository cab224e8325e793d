import io

import pytest

from rdpquest.console import BAR_LENGTH, Console, health_bar, xp_bar


def make_console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out, delay=False), out


def bar_body(bar):
    return bar[bar.index("[") + 1 : bar.index("]")]


def test_write_goes_to_stdout():
    console, out = make_console()
    console.write("hello")
    assert out.getvalue() == "hello"


def test_read_line_strips_newline_and_shows_prompt():
    console, out = make_console("answer\nnext\n")
    assert console.read_line("? ") == "answer"
    assert out.getvalue() == "? "
    assert console.read_line() == "next"


def test_read_line_at_end_raises_eof():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        console.read_line()


def test_read_int_parses_leading_integer():
    console, _ = make_console("42\n 7abc\n")
    assert console.read_int() == 42
    assert console.read_int() == 7


def test_read_int_rejects_text():
    console, _ = make_console("abc\n")
    with pytest.raises(ValueError):
        console.read_int()


def test_discard_line_skips_one_line():
    console, _ = make_console("skip me\nkeep\n")
    console.discard_line()
    assert console.read_line() == "keep"


def test_loading_prints_characters():
    console, out = make_console()
    console.loading(7, ">", 0)
    assert out.getvalue() == ">>>>>>>"


def test_clear_writes_nothing_off_terminal():
    console, out = make_console()
    console.clear(0)
    assert out.getvalue() == ""


def test_health_bar_full():
    bar = health_bar("Hero", 100.0, 100.0)
    assert bar_body(bar) == "+" * BAR_LENGTH
    assert bar.startswith("Hero - [")
    assert bar.endswith("(100.00/100.00)")


def test_health_bar_empty():
    bar = health_bar("Hero", 0.0, 100.0)
    assert bar_body(bar) == "-" * BAR_LENGTH


def test_health_bar_tiny_life_shows_one_mark():
    body = bar_body(health_bar("Hero", 0.01, 1000.0))
    assert body.count("+") == 1
    assert len(body) == BAR_LENGTH


@pytest.mark.parametrize("current", [1.0, 33.3, 50.0, 77.7, 99.0])
def test_health_bar_width_is_constant(current):
    body = bar_body(health_bar("X", current, 100.0))
    assert len(body) == BAR_LENGTH
    assert set(body) <= {"+", "-"}


def test_xp_bar_format():
    bar = xp_bar("XP", 0, 50)
    assert bar == "XP - [" + "-" * BAR_LENGTH + "] (0/50)"


def test_xp_bar_small_progress_shows_one_mark():
    assert bar_body(xp_bar("XP", 1, 1000)).count("#") == 1