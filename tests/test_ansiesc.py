import pytest

from omwkit import ansiesc
from omwkit.ansiesc import CsiType, Mode, Sgr

COL8BIT_GRAYSCALE_LEN = 24


@pytest.fixture(autouse=True)
def _restore_mode():
    saved = ansiesc.get_mode()
    yield
    ansiesc.set_mode(saved)


def test_pinned_sgr_bold():
    ansiesc.enable()
    assert ansiesc.sgr_seq(Sgr.BOLD) == "\x1b[1m"


def test_pinned_cursor_position():
    ansiesc.enable()
    assert ansiesc.csi_seq(CsiType.CUP, 3, 4) == "\x1b[3;4H"


def test_pinned_reset_to_initial_state():
    ansiesc.enable()
    assert ansiesc.seq(ansiesc.RIS) == "\x1bc"


def test_seq_starts_with_escape_and_type():
    ansiesc.enable()
    result = ansiesc.seq(ansiesc.OSC, "0;title")
    assert result.startswith(ansiesc.ESC_CHAR + ansiesc.OSC)
    assert result.endswith("0;title")


def test_disabled_builders_return_empty():
    ansiesc.disable()
    assert ansiesc.seq(ansiesc.CSI, "1m") == ""
    assert ansiesc.csi_seq(CsiType.ED, ansiesc.ENTIRE) == ""
    assert ansiesc.sgr_seq(Sgr.RESET) == ""


def test_enable_false_disables():
    ansiesc.enable(False)
    assert ansiesc.get_mode() is Mode.DISABLED
    assert ansiesc.is_enabled() is False


def test_enable_sets_enabled_mode():
    ansiesc.disable()
    ansiesc.enable()
    assert ansiesc.get_mode() is Mode.ENABLED
    assert ansiesc.is_enabled() is True


def test_default_mode_depends_on_platform(monkeypatch):
    ansiesc.set_mode(Mode.DEFAULT)
    monkeypatch.setattr("sys.platform", "win32")
    assert ansiesc.is_enabled() is False
    assert ansiesc.sgr_seq(Sgr.BOLD) == ""
    monkeypatch.setattr("sys.platform", "linux")
    assert ansiesc.is_enabled() is True


def test_set_mode_accepts_int():
    ansiesc.set_mode(int(Mode.DISABLED))
    assert ansiesc.get_mode() is Mode.DISABLED


def test_set_mode_rejects_unknown():
    with pytest.raises(ValueError):
        ansiesc.set_mode(7)


def test_sgr_is_csi_with_final_m():
    ansiesc.enable()
    assert ansiesc.sgr_seq(Sgr.UNDERLINE) == ansiesc.csi_seq(CsiType.SGR, Sgr.UNDERLINE)
    assert ansiesc.sgr_seq(Sgr.UNDERLINE).endswith(CsiType.SGR.value)


def test_string_and_integer_arguments_agree():
    ansiesc.enable()
    ints = ansiesc.sgr_seq(Sgr.SET_FORE_COLOR, ansiesc.SET_COLOR_8BIT, 200)
    text = ansiesc.sgr_seq(f"{int(Sgr.SET_FORE_COLOR)};{ansiesc.SET_COLOR_8BIT};200")
    assert ints == text


def test_sequence_argument_equals_separate_arguments():
    ansiesc.enable()
    params = [Sgr.UNDERLINE_OFF, Sgr.BOLD_OFF, Sgr.FG_COLOR_GREEN]
    assert ansiesc.sgr_seq(params) == ansiesc.sgr_seq(*params)
    assert ansiesc.sgr_seq(tuple(params)) == ansiesc.sgr_seq(*params)


def test_argument_count_matches_delimiters():
    ansiesc.enable()
    result = ansiesc.sgr_seq(Sgr.SET_BACK_COLOR, ansiesc.SET_COLOR_RGB, 10, 20, 30)
    body = result[len(ansiesc.ESC_CHAR + ansiesc.CSI) : -1]
    assert body.split(ansiesc.ARG_DELIMITER) == [str(int(Sgr.SET_BACK_COLOR)), "2", "10", "20", "30"]


def test_empty_arguments():
    ansiesc.enable()
    assert ansiesc.sgr_seq() == ansiesc.seq(ansiesc.CSI, CsiType.SGR.value)


def test_csi_accepts_plain_character():
    ansiesc.enable()
    assert ansiesc.csi_seq("J", ansiesc.ENTIRE) == ansiesc.csi_seq(CsiType.ERASE_DISPLAY, ansiesc.ENTIRE)


def test_invalid_sequence_type():
    ansiesc.enable()
    with pytest.raises(ValueError):
        ansiesc.seq("ab")
    with pytest.raises(ValueError):
        ansiesc.csi_seq("", 1)


def test_invalid_argument_type():
    ansiesc.enable()
    with pytest.raises(TypeError):
        ansiesc.sgr_seq(1, "2")
    with pytest.raises(TypeError):
        ansiesc.sgr_seq(1.5)


def test_sgr_aliases():
    ansiesc.enable()
    assert Sgr.BOLD_OFF is Sgr.BOLD_FAINT_OFF
    assert Sgr.FAINT_OFF is Sgr.BOLD_FAINT_OFF
    assert Sgr.REVEAL is Sgr.CONCEAL_OFF
    assert Sgr.DEFAULT_FONT is Sgr.FONT0
    assert Sgr.FG_COLOR_DEFAULT is Sgr.DEFAULT_FORE_COLOR
    assert ansiesc.sgr_seq(Sgr.BOLD_OFF) == "\x1b[22m"
    assert ansiesc.sgr_seq(Sgr.REVEAL) == "\x1b[28m"
    assert ansiesc.sgr_seq(Sgr.DEFAULT_FONT) == "\x1b[10m"
    assert ansiesc.sgr_seq(Sgr.FG_COLOR_DEFAULT) == "\x1b[39m"


def test_csi_type_aliases():
    ansiesc.enable()
    assert CsiType.CURSOR_UP is CsiType.CUU
    assert CsiType.ERASE_LINE is CsiType.EL
    assert ansiesc.csi_seq(CsiType.CURSOR_UP, 2) == "\x1b[2A"
    assert ansiesc.csi_seq(CsiType.ERASE_LINE, ansiesc.ENTIRE) == "\x1b[2K"


def test_sgr_documented_values():
    ansiesc.enable()
    assert ansiesc.sgr_seq(Sgr.SET_FORE_COLOR, ansiesc.SET_COLOR_8BIT, 5) == "\x1b[38;5;5m"
    assert ansiesc.sgr_seq(Sgr.SET_BACK_COLOR, ansiesc.SET_COLOR_8BIT, 5) == "\x1b[48;5;5m"
    assert ansiesc.sgr_seq(Sgr.SET_UNDERLINE_COLOR, ansiesc.SET_COLOR_8BIT, 5) == "\x1b[58;5;5m"


def test_grayscale_tables():
    ansiesc.enable()
    assert COL8BIT_GRAYSCALE_LEN == len(ansiesc.COL8BIT_GRAYSCALE)
    assert ansiesc.COL8BIT_FULL_GRAYSCALE[1:-1] == ansiesc.COL8BIT_GRAYSCALE
    first = ansiesc.sgr_seq(Sgr.SET_FORE_COLOR, ansiesc.SET_COLOR_8BIT, ansiesc.COL8BIT_GRAYSCALE[0])
    last = ansiesc.sgr_seq(Sgr.SET_FORE_COLOR, ansiesc.SET_COLOR_8BIT, ansiesc.COL8BIT_GRAYSCALE[-1])
    assert first == "\x1b[38;5;232m"
    assert last == "\x1b[38;5;255m"
    black = ansiesc.sgr_seq(Sgr.SET_BACK_COLOR, ansiesc.SET_COLOR_8BIT, ansiesc.COL8BIT_FULL_GRAYSCALE[0])
    white = ansiesc.sgr_seq(Sgr.SET_BACK_COLOR, ansiesc.SET_COLOR_8BIT, ansiesc.COL8BIT_FULL_GRAYSCALE[-1])
    assert black == "\x1b[48;5;16m"
    assert white == "\x1b[48;5;231m"