import pytest

from proton_caller.arguments import ArgumentSlots, Mode, parse_args, select_mode
from proton_caller.errors import MissingArgument


def test_no_tokens_asks_for_an_argument():
    with pytest.raises(MissingArgument) as exc:
        parse_args([])
    assert exc.value.message == "You must supply argument. View help (-h)."
    assert exc.value.exit_code != 0


@pytest.mark.parametrize(
    "token, mode",
    [
        ("-h", Mode.HELP),
        ("-v", Mode.VERSION),
        ("-c", Mode.CUSTOM),
        ("--setup", Mode.SETUP),
        ("6.3", Mode.NORMAL),
        ("5", Mode.NORMAL),
    ],
)
def test_select_mode(token, mode):
    assert select_mode(token) is mode


@pytest.mark.parametrize("token", ["-h", "-v", "--setup"])
def test_terminal_modes_need_no_program(token):
    mode, slots = parse_args([token])
    assert mode is select_mode(token)
    assert slots == ArgumentSlots(slot1=token)


def test_normal_mode_without_program():
    with pytest.raises(MissingArgument) as exc:
        parse_args(["6.3"])
    assert exc.value.message == "What program?"


def test_custom_mode_without_path():
    with pytest.raises(MissingArgument) as exc:
        parse_args(["-c"])
    assert exc.value.message == "What program?"


def test_custom_mode_without_program_is_an_error():
    with pytest.raises(MissingArgument) as exc:
        parse_args(["-c", "/custom/path"])
    assert "Custom mode" in exc.value.message


def test_normal_mode_slots():
    mode, slots = parse_args(["5", "mygame.exe"])
    assert mode is Mode.NORMAL
    assert slots.slot1 == "5"
    assert slots.slot2 == "mygame.exe"
    assert slots.slot3 is None
    assert slots.extra == ()


def test_normal_mode_forwards_trailing_tokens():
    _, slots = parse_args(["6.3", "mygame.exe", "--windowed", "-x"])
    assert slots.slot3 == "--windowed"
    assert slots.extra == ("--windowed", "-x")


def test_custom_mode_slots():
    mode, slots = parse_args(["-c", "/custom/path", "mygame.exe", "--windowed"])
    assert mode is Mode.CUSTOM
    assert slots.slot2 == "/custom/path"
    assert slots.slot3 == "mygame.exe"
    assert slots.extra == ("--windowed",)


def test_slots_are_immutable():
    _, slots = parse_args(["5", "mygame.exe"])
    with pytest.raises(AttributeError):
        slots.slot1 = "6.3"
