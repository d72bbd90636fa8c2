import pytest

from babarules.input import InputManager, key_to_direction
from babarules.types import Direction


@pytest.mark.parametrize(
    "key, expected",
    [
        ("w", Direction.UP),
        ("a", Direction.LEFT),
        ("s", Direction.DOWN),
        ("d", Direction.RIGHT),
        ("r", Direction.RESET),
        ("\x1b", Direction.PAUSE),
    ],
)
def test_known_keys(key, expected):
    assert key_to_direction(key) is expected


@pytest.mark.parametrize("key", ["x", "W", "", "q", " "])
def test_unknown_keys_give_none(key):
    assert key_to_direction(key) is Direction.NONE


def test_escape_as_integer_code():
    assert key_to_direction(27) is Direction.PAUSE


def test_bytes_key():
    assert key_to_direction(b"d") is Direction.RIGHT


def test_initial_last_input_is_none():
    manager = InputManager(read_key=lambda: "w")
    assert manager.last_input is Direction.NONE


def test_get_input_reads_and_remembers():
    keys = iter("wx")
    manager = InputManager(read_key=lambda: next(keys))
    assert manager.get_input() is Direction.UP
    assert manager.last_input is Direction.UP
    assert manager.get_input() is Direction.NONE
    assert manager.last_input is Direction.NONE


def test_get_input_sequence_matches_mapping():
    sequence = "wasdr"
    keys = iter(sequence)
    manager = InputManager(read_key=lambda: next(keys))
    got = [manager.get_input() for _ in sequence]
    assert got == [key_to_direction(k) for k in sequence]