import io

import pytest

from mazechomp.controls import direction, is_movement, is_quit, parse_key, read_key


@pytest.mark.parametrize(
    "key, expected",
    [("w", "W"), ("A", "A"), ("s", "S"), ("d", "D"), ("q", "Q"), ("Q", "Q")],
)
def test_parse_key_accepts_controls(key, expected):
    assert parse_key(key) == expected


@pytest.mark.parametrize("key", ["x", "1", " ", "\n", "", "wa"])
def test_parse_key_rejects_others(key):
    assert parse_key(key) is None


@pytest.mark.parametrize(
    "key, delta",
    [("W", (-1, 0)), ("S", (1, 0)), ("A", (0, -1)), ("D", (0, 1))],
)
def test_direction(key, delta):
    assert direction(key) == delta
    assert is_movement(key)


@pytest.mark.parametrize("key", ["Q", "w", "x", ""])
def test_direction_none_for_non_movement(key):
    assert direction(key) is None
    assert not is_movement(key)


def test_is_quit():
    assert is_quit("Q")
    assert not is_quit("q")
    assert not is_quit("W")


def test_read_key_end_of_input_quits():
    assert read_key(io.StringIO("")) == "Q"


def test_read_key_sequence():
    stream = io.StringIO("dz")
    assert read_key(stream) == "D"
    assert read_key(stream) is None
    assert read_key(stream) == "Q"