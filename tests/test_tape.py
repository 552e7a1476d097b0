import numpy as np
import pytest

from ca_extrapolate.tape import Tape


def test_from_string_and_render():
    tape = Tape.from_string("#..#.#")
    assert len(tape) == 6
    assert tape.zero_offset == 0
    assert tape.render() == "#..#.#"
    assert tape.active_bounds() == (0, 5)


def test_cells_must_be_binary():
    with pytest.raises(ValueError):
        Tape(cells=[0, 2, 1])


def test_from_string_rejects_unknown_characters():
    with pytest.raises(ValueError, match="x"):
        Tape.from_string("#x.")


def test_cells_are_read_only():
    tape = Tape.from_string("#.#")
    with pytest.raises(ValueError):
        tape.cells[1] = 1


def test_pad_adds_window_minus_one_on_both_sides():
    tape = Tape.from_string("#..#").pad()
    assert tape.render() == "....#..#...."
    assert tape.zero_offset == 4
    assert tape.is_padded()
    assert tape.coordinates().tolist() == [0, 3]


def test_pad_is_noop_when_invariant_holds():
    tape = Tape.from_string("....#..#....")
    assert tape.is_padded()
    assert tape.pad() is tape


def test_pad_only_grows_the_short_side():
    tape = Tape.from_string("......#.#")
    padded = tape.pad()
    assert padded.zero_offset == 0
    assert padded.render() == "......#.#...."


def test_pad_empty_tape():
    tape = Tape.from_string(".....")
    assert tape.active_bounds() is None
    assert tape.is_padded()
    assert tape.pad() is tape
    assert tape.metric() == 0


def test_pad_respects_window_width():
    tape = Tape.from_string("#", window_width=3).pad()
    assert tape.render() == "..#.."
    assert tape.zero_offset == 2


def test_metric_uses_logical_coordinates():
    tape = Tape.from_string("#..#.#..##......###...###")
    assert tape.metric() == 145
    assert tape.pad().metric() == 145


def test_window_is_centered():
    tape = Tape.from_string("....#..#....")
    assert tape.window_range() == range(2, 9)
    assert tape.window(4).tolist() == [0, 0, 1, 0, 0]
    assert tape.window(8).tolist() == [0, 1, 0, 0, 0]
    assert np.array_equal(tape.window(8), tape.cells[6:11])


def test_window_range_stops_before_last_complete_window():
    assert Tape.from_string("....#....").window_range() == range(2, 6)
    assert Tape.from_string(".#.", window_width=3).window_range() == range(1, 1)


@pytest.mark.parametrize("index", [0, 1, 9, 10, 11])
def test_window_out_of_range(index):
    tape = Tape.from_string("....#..#....")
    with pytest.raises(IndexError):
        tape.window(index)


def test_equality():
    assert Tape.from_string("#.#") == Tape.from_string("#.#")
    assert Tape.from_string("#.#") != Tape.from_string("#.#").pad()
