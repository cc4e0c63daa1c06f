import random

import pytest

from pixelgen.raster import RowGenerator, RowSource, pack_line


@pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, 1)])
def test_generator_rejects_bad_dimensions(width, height):
    with pytest.raises(ValueError):
        RowGenerator(width, height)


def test_generator_satisfies_row_source_without_inheriting():
    source: RowSource = RowGenerator(4, 4)
    assert RowSource not in type(source).__mro__
    assert isinstance(source.next_row(0), memoryview)


def test_next_row_swaps_drawn_indices(sequence_random):
    rng = sequence_random([0, 3])
    generator = RowGenerator(4, 1, rng)
    row = generator.next_row(0)
    assert generator.pixels == [1, 0, 0, 0]
    assert bytes(row) == b"\x80"
    assert rng.calls == [4, 4]


def test_next_row_ignores_row_index_and_accumulates(sequence_random):
    generator = RowGenerator(4, 3, sequence_random([0, 3, 0, 1, 2, 2]))
    generator.next_row(7)
    assert generator.pixels == [1, 0, 0, 0]
    generator.next_row(0)
    assert generator.pixels == [0, 1, 0, 0]
    generator.next_row(1)
    assert generator.pixels == [0, 1, 0, 0]


def test_width_one_swap_is_noop(sequence_random):
    generator = RowGenerator(1, 5, sequence_random([0, 0]))
    assert bytes(generator.next_row(0)) == b"\x00"
    assert generator.pixels == [0]


def test_counts_invariant_over_many_rows():
    generator = RowGenerator(33, 500, random.Random(1234))
    initial = generator.counts()
    for index in range(500):
        row = generator.next_row(index)
        assert generator.counts() == initial
        assert bytes(row) == pack_line(generator.pixels)


def test_width_four_stays_permutation():
    generator = RowGenerator(4, 50, random.Random(7))
    for index in range(50):
        generator.next_row(index)
        assert sorted(generator.pixels) == [0, 0, 0, 1]


def test_returned_view_tracks_next_call(sequence_random):
    generator = RowGenerator(8, 2, sequence_random([0, 7, 0, 7]))
    first = generator.next_row(0)
    snapshot = bytes(first)
    generator.next_row(1)
    assert snapshot == b"\x86"
    assert bytes(first) == b"\x07"


def test_default_source_is_process_random(monkeypatch):
    draws = iter([0, 3])
    monkeypatch.setattr(random, "randrange", lambda stop: next(draws))
    generator = RowGenerator(4, 1)
    generator.next_row(0)
    assert generator.pixels == [1, 0, 0, 0]
