import pytest

from char_data import CharFrequency, calculate_probabilities
from sampler import sample


@pytest.fixture
def entries():
    entries = [CharFrequency('a', 1), CharFrequency('b', 2), CharFrequency('c', 1)]
    calculate_probabilities(entries)  # cp: 0.25, 0.75, 1.0
    return entries


def test_zero_draw_returns_first(entries):
    assert sample(entries, 0.0) == 'a'


def test_draw_selects_first_cumulative_above_it(entries):
    assert sample(entries, 0.24) == 'a'
    assert sample(entries, 0.25) == 'b'
    assert sample(entries, 0.5) == 'b'
    assert sample(entries, 0.75) == 'c'


def test_draw_between_second_to_last_and_one_returns_last(entries):
    assert sample(entries, 0.9) == 'c'
    assert sample(entries, 0.999999) == 'c'


def test_falls_back_to_last_entry_on_rounding():
    entries = [CharFrequency('x', 1), CharFrequency('y', 1)]
    entries[0].cumulative_probability = 0.5
    entries[1].cumulative_probability = 0.9999999999
    assert sample(entries, 0.99999999999) == 'y'


def test_does_not_touch_entries(entries):
    before = [repr(e) for e in entries]
    sample(entries, 0.6)
    assert [repr(e) for e in entries] == before


def test_empty_entries_raise():
    with pytest.raises(ValueError):
        sample([], 0.5)
