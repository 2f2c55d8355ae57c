import pytest
from hypothesis import given, strategies as st

from ptools.util import is_flag, rand_next_int, rand_seed_by_milliseconds, version


def test_version():
    assert version() == "0.4.3"


@pytest.mark.parametrize("text", ["true", "1", "ON", "on", "TRUE", "True", "  true", "\ttrue"])
def test_is_flag_accepts(text):
    assert is_flag(text) is True


@pytest.mark.parametrize("text", ["false", "0", "off", "no", "yes"])
def test_is_flag_rejects(text):
    assert is_flag(text) is False


def test_is_flag_with_length():
    assert is_flag("true", 4) is True
    assert is_flag("1", 1) is True
    assert is_flag("nope", 4) is False


def test_is_flag_length_skips_whitespace_inside_range():
    assert is_flag(" on", 3) is True


def test_is_flag_zero_length_accepts():
    assert is_flag("anything", 0) is True


def test_is_flag_missing_text():
    with pytest.raises(ValueError):
        is_flag(None)


def test_rand_empty_range_returns_min():
    assert rand_next_int(5, 5) == 5
    assert rand_next_int(7, 3) == 7


@given(st.integers(min_value=-1000, max_value=1000), st.integers(min_value=1, max_value=1000))
def test_rand_in_range(low, width):
    high = low + width
    value = rand_next_int(low, high)
    assert low <= value <= high


def test_rand_after_seed_in_range():
    rand_seed_by_milliseconds()
    values = {rand_next_int(0, 3) for _ in range(200)}
    assert values <= {0, 1, 2, 3}
    assert len(values) > 1