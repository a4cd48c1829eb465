import pytest

from keysmith.randomness import SystemRandomSource


def test_randbelow_in_range():
    src = SystemRandomSource()
    values = {src.randbelow(5) for _ in range(500)}
    assert values == {0, 1, 2, 3, 4}

def test_randbelow_rejects_empty_range():
    with pytest.raises(ValueError):
        SystemRandomSource().randbelow(0)

def test_random_in_unit_interval():
    src = SystemRandomSource()
    for _ in range(100):
        x = src.random()
        assert 0.0 <= x < 1.0
