import pytest

from mazeknight.core.rng import RNG


def test_same_seed_same_choices():
    items = list(range(50))
    a, b = RNG(123), RNG(123)
    assert [a.choice(items) for _ in range(10)] == [b.choice(items) for _ in range(10)]


def test_choice_rejects_empty():
    with pytest.raises(IndexError):
        RNG(0).choice([])


def test_choice_stays_in_sequence():
    rng = RNG(4)
    picks = {rng.choice("abc") for _ in range(30)}
    assert picks <= {"a", "b", "c"}
