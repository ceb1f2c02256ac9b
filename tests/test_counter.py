from cuidkit.config import INITIAL_COUNT_MAX
from cuidkit.counter import Counter, create_counter
from cuidkit.random_source import SeededRandomSource

from ._fixtures import FixedRandomSource


def test_counter_yields_consecutive_values():
    counter = Counter(7)
    assert [counter.next() for _ in range(4)] == [7, 8, 9, 10]


def test_counter_is_strictly_increasing_over_long_runs():
    counter = Counter(123)
    previous = counter.next()
    for expected in range(124, 123 + 10_000):
        value = counter.next()
        assert value == expected
        assert value > previous
        previous = value


def test_counter_does_not_wrap_past_machine_words():
    counter = Counter(2**64 - 2)
    assert [counter.next() for _ in range(4)] == [2**64 - 2, 2**64 - 1, 2**64, 2**64 + 1]


def test_counter_iterator_protocol_and_peek():
    counter = Counter(0)
    assert next(counter) == 0
    assert counter.peek() == 1
    assert counter.next() == 1
    assert repr(counter) == "Counter(next=2)"


def test_random_start_is_in_range():
    for seed in range(50):
        start = create_counter(SeededRandomSource(seed)).peek()
        assert 0 <= start < INITIAL_COUNT_MAX
    assert 0 <= create_counter().peek() < INITIAL_COUNT_MAX


def test_random_start_uses_floor_of_scaled_float():
    assert create_counter(FixedRandomSource(value=0.0)).peek() == 0
    assert create_counter(FixedRandomSource(value=0.5)).peek() == 238391183
