import pytest

from paginator.domain.entities.counter import BoundedCounter
from paginator.domain.entities.errors import InvalidRangeError, PaginationError


def test_between_starts_at_lower_bound():
    counter = BoundedCounter.between(1, 5)
    assert counter.value == 1
    assert counter.max_bound == 5


@pytest.mark.parametrize("value, expected", [(-3, 1), (0, 1), (3, 3), (5, 5), (42, 5)])
def test_initial_value_is_clamped(value, expected):
    assert BoundedCounter.between(1, 5, value).value == expected


def test_direct_construction_is_clamped():
    assert BoundedCounter(value=100, lower_bound=1, upper_bound=3).value == 3


@pytest.mark.parametrize("new_value, expected", [(-1, 1), (4, 4), (10, 7)])
def test_set_clamps(new_value, expected):
    assert BoundedCounter.between(1, 7).set(new_value).value == expected


def test_increment_and_decrement_saturate():
    counter = BoundedCounter.between(1, 3)
    assert counter.decrement().value == 1
    assert counter.increment().increment().increment().increment().value == 3
    assert counter.increment(2).value == 3
    assert counter.set(3).decrement(5).value == 1


def test_operations_return_new_values():
    counter = BoundedCounter.between(1, 3)
    moved = counter.increment()
    assert counter.value == 1
    assert moved.value == 2
    assert moved != counter


def test_single_value_range():
    counter = BoundedCounter.between(1, 1)
    assert counter.increment().value == 1
    assert counter.decrement().value == 1


def test_inverted_range_fails_fast():
    with pytest.raises(InvalidRangeError) as exc_info:
        BoundedCounter.between(5, 1)
    assert exc_info.value.details == {"lower_bound": 5, "upper_bound": 1}
    assert isinstance(exc_info.value, PaginationError)
    assert isinstance(exc_info.value, ValueError)


def test_counter_is_frozen():
    counter = BoundedCounter.between(1, 3)
    with pytest.raises(AttributeError):
        counter.value = 2
