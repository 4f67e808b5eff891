import pytest

from couponlegs.cashflows.broadcast import as_values, resolve


def test_empty_values_give_default() -> None:
    assert resolve([], 0, 1.0) == 1.0
    assert resolve(None, 3, 0.0) == 0.0
    assert resolve((), 2) is None


def test_values_within_range_are_indexed_directly() -> None:
    values = [0.01, 0.02, 0.03]
    assert [resolve(values, i) for i in range(3)] == values


@pytest.mark.parametrize("length", [1, 2, 5])
def test_last_value_is_held_past_the_end(length: int) -> None:
    values = [100.0 + i for i in range(length)]
    periods = 8
    resolved = [resolve(values, i, -1.0) for i in range(periods)]
    assert resolved[:length] == values
    assert resolved[length:] == [values[-1]] * (periods - length)


def test_scalar_is_held_for_every_period() -> None:
    assert [resolve(1_000, i) for i in range(4)] == [1_000] * 4


def test_as_values_normalizes_inputs() -> None:
    assert as_values(None) == ()
    assert as_values([]) == ()
    assert as_values(0.5) == (0.5,)
    assert as_values([1, 2]) == (1, 2)
    assert as_values(x for x in (3, 4)) == (3, 4)


def test_generator_normalized_once_holds_last_value() -> None:
    values = as_values(v for v in (0.001, 0.002))
    assert [resolve(values, i, 0.0) for i in range(4)] == [0.001, 0.002, 0.002, 0.002]
