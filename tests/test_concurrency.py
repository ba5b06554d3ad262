import pytest

from algopatterns.concurrency import (
    Money,
    buffered_demo,
    dynamite,
    fan_in,
    fan_in_demo,
    fibonacci,
    fibonacci_demo,
    fruits_demo,
    generator_demo,
    main,
    numbers,
    racing,
    range_close_money,
    sequence_food,
)


def test_numbers_yields_range():
    assert list(numbers(5)) == list(range(5))


def test_numbers_zero_is_empty():
    assert list(numbers(0)) == []


def test_fan_in_merges_all_values():
    merged = list(fan_in(numbers(5), numbers(5)))
    assert sorted(merged) == sorted(list(range(5)) * 2)


def test_fan_in_keeps_order_within_each_source():
    merged = list(fan_in(["a", "b", "c"], [1, 2, 3]))
    assert [item for item in merged if isinstance(item, str)] == ["a", "b", "c"]
    assert [item for item in merged if isinstance(item, int)] == [1, 2, 3]


def test_fan_in_without_sources_is_empty():
    assert list(fan_in()) == []


def test_fibonacci_recurrence():
    values = list(fibonacci(10))
    assert len(values) == 10
    assert values[:2] == [0, 1]
    for earlier, previous, current in zip(values, values[1:], values[2:]):
        assert current == earlier + previous


def test_fibonacci_zero_count():
    assert list(fibonacci(0)) == []


def test_buffered_demo(capsys):
    first, second, after_close = buffered_demo()
    assert first == list(range(5))
    assert second == list(range(5))
    assert after_close == 0
    out = capsys.readouterr().out
    assert "channel closed" in out
    assert "v2=4" in out


def test_fan_in_demo(capsys):
    values = fan_in_demo()
    assert sorted(values) == sorted(list(range(5)) * 2)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(values) + 2


def test_fibonacci_demo_prints_values(capsys):
    values = fibonacci_demo(6)
    assert values == list(fibonacci(6))
    lines = capsys.readouterr().out.splitlines()
    assert lines[1:-1] == [str(value) for value in values]


def test_fruits_demo(capsys):
    assert fruits_demo() == ["a", "b", "c", "d"]
    assert capsys.readouterr().out.splitlines()[-1] == "... end fruits"


def test_generator_demo():
    assert generator_demo() == list(range(5))


def test_racing_winner_and_duration(capsys):
    winner, millis = racing(3)
    assert winner in range(3)
    assert 5 <= millis < 20
    out = capsys.readouterr().out
    assert f"quit by {winner} took {millis} milliseconds" in out


def test_racing_needs_a_racer():
    with pytest.raises(ValueError):
        racing(0)


def test_range_close_money(capsys):
    received = range_close_money()
    assert [money.idx for money in received] == [0, 1, 2]
    assert all(money.amount == 500 for money in received)
    assert received[0] == Money(0, 500)
    assert "2 generate 500" in capsys.readouterr().out


def test_sequence_food_serves_in_lock_step():
    served = sequence_food()
    assert served[::2] == [0, 1, 2]
    assert served[1::2] == [0, 1, 2]


def test_dynamite_receives_everything_with_generous_timeout(capsys):
    assert dynamite(50, 5.0) == list(range(50))
    assert "channel closed" in capsys.readouterr().out


def test_dynamite_short_timeout_gives_prefix():
    received = dynamite(100, 0.0001)
    assert received == list(range(len(received)))
    assert len(received) <= 100


def test_main_runs_named_demo(capsys):
    assert main(["fruits"]) == 0
    assert "d" in capsys.readouterr().out.splitlines()


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit):
        main(["bogus"])