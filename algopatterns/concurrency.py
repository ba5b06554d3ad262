"""Producer and consumer patterns built on threads and blocking queues."""

from __future__ import annotations

import argparse
import queue
import random
import threading
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_CLOSED = object()


class _Channel(Generic[T]):
    """A closable FIFO passed between threads.

    Receiving from a closed, drained channel yields the zero value with
    ``ok`` set to False, every time it is asked.
    """

    def __init__(self, capacity: int = 0) -> None:
        self._queue: queue.Queue[Any] = queue.Queue(maxsize=max(capacity, 1))
        self._drained = False

    def send(self, value: T) -> None:
        self._queue.put(value)

    def close(self) -> None:
        self._queue.put(_CLOSED)

    def receive(self, zero: Any = None, timeout: float | None = None) -> tuple[Any, bool]:
        """Return ``(value, True)``, or ``(zero, False)`` once closed.

        Raises TimeoutError if nothing arrives within ``timeout`` seconds.
        """
        if self._drained:
            return zero, False
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError("nothing received before the timeout") from None
        if item is _CLOSED:
            self._drained = True
            return zero, False
        return item, True

    def __iter__(self) -> Iterator[T]:
        while True:
            value, ok = self.receive()
            if not ok:
                return
            yield value


def _produce(items: Iterable[T], capacity: int = 0) -> _Channel[T]:
    """Feed ``items`` into a new channel from a background thread, then close it."""
    channel: _Channel[T] = _Channel(capacity)

    def feed() -> None:
        for item in items:
            channel.send(item)
        channel.close()

    threading.Thread(target=feed, daemon=True).start()
    return channel


@dataclass(frozen=True)
class Money:
    """An amount of money produced by a numbered generator."""

    idx: int
    amount: int


@dataclass(frozen=True)
class _CookOrder:
    food: int
    done: threading.Event


def numbers(limit: int) -> Iterator[int]:
    """Yield ``0 .. limit - 1``, produced by a background thread."""
    return iter(_produce(range(limit)))


def fan_in(*sources: Iterable[T]) -> Iterator[T]:
    """Merge several iterables into one stream, in order of arrival.

    Each source is drained by its own thread; the stream ends once every
    source is exhausted.
    """
    merged: _Channel[T] = _Channel()

    def forward(source: Iterable[T]) -> None:
        for item in source:
            merged.send(item)

    workers = [threading.Thread(target=forward, args=(source,), daemon=True) for source in sources]
    for worker in workers:
        worker.start()

    def close_when_done() -> None:
        for worker in workers:
            worker.join()
        merged.close()

    threading.Thread(target=close_when_done, daemon=True).start()
    return iter(merged)


def _fibonacci_values(count: int) -> Iterator[int]:
    current, previous = 0, 1
    for _ in range(count):
        yield current
        current, previous = current + previous, current


def fibonacci(count: int) -> Iterator[int]:
    """Yield the first ``count`` Fibonacci numbers, starting at 0."""
    return iter(_produce(_fibonacci_values(count)))


def buffered_demo() -> tuple[list[int], list[int], int]:
    """Drain two buffered channels, then read a closed one.

    Returns the values read from each channel and the value a closed
    channel gives back.
    """
    print("start buffered ...")
    first_channel = _produce(range(5), capacity=3)
    second_channel = _produce(range(5), capacity=3)

    first: list[int] = []
    while True:
        value, ok = first_channel.receive(zero=0)
        if not ok:
            print("channel closed")
            break
        print(f"value read: {value}")
        first.append(value)
    print("channel c1 closed")

    second: list[int] = []
    for value in second_channel:
        print(f"v2={value}")
        second.append(value)
    print("channel c2 closed")

    after_close = 0
    for _ in range(4):
        after_close, _ok = first_channel.receive(zero=0)
    print(f"value after the channel closed: {after_close}")
    print("... end buffered")
    return first, second, after_close


def _consume_demo(name: str, stream: Iterable[T]) -> list[T]:
    print(f"start {name} ...")
    received: list[T] = []
    for value in stream:
        print(value)
        received.append(value)
    print(f"... end {name}")
    return received


def fan_in_demo() -> list[int]:
    """Merge two counting streams and print every value received."""
    return _consume_demo("fan in", fan_in(numbers(5), numbers(5)))


def fibonacci_demo(count: int = 10) -> list[int]:
    """Print the first ``count`` Fibonacci numbers."""
    return _consume_demo("fibonacci", fibonacci(count))


def fruits_demo() -> list[str]:
    """Receive fruit names until the last one, ``d``, arrives."""
    print("start fruits ...")
    received: list[str] = []
    try:
        for fruit in _produce(["a", "b", "c", "d"]):
            print(fruit)
            received.append(fruit)
            if fruit == "d":
                break
    finally:
        print("... end fruits")
    return received


def generator_demo() -> list[int]:
    """Print the values of a counting generator."""
    return _consume_demo("generator", numbers(5))


def racing(racers: int = 3) -> tuple[int, int]:
    """Start ``racers`` threads that each sleep 5 to 19 milliseconds.

    Prints each racer as it starts and returns the first to finish together
    with its sleep in milliseconds.
    """
    if racers < 1:
        raise ValueError("at least one racer is needed")
    events: queue.Queue[tuple[str, int]] = queue.Queue()
    durations: dict[int, int] = {}

    def race(idx: int) -> None:
        events.put(("start", idx))
        millis = random.randrange(5, 20)
        durations[idx] = millis
        time.sleep(millis / 1000)
        events.put(("quit", idx))

    print("start racing ...")
    try:
        for idx in range(racers):
            threading.Thread(target=race, args=(idx,), daemon=True).start()
        while True:
            kind, idx = events.get()
            if kind == "start":
                print(idx)
                continue
            print(f"quit by {idx} took {durations[idx]} milliseconds")
            return idx, durations[idx]
    finally:
        print("... end racing")


def range_close_money() -> list[Money]:
    """Receive three amounts of money from a generator thread."""
    print("start range close money ...")
    received: list[Money] = []
    for money in _produce(Money(idx, 500) for idx in range(3)):
        print(f"{money.idx} generate {money.amount}")
        received.append(money)
    print("... end range close money")
    return received


def _cook(orders: int) -> Iterator[_CookOrder]:
    for food in range(orders):
        done = threading.Event()
        yield _CookOrder(food, done)
        done.wait()


def sequence_food() -> list[int]:
    """Serve two cooks in lock step: each waits until its dish is taken."""
    print("start sequence food ...")
    orders = fan_in(_cook(3), _cook(3))
    served: list[int] = []
    for _ in range(3):
        first = next(orders)
        second = next(orders)
        print(first.food)
        print(second.food)
        served.extend((first.food, second.food))
        first.done.set()
        second.done.set()
    print("... end sequence food")
    return served


def dynamite(limit: int = 100, timeout: float = 0.001) -> list[int]:
    """Receive ``0 .. limit - 1`` until the stream closes or a read times out.

    ``timeout`` is in seconds. Returns the values received.
    """
    print("start dynamite ...")
    received: list[int] = []
    channel = _produce(range(limit))
    try:
        while True:
            try:
                value, ok = channel.receive(timeout=timeout)
            except TimeoutError:
                print("time out")
                break
            if not ok:
                print("channel closed")
                break
            print(value)
            received.append(value)
    finally:
        print("... end dynamite")
    return received


_DEMOS: dict[str, Callable[[argparse.Namespace], object]] = {
    "buffered": lambda args: buffered_demo(),
    "fan-in": lambda args: fan_in_demo(),
    "fibonacci": lambda args: fibonacci_demo(args.count),
    "fruits": lambda args: fruits_demo(),
    "generator": lambda args: generator_demo(),
    "racing": lambda args: racing(args.racers),
    "money": lambda args: range_close_money(),
    "sequence": lambda args: sequence_food(),
    "dynamite": lambda args: dynamite(args.limit, args.timeout),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the concurrency demonstrations."""
    parser = argparse.ArgumentParser(
        prog="algopatterns-concurrency",
        description="Run a concurrency pattern demonstration.",
    )
    parser.add_argument("demo", nargs="?", default="dynamite", choices=sorted(_DEMOS))
    parser.add_argument("--count", type=int, default=10, help="Fibonacci numbers to print")
    parser.add_argument("--racers", type=int, default=3, help="number of racers")
    parser.add_argument("--limit", type=int, default=100, help="values the dynamite producer sends")
    parser.add_argument("--timeout", type=float, default=0.001, help="dynamite read timeout in seconds")
    args = parser.parse_args(argv)
    _DEMOS[args.demo](args)
    return 0