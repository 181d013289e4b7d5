import pytest

from smartpq.datastructures import Polarity, PolarityHeap


def _check_heap(heap: PolarityHeap) -> None:
    data = heap.to_list()
    before = heap.polarity.before
    for i in range(len(data)):
        for child in (2 * i + 1, 2 * i + 2):
            if child < len(data):
                assert not before(data[child], data[i]), (
                    f"child {data[child]!r} at {child} outranks parent {data[i]!r} at {i} "
                    f"under {heap.status()}: {data!r}"
                )


@pytest.fixture
def assert_heap_invariant():
    return _check_heap


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # Tests assume built-in defaults unless they set the environment themselves.
    monkeypatch.delenv("SMARTPQ_CAPACITY", raising=False)
    monkeypatch.delenv("SMARTPQ_POLARITY", raising=False)


@pytest.fixture
def min_heap():
    h = PolarityHeap(capacity=5, polarity=Polarity.MIN_FIRST)
    for v in [3, 1, 5, 4, 2]:
        h.insert(v)
    return h


@pytest.fixture
def max_heap():
    h = PolarityHeap(capacity=5, polarity=Polarity.MAX_FIRST)
    for v in [3, 1, 5, 4, 2]:
        h.insert(v)
    return h
