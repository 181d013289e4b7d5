import pytest

from smartpq import config
from smartpq.datastructures import Polarity, PolarityHeap


def test_defaults_without_environment():
    assert config.default_capacity() == config.DEFAULT_CAPACITY
    assert config.default_polarity() is Polarity.MIN_FIRST
    h = PolarityHeap()
    assert h.capacity == 16
    assert h.status() == "Min"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SMARTPQ_CAPACITY", "3")
    monkeypatch.setenv("SMARTPQ_POLARITY", "max")
    h = PolarityHeap()
    assert h.capacity == 3
    assert h.polarity is Polarity.MAX_FIRST


def test_explicit_arguments_beat_environment(monkeypatch):
    monkeypatch.setenv("SMARTPQ_CAPACITY", "3")
    monkeypatch.setenv("SMARTPQ_POLARITY", "max")
    h = PolarityHeap(capacity=8, polarity="min")
    assert h.capacity == 8
    assert h.polarity is Polarity.MIN_FIRST


@pytest.mark.parametrize("raw", ["zero", "0", "-2"])
def test_bad_capacity_env(monkeypatch, raw):
    monkeypatch.setenv("SMARTPQ_CAPACITY", raw)
    with pytest.raises(ValueError):
        config.default_capacity()


def test_bad_polarity_env(monkeypatch):
    monkeypatch.setenv("SMARTPQ_POLARITY", "up")
    with pytest.raises(ValueError):
        config.default_polarity()


@pytest.mark.parametrize("cap", [0, -1, 2.5, True])
def test_bad_capacity_argument(cap):
    with pytest.raises(ValueError):
        PolarityHeap(capacity=cap)
