import pytest

from smartpq.datastructures import Entry, Polarity


def test_before_predicates():
    assert Polarity.MIN_FIRST.before(1, 2)
    assert not Polarity.MIN_FIRST.before(2, 1)
    assert Polarity.MAX_FIRST.before(2, 1)
    assert not Polarity.MAX_FIRST.before(1, 1)


def test_toggled_round_trip():
    assert Polarity.MIN_FIRST.toggled() is Polarity.MAX_FIRST
    assert Polarity.MIN_FIRST.toggled().toggled() is Polarity.MIN_FIRST


@pytest.mark.parametrize(
    "text, expected",
    [
        ("min", Polarity.MIN_FIRST),
        ("MAX", Polarity.MAX_FIRST),
        ("MinFirst", Polarity.MIN_FIRST),
        ("max_first", Polarity.MAX_FIRST),
        (" max-first ", Polarity.MAX_FIRST),
    ],
)
def test_parse(text, expected):
    assert Polarity.parse(text) is expected


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        Polarity.parse("sideways")


def test_labels():
    assert Polarity.MIN_FIRST.label == "Min"
    assert Polarity.MAX_FIRST.label == "Max"


def test_entry_orders_by_key_only():
    a = Entry(1, "zzz")
    b = Entry(2, "aaa")
    assert a < b and b > a
    assert a <= Entry(1, "other") and a >= Entry(1, "other")
    assert Entry(1, "x") == Entry(1, "x")
    assert Entry(1, "x") != Entry(1, "y")
