import pytest

from linkedkit.all_one import AllOne


def test_worked_example():
    obj = AllOne()
    obj.inc("hello")
    obj.inc("hello")
    assert obj.get_max_key() == "hello"
    assert obj.get_min_key() == "hello"

    obj.inc("leet")
    assert obj.get_max_key() == "hello"
    assert obj.get_min_key() == "leet"

    obj.inc("leet")
    obj.inc("leet")
    assert obj.get_max_key() == "leet"
    assert obj.get_min_key() == "hello"

    obj.dec("leet")
    obj.dec("leet")
    assert obj.get_max_key() == "hello"


def test_empty_returns_empty_string():
    obj = AllOne()
    assert obj.get_max_key() == ""
    assert obj.get_min_key() == ""


def test_dec_to_zero_removes_key():
    obj = AllOne()
    obj.inc("hello")
    obj.dec("hello")
    assert "hello" not in obj
    assert len(obj) == 0
    assert obj.get_max_key() == ""
    assert obj.get_min_key() == ""


def test_dec_unknown_key_raises():
    obj = AllOne()
    with pytest.raises(KeyError):
        obj.dec("missing")


def test_dec_creates_lower_bucket():
    obj = AllOne()
    for _ in range(3):
        obj.inc("hello")
    obj.inc("leet")
    obj.dec("hello")
    obj.dec("hello")
    # both keys at count 1 now; whichever is reported must be one of them
    assert {obj.get_min_key(), obj.get_max_key()} <= {"hello", "leet"}
    obj.dec("leet")
    assert obj.get_min_key() == "hello"
    assert obj.get_max_key() == "hello"


def test_min_and_max_track_many_keys():
    obj = AllOne()
    counts = {"a": 1, "b": 4, "c": 2, "d": 3}
    for key, count in counts.items():
        for _ in range(count):
            obj.inc(key)
    assert obj.get_max_key() == max(counts, key=counts.get)
    assert obj.get_min_key() == min(counts, key=counts.get)
    assert len(obj) == len(counts)


def test_reincrement_after_removal():
    obj = AllOne()
    obj.inc("hello")
    obj.inc("leet")
    obj.inc("leet")
    obj.dec("hello")
    obj.inc("hello")
    assert obj.get_min_key() == "hello"
    assert obj.get_max_key() == "leet"