import threading

import pytest

from zkit.safemap import ZMap


@pytest.mark.parametrize(
    "key, value",
    [("test", 42), ("", 0), ("existing", 100)],
    ids=["string key", "empty key", "overwrite"],
)
def test_set(key, value):
    m = ZMap()
    m.set(key, value)
    assert key in m
    assert m.get(key) == value


def test_set_overwrites():
    m = ZMap()
    m.set("existing", 1)
    m.set("existing", 100)
    assert m.get("existing") == 100
    assert len(m) == 1


@pytest.mark.parametrize(
    "setup, key, want, present",
    [
        ({"test": 42}, "test", 42, True),
        ({}, "missing", None, False),
        (None, "any", None, False),
    ],
    ids=["existing", "non-existent", "empty map"],
)
def test_get(setup, key, want, present):
    m = ZMap()
    for k, v in (setup or {}).items():
        m.set(k, v)
    assert (key in m) is present
    assert m.get(key) == want


def test_get_default():
    m = ZMap()
    assert m.get("missing", 0) == 0
    m.set("present", 5)
    assert m.get("present", 0) == 5


@pytest.mark.parametrize(
    "setup, key, want, length",
    [
        ({"test": 42, "other": 1}, "test", True, 1),
        ({"test": 42}, "missing", False, 1),
        (None, "any", False, 0),
    ],
    ids=["existing", "non-existent", "empty map"],
)
def test_delete(setup, key, want, length):
    m = ZMap()
    for k, v in (setup or {}).items():
        m.set(k, v)
    assert m.delete(key) is want
    assert len(m) == length


@pytest.mark.parametrize(
    "setup, want",
    [(None, 0), ({"test": 42}, 1), ({"a": 1, "b": 2, "c": 3}, 3)],
)
def test_len(setup, want):
    m = ZMap()
    for k, v in (setup or {}).items():
        m.set(k, v)
    assert len(m) == want


@pytest.mark.parametrize(
    "setup, want",
    [(None, []), ({"test": 42}, ["test"]), ({"a": 1, "b": 2}, ["a", "b"])],
)
def test_keys(setup, want):
    m = ZMap()
    for k, v in (setup or {}).items():
        m.set(k, v)
    assert sorted(m.keys()) == sorted(want)


def test_clear():
    m = ZMap()
    m.set("a", 1)
    m.set("b", 2)
    assert len(m) == 2
    m.clear()
    assert len(m) == 0
    assert "a" not in m
    assert m.get("a") is None


def test_concurrent():
    m = ZMap()
    num_threads = 100
    num_ops = 1000

    def writer(ident):
        for j in range(num_ops):
            m.set(ident * num_ops + j, "value")

    def reader(ident):
        for j in range(num_ops):
            m.get(ident * num_ops + j)

    threads = [threading.Thread(target=writer, args=(i,)) for i in range(num_threads)]
    threads += [threading.Thread(target=reader, args=(i,)) for i in range(num_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(m) == num_threads * num_ops