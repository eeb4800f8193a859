import pytest

from quadkit.generational import GenerationalId, GenerationalStorage


def test_push_and_get():
    storage = GenerationalStorage()
    a = storage.push("a")
    b = storage.push("b")
    assert storage.get(a) == "a"
    assert storage.get(b) == "b"
    assert storage.count() == 2
    assert a.generation == 0


def test_get_unknown_id():
    storage = GenerationalStorage()
    storage.push("a")
    assert storage.get(GenerationalId(1, 0)) is None
    assert storage.get(GenerationalId(5, 0)) is None


def test_free_then_get_is_none():
    storage = GenerationalStorage()
    a = storage.push("a")
    storage.free(a)
    assert storage.get(a) is None
    assert storage.count() == 0


def test_reuse_bumps_generation():
    storage = GenerationalStorage()
    a = storage.push("a")
    storage.free(a)
    b = storage.push("b")
    assert b.index == a.index
    assert b.generation == a.generation + 1
    assert storage.get(a) is None
    assert storage.get(b) == "b"


def test_stale_free_keeps_new_value():
    storage = GenerationalStorage()
    a = storage.push("a")
    storage.free(a)
    b = storage.push("b")
    storage.free(a)
    assert storage.get(b) == "b"


def test_double_free_is_harmless():
    storage = GenerationalStorage()
    a = storage.push("a")
    storage.free(a)
    storage.free(a)
    b = storage.push("b")
    c = storage.push("c")
    assert storage.get(b) == "b"
    assert storage.get(c) == "c"
    assert b.index != c.index


def test_replace():
    storage = GenerationalStorage()
    a = storage.push("a")
    storage.replace(a, "z")
    assert storage.get(a) == "z"


def test_replace_stale_raises():
    storage = GenerationalStorage()
    a = storage.push("a")
    storage.free(a)
    with pytest.raises(KeyError):
        storage.replace(a, "z")


def test_retain_removes_rejected():
    storage = GenerationalStorage()
    ids = [storage.push(n) for n in range(6)]
    storage.retain(lambda n: n % 2 == 0)
    assert storage.count() == 3
    assert [storage.get(i) for i in ids] == [0, None, 2, None, 4, None]


def test_retain_visits_in_order():
    storage = GenerationalStorage()
    for n in "abc":
        storage.push(n)
    seen = []
    storage.retain(lambda v: seen.append(v) or True)
    assert seen == ["a", "b", "c"]
    assert len(storage) == 3


def test_clear():
    storage = GenerationalStorage()
    a = storage.push("a")
    storage.clear()
    assert storage.count() == 0
    assert storage.get(a) is None
    b = storage.push("b")
    assert b == GenerationalId(0, 0)