import pytest

from blogchain.errors import InvalidRequestError
from blogchain.store import KVStore, PageRequest, PrefixStore, paginate

KEYS = [bytes([c]) for c in b"abcde"]


@pytest.fixture
def filled():
    store = KVStore()
    for key in reversed(KEYS):
        store.set(key, key * 2)
    return store


def test_set_get_delete():
    store = KVStore()
    store.set(b"k", b"v")
    assert store.get(b"k") == b"v"
    store.delete(b"k")
    assert store.get(b"k") is None


def test_items_are_sorted(filled):
    assert [k for k, _ in filled.items()] == KEYS
    assert [k for k, _ in filled.items(reverse=True)] == KEYS[::-1]


def test_rejects_non_bytes_key_and_missing_value():
    store = KVStore()
    with pytest.raises(TypeError):
        store.set("k", b"v")
    with pytest.raises(ValueError):
        store.set(b"k", None)


def test_prefix_store_isolation():
    parent = KVStore()
    inner = PrefixStore(parent, b"p/")
    inner.set(b"x", b"1")
    parent.set(b"q/x", b"2")
    assert parent.get(b"p/x") == b"1"
    assert list(inner.items()) == [(b"x", b"1")]
    inner.delete(b"x")
    assert parent.get(b"p/x") is None
    assert parent.get(b"q/x") == b"2"


def test_nested_prefix_stores():
    parent = KVStore()
    nested = PrefixStore(PrefixStore(parent, b"a/"), b"b/")
    nested.set(b"k", b"v")
    assert parent.get(b"a/b/k") == b"v"


def test_paginate_default_returns_everything_with_total(filled):
    results, page = paginate(filled)
    assert [k for k, _ in results] == KEYS
    assert page.next_key is None
    assert page.total == len(KEYS)


def test_paginate_by_offset(filled):
    results, page = paginate(filled, PageRequest(limit=2))
    assert [k for k, _ in results] == KEYS[:2]
    assert page.next_key == KEYS[2]
    assert page.total == 0

    results, page = paginate(filled, PageRequest(offset=2, limit=2, count_total=True))
    assert [k for k, _ in results] == KEYS[2:4]
    assert page.next_key == KEYS[4]
    assert page.total == len(KEYS)


def test_paginate_by_key_continues_from_next_key(filled):
    first, page = paginate(filled, PageRequest(limit=2))
    second, page = paginate(filled, PageRequest(key=page.next_key, limit=2))
    assert [k for k, _ in first + second] == KEYS[:4]
    assert page.next_key == KEYS[4]


def test_paginate_reverse(filled):
    results, page = paginate(filled, PageRequest(limit=2, reverse=True))
    assert [k for k, _ in results] == KEYS[::-1][:2]
    results, _ = paginate(filled, PageRequest(key=page.next_key, limit=2, reverse=True))
    assert [k for k, _ in results] == KEYS[::-1][2:4]


def test_paginate_values_match_store(filled):
    results, _ = paginate(filled)
    assert all(filled.get(k) == v for k, v in results)


def test_paginate_rejects_key_and_offset(filled):
    with pytest.raises(InvalidRequestError, match="either offset or key"):
        paginate(filled, PageRequest(key=KEYS[0], offset=1))


def test_paginate_over_prefix_store():
    parent = KVStore()
    posts = PrefixStore(parent, b"Post/value/")
    for key in KEYS:
        posts.set(key, key)
    parent.set(b"other", b"x")
    results, page = paginate(posts)
    assert [k for k, _ in results] == KEYS
    assert page.total == len(KEYS)