"""In-memory key-value stores and pagination over them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

from blogchain.errors import InvalidRequestError

DEFAULT_LIMIT = 100


def _check_key(key: bytes) -> bytes:
    if not isinstance(key, (bytes, bytearray)):
        raise TypeError(f"key must be bytes, not {type(key).__name__}")
    return bytes(key)


class _Iterable(Protocol):
    def items(self, reverse: bool = False) -> Iterator[tuple[bytes, bytes]]: ...


class KVStore:
    """A byte-keyed store that iterates in key order."""

    def __init__(self) -> None:
        self._data: dict[bytes, bytes] = {}

    def get(self, key: bytes) -> bytes | None:
        return self._data.get(_check_key(key))

    def set(self, key: bytes, value: bytes) -> None:
        key = _check_key(key)
        if value is None:
            raise ValueError("value is nil")
        self._data[key] = bytes(value)

    def delete(self, key: bytes) -> None:
        self._data.pop(_check_key(key), None)

    def items(self, reverse: bool = False) -> Iterator[tuple[bytes, bytes]]:
        """Yield key-value pairs in ascending (or descending) key order."""
        for key in sorted(self._data, reverse=reverse):
            value = self._data.get(key)
            if value is not None:
                yield key, value

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data


class PrefixStore:
    """A view of a parent store restricted to keys under a prefix."""

    def __init__(self, parent: KVStore | PrefixStore, prefix: bytes) -> None:
        self._parent = parent
        self._prefix = _check_key(prefix)

    def get(self, key: bytes) -> bytes | None:
        return self._parent.get(self._prefix + _check_key(key))

    def set(self, key: bytes, value: bytes) -> None:
        self._parent.set(self._prefix + _check_key(key), value)

    def delete(self, key: bytes) -> None:
        self._parent.delete(self._prefix + _check_key(key))

    def items(self, reverse: bool = False) -> Iterator[tuple[bytes, bytes]]:
        """Yield pairs under the prefix, with the prefix stripped from keys."""
        size = len(self._prefix)
        for key, value in self._parent.items(reverse):
            if key.startswith(self._prefix):
                yield key[size:], value


@dataclass
class PageRequest:
    """Selects one page of results, by start key or by offset."""

    key: bytes = b""
    offset: int = 0
    limit: int = 0
    count_total: bool = False
    reverse: bool = False


@dataclass
class PageResponse:
    """Where the next page starts and, if requested, the total count."""

    next_key: bytes | None = None
    total: int = 0


def _iterate_from(
    store: _Iterable, start: bytes, reverse: bool
) -> Iterator[tuple[bytes, bytes]]:
    if not reverse:
        return ((k, v) for k, v in store.items() if k >= start)
    bound = next((k for k, _ in store.items() if k >= start), None)
    return ((k, v) for k, v in store.items(reverse=True) if bound is None or k <= bound)


def paginate(
    store: _Iterable, request: PageRequest | None = None
) -> tuple[list[tuple[bytes, bytes]], PageResponse]:
    """Return one page of key-value pairs from ``store`` and its page response."""
    request = request or PageRequest()
    if request.offset < 0 or request.limit < 0:
        raise ValueError("offset and limit must not be negative")
    if request.offset > 0 and request.key:
        raise InvalidRequestError("invalid request, either offset or key is expected, got both")

    limit = request.limit
    count_total = request.count_total
    if limit == 0:
        limit = DEFAULT_LIMIT
        count_total = True

    results: list[tuple[bytes, bytes]] = []
    next_key: bytes | None = None

    if request.key:
        for key, value in _iterate_from(store, request.key, request.reverse):
            if len(results) == limit:
                next_key = key
                break
            results.append((key, value))
        return results, PageResponse(next_key=next_key)

    end = request.offset + limit
    count = 0
    for key, value in store.items(request.reverse):
        count += 1
        if count <= request.offset:
            continue
        if count <= end:
            results.append((key, value))
        elif count == end + 1:
            next_key = key
            if not count_total:
                break
    return results, PageResponse(next_key=next_key, total=count if count_total else 0)