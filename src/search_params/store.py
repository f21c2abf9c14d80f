"""Ordered multi-map of query-string parameters."""

from __future__ import annotations

import urllib.parse
from typing import Iterable, Iterator, Protocol


class ParamStore(Protocol):
    """Read/write access to an ordered multi-map of string pairs."""

    def get(self, key: str) -> str | None: ...
    def get_all(self, key: str) -> list[str]: ...
    def append(self, key: str, value: str) -> None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...
    def entries(self) -> list[tuple[str, str]]: ...
    def serialize(self) -> str: ...


class SearchParams:
    """Query-string parameters parsed from ``application/x-www-form-urlencoded``.

    Duplicate keys are kept as independent entries in insertion order.
    Encoding and decoding are delegated to :mod:`urllib.parse`; malformed
    percent-escapes are passed through instead of raising.

    Usage::

        params = SearchParams("?a=1&b=2")
        params.append("a", "3")
        params.serialize()  # "a=1&b=2&a=3"
    """

    def __init__(self, query: str = "") -> None:
        self._entries: list[tuple[str, str]] = _parse(query)

    def get(self, key: str) -> str | None:
        """First value for *key*, or ``None``."""
        for k, v in self._entries:
            if k == key:
                return v
        return None

    def get_all(self, key: str) -> list[str]:
        return [v for k, v in self._entries if k == key]

    def has(self, key: str) -> bool:
        return any(k == key for k, _ in self._entries)

    def append(self, key: str, value: str) -> None:
        self._entries.append((key, value))

    def set(self, key: str, value: str) -> None:
        """Leave exactly one entry for *key*.

        The first existing entry is overwritten in place and later ones are
        dropped; if *key* is absent the pair is appended.
        """
        result: list[tuple[str, str]] = []
        found = False
        for k, v in self._entries:
            if k != key:
                result.append((k, v))
            elif not found:
                result.append((key, value))
                found = True
        if not found:
            result.append((key, value))
        self._entries = result

    def delete(self, key: str) -> None:
        self._entries = [(k, v) for k, v in self._entries if k != key]

    def entries(self) -> list[tuple[str, str]]:
        return list(self._entries)

    def serialize(self) -> str:
        """Encoded query string without a leading ``?``."""
        return urllib.parse.urlencode(self._entries, safe="*")

    def __str__(self) -> str:
        return self.serialize()

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SearchParams):
            return self._entries == other._entries
        return NotImplemented

    def __repr__(self) -> str:
        return f"SearchParams({self.serialize()!r})"


def first_values(store: ParamStore, keys: Iterable[str]) -> dict[str, str | None]:
    """Map each of *keys* to its first value in *store* (``None`` if absent)."""
    return {key: store.get(key) for key in keys}


def first_seen(store: ParamStore) -> dict[str, str]:
    """Map every distinct key in *store* to its first value, in first-seen order."""
    params: dict[str, str] = {}
    for key, value in store.entries():
        params.setdefault(key, value)
    return params


def _parse(query: str) -> list[tuple[str, str]]:
    if query.startswith("?"):
        query = query[1:]
    return urllib.parse.parse_qsl(query, keep_blank_values=True)
