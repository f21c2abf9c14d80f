"""Chainable surface over ``SearchParams``."""

from __future__ import annotations

from typing import Iterable

from search_params.store import SearchParams, first_seen, first_values


class SearchParamsHelper:
    """Query-string editor whose mutators return ``self``.

    Usage::

        query = (
            SearchParamsHelper.create("?key1=value1&key2=value2")
            .add_param("added", "x")
            .remove_param("key1")
            .add_or_replace_param("key2", "replaced")
            .get_url_search_params()
        )  # "key2=replaced&added=x"
    """

    def __init__(self, query: str = "") -> None:
        self.search_params = SearchParams(query)

    @classmethod
    def create(cls, query: str = "") -> SearchParamsHelper:
        return cls(query)

    def add_param(self, key: str, value: str) -> SearchParamsHelper:
        self.search_params.append(key, value)
        return self

    def add_param_list(self, pairs: Iterable[tuple[str, str]]) -> SearchParamsHelper:
        for key, value in pairs:
            self.search_params.append(key, value)
        return self

    def remove_param(self, key: str) -> SearchParamsHelper:
        """Drop every entry for *key*; a missing key is ignored."""
        self.search_params.delete(key)
        return self

    def remove_param_list(self, keys: Iterable[str]) -> SearchParamsHelper:
        for key in keys:
            self.search_params.delete(key)
        return self

    def add_or_replace_param(self, key: str, value: str) -> SearchParamsHelper:
        """Replace all entries for *key* with one, or append it if missing."""
        self.search_params.set(key, value)
        return self

    def add_or_replace_param_list(
        self, pairs: Iterable[tuple[str, str]],
    ) -> SearchParamsHelper:
        for key, value in pairs:
            self.search_params.set(key, value)
        return self

    def get_param(self, key: str) -> str | None:
        return self.search_params.get(key)

    def get_param_list(self, keys: Iterable[str]) -> dict[str, str | None]:
        return first_values(self.search_params, keys)

    def get_all_params(self) -> dict[str, str]:
        """Every distinct key with its first value.

        Later duplicates of a key are not reflected here; use
        ``search_params.get_all`` to read them.
        """
        return first_seen(self.search_params)

    def get_url_search_params(self) -> str:
        return self.search_params.serialize()

    def __str__(self) -> str:
        return self.search_params.serialize()

    def __repr__(self) -> str:
        return f"SearchParamsHelper({self.search_params.serialize()!r})"
