"""Factory surface: a bag of closures over one shared ``SearchParams``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from search_params.store import SearchParams, first_seen, first_values


@dataclass(frozen=True)
class SearchParamsFactory:
    """Operations returned by :func:`search_params_factory`.

    Every mutator returns the serialized query string after the change.
    All fields close over the same ``search_params`` container, so they can
    be unpacked and called independently.
    """

    search_params: SearchParams
    add_param: Callable[[str, str], str]
    add_param_list: Callable[[Iterable[tuple[str, str]]], str]
    remove_param: Callable[[str], str]
    remove_param_list: Callable[[Iterable[str]], str]
    add_or_replace_param: Callable[[str, str], str]
    add_or_replace_param_list: Callable[[Iterable[tuple[str, str]]], str]
    get_param: Callable[[str], str | None]
    get_param_list: Callable[[Iterable[str]], dict[str, str | None]]
    get_all_params: Callable[[], dict[str, str]]
    get_url_search_params: Callable[[], str]
    compose: Callable[..., str]


def search_params_factory(query: str = "") -> SearchParamsFactory:
    """Parse *query* and return closures that edit and read it.

    Usage::

        p = search_params_factory("?key1=value1")
        p.add_param("key2", "value2")  # "key1=value1&key2=value2"
        p.compose(
            lambda: p.remove_param("key1"),
            lambda: p.add_or_replace_param("key2", "x"),
        )  # "key2=x"
    """
    params = SearchParams(query)

    def add_param(key: str, value: str) -> str:
        params.append(key, value)
        return params.serialize()

    def add_param_list(pairs: Iterable[tuple[str, str]]) -> str:
        for key, value in pairs:
            params.append(key, value)
        return params.serialize()

    def remove_param(key: str) -> str:
        params.delete(key)
        return params.serialize()

    def remove_param_list(keys: Iterable[str]) -> str:
        for key in keys:
            params.delete(key)
        return params.serialize()

    def add_or_replace_param(key: str, value: str) -> str:
        params.set(key, value)
        return params.serialize()

    def add_or_replace_param_list(pairs: Iterable[tuple[str, str]]) -> str:
        for key, value in pairs:
            params.set(key, value)
        return params.serialize()

    def get_param(key: str) -> str | None:
        return params.get(key)

    def get_param_list(keys: Iterable[str]) -> dict[str, str | None]:
        return first_values(params, keys)

    def get_all_params() -> dict[str, str]:
        return first_seen(params)

    def get_url_search_params() -> str:
        return params.serialize()

    def compose(*operations: Callable[[], Any]) -> str:
        """Run *operations* in order and return the final query string."""
        for operation in operations:
            operation()
        return params.serialize()

    return SearchParamsFactory(
        search_params=params,
        add_param=add_param,
        add_param_list=add_param_list,
        remove_param=remove_param,
        remove_param_list=remove_param_list,
        add_or_replace_param=add_or_replace_param,
        add_or_replace_param_list=add_or_replace_param_list,
        get_param=get_param,
        get_param_list=get_param_list,
        get_all_params=get_all_params,
        get_url_search_params=get_url_search_params,
        compose=compose,
    )
