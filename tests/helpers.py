"""Shared test utilities."""


class ListParamStore:
    """In-memory ParamStore for tests, backed by a plain list of pairs."""

    def __init__(self, pairs: list[tuple[str, str]] | None = None) -> None:
        self._pairs: list[tuple[str, str]] = list(pairs) if pairs else []

    def get(self, key: str) -> str | None:
        return next((v for k, v in self._pairs if k == key), None)

    def get_all(self, key: str) -> list[str]:
        return [v for k, v in self._pairs if k == key]

    def append(self, key: str, value: str) -> None:
        self._pairs.append((key, value))

    def set(self, key: str, value: str) -> None:
        self.delete(key)
        self._pairs.append((key, value))

    def delete(self, key: str) -> None:
        self._pairs = [(k, v) for k, v in self._pairs if k != key]

    def entries(self) -> list[tuple[str, str]]:
        return list(self._pairs)

    def serialize(self) -> str:
        return "&".join(f"{k}={v}" for k, v in self._pairs)

    @property
    def pairs(self) -> list[tuple[str, str]]:
        return self._pairs
