from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta

import pytest

from askedout.infrastructure.storage.key_value import KeyValueBackend


class InMemoryKeyValueBackend(KeyValueBackend):
    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.writes = 0

    def read(self, key: str) -> str | None:
        return self.data.get(key)

    def write_many(self, items: Mapping[str, str | None]) -> None:
        self.writes += 1
        for key, value in items.items():
            if value is None:
                self.data.pop(key, None)
            else:
                self.data[key] = value


class FrozenClock:
    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime(2025, 3, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture(autouse=True)
def _log_file(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "app.log"))


@pytest.fixture()
def backend() -> InMemoryKeyValueBackend:
    return InMemoryKeyValueBackend()


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock()
