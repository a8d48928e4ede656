"""テスト共通のフィクスチャ"""
from collections import Counter
from typing import Optional

import pytest

from postal_api.features.geocoding.domain.models import LocationRecord
from postal_api.features.storage.repositories.base import LogStore
from postal_api.shared.exceptions.errors import StorageError


def make_record(
    town: str,
    prefecture: str = "東京都",
    city: str = "千代田区",
    x: str = "139.7640",
    y: str = "35.6790",
    postal_code: str = "1000001",
) -> LocationRecord:
    """テスト用の地域レコードを作成"""
    return LocationRecord(
        prefecture=prefecture,
        city=city,
        town=town,
        longitude=x,
        latitude=y,
        postal_code=postal_code,
    )


class FakeGeocoder:
    """固定の地域を返すジオコーダー"""

    def __init__(
        self,
        records: Optional[list[LocationRecord]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.records = records or []
        self.error = error
        self.calls: list[str] = []

    def search(self, postal_code: str) -> list[LocationRecord]:
        self.calls.append(postal_code)
        if self.error:
            raise self.error
        return list(self.records)


class InMemoryLogStore(LogStore):
    """メモリ上のアクセスログ"""

    def __init__(self, fail_append: bool = False, fail_query: bool = False) -> None:
        self.entries: list[str] = []
        self.fail_append = fail_append
        self.fail_query = fail_query

    def append(self, postal_code: str) -> None:
        if self.fail_append:
            raise StorageError("connection refused")
        self.entries.append(postal_code)

    def grouped_counts(self) -> list[tuple[str, int]]:
        if self.fail_query:
            raise StorageError("connection refused")
        return list(Counter(self.entries).items())


@pytest.fixture
def log_store() -> InMemoryLogStore:
    return InMemoryLogStore()
