"""HTTPエンドポイントのテスト"""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from conftest import FakeGeocoder, InMemoryLogStore, make_record
from postal_api.features.access_logs.services.log_aggregator import LogAggregator
from postal_api.features.lookup.services.lookup_service import LookupService
from postal_api.infrastructure.config.settings import Settings
from postal_api.server import create_app
from postal_api.shared.exceptions.errors import UpstreamMalformedError, UpstreamUnavailableError


def _client(geocoder: FakeGeocoder, log_store: InMemoryLogStore) -> TestClient:
    container = SimpleNamespace(
        lookup_service=LookupService(geocoder, log_store),
        log_aggregator=LogAggregator(log_store),
        close=lambda: None,
    )
    app = create_app(Settings(_env_file=None), container=container)
    return TestClient(app)


@pytest.fixture
def marunouchi_geocoder() -> FakeGeocoder:
    return FakeGeocoder(
        records=[
            make_record("Marunouchi1", prefecture="Tokyo", city="Chiyoda"),
            make_record("Marunouchi2", prefecture="Tokyo", city="Chiyoda"),
            make_record("Marunouchi3", prefecture="Tokyo", city="Chiyoda"),
        ]
    )


class TestAddressEndpoint:
    """GET /address のテスト"""

    def test_success(self, marunouchi_geocoder: FakeGeocoder, log_store: InMemoryLogStore) -> None:
        client = _client(marunouchi_geocoder, log_store)

        response = client.get("/address", params={"postal_code": "1000001"})

        assert response.status_code == 200
        body = response.json()
        assert body["postal_code"] == "1000001"
        assert body["hit_count"] == 3
        assert body["address"] == "TokyoChiyodaMarunouchi"
        assert body["tokyo_sta_distance"] >= 0
        assert log_store.entries == ["1000001"]

    @pytest.mark.parametrize("params", [{"postal_code": "12345"}, {"postal_code": "abcdefg"}, {}])
    def test_invalid_postal_code(
        self, marunouchi_geocoder: FakeGeocoder, log_store: InMemoryLogStore, params: dict
    ) -> None:
        client = _client(marunouchi_geocoder, log_store)

        response = client.get("/address", params=params)

        assert response.status_code == 400
        assert "7 digits" in response.json()["message"]

    def test_not_found(self, log_store: InMemoryLogStore) -> None:
        client = _client(FakeGeocoder(records=[]), log_store)

        response = client.get("/address", params={"postal_code": "0000000"})

        assert response.status_code == 404
        assert log_store.entries == []

    @pytest.mark.parametrize(
        "error",
        [UpstreamUnavailableError("timeout"), UpstreamMalformedError("not json")],
    )
    def test_upstream_error(self, log_store: InMemoryLogStore, error: Exception) -> None:
        """外部APIの通信失敗・解析失敗はどちらも500"""
        client = _client(FakeGeocoder(error=error), log_store)

        response = client.get("/address", params={"postal_code": "1000001"})

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch data from external API"}

    def test_log_failure_still_succeeds(self, marunouchi_geocoder: FakeGeocoder) -> None:
        client = _client(marunouchi_geocoder, InMemoryLogStore(fail_append=True))

        response = client.get("/address", params={"postal_code": "1000001"})

        assert response.status_code == 200

    def test_method_not_allowed(self, marunouchi_geocoder: FakeGeocoder, log_store: InMemoryLogStore) -> None:
        client = _client(marunouchi_geocoder, log_store)

        response = client.post("/address", params={"postal_code": "1000001"})

        assert response.status_code == 405


class TestAccessLogsEndpoint:
    """GET /address/access_logs のテスト"""

    def test_report(self, marunouchi_geocoder: FakeGeocoder, log_store: InMemoryLogStore) -> None:
        log_store.entries = ["1000001", "2000002", "1000001", "1000001"]
        client = _client(marunouchi_geocoder, log_store)

        response = client.get("/address/access_logs")

        assert response.status_code == 200
        assert response.json() == {
            "access_logs": [
                {"postal_code": "1000001", "request_count": 3},
                {"postal_code": "2000002", "request_count": 1},
            ]
        }

    def test_empty_report(self, marunouchi_geocoder: FakeGeocoder, log_store: InMemoryLogStore) -> None:
        client = _client(marunouchi_geocoder, log_store)

        response = client.get("/address/access_logs")

        assert response.json() == {"access_logs": []}

    def test_store_failure(self, marunouchi_geocoder: FakeGeocoder) -> None:
        client = _client(marunouchi_geocoder, InMemoryLogStore(fail_query=True))

        response = client.get("/address/access_logs")

        assert response.status_code == 500

    def test_method_not_allowed(self, marunouchi_geocoder: FakeGeocoder, log_store: InMemoryLogStore) -> None:
        client = _client(marunouchi_geocoder, log_store)

        response = client.delete("/address/access_logs")

        assert response.status_code == 405


def test_health(log_store: InMemoryLogStore) -> None:
    client = _client(FakeGeocoder(), log_store)

    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["status"] == "running"
