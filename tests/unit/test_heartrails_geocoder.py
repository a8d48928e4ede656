"""HeartRailsGeocoder のモックテスト"""

from unittest.mock import MagicMock

import pytest

from postal_api.features.geocoding.providers.heartrails_geocoder import HeartRailsGeocoder
from postal_api.shared.exceptions.errors import (
    HTTPError,
    UpstreamMalformedError,
    UpstreamUnavailableError,
)

_LOCATION = {
    "city": "千代田区",
    "city_kana": "ちよだく",
    "town": "千代田",
    "town_kana": "ちよだ",
    "x": "139.753634",
    "y": "35.685175",
    "prefecture": "東京都",
    "postal": "1000001",
}


def _geocoder_returning(body=None, json_error: Exception = None) -> tuple[HeartRailsGeocoder, MagicMock]:
    http_client = MagicMock()
    response = MagicMock()
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    http_client.get.return_value = response
    return HeartRailsGeocoder(http_client, base_url="https://example.test/api/json"), http_client


class TestSearch:
    """search のテスト"""

    def test_parses_locations(self) -> None:
        geocoder, http_client = _geocoder_returning({"response": {"location": [_LOCATION]}})

        records = geocoder.search("1000001")

        http_client.get.assert_called_once_with(
            "https://example.test/api/json",
            params={"method": "searchByPostal", "postal": "1000001"},
        )
        assert len(records) == 1
        record = records[0]
        assert record.prefecture == "東京都"
        assert record.city == "千代田区"
        assert record.town == "千代田"
        assert record.longitude == "139.753634"
        assert record.latitude == "35.685175"
        assert record.postal_code == "1000001"
        assert record.town_kana == "ちよだ"
        assert record.full_address == "東京都千代田区千代田"

    def test_missing_fields_default_to_empty(self) -> None:
        geocoder, _ = _geocoder_returning({"response": {"location": [{"prefecture": "東京都"}]}})

        record = geocoder.search("1000001")[0]

        assert record.city == ""
        assert record.longitude == ""

    def test_error_response_returns_empty(self) -> None:
        """該当なしの場合、APIはerrorを返す"""
        geocoder, _ = _geocoder_returning(
            {"response": {"error": "Cities of the specified postal code were not found."}}
        )

        assert geocoder.search("0000000") == []

    def test_empty_location_list(self) -> None:
        geocoder, _ = _geocoder_returning({"response": {"location": []}})
        assert geocoder.search("0000000") == []

    def test_transport_error(self) -> None:
        """通信失敗はUpstreamUnavailableError"""
        http_client = MagicMock()
        http_client.get.side_effect = HTTPError("Connection refused")
        geocoder = HeartRailsGeocoder(http_client)

        with pytest.raises(UpstreamUnavailableError):
            geocoder.search("1000001")

    def test_invalid_json(self) -> None:
        geocoder, _ = _geocoder_returning(json_error=ValueError("Expecting value"))

        with pytest.raises(UpstreamMalformedError):
            geocoder.search("1000001")

    @pytest.mark.parametrize(
        "body",
        [
            [],
            "text",
            {"response": "oops"},
            {"response": {"location": "oops"}},
            {"response": {"location": ["oops"]}},
        ],
    )
    def test_unexpected_shape(self, body) -> None:
        """想定外の構造はUpstreamMalformedError"""
        geocoder, _ = _geocoder_returning(body)

        with pytest.raises(UpstreamMalformedError):
            geocoder.search("1000001")
