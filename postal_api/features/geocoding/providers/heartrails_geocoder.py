"""HeartRails Geo API（郵便番号検索）実装"""
from typing import Any

from ..domain.models import LocationRecord
from ....shared.exceptions.errors import (
    HTTPError,
    UpstreamMalformedError,
    UpstreamUnavailableError,
)
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


class HeartRailsGeocoder:
    """HeartRails Geo API の searchByPostal を呼び出す"""

    DEFAULT_BASE_URL = "https://geoapi.heartrails.com/api/json"

    def __init__(self, http_client: HTTPClient, base_url: str = DEFAULT_BASE_URL) -> None:
        """
        Args:
            http_client: HTTPクライアント
            base_url: APIのURL
        """
        self.http_client = http_client
        self.base_url = base_url

        logger.info(f"HeartRailsGeocoder initialized: {base_url}")

    def search(self, postal_code: str) -> list[LocationRecord]:
        """
        郵便番号に該当する地域を検索

        Args:
            postal_code: 7桁の郵便番号

        Returns:
            list[LocationRecord]: 該当する地域（該当なしの場合は空リスト）

        Raises:
            UpstreamUnavailableError: 通信に失敗した場合
            UpstreamMalformedError: レスポンスが想定外の形式の場合
        """
        params = {"method": "searchByPostal", "postal": postal_code}

        try:
            response = self.http_client.get(self.base_url, params=params)
        except HTTPError as e:
            raise UpstreamUnavailableError(
                f"Failed to fetch locations for {postal_code}: {e}"
            ) from e

        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamMalformedError(
                f"Failed to parse response for {postal_code}: {e}"
            ) from e

        records = self._parse_locations(body)
        logger.debug(f"HeartRails returned {len(records)} locations for {postal_code}")

        return records

    def _parse_locations(self, body: Any) -> list[LocationRecord]:
        """
        レスポンスJSONから地域リストを抽出

        該当なしの場合、APIは location の代わりに error を返す

        Args:
            body: パース済みのレスポンス

        Returns:
            list[LocationRecord]: 地域リスト

        Raises:
            UpstreamMalformedError: 想定外の構造の場合
        """
        if not isinstance(body, dict):
            raise UpstreamMalformedError("Response root is not an object")

        payload = body.get("response", {})
        if not isinstance(payload, dict):
            raise UpstreamMalformedError("'response' is not an object")

        if "error" in payload and "location" not in payload:
            logger.info(f"HeartRails reported no match: {payload['error']}")
            return []

        locations = payload.get("location", [])
        if locations is None:
            return []
        if not isinstance(locations, list):
            raise UpstreamMalformedError("'location' is not a list")

        records = []
        for item in locations:
            if not isinstance(item, dict):
                raise UpstreamMalformedError("'location' item is not an object")
            records.append(LocationRecord.from_api_dict(item))

        return records
