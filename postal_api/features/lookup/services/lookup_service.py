"""郵便番号検索サービス"""

from collections.abc import Sequence
from typing import Protocol

from ...access_logs.domain.models import AccessLogWriteResult
from ...geocoding.domain.models import LocationRecord
from ...storage.repositories.base import LogStore
from ..domain.models import LookupResult
from ....shared.exceptions.errors import InvalidInputError, NotFoundError, StorageError
from ....shared.logging.config import get_logger
from ....shared.utils.text import is_valid_postal_code
from .address_reducer import reduce_common_address
from .distance_calculator import calculate_distance, parse_coordinate

logger = get_logger(__name__)


class GeocodeProvider(Protocol):
    """郵便番号から地域を検索する外部API"""

    def search(self, postal_code: str) -> list[LocationRecord]: ...


class LookupService:
    """
    郵便番号検索サービス

    1リクエスト分の処理（入力検証、外部API呼び出し、共通住所と距離の算出、
    アクセスログ記録）をまとめる
    """

    def __init__(self, geocoder: GeocodeProvider, log_store: LogStore) -> None:
        """
        Args:
            geocoder: 郵便番号検索API
            log_store: アクセスログの保存先
        """
        self.geocoder = geocoder
        self.log_store = log_store

        logger.info("LookupService initialized")

    def lookup(self, postal_code: str) -> LookupResult:
        """
        郵便番号に該当する住所を検索

        Args:
            postal_code: 7桁の郵便番号

        Returns:
            LookupResult: 検索結果

        Raises:
            InvalidInputError: 郵便番号が7桁の数字でない場合
            UpstreamUnavailableError: 外部APIとの通信に失敗した場合
            UpstreamMalformedError: 外部APIのレスポンスが解析できない場合
            NotFoundError: 該当する地域がない場合
        """
        if not is_valid_postal_code(postal_code):
            raise InvalidInputError(
                f"Invalid postal code format: {postal_code!r}. Must be 7 digits."
            )

        logger.info(f"Looking up postal code: {postal_code}")

        records = self.geocoder.search(postal_code)
        if not records:
            raise NotFoundError(f"No location found for postal code {postal_code}")

        result = LookupResult(
            postal_code=postal_code,
            hit_count=len(records),
            common_address=reduce_common_address(records),
            max_distance_km=self._max_distance(records),
        )

        self.record_access(postal_code)

        logger.info(
            f"Lookup completed: {postal_code} hits={result.hit_count} "
            f"address={result.common_address!r} distance={result.max_distance_km}km"
        )

        return result

    def record_access(self, postal_code: str) -> AccessLogWriteResult:
        """
        アクセスログを記録

        書き込みに失敗してもエラーは送出せず、結果として返す

        Args:
            postal_code: 郵便番号

        Returns:
            AccessLogWriteResult: 書き込み結果
        """
        try:
            self.log_store.append(postal_code)
        except StorageError as e:
            logger.warning(f"Failed to save access log: {postal_code} - {e}")
            return AccessLogWriteResult.failed(postal_code, str(e))

        return AccessLogWriteResult.ok(postal_code)

    def _max_distance(self, records: Sequence[LocationRecord]) -> float:
        """
        東京駅から最も遠い地域までの距離を取得

        座標が解析できない地域は距離0として扱う
        """
        max_distance = 0.0
        for record in records:
            longitude = parse_coordinate(record.longitude)
            latitude = parse_coordinate(record.latitude)

            if longitude is None or latitude is None:
                logger.warning(
                    f"Unparseable coordinates for {record.full_address}: "
                    f"x={record.longitude!r}, y={record.latitude!r}"
                )
                continue

            max_distance = max(max_distance, calculate_distance(longitude, latitude))

        return max_distance
