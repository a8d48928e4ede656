"""カスタム例外定義"""


class PostalApiError(Exception):
    """郵便番号API基底例外"""

    pass


class InvalidInputError(PostalApiError):
    """入力値（郵便番号）の形式エラー"""

    pass


class NotFoundError(PostalApiError):
    """該当する住所が存在しない"""

    pass


class HTTPError(PostalApiError):
    """HTTP関連のエラー"""

    pass


class GeocodingError(PostalApiError):
    """ジオコーディングエラー"""

    pass


class UpstreamUnavailableError(GeocodingError):
    """外部APIへの通信失敗"""

    pass


class UpstreamMalformedError(GeocodingError):
    """外部APIのレスポンスが想定外の形式"""

    pass


class StorageError(PostalApiError):
    """ストレージ関連のエラー"""

    pass


class StoreUnavailableError(StorageError):
    """アクセスログの集計クエリ失敗"""

    pass


class ConfigurationError(PostalApiError):
    """設定エラー"""

    pass
