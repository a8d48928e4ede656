"""サービスコンテナ（依存性注入）"""

from .features.access_logs.services.log_aggregator import LogAggregator
from .features.geocoding.providers.heartrails_geocoder import HeartRailsGeocoder
from .features.lookup.services.lookup_service import LookupService
from .features.storage.clients.firestore_client import FirestoreClient
from .features.storage.repositories.access_log_repository import AccessLogRepository
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import ConfigurationError
from .shared.http.client import HTTPClient
from .shared.logging.config import get_logger

logger = get_logger(__name__)


class ServiceContainer:
    """
    サービスコンテナ

    各Featureを組み立て、依存性注入を行う。
    HTTPクライアントとFirestoreクライアントは全リクエストで共有する
    """

    def __init__(self, settings: Settings) -> None:
        """
        Args:
            settings: アプリケーション設定

        Raises:
            ConfigurationError: 設定値が不正な場合
        """
        self.settings = settings

        if not settings.geocode_api_url:
            raise ConfigurationError("GEOCODE_API_URL must not be empty")
        if settings.geocode_timeout <= 0:
            raise ConfigurationError("GEOCODE_TIMEOUT must be positive")

        # 外部API
        self.http_client = HTTPClient(
            timeout=settings.geocode_timeout,
            user_agent=settings.geocode_user_agent,
        )
        self.geocoder = HeartRailsGeocoder(
            http_client=self.http_client,
            base_url=settings.geocode_api_url,
        )

        # アクセスログ
        self.firestore_client = FirestoreClient(
            project_id=settings.gcp_project_id,
            database_id=settings.firestore_database_id,
            emulator_host=settings.db_host or None,
        )
        self.access_log_repository = AccessLogRepository(
            self.firestore_client,
            collection_name=settings.access_logs_collection,
        )

        # サービス
        self.lookup_service = LookupService(
            geocoder=self.geocoder,
            log_store=self.access_log_repository,
        )
        self.log_aggregator = LogAggregator(self.access_log_repository)

        logger.info("ServiceContainer initialized")

    def close(self) -> None:
        """外部リソースを解放"""
        self.http_client.close()
        logger.info("ServiceContainer closed")
