"""アクセスログ集計サービス"""

from ...storage.repositories.base import LogStore
from ..domain.models import AccessLogSummary
from ....shared.exceptions.errors import StorageError, StoreUnavailableError
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


class LogAggregator:
    """郵便番号ごとのリクエスト数を集計する（キャッシュしない）"""

    def __init__(self, log_store: LogStore) -> None:
        """
        Args:
            log_store: アクセスログの保存先
        """
        self.log_store = log_store

    def report(self) -> list[AccessLogSummary]:
        """
        郵便番号ごとのリクエスト数を取得

        リクエスト数の降順。同数の場合は郵便番号の昇順

        Returns:
            list[AccessLogSummary]: 集計結果

        Raises:
            StoreUnavailableError: アクセスログを取得できない場合
        """
        try:
            counts = self.log_store.grouped_counts()
        except StorageError as e:
            logger.error(f"Failed to query access logs: {e}")
            raise StoreUnavailableError(f"Failed to query access logs: {e}") from e

        summaries = [
            AccessLogSummary(postal_code=postal_code, request_count=count)
            for postal_code, count in sorted(counts, key=lambda item: (-item[1], item[0]))
        ]

        logger.info(f"Access log report: {len(summaries)} postal codes")

        return summaries
