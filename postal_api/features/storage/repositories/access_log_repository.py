"""アクセスログリポジトリ"""

from collections import Counter

from ....shared.exceptions.errors import StorageError
from ....shared.logging.config import get_logger
from ...access_logs.domain.models import AccessLogEntry
from ..clients.firestore_client import FirestoreClient
from .base import LogStore

logger = get_logger(__name__)


class AccessLogRepository(LogStore):
    """Firestoreに保存するアクセスログのリポジトリ"""

    DEFAULT_COLLECTION_NAME = "access_logs"

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection_name: str = DEFAULT_COLLECTION_NAME,
    ) -> None:
        """
        AccessLogRepositoryを初期化

        Args:
            firestore_client: Firestoreクライアント
            collection_name: コレクション名
        """
        self.client = firestore_client
        self.collection_name = collection_name
        logger.info(f"AccessLogRepository initialized: collection={collection_name}")

    def append(self, postal_code: str) -> None:
        """
        アクセスログを1件追加（同じ郵便番号でも毎回追加する）

        Args:
            postal_code: 郵便番号

        Raises:
            StorageError: 書き込みに失敗した場合
        """
        entry = AccessLogEntry(postal_code=postal_code)
        doc_id = self.client.add_document(self.collection_name, entry.to_firestore_dict())
        logger.debug(f"Access log saved: {postal_code} ({doc_id})")

    def grouped_counts(self) -> list[tuple[str, int]]:
        """
        郵便番号ごとのアクセス数を取得

        全件取得してクライアント側でカウントする
        （FirestoreにはGROUP BYがないため）

        Returns:
            list[tuple[str, int]]: (郵便番号, アクセス数) のリスト

        Raises:
            StorageError: 取得に失敗した場合
        """
        try:
            counts: Counter[str] = Counter()
            for doc in self.client.stream_documents(
                self.collection_name, fields=["postal_code"]
            ):
                postal_code = doc.get("postal_code")
                if postal_code:
                    counts[postal_code] += 1

        except StorageError:
            raise
        except Exception as e:
            raise StorageError(f"Failed to count access logs: {e}") from e

        logger.info(f"Access log counts: {len(counts)} postal codes")

        return list(counts.items())
