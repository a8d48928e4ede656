"""Firestoreクライアント"""
import os
from collections.abc import Iterator
from typing import Any, Optional

from google.cloud import firestore

from ....shared.exceptions.errors import StorageError
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


class FirestoreClient:
    """Firestore操作クライアント（スレッド間で共有して使用する）"""

    def __init__(
        self,
        project_id: str,
        database_id: str = "(default)",
        emulator_host: Optional[str] = None,
    ) -> None:
        """
        Firestoreクライアントを初期化

        Args:
            project_id: GCPプロジェクトID
            database_id: データベースID（デフォルトは"(default)"）
            emulator_host: 接続先ホスト（例: localhost:8081）。
                指定された場合はそのホストのエミュレータに接続
        """
        self.project_id = project_id
        self.database_id = database_id

        # google-cloud-firestore は環境変数で接続先を切り替える
        if emulator_host:
            os.environ["FIRESTORE_EMULATOR_HOST"] = emulator_host

        try:
            self.client = firestore.Client(project=project_id, database=database_id)

            if emulator_host:
                logger.info(
                    f"Firestore client initialized (EMULATOR MODE): "
                    f"host={emulator_host}, project={project_id}, database={database_id}"
                )
            else:
                logger.info(
                    f"Firestore client initialized: project={project_id}, database={database_id}"
                )
        except Exception as e:
            raise StorageError(f"Failed to initialize Firestore client: {e}") from e

    def get_collection(self, collection_path: str) -> firestore.CollectionReference:
        """
        コレクション参照を取得

        Args:
            collection_path: コレクションパス

        Returns:
            CollectionReference: コレクション参照
        """
        return self.client.collection(collection_path)

    def add_document(self, collection_path: str, document: dict[str, Any]) -> str:
        """
        自動採番のIDでドキュメントを追加

        Args:
            collection_path: コレクションパス
            document: 追加するドキュメント

        Returns:
            str: 採番されたドキュメントID

        Raises:
            StorageError: 書き込みに失敗した場合
        """
        try:
            _, doc_ref = self.get_collection(collection_path).add(document)
            logger.debug(f"Document {doc_ref.id} added to {collection_path}")
            return doc_ref.id

        except Exception as e:
            raise StorageError(f"Failed to add document to {collection_path}: {e}") from e

    def stream_documents(
        self,
        collection_path: str,
        fields: Optional[list[str]] = None,
    ) -> Iterator[dict[str, Any]]:
        """
        コレクションの全ドキュメントを順に取得

        Args:
            collection_path: コレクションパス
            fields: 取得するフィールド（Noneの場合は全フィールド）

        Yields:
            dict[str, Any]: ドキュメントデータ

        Raises:
            StorageError: 取得に失敗した場合
        """
        try:
            query = self.get_collection(collection_path)
            if fields:
                query = query.select(fields)

            for doc in query.stream():
                if doc.exists:
                    yield doc.to_dict()

        except Exception as e:
            raise StorageError(
                f"Failed to stream documents from {collection_path}: {e}"
            ) from e
