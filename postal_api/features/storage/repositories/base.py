"""アクセスログストアの抽象基底クラス"""
from abc import ABC, abstractmethod


class LogStore(ABC):
    """
    アクセスログの保存先

    実装は複数のリクエストスレッドから同時に呼ばれる
    """

    @abstractmethod
    def append(self, postal_code: str) -> None:
        """
        アクセスログを1件追加

        Args:
            postal_code: 郵便番号

        Raises:
            StorageError: 書き込みに失敗した場合
        """
        pass

    @abstractmethod
    def grouped_counts(self) -> list[tuple[str, int]]:
        """
        郵便番号ごとのアクセス数を取得

        Returns:
            list[tuple[str, int]]: (郵便番号, アクセス数) のリスト（順不同）

        Raises:
            StorageError: 取得に失敗した場合
        """
        pass
