"""アクセスログ機能のドメインモデル"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from ....shared.utils.datetime_utils import now_jst


@dataclass
class AccessLogEntry:
    """アクセスログ1件（検索成功ごとに1件、重複排除しない）"""

    postal_code: str
    accessed_at: datetime = field(default_factory=now_jst)

    def to_firestore_dict(self) -> dict[str, Any]:
        """Firestore保存用の辞書に変換"""
        return {
            "postal_code": self.postal_code,
            "accessed_at": self.accessed_at,
        }


@dataclass(frozen=True)
class AccessLogSummary:
    """郵便番号ごとのリクエスト数"""

    postal_code: str
    request_count: int

    def to_response_dict(self) -> dict[str, Any]:
        """APIレスポンス用の辞書に変換"""
        return {
            "postal_code": self.postal_code,
            "request_count": self.request_count,
        }


@dataclass(frozen=True)
class AccessLogWriteResult:
    """アクセスログ書き込みの結果（失敗してもリクエスト自体は失敗させない）"""

    postal_code: str
    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls, postal_code: str) -> "AccessLogWriteResult":
        return cls(postal_code=postal_code, success=True)

    @classmethod
    def failed(cls, postal_code: str, error: str) -> "AccessLogWriteResult":
        return cls(postal_code=postal_code, success=False, error=error)
