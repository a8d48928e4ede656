"""住所検索機能のドメインモデル"""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LookupResult:
    """郵便番号1件の検索結果"""

    postal_code: str  # リクエストされた郵便番号
    hit_count: int  # 該当した地域の数
    common_address: str  # 各地域に共通する住所（共通部分がなければ空文字）
    max_distance_km: float  # 東京駅から最も遠い地域までの距離（km、小数点第一位）

    def to_response_dict(self) -> dict[str, Any]:
        """APIレスポンス用の辞書に変換"""
        return {
            "postal_code": self.postal_code,
            "hit_count": self.hit_count,
            "address": self.common_address,
            "tokyo_sta_distance": self.max_distance_km,
        }
