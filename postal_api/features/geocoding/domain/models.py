"""ジオコーディング機能のドメインモデル"""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LocationRecord:
    """
    郵便番号検索APIが返す地域1件

    経度・緯度は外部APIから文字列で返るため、そのまま保持し、
    距離計算時にパースする
    """

    prefecture: str  # 都道府県名
    city: str  # 市区町村名
    town: str  # 町域名
    longitude: str  # 経度（x）
    latitude: str  # 緯度（y）
    postal_code: str  # 郵便番号
    city_kana: str = ""  # 市区町村名（カナ）
    town_kana: str = ""  # 町域名（カナ）

    @property
    def full_address(self) -> str:
        """都道府県＋市区町村＋町域の連結"""
        return f"{self.prefecture}{self.city}{self.town}"

    @classmethod
    def from_api_dict(cls, data: dict[str, Any]) -> "LocationRecord":
        """
        外部APIのlocation要素から生成

        Args:
            data: location配列の1要素

        Returns:
            LocationRecord: 地域レコード
        """
        return cls(
            prefecture=_as_text(data.get("prefecture")),
            city=_as_text(data.get("city")),
            town=_as_text(data.get("town")),
            longitude=_as_text(data.get("x")),
            latitude=_as_text(data.get("y")),
            postal_code=_as_text(data.get("postal")),
            city_kana=_as_text(data.get("city_kana")),
            town_kana=_as_text(data.get("town_kana")),
        )


def _as_text(value: Any) -> str:
    """Noneは空文字、それ以外は文字列化"""
    if value is None:
        return ""
    return str(value)
