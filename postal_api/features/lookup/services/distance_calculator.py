"""東京駅からの距離計算"""
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

# 東京駅の座標
TOKYO_STATION_LONGITUDE = 139.7673068
TOKYO_STATION_LATITUDE = 35.6809591

# 地球の平均半径（km）
EARTH_RADIUS_KM = 6371.0


def calculate_distance(longitude: float, latitude: float) -> float:
    """
    指定座標から東京駅までの距離を計算（km）

    緯度差・経度差から平面近似（正距円筒図法）で求めるため、
    国内程度の距離を想定している

    Args:
        longitude: 経度（度）
        latitude: 緯度（度）

    Returns:
        float: 距離（km、小数点第一位で四捨五入）
    """
    xt = TOKYO_STATION_LONGITUDE
    yt = TOKYO_STATION_LATITUDE

    d_x = (longitude - xt) * math.cos(math.pi * (latitude + yt) / 360)
    d_y = latitude - yt

    distance = (math.pi * EARTH_RADIUS_KM / 180) * math.sqrt(d_x * d_x + d_y * d_y)

    return round_half_up(distance)


def round_half_up(value: float, digits: int = 1) -> float:
    """
    四捨五入（0から遠い方向へ丸める）

    2進浮動小数点の誤差で12.35が12.3になることを避けるため、
    floatの最短10進表現を基準に丸める

    Args:
        value: 対象の値
        digits: 小数点以下の桁数

    Returns:
        float: 丸めた値
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def parse_coordinate(text: Optional[str]) -> Optional[float]:
    """
    外部APIの座標文字列をfloatに変換

    Args:
        text: 座標文字列

    Returns:
        Optional[float]: 変換結果（空、数値以外、無限大・NaNの場合はNone）
    """
    if text is None:
        return None

    try:
        value = float(text)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(value):
        return None

    return value
