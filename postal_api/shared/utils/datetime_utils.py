"""日時関連ユーティリティ"""

from datetime import datetime

import pytz

# 日本時間のタイムゾーン
JST = pytz.timezone("Asia/Tokyo")


def now_jst() -> datetime:
    """現在の日本時間を取得"""
    return datetime.now(JST)
