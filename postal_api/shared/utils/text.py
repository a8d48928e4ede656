"""テキスト処理ユーティリティ"""

import re
from typing import Optional

# 半角数字7桁（全角数字やハイフン付きは不可）
_POSTAL_CODE_PATTERN = re.compile(r"[0-9]{7}")


def is_valid_postal_code(postal_code: Optional[str]) -> bool:
    """
    郵便番号が半角数字7桁かどうかを判定

    Args:
        postal_code: 判定対象の文字列

    Returns:
        bool: 7桁の半角数字であればTrue
    """
    if not postal_code:
        return False

    return _POSTAL_CODE_PATTERN.fullmatch(postal_code) is not None


def common_prefix(a: str, b: str) -> str:
    """
    2つの文字列の共通接頭辞を文字単位で取得

    バイト列ではなく文字（コードポイント）単位で比較するため、
    マルチバイト文字の途中で切れることはない

    Args:
        a: 文字列1
        b: 文字列2

    Returns:
        str: 共通接頭辞（共通部分がない場合は空文字列）
    """
    length = 0
    for char_a, char_b in zip(a, b):
        if char_a != char_b:
            break
        length += 1

    return a[:length]
