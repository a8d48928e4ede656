"""複数の地域から共通する住所を求める"""
from collections.abc import Sequence

from ....shared.utils.text import common_prefix
from ...geocoding.domain.models import LocationRecord


def reduce_common_address(records: Sequence[LocationRecord]) -> str:
    """
    各地域に共通する住所（都道府県＋市区町村＋町域の共通接頭辞）を取得

    先頭の地域を基準とし、都道府県または市区町村が1件でも異なれば
    共通部分はないものとして空文字列を返す。町域は文字単位で
    共通接頭辞を求める。

    Args:
        records: 外部APIが返した地域のリスト（順序を保持）

    Returns:
        str: 共通する住所。地域が0件、または共通部分がない場合は空文字列
    """
    if not records:
        return ""

    prefecture = records[0].prefecture
    city = records[0].city
    common_town = records[0].town

    for record in records:
        if record.prefecture != prefecture or record.city != city:
            return ""

        town = record.town
        if not town.startswith(common_town) and not common_town.startswith(town):
            common_town = common_prefix(town, common_town)
        elif len(town) < len(common_town):
            common_town = town

    return prefecture + city + common_town
