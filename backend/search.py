# search.py
from collections.abc import Iterable, Mapping

from models import Record, scalar_text


def _matches_key(record: Record, key: str, wanted: str) -> bool:
    # 1) top-level 속성이 있으면 그것만 본다 (nested 검색 X)
    #    대소문자만 다른 key 가 여러 개면 그중 하나만 맞아도 통과
    attrs = record.attributes(key)
    if attrs:
        return any(attr.matches(wanted) for attr in attrs)

    # 2) 없으면 stats / damages / misc 안에서 같은 이름의 sub-key 를 찾는다
    return any(
        scalar_text(value).lower() == wanted
        for table in record.tables()
        for value in table.lookup_all(key)
    )


def record_matches(record: Record, query: Mapping[str, str]) -> bool:
    """query 의 모든 key 를 만족해야 True (AND). 빈 query 는 항상 True."""
    return all(
        _matches_key(record, key, value.lower())
        for key, value in query.items()
    )


def filter_records(records: Iterable[Record], query: Mapping[str, str]) -> list[Record]:
    """
    Attribute filter – JSON / HTML 검색 엔드포인트가 공통으로 사용.

    예: ?type=electric → type 목록에 'Electric' 이 있는 것
        ?hp=35        → top-level 'hp' 가 없으니 stats.hp == 35 인 것
        ?stats=35     → stats 값 중 하나라도 35 인 것 (어느 스탯이든)

    원래 순서를 유지하고, 결과가 없으면 빈 리스트 (404 처리는 호출하는 쪽).
    """
    return [r for r in records if record_matches(r, query)]
