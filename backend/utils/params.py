import math
import re
from decimal import Decimal

# parseInt 과 동일: 앞 공백 + 부호 + 숫자까지만 읽고 나머지는 무시 (ASCII 숫자만)
_LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)')

# Number() 가 받아주는 표기만 허용
_DECIMAL  = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
_INFINITY = re.compile(r'([+-]?)Infinity')
_RADIX    = re.compile(r'0([xXoObB])([0-9a-zA-Z]+)')
_RADIX_BASE = {'x': 16, 'o': 8, 'b': 2}

_EXPONENT = re.compile(r'e([+-])0*(\d)')


def parse_index(text: str) -> int | None:
    """'12abc' → 12, '1.9' → 1, 'abc' → None"""
    m = _LEADING_INT.match(text)
    return int(m.group(1)) if m else None


def parse_count(text: str) -> float:
    """
    URL 조각을 숫자로 변환. 숫자가 아니면 예외 대신 NaN 을 돌려준다.
    빈 문자열(공백만) → 0, 'Infinity' / '0x10' 같은 표기도 허용.
    """
    s = text.strip()
    if not s:
        return 0.0
    if _DECIMAL.fullmatch(s):
        return float(s)
    if m := _INFINITY.fullmatch(s):
        return -math.inf if m.group(1) == '-' else math.inf
    if m := _RADIX.fullmatch(s):
        try:
            return float(int(m.group(2), _RADIX_BASE[m.group(1).lower()]))
        except ValueError:
            return math.nan
    return math.nan


def format_number(value) -> str:
    """숫자를 JSON 원본과 같은 모양으로: 2.0 → '2', True → 'true', nan → 'NaN', 1e21 → '1e+21'"""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == 0:
        return '0'
    if 1e-6 <= abs(value) < 1e21:
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), 'f')
    # 지수 표기: 1e+21, 1.5e-7 (지수 앞 0 제거)
    return _EXPONENT.sub(r'e\1\2', repr(value))
