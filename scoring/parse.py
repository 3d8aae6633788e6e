# scoring/parse.py
from typing import Any, Optional
import re

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_score_or_default(raw: Any, default: Optional[int] = 0) -> Optional[int]:
    """
    입력값을 정수로 해석. 해석 불가하면 default.
    - int는 그대로 (범위 검사 없음: 음수/초과값도 통과)
    - 문자열은 앞쪽 정수부만 읽음: "4mm" → 4, "5.9" → 5, " 6 " → 6
    - 숫자는 ASCII 0-9만 인정 (전각 "６" 등은 해석 불가)
    - None, bool, 빈 문자열, 숫자로 시작하지 않는 문자열 → default
    예외를 던지지 않는다.
    """
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if raw != raw or raw in (float("inf"), float("-inf")):
            return default
        return int(raw)
    m = _LEADING_INT.match(str(raw))
    if not m:
        return default
    return int(m.group(1))
