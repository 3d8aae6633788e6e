# scoring/single.py — 단일 문항 카테고리 (민감성 / 악궁 / 손 운동기능)
from typing import Any, Callable, Dict

from scoring.constants import (
    MAX_SCORES,
    SENSITIVITY_WARNING_AT,
    ARCH_WARNING_EQUALS,
    MOTOR_WARNING_EQUALS,
)
from scoring.parse import parse_score_or_default


class SingleItemScorer:
    """값 자체가 점수. 주의 여부는 카테고리별 판정 함수로."""

    def __init__(self, key: str, is_warning: Callable[[int], bool]):
        self.key = key
        self.is_warning = is_warning

    def score(self, value: Any) -> Dict[str, Any]:
        val = parse_score_or_default(value)
        return {"total": val, "max": MAX_SCORES[self.key], "warning": self.is_warning(val)}


def _sensitivity_warning(v: int) -> bool:
    return v >= SENSITIVITY_WARNING_AT


def _arch_warning(v: int) -> bool:
    return v == ARCH_WARNING_EQUALS


def _motor_warning(v: int) -> bool:
    return v == MOTOR_WARNING_EQUALS


class SensitivityScorer(SingleItemScorer):
    def __init__(self):
        super().__init__("sensitivity", _sensitivity_warning)


class ArchScorer(SingleItemScorer):
    def __init__(self):
        super().__init__("arch", _arch_warning)


class MotorScorer(SingleItemScorer):
    def __init__(self):
        super().__init__("motor", _motor_warning)
