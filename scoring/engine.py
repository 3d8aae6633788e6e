# scoring/engine.py — 원시 입력 → 카테고리 점수 / 환산값 / 주의 플래그 / 총점
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple

from scoring.assessment import Assessment
from scoring.constants import CATEGORY_ORDER, MAX_SCORES, TOTAL_MAX, WARNING_LABELS
from scoring.plaque import PlaqueScorer
from scoring.perio import PerioScorer
from scoring.interdental import InterdentalScorer
from scoring.single import SensitivityScorer, ArchScorer, MotorScorer

SCORERS = {
    "plaque": PlaqueScorer(),
    "perio": PerioScorer(),
    "interdental": InterdentalScorer(),
    "sensitivity": SensitivityScorer(),
    "arch": ArchScorer(),
    "motor": MotorScorer(),
}


@dataclass(frozen=True)
class CategoryScore:
    key: str
    actual: int
    maximum: int
    warning: bool

    @property
    def normalized(self) -> float:
        """0~100 환산값 (반올림 안 함)."""
        return self.actual / self.maximum * 100


@dataclass(frozen=True)
class ScoreReport:
    categories: Tuple[CategoryScore, ...]
    total_score: int
    total_max: int
    total_percent: str

    def category(self, key: str) -> CategoryScore:
        for c in self.categories:
            if c.key == key:
                return c
        raise KeyError(key)

    @property
    def actual_scores(self) -> Dict[str, int]:
        return {c.key: c.actual for c in self.categories}

    @property
    def normalized(self) -> Dict[str, float]:
        return {c.key: c.normalized for c in self.categories}

    @property
    def warnings(self) -> Dict[str, bool]:
        return {c.key: c.warning for c in self.categories}

    @property
    def warning_labels(self) -> List[str]:
        return [WARNING_LABELS[c.key] for c in self.categories if c.warning]


def format_percent(total: int, total_max: int = TOTAL_MAX) -> str:
    return f"{total / total_max * 100:.1f}"


def compute_report(assessment: Assessment) -> ScoreReport:
    """
    순수 함수: 같은 Assessment → 항상 같은 결과.
    어떤 입력도 거부하지 않는다 (해석 불가 → 0, 범위 밖 값은 그대로 합산).
    """
    raw = {
        "plaque": assessment.plaque,
        "perio": assessment.perio,
        "interdental": assessment.interdental,
        "sensitivity": assessment.sensitivity,
        "arch": assessment.arch,
        "motor": assessment.motor,
    }
    categories = []
    for key in CATEGORY_ORDER:
        out = SCORERS[key].score(raw[key])
        categories.append(CategoryScore(key=key, actual=out["total"], maximum=MAX_SCORES[key], warning=out["warning"]))

    total = sum(c.actual for c in categories)
    return ScoreReport(
        categories=tuple(categories),
        total_score=total,
        total_max=TOTAL_MAX,
        total_percent=format_percent(total),
    )
