# utils/wizard.py — 8페이지(0~7) 문진 진행 상태
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from scoring.assessment import Assessment
from utils.logging_config import get_logger

logger = get_logger("wizard")

FIRST_PAGE = 0
LAST_PAGE = 7

PAGE_TITLES = {
    0: "시작",
    1: "진단 정보",
    2: "치면세정 능력",
    3: "치주건강도",
    4: "치간 점수",
    5: "민감성",
    6: "악궁 / 손 운동기능",
    7: "결과 요약",
}

# (현재 페이지, 목적 페이지, assessment) → 이동 허용 여부
TransitionGuard = Callable[[int, int, Assessment], bool]


def allow_all(current: int, target: int, assessment: Assessment) -> bool:
    """입력 완료 여부와 무관하게 항상 이동 허용."""
    return True


@dataclass
class WizardState:
    page: int = FIRST_PAGE
    assessment: Assessment = field(default_factory=Assessment)
    guard: TransitionGuard = allow_all

    # ── navigation ───────────────────────────────────────────
    def go_to(self, index: int) -> int:
        """범위 밖 index는 0~7로 잘라낸다. 실패하지 않음."""
        target = max(FIRST_PAGE, min(LAST_PAGE, int(index)))
        if target != self.page and self.guard(self.page, target, self.assessment):
            logger.debug("page %s -> %s", self.page, target)
            self.page = target
        return self.page

    def advance(self) -> int:
        if self.page < LAST_PAGE:
            return self.go_to(self.page + 1)
        return self.page

    def retreat(self) -> int:
        if self.page > FIRST_PAGE:
            return self.go_to(self.page - 1)
        return self.page

    @property
    def is_summary(self) -> bool:
        return self.page == LAST_PAGE

    @property
    def title(self) -> str:
        return PAGE_TITLES[self.page]

    # ── assessment 변경 (한 동작 = 한 변경) ──────────────────
    def update(self, method: str, *args: Any, **kwargs: Any) -> Assessment:
        self.assessment = getattr(self.assessment, method)(*args, **kwargs)
        return self.assessment

    def set_identity(self, **kwargs: Any) -> Assessment:
        return self.update("set_identity", **kwargs)

    def set_plaque(self, index: int, level: int) -> Assessment:
        return self.update("set_plaque", index, level)

    def set_perio(self, index: int, depth: str) -> Assessment:
        return self.update("set_perio", index, depth)

    def set_interdental(self, index: int, level: int) -> Assessment:
        return self.update("set_interdental", index, level)

    def set_sensitivity(self, value: int) -> Assessment:
        return self.update("set_sensitivity", value)

    def set_arch(self, value: int) -> Assessment:
        return self.update("set_arch", value)

    def set_motor(self, value: int) -> Assessment:
        return self.update("set_motor", value)

    def restart(self) -> None:
        """처음으로: 입력 폐기 (저장하지 않음)."""
        logger.info("wizard restarted; assessment discarded")
        self.page = FIRST_PAGE
        self.assessment = Assessment()

    def to_dict(self) -> Dict[str, Any]:
        return {"page": self.page, "assessment": self.assessment.to_dict()}
