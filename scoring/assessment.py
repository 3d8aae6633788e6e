# scoring/assessment.py — 환자 1명의 원시 입력 (메모리 전용, 저장하지 않음)
from __future__ import annotations
from dataclasses import dataclass, field, replace, asdict
from typing import Any, Dict, Tuple

from scoring.constants import PLAQUE_SITES, PERIO_SITES, INTERDENTAL_SITES


def _replace_at(values: Tuple[Any, ...], index: int, value: Any) -> Tuple[Any, ...]:
    # 음수 인덱스는 뒤에서부터 세지 않고 범위 밖으로 본다
    if index < 0:
        raise IndexError(f"site index out of range: {index}")
    items = list(values)
    items[index] = value
    return tuple(items)


@dataclass(frozen=True)
class Assessment:
    """
    환자 정보(이름/차트번호/날짜, 검증 없음) + 6개 카테고리 원시 입력.
    set_* 는 항상 새 Assessment를 반환한다. 값 범위 검사는 하지 않는다.
    """
    name: str = ""
    chart_number: str = ""
    date: str = ""
    plaque: Tuple[int, ...] = field(default_factory=lambda: (0,) * PLAQUE_SITES)
    perio: Tuple[str, ...] = field(default_factory=lambda: ("",) * PERIO_SITES)
    interdental: Tuple[int, ...] = field(default_factory=lambda: (0,) * INTERDENTAL_SITES)
    sensitivity: int = 0
    arch: int = 0
    motor: int = 0

    # ── setters ──────────────────────────────────────────────
    def set_identity(self, name: str = None, chart_number: str = None, date: str = None) -> "Assessment":
        changes = {}
        if name is not None:
            changes["name"] = name
        if chart_number is not None:
            changes["chart_number"] = chart_number
        if date is not None:
            changes["date"] = date
        return replace(self, **changes)

    def set_plaque(self, index: int, level: int) -> "Assessment":
        return replace(self, plaque=_replace_at(self.plaque, index, level))

    def set_perio(self, index: int, depth: str) -> "Assessment":
        return replace(self, perio=_replace_at(self.perio, index, depth))

    def set_interdental(self, index: int, level: int) -> "Assessment":
        return replace(self, interdental=_replace_at(self.interdental, index, level))

    def set_sensitivity(self, value: int) -> "Assessment":
        return replace(self, sensitivity=value)

    def set_arch(self, value: int) -> "Assessment":
        return replace(self, arch=value)

    def set_motor(self, value: int) -> "Assessment":
        return replace(self, motor=value)

    # ── (de)serialize ────────────────────────────────────────
    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        for k in ("plaque", "perio", "interdental"):
            d[k] = list(d[k])
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Assessment":
        """누락 키는 기본값으로 채움. 시퀀스 길이는 그대로 둔다."""
        base = cls()
        return cls(
            name=str(data.get("name", base.name) or ""),
            chart_number=str(data.get("chart_number", base.chart_number) or ""),
            date=str(data.get("date", base.date) or ""),
            plaque=tuple(data.get("plaque", base.plaque)),
            perio=tuple(data.get("perio", base.perio)),
            interdental=tuple(data.get("interdental", base.interdental)),
            sensitivity=data.get("sensitivity", base.sensitivity),
            arch=data.get("arch", base.arch),
            motor=data.get("motor", base.motor),
        )
