# scoring/perio.py
from typing import Sequence, Dict, Any, Optional

from scoring.constants import MAX_SCORES, PERIO_WARNING_DEPTH_ABOVE
from scoring.parse import parse_score_or_default


def band_depth(depth: Optional[int]) -> int:
    """probing depth(mm) → 점수. 3mm 이하 0점, 4~5mm 1점, 6mm 이상 2점."""
    if depth is None or depth <= 3:
        return 0
    if depth <= 5:
        return 1
    return 2


class PerioScorer:
    def score(self, depths: Sequence[Any]) -> Dict[str, Any]:
        total = 0
        warning = False
        for raw in depths:
            # 해석 불가 입력은 점수/주의 모두에서 제외
            d = parse_score_or_default(raw, default=None)
            if d is None:
                continue
            total += band_depth(d)
            # 밴드(≥6)와 별개로 판정
            if d > PERIO_WARNING_DEPTH_ABOVE:
                warning = True
        return {"total": total, "max": MAX_SCORES["perio"], "warning": warning}
