# scoring/plaque.py
from typing import Sequence, Dict, Any

from scoring.constants import MAX_SCORES, PLAQUE_WARNING_ABOVE
from scoring.parse import parse_score_or_default


class PlaqueScorer:
    def score(self, levels: Sequence[Any]) -> Dict[str, Any]:
        """
        치면세정능력: 6개 치면 점수(0~3)의 합. 합계 > 6 이면 주의.
        """
        total = sum(parse_score_or_default(v) for v in levels)
        return {
            "total": total,
            "max": MAX_SCORES["plaque"],
            "warning": total > PLAQUE_WARNING_ABOVE,
        }
