# scoring/interdental.py
from typing import Sequence, Dict, Any

from scoring.constants import MAX_SCORES, INTERDENTAL_WARNING_AT
from scoring.parse import parse_score_or_default


class InterdentalScorer:
    def score(self, levels: Sequence[Any]) -> Dict[str, Any]:
        values = [parse_score_or_default(v) for v in levels]
        return {
            "total": sum(values),
            "max": MAX_SCORES["interdental"],
            "warning": any(v >= INTERDENTAL_WARNING_AT for v in values),
        }
