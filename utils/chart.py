# utils/chart.py — 6축 레이더 차트 (matplotlib)
from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import re

import matplotlib
matplotlib.use("Agg")
from matplotlib import font_manager
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure
import numpy as np

from scoring.constants import AXIS_LABELS, CATEGORY_ORDER
from scoring.engine import ScoreReport
from utils.config import fonts_dir
from utils.logging_config import get_logger

logger = get_logger("chart")

WARNING_MARK = "⚠️"
WARNING_COLOR = "red"
NORMAL_COLOR = "black"
FILL_COLOR = "rgba(255, 99, 132, 0.2)"
STROKE_COLOR = "rgba(255, 99, 132, 1)"
BORDER_WIDTH = 2
SCALE = {"min": 0, "max": 100, "step": 10}

DATASET_LABEL = "구강 상태 점수 (100점 만점 환산)"

# 한글 라벨용: assets/fonts 번들 폰트 우선, 다음은 시스템 폰트
KOREAN_FONTS = ("NanumBarunGothic", "Malgun Gothic", "AppleGothic", "NanumGothic", "Noto Sans CJK KR", "Noto Sans KR")
# 한글 폰트에 없는 글자(숫자, 라틴, ⚠)는 여기서 찾는다
FALLBACK_FONT = "DejaVu Sans"

_RGBA = re.compile(r"rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*([\d.]+)\s*)?\)")


@lru_cache(maxsize=None)
def register_fonts(base_dir: Optional[str] = None) -> Tuple[str, ...]:
    """폰트 폴더의 TTF/OTF를 matplotlib에 등록하고 family 이름을 돌려준다."""
    base = Path(base_dir) if base_dir is not None else fonts_dir()
    names = []
    for p in sorted(base.glob("*.ttf")) + sorted(base.glob("*.otf")):
        font_manager.fontManager.addfont(str(p))
        names.append(font_manager.FontProperties(fname=str(p)).get_name())
    if not names:
        logger.warning("no bundled fonts in %s; Korean text may not render", base)
    return tuple(names)


def korean_font() -> Optional[str]:
    bundled = register_fonts()
    installed = {f.name for f in font_manager.fontManager.ttflist}
    for name in bundled + KOREAN_FONTS:
        if name in installed:
            return name
    return None


def font_family() -> List[str]:
    name = korean_font()
    return [name, FALLBACK_FONT] if name else [FALLBACK_FONT]


def drawable(text: str) -> str:
    """그림용 문자열: 이모지 변형 선택자(U+FE0F)는 폰트에 없으므로 뺀다."""
    return text.replace("\ufe0f", "")


def build_radar_spec(report: ScoreReport, dataset_label: str = DATASET_LABEL) -> Dict[str, Any]:
    """렌더러에 넘길 데이터: 라벨 6개, 값 6개(0~100), 점 색상, 스타일, 눈금."""
    labels: List[str] = []
    values: List[float] = []
    point_colors: List[str] = []
    for key in CATEGORY_ORDER:
        c = report.category(key)
        labels.append(f"{AXIS_LABELS[key]} {WARNING_MARK}" if c.warning else AXIS_LABELS[key])
        values.append(c.normalized)
        point_colors.append(WARNING_COLOR if c.warning else NORMAL_COLOR)
    return {
        "labels": labels,
        "dataset": {
            "label": dataset_label,
            "data": values,
            "backgroundColor": FILL_COLOR,
            "borderColor": STROKE_COLOR,
            "borderWidth": BORDER_WIDTH,
            "pointBackgroundColor": point_colors,
        },
        "scale": dict(SCALE),
    }


def css_to_rgba(color: str) -> Tuple[float, float, float, float]:
    """'rgba(255, 99, 132, 0.2)' → (1.0, 0.388, 0.518, 0.2). 이름 색상은 matplotlib에 맡김."""
    m = _RGBA.fullmatch(color.strip())
    if not m:
        return to_rgba(color)
    r, g, b, a = m.groups()
    return (float(r) / 255, float(g) / 255, float(b) / 255, float(a) if a is not None else 1.0)


def draw_radar(ax, spec: Dict[str, Any], family: Optional[List[str]] = None) -> None:
    """polar axes에 spec을 그린다."""
    family = family or font_family()
    labels = spec["labels"]
    ds = spec["dataset"]
    scale = spec["scale"]
    vals = [float(v) for v in ds["data"]]

    angles = np.linspace(0, 2 * np.pi, len(labels), endpoint=False).tolist()
    closed_vals = vals + vals[:1]
    closed_angles = angles + angles[:1]

    # 첫 축을 12시 방향, 시계 방향 배치
    ax.set_theta_offset(np.pi / 2)
    ax.set_theta_direction(-1)

    ax.fill(closed_angles, closed_vals, color=css_to_rgba(ds["backgroundColor"]))
    ax.plot(closed_angles, closed_vals, color=css_to_rgba(ds["borderColor"]),
            linewidth=ds["borderWidth"], label=ds["label"])
    for angle, val, color in zip(angles, vals, ds["pointBackgroundColor"]):
        ax.scatter([angle], [val], color=css_to_rgba(color), s=30, zorder=3)

    ax.set_thetagrids(np.degrees(angles), [drawable(l) for l in labels], fontfamily=family)
    ax.set_ylim(scale["min"], scale["max"])
    ax.set_yticks(np.arange(scale["min"], scale["max"] + scale["step"], scale["step"]))
    ax.legend(loc="upper right", bbox_to_anchor=(1.25, 1.12), prop={"family": family, "size": 8})


def render_radar(spec: Dict[str, Any], size: float = 5.0) -> Figure:
    """spec → matplotlib Figure (pyplot 전역 상태를 쓰지 않음)."""
    fig = Figure(figsize=(size, size))
    ax = fig.add_subplot(111, polar=True)
    draw_radar(ax, spec)
    fig.tight_layout()
    return fig
