# utils/export.py — 결과 이미지(워터마크) / CSV 요약 내보내기
# - 요약 화면을 PIL 이미지로 래스터화
# - 워터마크: 캔버스 폭의 25%, 중앙, 투명도 0.25
# - 워터마크 로드 실패/타임아웃 → ExportError (무한 대기 없음)
from __future__ import annotations
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, Optional, Union
from concurrent.futures import ThreadPoolExecutor
import asyncio

from matplotlib.figure import Figure
from PIL import Image, UnidentifiedImageError
import pandas as pd

from scoring.assessment import Assessment
from scoring.constants import CATEGORY_ORDER, SCORE_LABELS
from scoring.engine import ScoreReport
from utils.chart import build_radar_spec, draw_radar, drawable, font_family
from utils.config import export_timeout, watermark_path
from utils.logging_config import get_logger

logger = get_logger("export")

WATERMARK_SCALE = 0.25
WATERMARK_ALPHA = 0.25
FILENAME_FALLBACK = "patient"


class ExportError(RuntimeError):
    """이미지 내보내기 실패 (부분 결과/재시도 없음)."""


@dataclass(frozen=True)
class ExportResult:
    filename: str
    png: bytes
    mime: str = "image/png"


def export_filename(name: str) -> str:
    return f"oral_hygiene_result_{name or FILENAME_FALLBACK}.png"


# ─────────────────────────────────────────────────────────────
# Watermark
# ─────────────────────────────────────────────────────────────
def load_watermark(path: Union[str, Path]) -> Image.Image:
    p = Path(path)
    try:
        with Image.open(p) as img:
            img.load()
            return img.convert("RGBA")
    except FileNotFoundError as e:
        raise ExportError(f"워터마크 파일이 없습니다: {p}") from e
    except (UnidentifiedImageError, OSError) as e:
        raise ExportError(f"워터마크 이미지를 읽을 수 없습니다: {p} → {e}") from e


def apply_watermark(canvas: Image.Image, watermark: Image.Image,
                    scale: float = WATERMARK_SCALE, alpha: float = WATERMARK_ALPHA) -> Image.Image:
    """워터마크 폭 = 캔버스 폭 × scale (비율 유지), 정중앙, 알파 × alpha."""
    out = canvas.convert("RGBA")
    wm = watermark.convert("RGBA")
    wm_w = max(1, round(out.width * scale))
    wm_h = max(1, round(wm.height / wm.width * wm_w))
    wm = wm.resize((wm_w, wm_h), Image.LANCZOS)

    faded = wm.getchannel("A").point(lambda a: round(a * alpha))
    wm.putalpha(faded)

    x = (out.width - wm_w) // 2
    y = (out.height - wm_h) // 2
    out.alpha_composite(wm, (x, y))
    return out


# ─────────────────────────────────────────────────────────────
# Rasterize
# ─────────────────────────────────────────────────────────────
def summary_lines(assessment: Assessment, report: ScoreReport) -> Dict[str, Any]:
    """요약 화면 문구 (app 화면과 이미지가 같은 문구를 쓴다)."""
    identity = [
        f"환자명: {assessment.name}",
        f"차트번호: {assessment.chart_number}",
        f"진단일자: {assessment.date}",
    ]
    total = f"총점: {report.total_score} / {report.total_max}점 ({report.total_percent}%)"
    items = [
        f"{SCORE_LABELS[k]}: {report.category(k).actual} / {report.category(k).maximum}"
        for k in CATEGORY_ORDER
    ]
    warning = ""
    if report.warning_labels:
        warning = f"⚠️ 주의 요약: {', '.join(report.warning_labels)} 항목에 주의가 필요합니다."
    return {"identity": identity, "total": total, "items": items, "warning": warning}


def rasterize_summary(assessment: Assessment, report: ScoreReport,
                      title: str = "최종 결과 요약", dpi: int = 120) -> Image.Image:
    lines = summary_lines(assessment, report)
    family = font_family()
    text_kw = {"fontfamily": family}

    fig = Figure(figsize=(7.5, 11))
    fig.patch.set_facecolor("white")
    fig.text(0.06, 0.96, title, fontsize=18, fontweight="bold", **text_kw)
    y = 0.92
    for line in lines["identity"]:
        fig.text(0.06, y, line, fontsize=11, **text_kw)
        y -= 0.025

    ax = fig.add_axes([0.18, 0.36, 0.64, 0.44], polar=True)
    draw_radar(ax, build_radar_spec(report), family)

    y = 0.31
    fig.text(0.06, y, lines["total"], fontsize=12, fontweight="bold", **text_kw)
    y -= 0.03
    for line in lines["items"]:
        fig.text(0.08, y, f"• {line}", fontsize=11, **text_kw)
        y -= 0.025
    if lines["warning"]:
        fig.text(0.06, y - 0.01, drawable(lines["warning"]), fontsize=11, color="red", wrap=True, **text_kw)

    buf = BytesIO()
    fig.savefig(buf, format="png", dpi=dpi, facecolor="white")
    buf.seek(0)
    with Image.open(buf) as img:
        img.load()
        return img.convert("RGBA")


def to_png_bytes(img: Image.Image) -> bytes:
    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


# ─────────────────────────────────────────────────────────────
# Export (async: 워터마크 로드 대기 → 래스터화+합성 한 단위)
# ─────────────────────────────────────────────────────────────
def _compose(assessment: Assessment, report: ScoreReport, watermark: Image.Image) -> bytes:
    canvas = rasterize_summary(assessment, report)
    return to_png_bytes(apply_watermark(canvas, watermark))


async def export_report_async(assessment: Assessment, report: ScoreReport,
                              watermark: Optional[Union[str, Path]] = None,
                              timeout: Optional[float] = None) -> ExportResult:
    wm_path = Path(watermark) if watermark is not None else watermark_path()
    limit = export_timeout() if timeout is None else timeout
    # 시간 초과 시 로드 스레드를 기다리지 않음
    loop = asyncio.get_running_loop()
    executor = ThreadPoolExecutor(max_workers=1)
    try:
        wm = await asyncio.wait_for(loop.run_in_executor(executor, load_watermark, wm_path), timeout=limit)
    except asyncio.TimeoutError as e:
        raise ExportError(f"워터마크 로드 시간 초과 ({limit:.1f}s): {wm_path}") from e
    finally:
        executor.shutdown(wait=False)

    png = await asyncio.to_thread(_compose, assessment, report, wm)
    filename = export_filename(assessment.name)
    logger.info("report exported: %s (%d bytes)", filename, len(png))
    return ExportResult(filename=filename, png=png)


def export_report(assessment: Assessment, report: ScoreReport,
                  watermark: Optional[Union[str, Path]] = None,
                  timeout: Optional[float] = None) -> ExportResult:
    """Streamlit 스크립트(이벤트 루프 없음)에서 호출하는 동기 버전."""
    return asyncio.run(export_report_async(assessment, report, watermark=watermark, timeout=timeout))


# ─────────────────────────────────────────────────────────────
# 표 / CSV
# ─────────────────────────────────────────────────────────────
def build_summary_frame(report: ScoreReport) -> pd.DataFrame:
    return pd.DataFrame([
        {"category": c.key,
         "label": SCORE_LABELS[c.key],
         "score": c.actual,
         "max": c.maximum,
         "percent": round(c.normalized, 1),
         "warning": c.warning}
        for c in report.categories
    ])


def build_row(assessment: Assessment, report: ScoreReport) -> Dict[str, Any]:
    row: Dict[str, Any] = {
        "name": assessment.name,
        "chart_number": assessment.chart_number,
        "date": assessment.date,
    }
    for c in report.categories:
        row[f"{c.key}_score"] = c.actual
        row[f"{c.key}_warning"] = c.warning
    row["total_score"] = report.total_score
    row["total_max"] = report.total_max
    row["total_percent"] = report.total_percent
    row["warnings"] = ", ".join(report.warning_labels)
    return row


def summary_csv(assessment: Assessment, report: ScoreReport) -> bytes:
    df = pd.DataFrame([build_row(assessment, report)])
    return df.to_csv(index=False).encode("utf-8-sig")
