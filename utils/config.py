# utils/config.py — 경로/타임아웃 설정
# 우선순위: 환경변수(ORAL_HYGIENE_*) → st.secrets → 기본값
# 채점 상수는 여기서 바꿀 수 없다 (scoring/constants.py 고정)
from __future__ import annotations
from pathlib import Path
from typing import Any, Optional
import os

import streamlit as st

ROOT = Path(__file__).resolve().parent.parent

DEFAULTS = {
    "surveys_dir": str(ROOT / "surveys"),
    "watermark": str(ROOT / "assets" / "watermark.png"),
    "fonts_dir": str(ROOT / "assets" / "fonts"),
    "export_timeout": 10.0,
    "log_level": "INFO",
}


def _from_secrets(key: str) -> Optional[Any]:
    try:
        if key in st.secrets and st.secrets[key]:
            return st.secrets[key]
        if "general" in st.secrets:
            gen = st.secrets["general"]
            if isinstance(gen, dict) and gen.get(key):
                return gen[key]
    except Exception:
        # secrets.toml이 없으면 st.secrets 접근 자체가 실패한다
        return None
    return None


def get_setting(key: str, default: Any = None) -> Any:
    env = os.getenv(f"ORAL_HYGIENE_{key.upper()}")
    if env:
        return env
    val = _from_secrets(key)
    if val is not None:
        return val
    return DEFAULTS.get(key, default)


def surveys_dir() -> Path:
    return Path(get_setting("surveys_dir"))


def watermark_path() -> Path:
    return Path(get_setting("watermark"))


def fonts_dir() -> Path:
    return Path(get_setting("fonts_dir"))


def export_timeout() -> float:
    try:
        return float(get_setting("export_timeout"))
    except (TypeError, ValueError):
        return float(DEFAULTS["export_timeout"])
