# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃ utils/registry.py — 문진 화면 문구 로드 (JSON 기본, YAML 지원)         ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛
from __future__ import annotations
from pathlib import Path
from typing import Dict, Any, Optional
import json

import streamlit as st
import yaml

from utils.config import surveys_dir
from utils.logging_config import get_logger

logger = get_logger("registry")

DEFAULT_SURVEY = "oral_hygiene"

# 화면에서 반드시 쓰는 섹션
REQUIRED_SECTIONS = ("intro", "identity", "plaque", "perio", "interdental", "sensitivity", "arch_motor", "summary")


def _error(msg: str) -> None:
    logger.error(msg)
    st.error(msg)


def _load_json(p: Path) -> Dict[str, Any]:
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def _load_yaml(p: Path) -> Dict[str, Any]:
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _check_sections(doc: Dict[str, Any], p: Path) -> None:
    missing = [s for s in REQUIRED_SECTIONS if s not in doc]
    if missing:
        raise ValueError(f"{p.name}: 누락된 섹션 {', '.join(missing)}")


def load_survey(key: str = DEFAULT_SURVEY, base_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    key에 해당하는 문진 문구 로드.
    우선순위: surveys/{key}.json → {key}.yaml → {key}.yml
    """
    base = Path(base_dir) if base_dir is not None else surveys_dir()
    candidates = [
        base / f"{key}.json",
        base / f"{key}.yaml",
        base / f"{key}.yml",
    ]
    for p in candidates:
        if p.exists():
            try:
                doc = _load_json(p) if p.suffix.lower() == ".json" else _load_yaml(p)
                _check_sections(doc, p)
            except Exception as e:
                _error(f"문진 파일 로드 실패: {p.name} → {e}")
                raise
            logger.info("survey loaded: %s", p)
            return doc

    _error(f"문진 파일을 찾지 못했습니다: {key} ({base}/{key}.json|yaml|yml)")
    raise FileNotFoundError(f"No survey file for key={key}")
