# utils/logging_config.py — 콘솔 로거 (stdout, 한 번만 설정)
import logging
import sys

from utils.config import get_setting

ROOT_LOGGER = "oral_hygiene"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        root.addHandler(handler)
        level = str(get_setting("log_level", "INFO")).upper()
        root.setLevel(getattr(logging, level, logging.INFO))
    return root


def get_logger(name: str) -> logging.Logger:
    _configure_root()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
