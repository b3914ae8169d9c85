"""Logging setup shared by sitecustomize.py and the scripts.

Records go to text/log_file.log at the repo root, or to the file named by
CRIB_CALC_LOG_FILE, and to stdout. CRIB_CALC_LOG_LEVEL sets the level.
Calling configure_logging more than once adds no duplicate handlers.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path


def log_file_path() -> Path:
    override = os.getenv("CRIB_CALC_LOG_FILE")
    if override is None or override.strip() == "":
        return Path(__file__).resolve().parents[1] / "text" / "log_file.log"
    return Path(override).expanduser()


def configure_logging() -> None:
    log_path = log_file_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    level = logging.getLevelName(os.getenv("CRIB_CALC_LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    has_file = any(
        isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", "") == os.path.abspath(log_path)
        for h in root.handlers
    )
    has_stream = any(
        type(h) is logging.StreamHandler and getattr(h, "stream", None) in {sys.__stdout__, sys.__stderr__}
        for h in root.handlers
    )
    if not has_file:
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        file_handler.setLevel(level)
        root.addHandler(file_handler)
    if not has_stream:
        stream_handler = logging.StreamHandler(sys.__stdout__)
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        stream_handler.setLevel(level)
        root.addHandler(stream_handler)
