# infra/config_loader.py
"""
Central configuration loader for the app.

Responsibilities:
- Provide a single place to define default configuration values.
- Allow simple environment variable overrides for quick tweaks (no code changes).

Environment variables:
- LOOKOUT_LOG_LEVEL               (DEBUG/INFO/WARNING/ERROR)
- LOOKOUT_LOG_DIR                 (directory for the rotating log file)
- LOOKOUT_DEFAULT_CONTEXT_CHARS   (int; default 240)
- LOOKOUT_MAX_CONTEXT_CHARS       (int; default 1000)
- LOOKOUT_TERM_SEPARATOR          (default ";")
- LOOKOUT_UPLOAD_DIR              (parent of per-request scratch dirs; system temp if unset)
- LOOKOUT_MAX_UPLOAD_MB           (int; per-file limit, default 128)
- LOOKOUT_MAX_UPLOAD_FILES        (int; default 200)
"""

from __future__ import annotations

import os
from typing import Any, Dict


_DEFAULT: Dict[str, Any] = {
    "log_level": "INFO",
    "log_dir": "logs",

    # Search
    "default_context_chars": 240,
    "max_context_chars": 1000,
    "term_separator": ";",

    # Intake
    "upload_dir": None,
    "max_upload_mb": 128,
    "max_upload_files": 200,
}


def load_config() -> Dict[str, Any]:
    """
    Return a config dict. Environment variables can override every key;
    malformed integers are ignored and the default kept.
    """
    cfg = dict(_DEFAULT)

    # Numeric overrides
    _int_env(cfg, "default_context_chars", "LOOKOUT_DEFAULT_CONTEXT_CHARS")
    _int_env(cfg, "max_context_chars", "LOOKOUT_MAX_CONTEXT_CHARS")
    _int_env(cfg, "max_upload_mb", "LOOKOUT_MAX_UPLOAD_MB")
    _int_env(cfg, "max_upload_files", "LOOKOUT_MAX_UPLOAD_FILES")

    # String overrides
    _str_upper_env(cfg, "log_level", "LOOKOUT_LOG_LEVEL")
    _str_env(cfg, "log_dir", "LOOKOUT_LOG_DIR")
    _str_env(cfg, "upload_dir", "LOOKOUT_UPLOAD_DIR")

    # The separator may legitimately be a space, so it is not stripped.
    sep = os.getenv("LOOKOUT_TERM_SEPARATOR")
    if sep:
        cfg["term_separator"] = sep

    return cfg


# ----------------- helpers -----------------

def _int_env(cfg: Dict[str, Any], key: str, env_key: str) -> None:
    val = os.getenv(env_key)
    if val and val.strip().isdigit():
        cfg[key] = int(val)


def _str_env(cfg: Dict[str, Any], key: str, env_key: str) -> None:
    val = os.getenv(env_key)
    if val is not None and val.strip():
        cfg[key] = val.strip()


def _str_upper_env(cfg: Dict[str, Any], key: str, env_key: str) -> None:
    val = os.getenv(env_key)
    if val is not None and val.strip():
        cfg[key] = val.strip().upper()
