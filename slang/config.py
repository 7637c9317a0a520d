from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


# Resolve installation dir (slang package directory)
_SLANG_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _SLANG_DIR / 'prelude' / 'core.slang'
_DEFAULT_LOG_LEVEL = logging.WARNING


def get_log_level() -> int:
    """Logging level from SLANG_LOG_LEVEL (a level name); WARNING if unset or unknown."""
    raw = os.environ.get('SLANG_LOG_LEVEL', '').strip().upper()
    if raw:
        level = getattr(logging, raw, None)
        if isinstance(level, int):
            return level
    return _DEFAULT_LOG_LEVEL


def get_max_steps() -> Optional[int]:
    """Step budget per top-level evaluation from SLANG_MAX_STEPS; None disables it."""
    raw = os.environ.get('SLANG_MAX_STEPS', '').strip()
    if not raw:
        return None
    try:
        steps = int(raw)
    except ValueError:
        raise ValueError(f"SLANG_MAX_STEPS must be an integer, got {raw!r}") from None
    return steps if steps > 0 else None


def get_prelude_path() -> Path:
    raw = os.environ.get('SLANG_PRELUDE_PATH')
    if not raw:
        return _DEFAULT_PRELUDE
    p = Path(raw.strip())
    # a directory holds core.slang
    return p / 'core.slang' if p.is_dir() else p
