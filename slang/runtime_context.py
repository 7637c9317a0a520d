from __future__ import annotations
import logging
from typing import Optional

from slang.errors import SlangBudgetExceeded

logger = logging.getLogger(__name__)

# NOTE: For now this is process-global. If threading is introduced,
# consider switching to contextvars or threading.local.
_step_limit: Optional[int] = None
_steps: int = 0


def start_budget(limit: Optional[int]) -> None:
    """Reset the step counter and install `limit` (None means unlimited)."""
    global _step_limit, _steps
    _step_limit = limit
    _steps = 0


def steps_taken() -> int:
    return _steps


def tick() -> None:
    """Charge one evaluation step against the current budget."""
    global _steps
    if _step_limit is None:
        return
    _steps += 1
    if _steps > _step_limit:
        logger.warning("Evaluation exceeded step budget of %d", _step_limit)
        raise SlangBudgetExceeded(f"Evaluation exceeded {_step_limit} steps")
