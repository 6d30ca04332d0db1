from __future__ import annotations

from datetime import datetime
from typing import Optional


def now_stamp(now: Optional[datetime] = None) -> str:
    """Second-precision local timestamp used to make fixture text unique."""
    now = now or datetime.now()
    return now.replace(microsecond=0).isoformat()


def epoch_millis(now: Optional[datetime] = None) -> int:
    now = now or datetime.now()
    return int(now.timestamp() * 1000)
