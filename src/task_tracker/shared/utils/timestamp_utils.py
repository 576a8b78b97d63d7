"""
Epoch-millisecond timestamp helpers.

Timestamps are persisted as integer epoch milliseconds and rendered as
ISO-8601 UTC strings at the API boundary.
"""

import time
from datetime import datetime, timezone
from typing import Optional


def now_epoch_ms() -> int:
    """Get current time as epoch milliseconds."""
    return int(time.time() * 1000)


def epoch_ms_to_iso8601(epoch_ms: Optional[int]) -> Optional[str]:
    """Convert epoch milliseconds to an ISO-8601 string in UTC."""
    if epoch_ms is None:
        return None
    dt = datetime.fromtimestamp(epoch_ms / 1000.0, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
