"""
Epoch-millisecond timestamp helpers.

All persisted timestamps are integers in epoch milliseconds (UTC).
"""

import time


def now_epoch_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)
