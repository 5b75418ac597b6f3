"""
Shared utilities used by the server, the CLI and the tests.

Provides:
- Timestamp helper (now_epoch_ms)
- Exception types and FastAPI exception handlers
"""

from .utils.timestamp_utils import now_epoch_ms

__all__ = [
    "now_epoch_ms",
]
