"""
Error types raised while formatting timestamps.
"""

from typing import Any


class InvalidTimestamp(ValueError):
    """Raised when a timestamp cannot be resolved to a point in time"""

    def __init__(self, value: Any, reason: str = "not a valid timestamp"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid timestamp {value!r}: {reason}")
