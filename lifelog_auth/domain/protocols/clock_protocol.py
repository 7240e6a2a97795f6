"""Clock protocol (port).

Injectable time source so expiry logic is deterministic in tests.
"""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Current-time source."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...
