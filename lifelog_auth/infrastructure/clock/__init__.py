"""Clock adapters."""

from lifelog_auth.infrastructure.clock.system_clock import SystemClock

__all__ = ["SystemClock"]
