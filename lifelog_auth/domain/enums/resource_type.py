"""Resource types guarded by ownership checks."""

from enum import Enum


class ProtectedResourceType(str, Enum):
    """Resources owned by a single user."""

    LOGGABLE_EVENT = "loggable_event"
    EVENT_LABEL = "event_label"
