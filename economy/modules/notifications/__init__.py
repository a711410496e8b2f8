"""Notification exports"""

from .dispatcher import NotificationDispatcher
from .models import EventType, NotificationEvent
from .notifiers import LoggingNotifier, Notifier, NullNotifier

__all__ = [
    "EventType",
    "LoggingNotifier",
    "NotificationDispatcher",
    "NotificationEvent",
    "Notifier",
    "NullNotifier",
]
