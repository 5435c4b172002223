"""
User-facing notifications raised by the calculator (toasts in the form UI).
"""

from .models import Notification, NotificationKind
from .notifier import Notifier, LoggingNotifier, RecordingNotifier

__all__ = [
    "Notification",
    "NotificationKind",
    "Notifier",
    "LoggingNotifier",
    "RecordingNotifier",
]
