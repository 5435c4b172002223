import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from .models import Notification, NotificationKind

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Delivers notifications to the user"""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        pass


class LoggingNotifier(Notifier):
    """Writes notifications to a logger; errors at WARNING, the rest at INFO"""

    def __init__(self, logger_name: str = "voice_quote.notifications"):
        self.logger = logging.getLogger(logger_name)

    def notify(self, notification: Notification) -> None:
        log_message = f"{notification.title}: {notification.message}"
        if notification.kind == NotificationKind.ERROR:
            self.logger.warning(log_message)
        else:
            self.logger.info(log_message)


class RecordingNotifier(Notifier):
    """Keeps delivered notifications in memory for a UI to drain"""

    def __init__(self, max_history: int = 100):
        self.notifications: List[Notification] = []
        self.max_history = max_history

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)
        if len(self.notifications) > self.max_history:
            self.notifications = self.notifications[-self.max_history:]

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None

    def drain(self) -> List[Notification]:
        """Return and forget all pending notifications"""
        pending, self.notifications = self.notifications, []
        return pending
