import time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class NotificationKind(str, Enum):
    INFO = "info"
    ERROR = "error"


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: NotificationKind
    title: str
    message: str
    timestamp: float = Field(default_factory=time.time)

    @classmethod
    def error(cls, message: str, title: str = "Error") -> "Notification":
        return cls(kind=NotificationKind.ERROR, title=title, message=message)

    @classmethod
    def info(cls, message: str, title: str) -> "Notification":
        return cls(kind=NotificationKind.INFO, title=title, message=message)
