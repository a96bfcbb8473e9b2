import logging
from dataclasses import dataclass
from typing import List, Optional

from heroslides.admin.errors import ApiError

logger = logging.getLogger(__name__)

SUCCESS = "success"
ERROR = "error"


@dataclass(frozen=True)
class Notification:
    level: str
    title: str
    description: Optional[str] = None


class Notifier:
    """Toast sink for the admin screen. Keeps every notification in order and logs it."""

    def __init__(self):
        self.notifications: List[Notification] = []

    def notify(self, level: str, title: str, description: Optional[str] = None) -> Notification:
        notification = Notification(level, title, description)
        self.notifications.append(notification)
        log = logger.warning if level == ERROR else logger.info
        log("[toast:%s] %s%s", level, title, f" - {description}" if description else "")
        return notification

    def success(self, title: str, description: Optional[str] = None) -> Notification:
        return self.notify(SUCCESS, title, description)

    def error(self, error: ApiError) -> Notification:
        return self.notify(ERROR, error.title, error.user_message)

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None
