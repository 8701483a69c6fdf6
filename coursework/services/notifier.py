"""
Notifiers that report assignment status transitions.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from ..core.interfaces import Notifier


logger = logging.getLogger(__name__)


def format_notification(student_name: str, assignment_name: str, message: str) -> str:
    """Render a transition as a single human-readable line."""
    return f"Observer → {student_name}, {assignment_name} {message}"


@dataclass
class Notification:
    """A transition captured by a recording notifier."""
    student_name: str
    assignment_name: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def text(self) -> str:
        return format_notification(self.student_name, self.assignment_name, self.message)


class ConsoleNotifier(Notifier):
    """Prints every transition to standard output."""

    def notify(self, student_name: str, assignment_name: str, message: str) -> None:
        logger.debug("Notify %s/%s: %s", student_name, assignment_name, message)
        print(format_notification(student_name, assignment_name, message))


class RecordingNotifier(Notifier):
    """Keeps every transition in memory, optionally echoing to the console."""

    def __init__(self, echo: bool = False):
        self._echo = echo
        self._notifications: List[Notification] = []
        self._lock = threading.RLock()

    def notify(self, student_name: str, assignment_name: str, message: str) -> None:
        notification = Notification(student_name, assignment_name, message)
        with self._lock:
            self._notifications.append(notification)
        if self._echo:
            print(notification.text)

    @property
    def notifications(self) -> List[Notification]:
        with self._lock:
            return list(self._notifications)

    @property
    def lines(self) -> List[str]:
        """Formatted lines in the order they were received."""
        with self._lock:
            return [n.text for n in self._notifications]

    def messages_for(self, student_name: str, assignment_name: str) -> List[str]:
        """Get raw messages for one student's assignment."""
        with self._lock:
            return [
                n.message for n in self._notifications
                if n.student_name == student_name and n.assignment_name == assignment_name
            ]

    def clear(self) -> None:
        with self._lock:
            self._notifications.clear()
