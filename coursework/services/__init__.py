"""
Services module containing the notifiers, schedulers and class roster.
"""

from .notifier import ConsoleNotifier, RecordingNotifier, Notification, format_notification
from .scheduler_service import AsyncioTaskScheduler, VirtualClockScheduler
from .roster import ClassRoster

__all__ = [
    "ConsoleNotifier",
    "RecordingNotifier",
    "Notification",
    "format_notification",
    "AsyncioTaskScheduler",
    "VirtualClockScheduler",
    "ClassRoster",
]
