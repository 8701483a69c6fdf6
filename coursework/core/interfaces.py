"""
Core interfaces and abstract base classes for the coursework simulator.
"""

from abc import ABC, abstractmethod
from typing import Callable


class Notifier(ABC):
    """Observer told about every assignment status transition."""

    @abstractmethod
    def notify(self, student_name: str, assignment_name: str, message: str) -> None:
        """Report that ``assignment_name`` of ``student_name`` changed."""
        pass


class TaskScheduler(ABC):
    """Clock abstraction for delayed, fire-and-forget callbacks.

    Scheduled callbacks cannot be cancelled; once scheduled they always run.
    """

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        """Run ``callback`` once ``delay`` seconds have elapsed."""
        pass

    @abstractmethod
    def pending_count(self) -> int:
        """Get the number of callbacks that have not run yet."""
        pass
