"""
Core module containing the assignment state machine and student entity.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Assignment",
    "Person",
    "Student",

    # Interfaces
    "Notifier",
    "TaskScheduler",

    # Enums
    "AssignmentStatus",
    "is_done_status",
    "NOT_ASSIGNED",
    "PASS_THRESHOLD",

    # Exceptions
    "CourseworkException",
    "ConfigurationError",
    "SchedulingError",
]
