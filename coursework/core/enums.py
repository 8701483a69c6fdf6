"""
Enumerations and constants for the coursework simulator.
"""

from enum import Enum
from typing import FrozenSet


class AssignmentStatus(Enum):
    """Lifecycle status of a single assignment record."""
    CREATED = "created"
    RELEASED = "released"
    WORKING = "working"
    SUBMITTED = "submitted"
    FINAL_REMINDER = "final-reminder"
    PASS = "pass"
    FAIL = "fail"

    @property
    def is_done(self) -> bool:
        """Submitted or graded."""
        return is_done_status(self.value)


# Compared case-insensitively, so "Pass" and "pass" are both done.
DONE_STATUS_VALUES: FrozenSet[str] = frozenset({"submitted", "pass", "fail"})

# Statuses considered by the roster-wide outstanding query.
OPEN_STATUSES: FrozenSet[AssignmentStatus] = frozenset({
    AssignmentStatus.RELEASED,
    AssignmentStatus.WORKING,
    AssignmentStatus.FINAL_REMINDER,
})

PASS_THRESHOLD = 50  # grades strictly above pass
MIN_GRADE = 0
MAX_GRADE = 100

NOT_ASSIGNED = "Hasn't been assigned"


def is_done_status(status: str) -> bool:
    """Check a raw status string against the done set."""
    return status.lower() in DONE_STATUS_VALUES
