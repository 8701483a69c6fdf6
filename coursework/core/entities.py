"""
Core entities for the coursework simulator: assignment records and students.
"""

import logging
import random
import threading
import uuid
from abc import ABC
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Set

from .enums import AssignmentStatus, PASS_THRESHOLD, MIN_GRADE, MAX_GRADE, NOT_ASSIGNED
from .interfaces import Notifier, TaskScheduler


logger = logging.getLogger(__name__)

DEFAULT_WORK_DELAY = 0.5
DEFAULT_GRADING_DELAY = 0.5


class AbstractEntity(ABC):
    """Base abstract entity with universal ID, timestamps, and versioning."""

    def __init__(self, entity_id: Optional[str] = None):
        self._id = entity_id or str(uuid.uuid4())
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """Get last update timestamp."""
        return self._updated_at

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    def touch(self) -> None:
        """Record a mutation."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"


class Assignment(AbstractEntity):
    """A single student's record of one named assignment."""

    def __init__(self, name: str, **kwargs):
        super().__init__(**kwargs)
        self._name = name
        self._status = AssignmentStatus.CREATED
        self._grade: Optional[float] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def status(self) -> AssignmentStatus:
        return self._status

    @status.setter
    def status(self, status: AssignmentStatus) -> None:
        self._status = status
        self.touch()

    @property
    def grade(self) -> Optional[float]:
        return self._grade

    @property
    def is_graded(self) -> bool:
        return self._grade is not None

    @property
    def is_done(self) -> bool:
        return self._status.is_done

    def set_grade(self, grade: float) -> None:
        """Record a grade and derive pass/fail from it."""
        self._grade = grade
        self._status = AssignmentStatus.PASS if grade > PASS_THRESHOLD else AssignmentStatus.FAIL
        self.touch()

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'name': self._name,
            'status': self._status.value,
            'grade': self._grade,
        })
        return data

    def __repr__(self) -> str:
        return f"Assignment(name={self._name!r}, status={self._status.value}, grade={self._grade})"


class Person(AbstractEntity):
    """Base class for people known to the simulator."""

    def __init__(self, full_name: str, email: str, **kwargs):
        super().__init__(**kwargs)
        self._full_name = full_name
        self._email = email

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def email(self) -> str:
        return self._email

    def set_full_name(self, full_name: str) -> None:
        self._full_name = full_name
        self.touch()

    def set_email(self, email: str) -> None:
        self._email = email
        self.touch()

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'full_name': self._full_name,
            'email': self._email,
        })
        return data


class Student(Person):
    """Student owning assignment records and driving their lifecycle.

    Work and grading happen after simulated delays, scheduled through the
    injected ``TaskScheduler``. Grades are drawn from the injected random
    source. The submitted-names set is the single guard against double
    submission, shared by direct calls and scheduled auto-submits.
    """

    def __init__(self, full_name: str, email: str, notifier: Notifier,
                 scheduler: Optional[TaskScheduler] = None,
                 rng: Optional[random.Random] = None,
                 work_delay: float = DEFAULT_WORK_DELAY,
                 grading_delay: float = DEFAULT_GRADING_DELAY,
                 **kwargs):
        super().__init__(full_name, email, **kwargs)
        if scheduler is None:
            # services imports core, so resolve lazily
            from ..services.scheduler_service import AsyncioTaskScheduler
            scheduler = AsyncioTaskScheduler()
        self._notifier = notifier
        self._scheduler = scheduler
        self._rng = rng or random.Random()
        self._work_delay = work_delay
        self._grading_delay = grading_delay
        self._assignments: Dict[str, Assignment] = {}  # insertion ordered
        self._submitted_names: Set[str] = set()
        self._overall_grade: float = 0
        self._lock = threading.RLock()

    @property
    def assignments(self) -> List[Assignment]:
        """Assignment records in the order they were first referenced."""
        with self._lock:
            return list(self._assignments.values())

    @property
    def submitted_names(self) -> Set[str]:
        with self._lock:
            return set(self._submitted_names)

    @property
    def overall_grade(self) -> float:
        return self._overall_grade

    def find_assignment(self, name: str) -> Optional[Assignment]:
        """Get the record for ``name`` without creating it."""
        with self._lock:
            return self._assignments.get(name)

    def get_or_create_assignment(self, name: str, announce: bool = True) -> Assignment:
        """Get the record for ``name``, creating it as released on first use."""
        with self._lock:
            assignment = self._assignments.get(name)
            if assignment is not None:
                return assignment

            assignment = Assignment(name)
            assignment.status = AssignmentStatus.RELEASED
            self._assignments[name] = assignment
            self.touch()

        logger.debug("Created %s for %s", name, self._full_name)
        if announce:
            self._notifier.notify(self._full_name, name, "has been released.")
        return assignment

    def update_assignment_status(self, name: str, grade: Optional[float] = None) -> None:
        """Ensure ``name`` exists and, when a grade is given, apply it."""
        assignment = self.get_or_create_assignment(name)
        if grade is not None:
            self._apply_grade(assignment, grade)

    def get_assignment_status(self, name: str) -> str:
        """Get a display status for ``name``."""
        assignment = self.find_assignment(name)
        if assignment is None:
            return NOT_ASSIGNED

        if assignment.is_graded:
            return "Pass" if assignment.grade > PASS_THRESHOLD else "Fail"

        return assignment.status.value

    def start_working(self, name: str) -> None:
        """Begin work on ``name``; it is auto-submitted after the work delay."""
        assignment = self.get_or_create_assignment(name)

        def auto_submit() -> None:
            if not self.has_submitted(name):
                logger.debug("Auto-submitting %s for %s", name, self._full_name)
                self.submit_assignment(name)

        # nothing changes if scheduling fails
        self._scheduler.call_later(self._work_delay, auto_submit)
        assignment.status = AssignmentStatus.WORKING
        self._notifier.notify(self._full_name, name, f"is working on {name}.")

    def has_submitted(self, name: str) -> bool:
        with self._lock:
            return name in self._submitted_names

    def submit_assignment(self, name: str) -> None:
        """Submit ``name`` once; grading is scheduled after the grading delay."""
        assignment = self.get_or_create_assignment(name)

        def grade_submission() -> None:
            grade = self._rng.randint(MIN_GRADE, MAX_GRADE)
            logger.debug("Graded %s for %s: %s", name, self._full_name, grade)
            self._apply_grade(assignment, grade)

        with self._lock:
            if name in self._submitted_names:
                return
            # nothing changes if scheduling fails
            self._scheduler.call_later(self._grading_delay, grade_submission)
            self._submitted_names.add(name)
            assignment.status = AssignmentStatus.SUBMITTED

        self._notifier.notify(self._full_name, name, f"has submitted {name}.")

    def get_grade(self) -> float:
        """Recompute and return the overall average grade."""
        self._recalculate_overall_grade()
        return self._overall_grade

    def _apply_grade(self, assignment: Assignment, grade: float) -> None:
        with self._lock:
            assignment.set_grade(grade)

        if assignment.status is AssignmentStatus.PASS:
            self._notifier.notify(self._full_name, assignment.name, "has passed.")
        else:
            self._notifier.notify(self._full_name, assignment.name, "has failed.")

        self._recalculate_overall_grade()

    def _recalculate_overall_grade(self) -> None:
        with self._lock:
            grades = [a.grade for a in self._assignments.values() if a.is_graded]
            if not grades:
                self._overall_grade = 0
                return
            self._overall_grade = sum(grades) / len(grades)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        with self._lock:
            data.update({
                'overall_grade': self._overall_grade,
                'submitted': sorted(self._submitted_names),
                'assignments': [a.to_dict() for a in self._assignments.values()],
            })
        return data

    def __repr__(self) -> str:
        return f"Student(full_name={self._full_name!r}, email={self._email!r})"
