"""
Class roster coordinating batch assignment operations across students.
"""

import asyncio
import logging
import threading
from typing import Any, Dict, List, Optional, Sequence

from ..core.entities import Student
from ..core.enums import AssignmentStatus, OPEN_STATUSES
from ..core.interfaces import Notifier


logger = logging.getLogger(__name__)


class ClassRoster:
    """Ordered collection of students with class-wide coordination."""

    def __init__(self, notifier: Notifier):
        self._notifier = notifier
        self._students: List[Student] = []
        self._lock = threading.RLock()

    @property
    def students(self) -> List[Student]:
        with self._lock:
            return list(self._students)

    def add_student(self, student: Student) -> None:
        """Add a student and announce it on the console."""
        with self._lock:
            self._students.append(student)
        logger.info("Added %s to the roster", student.full_name)
        print(f"{student.full_name} has been added to the classlist.")

    def remove_student(self, full_name: str) -> None:
        """Remove every student named ``full_name``."""
        with self._lock:
            before = len(self._students)
            self._students = [s for s in self._students if s.full_name != full_name]
            removed = before - len(self._students)
        logger.info("Removed %d student(s) named %s", removed, full_name)

    def find_student_by_name(self, full_name: str) -> Optional[Student]:
        with self._lock:
            return next((s for s in self._students if s.full_name == full_name), None)

    def find_outstanding_assignments(self, name: Optional[str] = None) -> List[str]:
        """Get the full names of students with outstanding work.

        With ``name``, a student is outstanding when they have no record of
        it or the record is not done. Without ``name``, a student is
        outstanding when any record is not done and still released, being
        worked on, or under final reminder.
        """
        result = []
        for student in self.students:
            if name:
                assignment = student.find_assignment(name)
                if assignment is None or not assignment.is_done:
                    result.append(student.full_name)
            else:
                outstanding = any(
                    not a.is_done and a.status in OPEN_STATUSES
                    for a in student.assignments
                )
                if outstanding:
                    result.append(student.full_name)
        return result

    async def release_assignments_parallel(self, names: Sequence[str]) -> None:
        """Release every name to every student, one concurrent task per name."""

        async def release(name: str) -> None:
            await asyncio.sleep(0)
            for student in self.students:
                student.update_assignment_status(name)

        tasks = [asyncio.ensure_future(release(name)) for name in names]
        await asyncio.gather(*tasks)
        logger.info("Released %s to %d student(s)", ", ".join(names), len(self.students))

    def send_reminder(self, name: str) -> None:
        """Give a final reminder on ``name`` and force submission where not done."""
        reminded = 0
        for student in self.students:
            assignment = student.get_or_create_assignment(name, announce=False)
            if assignment.is_done:
                continue

            assignment.status = AssignmentStatus.FINAL_REMINDER
            self._notifier.notify(student.full_name, name, "has received a final reminder.")
            student.submit_assignment(name)
            reminded += 1
        logger.info("Sent final reminder for %s to %d student(s)", name, reminded)

    def get_statistics(self) -> Dict[str, Any]:
        """Get class-wide assignment statistics."""
        students = self.students
        records = [a for s in students for a in s.assignments]
        graded_averages = [
            s.get_grade() for s in students
            if any(a.is_graded for a in s.assignments)
        ]

        return {
            'total_students': len(students),
            'total_assignments': len(records),
            'graded_assignments': sum(1 for a in records if a.is_graded),
            'passed': sum(1 for a in records if a.status is AssignmentStatus.PASS),
            'failed': sum(1 for a in records if a.status is AssignmentStatus.FAIL),
            'class_average': sum(graded_averages) / len(graded_averages) if graded_averages else 0,
            'outstanding_students': len(self.find_outstanding_assignments()),
        }
