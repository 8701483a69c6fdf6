"""
Main entry point for the coursework simulator.
"""

import asyncio
import logging
import random
import sys
from typing import Any, Dict, List, Optional

from .config import SimulationSettings, build_settings, load_settings
from .core.entities import Student
from .core.exceptions import ConfigurationError
from .core.interfaces import Notifier
from .logging_config import configure_logging
from .services import AsyncioTaskScheduler, ClassRoster, ConsoleNotifier


logger = logging.getLogger(__name__)


class ClassroomSimulation:
    """Wires a roster of students together and plays the demo scenario."""

    def __init__(self, settings: Optional[SimulationSettings] = None,
                 notifier: Optional[Notifier] = None,
                 scheduler: Optional[AsyncioTaskScheduler] = None):
        self._settings = settings or SimulationSettings()
        self._notifier = notifier or ConsoleNotifier()
        self._scheduler = scheduler or AsyncioTaskScheduler()
        self._rng = random.Random(self._settings.seed)
        self._roster = ClassRoster(self._notifier)
        self._students: List[Student] = [
            Student(
                s.full_name,
                s.email,
                self._notifier,
                scheduler=self._scheduler,
                rng=self._rng,
                work_delay=self._settings.work_delay,
                grading_delay=self._settings.grading_delay,
            )
            for s in self._settings.students
        ]

    @property
    def roster(self) -> ClassRoster:
        return self._roster

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    @property
    def scheduler(self) -> AsyncioTaskScheduler:
        return self._scheduler

    @property
    def students(self) -> List[Student]:
        return list(self._students)

    async def run(self) -> Dict[str, Any]:
        """Run the scenario to completion and return roster statistics."""
        settings = self._settings
        logger.info("Starting simulation with %d student(s)", len(self._students))

        for student in self._students:
            self._roster.add_student(student)

        await self._roster.release_assignments_parallel(settings.assignments)

        if settings.assignments:
            for index, student in enumerate(self._students):
                student.start_working(settings.assignments[index % len(settings.assignments)])

            self._scheduler.call_later(
                settings.reminder_delay,
                lambda: self._roster.send_reminder(settings.assignments[0]),
            )

        await self._scheduler.drain()

        for student in self._students:
            print(f"{student.full_name}: overall grade {student.get_grade():g}")

        stats = self._roster.get_statistics()
        logger.info("Simulation finished: %s", stats)
        return stats


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Classroom assignment lifecycle simulator")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--seed", type=int, help="Seed for random grading")
    parser.add_argument("--log-level", type=str, help="Logging level")

    args = parser.parse_args(argv)

    try:
        if args.config:
            settings = load_settings(args.config, seed=args.seed, log_level=args.log_level)
        else:
            settings = build_settings(seed=args.seed, log_level=args.log_level)
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    simulation = ClassroomSimulation(settings)
    asyncio.run(simulation.run())
    return 0


if __name__ == "__main__":
    sys.exit(main())
