#!/usr/bin/env python3
"""
Demo scenario for the coursework simulator.
"""

import sys
import os
import asyncio
import json

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from coursework.config import SimulationSettings
from coursework.core.entities import Student
from coursework.logging_config import configure_logging
from coursework.main import ClassroomSimulation


async def run_demo():
    """Run a walkthrough of the roster operations around the core scenario."""
    print("=" * 60)
    print("COURSEWORK LIFECYCLE SIMULATOR - DEMO")
    print("=" * 60)

    settings = SimulationSettings(work_delay=0.3, grading_delay=0.3, reminder_delay=0.1, seed=7)
    simulation = ClassroomSimulation(settings)
    roster = simulation.roster

    print("\n1. Running the core scenario...")
    stats = await simulation.run()

    print("\n2. Late enrolment and outstanding work...")
    carol = Student("Carol Davis", "carol@example.com", simulation.notifier,
                    scheduler=simulation.scheduler)
    roster.add_student(carol)
    print(f"  Outstanding on A1: {roster.find_outstanding_assignments('A1')}")
    print(f"  Outstanding overall: {roster.find_outstanding_assignments()}")
    print(f"  Carol's A1: {carol.get_assignment_status('A1')}")

    print("\n3. Reminder forces submission...")
    roster.send_reminder("A1")
    await simulation.scheduler.drain()
    print(f"  Carol's A1: {carol.get_assignment_status('A1')} ({carol.get_grade():g})")

    print("\n4. Updating contact details and dropping a student...")
    carol.set_email("c.davis@example.com")
    roster.remove_student("Bob Jones")
    print(f"  Roster: {[s.full_name for s in roster.students]}")

    print("\n5. Statistics...")
    print(f"  Before: {json.dumps(stats, indent=2)}")
    print(f"  After: {json.dumps(roster.get_statistics(), indent=2)}")

    print("\n" + "=" * 60)
    print("DEMO COMPLETED SUCCESSFULLY!")
    print("=" * 60)


if __name__ == "__main__":
    configure_logging("WARNING")
    asyncio.run(run_demo())
