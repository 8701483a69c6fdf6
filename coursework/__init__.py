"""
Coursework: a classroom assignment lifecycle simulator.

Students receive assignments, work on them, submit, and are graded, while a
notifier reports every status transition. A class roster coordinates batch
releases, reminders and outstanding-work queries across its students.
"""

__version__ = "1.0.0"
__author__ = "Coursework Development Team"
__description__ = "Classroom assignment lifecycle simulator"
