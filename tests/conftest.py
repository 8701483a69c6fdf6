import random

import pytest

from coursework.core.entities import Student
from coursework.services import ClassRoster, RecordingNotifier, VirtualClockScheduler

WORK_DELAY = 0.5
GRADING_DELAY = 0.5


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def scheduler():
    return VirtualClockScheduler()


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def make_student(notifier, scheduler, rng):
    """Factory for students sharing the test notifier, clock and RNG."""

    def _make(full_name="Alice Smith", email="alice@example.com"):
        return Student(
            full_name,
            email,
            notifier,
            scheduler=scheduler,
            rng=rng,
            work_delay=WORK_DELAY,
            grading_delay=GRADING_DELAY,
        )

    return _make


@pytest.fixture()
def alice(make_student):
    return make_student("Alice Smith", "alice@example.com")


@pytest.fixture()
def bob(make_student):
    return make_student("Bob Jones", "bob@example.com")


@pytest.fixture()
def roster(notifier, alice, bob):
    r = ClassRoster(notifier)
    r.add_student(alice)
    r.add_student(bob)
    return r
