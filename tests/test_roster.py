import asyncio

from coursework.core.enums import AssignmentStatus
from coursework.services import ClassRoster

from conftest import WORK_DELAY


def test_add_student_prints_confirmation(notifier, alice, capsys):
    roster = ClassRoster(notifier)
    roster.add_student(alice)

    assert capsys.readouterr().out == "Alice Smith has been added to the classlist.\n"
    assert roster.students == [alice]
    # not routed through the notifier
    assert notifier.lines == []


def test_remove_student_removes_all_matches(roster, make_student):
    roster.add_student(make_student("Bob Jones", "bob2@example.com"))
    roster.remove_student("Bob Jones")

    assert [s.full_name for s in roster.students] == ["Alice Smith"]


def test_remove_unknown_student_is_noop(roster):
    roster.remove_student("Nobody")
    assert len(roster.students) == 2


def test_find_student_by_name(roster, alice):
    assert roster.find_student_by_name("Alice Smith") is alice
    assert roster.find_student_by_name("Nobody") is None


def test_release_parallel_reaches_every_student(roster, alice, bob, notifier):
    asyncio.run(roster.release_assignments_parallel(["A1", "A2"]))

    for student in (alice, bob):
        assert [a.name for a in student.assignments] == ["A1", "A2"]
        assert all(a.status is AssignmentStatus.RELEASED for a in student.assignments)
    assert len(notifier.lines) == 4
    assert "Observer → Bob Jones, A2 has been released." in notifier.lines


def test_release_keeps_existing_records(roster, alice):
    alice.update_assignment_status("A1", 75)
    asyncio.run(roster.release_assignments_parallel(["A1"]))

    assert alice.get_assignment_status("A1") == "Pass"


def test_outstanding_by_name(roster, alice, bob, make_student):
    carol = make_student("Carol Davis", "carol@example.com")
    roster.add_student(carol)
    alice.submit_assignment("A1")
    bob.update_assignment_status("A1")

    assert roster.find_outstanding_assignments("A1") == ["Bob Jones", "Carol Davis"]


def test_outstanding_by_name_counts_graded_as_done(roster, alice, bob):
    alice.update_assignment_status("A1", 10)
    bob.update_assignment_status("A1", 90)

    assert roster.find_outstanding_assignments("A1") == []


def test_outstanding_without_name(roster, alice, bob, make_student):
    carol = make_student("Carol Davis", "carol@example.com")
    roster.add_student(carol)
    alice.update_assignment_status("A1", 80)
    bob.start_working("A2")
    carol.get_or_create_assignment("A3", announce=False).status = AssignmentStatus.CREATED

    # created is neither done nor open, so Carol is left out
    assert roster.find_outstanding_assignments() == ["Bob Jones"]


def test_outstanding_without_name_ignores_students_without_records(roster):
    assert roster.find_outstanding_assignments() == []
    assert roster.find_outstanding_assignments("A1") == ["Alice Smith", "Bob Jones"]


def test_reminder_forces_submission(roster, alice, bob, notifier, scheduler):
    bob.start_working("A1")
    notifier.clear()

    roster.send_reminder("A1")

    assert alice.get_assignment_status("A1") == "submitted"
    assert bob.get_assignment_status("A1") == "submitted"
    assert notifier.messages_for("Alice Smith", "A1") == [
        "has received a final reminder.",
        "has submitted A1.",
    ]
    assert notifier.messages_for("Bob Jones", "A1") == [
        "has received a final reminder.",
        "has submitted A1.",
    ]

    scheduler.advance(WORK_DELAY)
    assert notifier.messages_for("Bob Jones", "A1").count("has submitted A1.") == 1


def test_reminder_skips_submitted_work(roster, alice, notifier, scheduler):
    alice.submit_assignment("A1")
    notifier.clear()
    pending = scheduler.pending_count()

    roster.send_reminder("A1")

    assert alice.get_assignment_status("A1") == "submitted"
    assert notifier.messages_for("Alice Smith", "A1") == []
    # only Bob's grading was added
    assert scheduler.pending_count() == pending + 1


def test_reminder_creates_missing_record_silently(roster, bob, notifier):
    roster.send_reminder("A1")

    messages = notifier.messages_for("Bob Jones", "A1")
    assert "has been released." not in messages
    assert messages[0] == "has received a final reminder."
    assert "A1" in bob.submitted_names


def test_final_reminder_counts_as_open_until_submitted(roster, alice):
    alice.get_or_create_assignment("A1").status = AssignmentStatus.FINAL_REMINDER
    assert roster.find_outstanding_assignments() == ["Alice Smith"]

    roster.send_reminder("A1")
    assert roster.find_outstanding_assignments() == []


def test_statistics(roster, alice, bob):
    alice.update_assignment_status("A1", 80)
    alice.update_assignment_status("A2", 40)
    bob.update_assignment_status("A1")

    stats = roster.get_statistics()

    assert stats == {
        'total_students': 2,
        'total_assignments': 3,
        'graded_assignments': 2,
        'passed': 1,
        'failed': 1,
        'class_average': 60,
        'outstanding_students': 1,
    }


def test_statistics_empty_roster(notifier):
    stats = ClassRoster(notifier).get_statistics()
    assert stats['total_students'] == 0
    assert stats['class_average'] == 0
