import asyncio
import json

from coursework.config import SimulationSettings
from coursework.core.enums import AssignmentStatus
from coursework.main import ClassroomSimulation, main
from coursework.services import RecordingNotifier

from conftest import WORK_DELAY, GRADING_DELAY


def test_single_student_lifecycle_end_to_end(roster, alice, bob, scheduler):
    asyncio.run(roster.release_assignments_parallel(["A1", "A2"]))
    alice.start_working("A1")

    scheduler.advance(WORK_DELAY + GRADING_DELAY + 0.1)

    a1 = alice.find_assignment("A1")
    assert a1.status in (AssignmentStatus.PASS, AssignmentStatus.FAIL)
    assert 0 <= a1.grade <= 100
    assert alice.get_grade() == a1.grade
    assert alice.get_assignment_status("A2") == "released"
    assert bob.get_grade() == 0


def test_simulation_run_completes_every_assignment(capsys):
    settings = SimulationSettings(work_delay=0.01, grading_delay=0.01, reminder_delay=0.005, seed=42)
    notifier = RecordingNotifier()
    simulation = ClassroomSimulation(settings, notifier=notifier)

    stats = asyncio.run(simulation.run())

    alice, bob = simulation.students
    # the reminder forces Bob to submit A1 as well
    for student, names in ((alice, ["A1"]), (bob, ["A1", "A2"])):
        for name in names:
            assert student.get_assignment_status(name) in ("Pass", "Fail")
    assert alice.get_assignment_status("A2") == "released"
    assert stats['total_students'] == 2
    assert stats['graded_assignments'] == 3
    assert stats['outstanding_students'] == 1

    out = capsys.readouterr().out
    assert "Alice Smith has been added to the classlist." in out
    assert "Bob Jones has been added to the classlist." in out
    assert f"Alice Smith: overall grade {alice.get_grade():g}" in out
    assert "Observer → Bob Jones, A1 has received a final reminder." in notifier.lines
    assert simulation.scheduler.pending_count() == 0


def test_simulation_is_reproducible_with_seed():
    def grades():
        settings = SimulationSettings(work_delay=0, grading_delay=0, reminder_delay=0, seed=5)
        simulation = ClassroomSimulation(settings, notifier=RecordingNotifier())
        asyncio.run(simulation.run())
        return sorted(a.grade for s in simulation.students for a in s.assignments if a.is_graded)

    assert grades() == grades()


def test_main_runs_with_config(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"work_delay": 0, "grading_delay": 0, "reminder_delay": 0}))

    assert main(["--config", str(path), "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Observer → Alice Smith, A1 has been released." in out
    assert "Bob Jones: overall grade" in out


def test_main_reports_bad_config(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"work_delay": -5}))

    assert main(["--config", str(path)]) == 2
    assert "Configuration error" in capsys.readouterr().err
