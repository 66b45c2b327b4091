"""
Tests for the interactive console.

Each test scripts a whole session as input lines, runs it against the
`scheduler` fixture, and checks both the scheduler state and what was printed.
"""

import io

from cli.console import Console
from cli.main import main
from config.settings import settings


def _run(scheduler, *lines: str) -> str:
    stdout = io.StringIO()
    Console(scheduler, io.StringIO("".join(f"{line}\n" for line in lines)), stdout).run()
    return stdout.getvalue()


def test_add_job(scheduler):
    output = _run(scheduler, "1", "build", "3", "7")

    assert "Added job: build (ID: 1, Priority: 3)" in output
    assert [j.name for j in scheduler.list_pending_jobs()] == ["build"]
    assert output.rstrip().endswith("Exiting...")


def test_add_job_rejects_blank_name(scheduler):
    output = _run(scheduler, "1", "   ", "7")

    assert "please enter a job name" in output
    assert scheduler.pending_count == 0


def test_add_job_rejects_bad_priority(scheduler):
    output = _run(scheduler, "1", "a", "0", "1", "b", "eleven", "1", "c", "11", "7")

    assert output.count("valid priority between 1 and 10") == 3
    assert scheduler.pending_count == 0
    assert scheduler.next_job_id == 1


def test_show_pending_in_processing_order(scheduler):
    scheduler.add_job("five", 5)
    scheduler.add_job("one", 1)

    output = _run(scheduler, "2", "7")

    assert output.index("Name: one") < output.index("Name: five")
    assert "Priority: 1 [high]" in output


def test_show_pending_empty(scheduler):
    assert "No jobs in queue." in _run(scheduler, "2", "7")


def test_process_next(scheduler):
    scheduler.add_job("build", 2)
    scheduler.add_job("test", 2)

    output = _run(scheduler, "3", "3", "3", "7")

    assert output.index("Processed job: build") < output.index("Processed job: test")
    assert "No jobs to process." in output
    assert scheduler.processed_count == 2


def test_show_processed_newest_first(scheduler):
    scheduler.add_job("first", 1)
    scheduler.add_job("second", 2)
    scheduler.process_next_job()
    scheduler.process_next_job()

    output = _run(scheduler, "4", "7")

    assert output.index("Name: second") < output.index("Name: first")
    assert "Processed at:" in output


def test_show_processed_empty(scheduler):
    assert "No processed jobs." in _run(scheduler, "4", "7")


def test_clear_pending_asks_for_confirmation(scheduler):
    scheduler.add_job("deploy", 1)

    output = _run(scheduler, "5", "n", "7")
    assert "Clear cancelled." in output
    assert scheduler.pending_count == 1

    output = _run(scheduler, "5", "y", "7")
    assert "Job queue cleared." in output
    assert scheduler.pending_count == 0


def test_clear_processed(scheduler):
    scheduler.add_job("a", 1)
    scheduler.add_job("b", 1)
    scheduler.process_next_job()

    output = _run(scheduler, "6", "7")

    assert "Processed history cleared." in output
    assert scheduler.processed_count == 0
    assert scheduler.pending_count == 1


def test_invalid_choice(scheduler):
    assert "Invalid choice." in _run(scheduler, "9", "7")


def test_end_of_input_exits_cleanly(scheduler):
    """Input ending mid-prompt (e.g. Ctrl+D) exits instead of crashing."""
    output = _run(scheduler, "1", "build")

    assert output.rstrip().endswith("Exiting...")
    assert scheduler.pending_count == 0


def test_main_runs_a_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nbuild\n2\n3\n7\n"))

    main(["--log-level", "WARNING"])

    output = capsys.readouterr().out
    assert "Added job: build" in output
    assert "Processed job: build" in output


def test_add_job_when_queue_full(scheduler, monkeypatch):
    monkeypatch.setattr(settings, "MAX_PENDING_JOBS", 1)
    scheduler.add_job("a", 1)

    output = _run(scheduler, "1", "b", "2", "7")

    assert "queue full (1 pending jobs)" in output
    assert scheduler.pending_count == 1
    # the name/priority lines were read as menu choices instead
    assert output.count("Invalid choice.") == 1


def test_add_job_rejects_long_name(scheduler, monkeypatch):
    monkeypatch.setattr(settings, "JOB_NAME_MAX_LENGTH", 5)

    output = _run(scheduler, "1", "too-long", "7")

    assert "longer than 5 characters" in output
    assert scheduler.pending_count == 0
