"""Tests for the daily recurrence scheduler."""

from datetime import date

from apscheduler.triggers.cron import CronTrigger

from fintrack.database.factories import create_sqlite_database
from fintrack.domain.entities import RecurrenceType
from fintrack.scheduler import JOB_ID, build_scheduler, run_recurrence_job


def test_build_scheduler_registers_daily_job(temp_db):
    scheduler = build_scheduler(lambda: temp_db, hour=2, minute=15)

    job = scheduler.get_job(JOB_ID)
    assert job is not None
    assert job.func is run_recurrence_job
    assert isinstance(job.trigger, CronTrigger)
    assert str(job.trigger.fields[job.trigger.FIELD_NAMES.index("hour")]) == "2"
    assert str(job.trigger.fields[job.trigger.FIELD_NAMES.index("minute")]) == "15"
    assert job.max_instances == 1
    assert job.coalesce is True
    assert not scheduler.running


def test_run_recurrence_job_generates_children(temp_db, make_original):
    original = make_original(recurrence=RecurrenceType.DAILY, occurrence_date=date(2024, 1, 1))

    run_recurrence_job(lambda: create_sqlite_database(database_path=temp_db.database_path))

    [child] = temp_db.list_child_transactions(original.id)
    assert child.occurrence_date == date(2024, 1, 2)


def test_run_recurrence_job_logs_and_disconnects_on_failure(caplog):
    events = []

    class BrokenDatabase:
        def connect(self):
            events.append("connect")

        def disconnect(self):
            events.append("disconnect")

        def find_active_recurring_originals(self):
            raise RuntimeError("database is locked")

    with caplog.at_level("ERROR", logger="fintrack.scheduler"):
        run_recurrence_job(BrokenDatabase)

    assert events == ["connect", "disconnect"]
    assert "Recurrence processing job failed" in caplog.text
    assert "database is locked" in caplog.text
