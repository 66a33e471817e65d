"""Daily trigger for recurrence processing.

Runs ``RecurrenceService.process_all_active_recurrences`` once a day from a
long-lived process. A deployment that already has cron can call
``fintrack recurrence process`` instead.
"""

import logging
from typing import Callable

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger

from fintrack.database.base import Database
from fintrack.domain.recurrence import RecurrenceService

logger = logging.getLogger(__name__)

JOB_ID = "recurrence_processing"


def run_recurrence_job(db_factory: Callable[[], Database]) -> None:
    """Process all active recurrences against a fresh database connection."""
    db = db_factory()
    db.connect()
    try:
        RecurrenceService(db).process_all_active_recurrences()
    except Exception:
        logger.exception("Recurrence processing job failed")
    finally:
        db.disconnect()


def build_scheduler(
    db_factory: Callable[[], Database], hour: int = 1, minute: int = 0
) -> BlockingScheduler:
    """Create a scheduler with the daily recurrence job registered (not started).

    Only one run executes at a time: overlapping or missed firings are
    collapsed into a single run.
    """
    scheduler = BlockingScheduler()
    scheduler.add_job(
        run_recurrence_job,
        CronTrigger(hour=hour, minute=minute),
        args=[db_factory],
        id=JOB_ID,
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    return scheduler


def run_scheduler(db_factory: Callable[[], Database], hour: int = 1, minute: int = 0) -> None:
    """Block and process recurrences every day at ``hour:minute``."""
    scheduler = build_scheduler(db_factory, hour=hour, minute=minute)
    logger.info("Recurrence scheduler started, running daily at %02d:%02d", hour, minute)
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Scheduler stopped")
