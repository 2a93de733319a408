"""Scheduled job: delete expired sessions.

Run from cron or any external scheduler, not per request::

    quizmaker-cleanup-sessions
    python -m quizmaker.jobs.cleanup_sessions
"""
import logging

import click

from quizmaker.core.logging import setup_logging
from quizmaker.db import session as db_session
from quizmaker.services.sessions import cleanup_expired_sessions

logger = logging.getLogger(__name__)


@click.command()
def run() -> None:
    """Delete every session whose expiry has passed."""
    setup_logging()
    db = db_session.SessionLocal()
    try:
        removed = cleanup_expired_sessions(db)
    finally:
        db.close()
    logger.info("Session cleanup finished", extra={"removed": removed})
    click.echo(f"Removed {removed} expired session(s)")


if __name__ == "__main__":
    run()
