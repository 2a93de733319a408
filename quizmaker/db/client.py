"""Thin SQL access layer used by every service.

Statements are written with anonymous ``?`` placeholders, whatever the engine.
They are rewritten here to SQLAlchemy named binds (``:p1``, ``:p2``, ...) and
parameter values are coerced to their storage representation:

* ``bool`` -> ``0`` / ``1`` (``is_correct`` columns are integers)
* ``datetime`` -> UTC ``"YYYY-MM-DD HH:MM:SS.ffffff"``, which sorts
  lexicographically and matches SQLite's own DateTime storage format

``mutate`` and ``batch`` commit on success and roll back on any error. Nothing
is retried.
"""
import itertools
import logging
import re
import secrets
from datetime import datetime, timezone
from typing import Any, NamedTuple, Sequence

from sqlalchemy import text
from sqlalchemy.orm import Session

from quizmaker.core.exceptions import ConditionFailedError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

_PLACEHOLDER_RE = re.compile(r"\?")


class Statement(NamedTuple):
    """One statement of a batch. A ``required`` statement must affect at least one row."""

    sql: str
    params: Sequence[Any] = ()
    required: bool = False


def new_id() -> str:
    """128 random bits as 32 lowercase hex chars; collisions are not checked."""
    return secrets.token_hex(16)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.strftime(TIMESTAMP_FORMAT)


def _coerce(value: Any) -> Any:
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, datetime):
        return format_timestamp(value)
    return value


def normalize_placeholders(sql: str, params: Sequence[Any] = ()) -> tuple[str, dict[str, Any]]:
    """Rewrite ``?`` placeholders to ``:p1``.. and build the matching bind dict."""
    expected = len(_PLACEHOLDER_RE.findall(sql))
    if expected != len(params):
        raise ValueError(f"Statement has {expected} placeholders but {len(params)} params were given")
    counter = itertools.count(1)
    normalized = _PLACEHOLDER_RE.sub(lambda _m: f":p{next(counter)}", sql)
    binds = {f"p{i}": _coerce(v) for i, v in enumerate(params, start=1)}
    return normalized, binds


def _execute(db: Session, sql: str, params: Sequence[Any]):
    normalized, binds = normalize_placeholders(sql, params)
    return db.execute(text(normalized), binds)


def query(db: Session, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
    """Run a SELECT and return every row as a dict."""
    result = _execute(db, sql, params)
    return [dict(row) for row in result.mappings().all()]


def query_first(db: Session, sql: str, params: Sequence[Any] = ()) -> dict[str, Any] | None:
    rows = query(db, sql, params)
    return rows[0] if rows else None


def mutate(db: Session, sql: str, params: Sequence[Any] = ()) -> int:
    """Run one INSERT/UPDATE/DELETE, commit, and return the affected row count."""
    try:
        result = _execute(db, sql, params)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return result.rowcount


def batch(db: Session, statements: Sequence[Statement]) -> list[int]:
    """Run all statements in one transaction; all commit or none do."""
    counts: list[int] = []
    try:
        for index, stmt in enumerate(statements):
            rowcount = _execute(db, stmt.sql, stmt.params).rowcount
            if stmt.required and rowcount == 0:
                logger.warning("Required statement %d of batch matched no rows; rolling back", index)
                raise ConditionFailedError()
            counts.append(rowcount)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return counts
