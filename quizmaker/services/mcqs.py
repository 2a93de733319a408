"""MCQ persistence: atomic create/update/delete with choices, ownership, listing."""
import logging
import math
from collections import defaultdict

from sqlalchemy.orm import Session

from quizmaker.core.exceptions import ConditionFailedError, ConsistencyError, PermissionDeniedError
from quizmaker.db.client import Statement, batch, mutate, new_id, query, query_first, utc_now
from quizmaker.schemas.mcq import (
    McqChoiceInputSchema,
    McqCreateSchema,
    McqUpdateSchema,
    McqWithChoicesSchema,
    PaginatedMcqsSchema,
    PaginationSchema,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# Public sort key -> column
SORT_COLUMNS = {
    "title": "title",
    "createdAt": "created_at",
}
SORT_ORDERS = ("asc", "desc")

MCQ_COLUMNS = "id, title, description, question_text, created_by_user_id, created_at, updated_at"
CHOICE_COLUMNS = "id, mcq_id, choice_text, is_correct, display_order, created_at"

INSERT_CHOICE_SQL = f"INSERT INTO mcq_choices ({CHOICE_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)"


def _choice_inserts(mcq_id: str, choices: list[McqChoiceInputSchema], now) -> list[Statement]:
    return [
        Statement(INSERT_CHOICE_SQL, [new_id(), mcq_id, c.choice_text, c.is_correct, c.display_order, now])
        for c in choices
    ]


def _to_mcq(row: dict, choices: list[dict]) -> McqWithChoicesSchema:
    return McqWithChoicesSchema.model_validate({**row, "choices": choices})


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def create_mcq(db: Session, user_id: str, data: McqCreateSchema) -> McqWithChoicesSchema:
    """Insert the MCQ and all of its choices in one transaction."""
    mcq_id = new_id()
    now = utc_now()
    statements = [
        Statement(
            f"INSERT INTO mcqs ({MCQ_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
            [mcq_id, data.title, data.description or None, data.question_text, user_id, now, now],
        ),
        *_choice_inserts(mcq_id, data.choices, now),
    ]
    batch(db, statements)

    mcq = get_mcq_by_id(db, mcq_id)
    if mcq is None:
        raise ConsistencyError("Failed to retrieve created MCQ")
    logger.info("MCQ created", extra={"mcq_id": mcq_id, "user_id": user_id})
    return mcq


def get_mcq_by_id(db: Session, mcq_id: str) -> McqWithChoicesSchema | None:
    row = query_first(db, f"SELECT {MCQ_COLUMNS} FROM mcqs WHERE id = ?", [mcq_id])
    if row is None:
        return None
    choices = query(
        db,
        f"SELECT {CHOICE_COLUMNS} FROM mcq_choices WHERE mcq_id = ? ORDER BY display_order ASC",
        [mcq_id],
    )
    return _to_mcq(row, choices)


def compute_total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if total else 0


def list_mcqs(
    db: Session,
    page: int | None = None,
    limit: int | None = None,
    search: str | None = None,
    user_id: str | None = None,
    sort: str | None = None,
    order: str | None = None,
) -> PaginatedMcqsSchema:
    """One page of MCQs with their choices.

    ``limit`` is capped at MAX_PAGE_SIZE. ``search`` matches title, description
    or question text ignoring case. An unknown ``sort`` falls back to newest
    first whatever ``order`` says.
    """
    page = max(page or 1, 1)
    limit = max(min(limit or DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE), 1)
    offset = (page - 1) * limit
    order = order.lower() if order and order.lower() in SORT_ORDERS else "desc"
    if sort in SORT_COLUMNS:
        direction = order.upper()
        order_by = f"{SORT_COLUMNS[sort]} {direction}, id {direction}"
    else:
        order_by = "created_at DESC, id DESC"

    conditions: list[str] = []
    params: list = []
    if search:
        term = f"%{_escape_like(search.lower())}%"
        conditions.append(
            "(LOWER(title) LIKE ? ESCAPE '\\' OR LOWER(description) LIKE ? ESCAPE '\\' "
            "OR LOWER(question_text) LIKE ? ESCAPE '\\')"
        )
        params.extend([term, term, term])
    if user_id:
        conditions.append("created_by_user_id = ?")
        params.append(user_id)
    where = f"WHERE {' AND '.join(conditions)}" if conditions else ""

    count_row = query_first(db, f"SELECT COUNT(*) AS total FROM mcqs {where}", params)
    total = count_row["total"] if count_row else 0

    rows = query(
        db,
        f"SELECT {MCQ_COLUMNS} FROM mcqs {where} ORDER BY {order_by} LIMIT ? OFFSET ?",
        [*params, limit, offset],
    )

    choices_by_mcq: dict[str, list[dict]] = defaultdict(list)
    if rows:
        ids = [row["id"] for row in rows]
        placeholders = ", ".join("?" for _ in ids)
        for choice in query(
            db,
            f"SELECT {CHOICE_COLUMNS} FROM mcq_choices WHERE mcq_id IN ({placeholders}) "
            "ORDER BY mcq_id, display_order ASC",
            ids,
        ):
            choices_by_mcq[choice["mcq_id"]].append(choice)

    return PaginatedMcqsSchema(
        data=[_to_mcq(row, choices_by_mcq[row["id"]]) for row in rows],
        pagination=PaginationSchema(
            page=page,
            limit=limit,
            total=total,
            total_pages=compute_total_pages(total, limit),
        ),
    )


def update_mcq(db: Session, mcq_id: str, user_id: str, data: McqUpdateSchema) -> McqWithChoicesSchema:
    """Update the MCQ fields and replace its whole choice set.

    The UPDATE is conditional on ownership, so a change of owner between the
    check and the write still rolls the batch back.
    """
    if not verify_mcq_ownership(db, mcq_id, user_id):
        logger.warning("MCQ update denied", extra={"mcq_id": mcq_id, "user_id": user_id})
        raise PermissionDeniedError("You do not have permission to update this MCQ")

    now = utc_now()
    statements = [
        Statement(
            "UPDATE mcqs SET title = ?, description = ?, question_text = ?, updated_at = ? "
            "WHERE id = ? AND created_by_user_id = ?",
            [data.title, data.description or None, data.question_text, now, mcq_id, user_id],
            required=True,
        ),
        Statement("DELETE FROM mcq_choices WHERE mcq_id = ?", [mcq_id]),
        *_choice_inserts(mcq_id, data.choices, now),
    ]
    try:
        batch(db, statements)
    except ConditionFailedError:
        raise PermissionDeniedError("You do not have permission to update this MCQ") from None

    mcq = get_mcq_by_id(db, mcq_id)
    if mcq is None:
        raise ConsistencyError("Failed to retrieve updated MCQ")
    logger.info("MCQ updated", extra={"mcq_id": mcq_id, "user_id": user_id})
    return mcq


def delete_mcq(db: Session, mcq_id: str, user_id: str) -> None:
    """Delete the MCQ; its choices and attempts go with it via ON DELETE CASCADE."""
    if not verify_mcq_ownership(db, mcq_id, user_id):
        logger.warning("MCQ delete denied", extra={"mcq_id": mcq_id, "user_id": user_id})
        raise PermissionDeniedError("You do not have permission to delete this MCQ")

    deleted = mutate(db, "DELETE FROM mcqs WHERE id = ? AND created_by_user_id = ?", [mcq_id, user_id])
    if not deleted:
        raise PermissionDeniedError("You do not have permission to delete this MCQ")
    logger.info("MCQ deleted", extra={"mcq_id": mcq_id, "user_id": user_id})


def verify_mcq_ownership(db: Session, mcq_id: str, user_id: str) -> bool:
    """True only if the MCQ exists and was created by ``user_id``."""
    row = query_first(
        db,
        "SELECT COUNT(*) AS total FROM mcqs WHERE id = ? AND created_by_user_id = ?",
        [mcq_id, user_id],
    )
    return bool(row and row["total"])
