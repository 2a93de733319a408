"""MCQs, choices and attempts.

Revision ID: 002
Revises: 001
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "mcqs",
        sa.Column("id", sa.String(32), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("created_by_user_id", sa.String(32), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["created_by_user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_mcqs_created_by_user_id"), "mcqs", ["created_by_user_id"], unique=False)

    op.create_table(
        "mcq_choices",
        sa.Column("id", sa.String(32), nullable=False),
        sa.Column("mcq_id", sa.String(32), nullable=False),
        sa.Column("choice_text", sa.Text(), nullable=False),
        sa.Column("is_correct", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("is_correct IN (0, 1)", name="ck_mcq_choices_is_correct"),
        sa.ForeignKeyConstraint(["mcq_id"], ["mcqs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_mcq_choices_mcq_id"), "mcq_choices", ["mcq_id"], unique=False)

    op.create_table(
        "mcq_attempts",
        sa.Column("id", sa.String(32), nullable=False),
        sa.Column("mcq_id", sa.String(32), nullable=False),
        sa.Column("user_id", sa.String(32), nullable=False),
        sa.Column("selected_choice_id", sa.String(32), nullable=False),
        sa.Column("is_correct", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("attempted_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("is_correct IN (0, 1)", name="ck_mcq_attempts_is_correct"),
        sa.ForeignKeyConstraint(["mcq_id"], ["mcqs.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["selected_choice_id"], ["mcq_choices.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_mcq_attempts_mcq_id"), "mcq_attempts", ["mcq_id"], unique=False)
    op.create_index(op.f("ix_mcq_attempts_user_id"), "mcq_attempts", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_mcq_attempts_user_id"), table_name="mcq_attempts")
    op.drop_index(op.f("ix_mcq_attempts_mcq_id"), table_name="mcq_attempts")
    op.drop_table("mcq_attempts")
    op.drop_index(op.f("ix_mcq_choices_mcq_id"), table_name="mcq_choices")
    op.drop_table("mcq_choices")
    op.drop_index(op.f("ix_mcqs_created_by_user_id"), table_name="mcqs")
    op.drop_table("mcqs")
