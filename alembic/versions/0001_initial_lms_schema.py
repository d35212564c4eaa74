"""Initial LMS schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column('id', sa.String(), primary_key=True)


def _indexed(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(name, sa.String(), nullable=nullable, index=True)


def upgrade() -> None:
    """Create every LMS table. References are plain indexed columns, not foreign keys."""
    op.create_table(
        'users',
        _id_column(),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        _indexed('role'),
        sa.Column('email_verified', sa.Boolean(), nullable=False),
        sa.Column('auth_provider', sa.String(), nullable=False),
        sa.Column('google_id', sa.String(), nullable=True, unique=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'courses',
        _id_column(),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        _indexed('teacher_id'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        'enrollments',
        _id_column(),
        _indexed('student_id'),
        _indexed('course_id'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint('student_id', 'course_id', name='uq_enrollment_student_course'),
    )

    op.create_table(
        'lectures',
        _id_column(),
        _indexed('course_id'),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('video_url', sa.String(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
    )

    op.create_table(
        'watchtimes',
        _id_column(),
        _indexed('student_id'),
        _indexed('lecture_id'),
        sa.Column('position_seconds', sa.Float(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint('student_id', 'lecture_id', name='uq_watchtime_student_lecture'),
    )

    op.create_table(
        'progress',
        _id_column(),
        _indexed('student_id'),
        _indexed('course_id'),
        _indexed('lecture_id'),
        sa.Column('completed', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        'tests',
        _id_column(),
        sa.Column('title', sa.String(), nullable=False),
        _indexed('course_id'),
        _indexed('created_by'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        'questions',
        _id_column(),
        _indexed('test_id'),
        sa.Column('question_text', sa.String(), nullable=False),
        sa.Column('options', sa.JSON(), nullable=False),
        sa.Column('correct_answer', sa.String(), nullable=False),
    )

    op.create_table(
        'testresults',
        _id_column(),
        _indexed('test_id'),
        _indexed('student_id'),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.Column('answers', sa.JSON(), nullable=False),
        sa.Column('submitted_at', sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        'assignments',
        _id_column(),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        _indexed('course_id'),
        _indexed('created_by'),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        'assignmentsubmissions',
        _id_column(),
        _indexed('assignment_id'),
        _indexed('student_id'),
        sa.Column('answer_text', sa.String(), nullable=False),
        sa.Column('marks', sa.Float(), nullable=True),
        sa.Column('feedback', sa.String(), nullable=True),
        _indexed('status'),
        sa.Column('submitted_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('evaluated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('graded_at', sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint('assignment_id', 'student_id', name='uq_submission_assignment_student'),
    )


def downgrade() -> None:
    """Drop every LMS table."""
    for table in (
        'assignmentsubmissions', 'assignments', 'testresults', 'questions', 'tests',
        'progress', 'watchtimes', 'lectures', 'enrollments', 'courses',
    ):
        op.drop_table(table)
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
