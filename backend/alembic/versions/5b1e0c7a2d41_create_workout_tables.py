"""create users/workouts/exercise_templates/exercises/sets

Revision ID: 5b1e0c7a2d41
Revises:
Create Date: 2025-01-14 18:02:11.406213

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1e0c7a2d41'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    ]


def upgrade() -> None:
    # 1) users
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    # 2) workouts (owned by users)
    op.create_table(
        'workouts',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_workouts_user_id', 'workouts', ['user_id'])
    op.create_index('workouts_user_date_idx', 'workouts', ['user_id', 'date'])
    op.create_index('workouts_created_at_idx', 'workouts', ['created_at'])

    # 3) exercise_templates (reference data)
    op.create_table(
        'exercise_templates',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=True),
        sa.Column('equipment_required', sa.String(length=255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_exercise_templates_name', 'exercise_templates', ['name'], unique=True)
    op.create_index('ix_exercise_templates_category', 'exercise_templates', ['category'])

    # 4) exercises
    op.create_table(
        'exercises',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('workout_id', sa.Uuid(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('template_id', sa.Uuid(), sa.ForeignKey('exercise_templates.id', ondelete='SET NULL'), nullable=True),
        sa.Column('exercise_name', sa.String(length=255), nullable=False),
        sa.Column('exercise_type', sa.String(length=100), nullable=True),
        sa.Column('order_in_workout', sa.Integer(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_exercises_workout_id', 'exercises', ['workout_id'])
    op.create_index('exercises_workout_order_idx', 'exercises', ['workout_id', 'order_in_workout'])
    op.create_index('ix_exercises_exercise_name', 'exercises', ['exercise_name'])
    op.create_index('ix_exercises_template_id', 'exercises', ['template_id'])

    # 5) sets
    op.create_table(
        'sets',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('exercise_id', sa.Uuid(), sa.ForeignKey('exercises.id', ondelete='CASCADE'), nullable=False),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('weight_kg', sa.Numeric(6, 2), nullable=True),
        sa.Column('rpe', sa.Numeric(3, 1), nullable=True),
        sa.Column('rest_seconds', sa.Integer(), nullable=True),
        sa.Column('is_warmup', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('is_failure', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_sets_exercise_id', 'sets', ['exercise_id'])
    op.create_index('sets_exercise_set_idx', 'sets', ['exercise_id', 'set_number'])


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('sets')
    op.drop_table('exercises')
    op.drop_table('exercise_templates')
    op.drop_table('workouts')
    op.drop_table('users')
