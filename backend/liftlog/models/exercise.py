import uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import ForeignKey, Index, Integer, String, Text, Uuid
from liftlog.db import Base
from liftlog.models.timestamps import TimestampMixin

class Exercise(TimestampMixin, Base):
    __tablename__ = "exercises"
    __table_args__ = (
        Index("exercises_workout_order_idx", "workout_id", "order_in_workout"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    workout_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    template_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("exercise_templates.id", ondelete="SET NULL"), nullable=True, index=True
    )
    exercise_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    exercise_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # Sort key only; duplicates and gaps are allowed
    order_in_workout: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    workout = relationship("Workout", back_populates="exercises")
    template = relationship("ExerciseTemplate", back_populates="exercises")
    sets = relationship(
        "WorkoutSet",
        back_populates="exercise",
        order_by="WorkoutSet.set_number",
        passive_deletes=True,
    )
