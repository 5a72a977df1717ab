import uuid
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, Uuid, func
from liftlog.db import Base
from liftlog.models.timestamps import TimestampMixin, utcnow

class Workout(TimestampMixin, Base):
    __tablename__ = "workouts"
    __table_args__ = (
        Index("workouts_user_date_idx", "user_id", "date"),
        Index("workouts_created_at_idx", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    duration_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)

    user = relationship("User", back_populates="workouts")
    # Children are removed by the FK cascade, not by the ORM
    exercises = relationship(
        "Exercise",
        back_populates="workout",
        order_by="Exercise.order_in_workout",
        passive_deletes=True,
    )
