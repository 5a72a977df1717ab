import uuid
from decimal import Decimal
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Boolean, ForeignKey, Index, Integer, Numeric, Text, Uuid, false
from liftlog.db import Base
from liftlog.models.timestamps import TimestampMixin

class WorkoutSet(TimestampMixin, Base):
    __tablename__ = "sets"
    __table_args__ = (
        Index("sets_exercise_set_idx", "exercise_id", "set_number"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False, index=True
    )
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight_kg: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)
    # RPE 1.0-10.0 by convention; range is not enforced here
    rpe: Mapped[Decimal | None] = mapped_column(Numeric(3, 1), nullable=True)
    rest_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_warmup: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    is_failure: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    exercise = relationship("Exercise", back_populates="sets")
