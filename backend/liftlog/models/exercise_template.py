import uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Text, Uuid
from liftlog.db import Base
from liftlog.models.timestamps import TimestampMixin

class ExerciseTemplate(TimestampMixin, Base):
    __tablename__ = "exercise_templates"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), index=True, nullable=True)
    equipment_required: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    exercises = relationship("Exercise", back_populates="template", passive_deletes=True)
