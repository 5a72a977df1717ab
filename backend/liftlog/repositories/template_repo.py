from __future__ import annotations
import uuid
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from liftlog.models import ExerciseTemplate
from liftlog.repositories.base import BaseRepository

class ExerciseTemplateRepository(BaseRepository[ExerciseTemplate]):
    """Reference data; not user-scoped."""
    model = ExerciseTemplate

    def get(self, template_id: uuid.UUID) -> Optional[ExerciseTemplate]:
        return self.db.get(ExerciseTemplate, template_id)

    def get_by_name(self, name: str) -> Optional[ExerciseTemplate]:
        stmt = select(ExerciseTemplate).where(ExerciseTemplate.name == name)
        return self.db.execute(stmt).scalar_one_or_none()

    def list(self, *, category: str | None = None) -> list[ExerciseTemplate]:
        stmt = select(ExerciseTemplate).order_by(ExerciseTemplate.name.asc())
        if category:
            stmt = stmt.where(ExerciseTemplate.category == category)
        return list(self.db.execute(stmt).scalars().all())

    def create(
        self,
        *,
        name: str,
        category: str | None = None,
        equipment_required: str | None = None,
        description: str | None = None,
    ) -> ExerciseTemplate:
        tpl = ExerciseTemplate(
            name=name, category=category, equipment_required=equipment_required, description=description
        )
        try:
            return self.add_and_commit(tpl)
        except IntegrityError:
            self.db.rollback()
            raise ValueError("template_name_exists")

    def delete(self, template_id: uuid.UUID) -> bool:
        """Exercises pointing at the template keep existing with template_id NULL."""
        result = self.db.execute(delete(ExerciseTemplate).where(ExerciseTemplate.id == template_id))
        self.db.commit()
        return result.rowcount > 0
