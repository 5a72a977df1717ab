import uuid
from datetime import datetime
from pydantic import BaseModel

class TemplateRead(BaseModel):
    id: uuid.UUID
    name: str
    category: str | None = None
    equipment_required: str | None = None
    description: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
