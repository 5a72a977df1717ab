import uuid
from typing import Annotated
from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator, model_validator
from datetime import datetime

UsernameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=100)]

class UserBase(BaseModel):
    email: EmailStr = Field(max_length=255)
    username: UsernameStr

class UserRegister(UserBase):
    # no regex here: Pydantic v2 core regex doesn't support look-arounds
    password: Annotated[str, Field(min_length=12, max_length=72)]

    @field_validator("password")
    @classmethod
    def password_policy(cls, v: str) -> str:
        if not any(c.islower() for c in v):
            raise ValueError("password must include a lowercase letter")
        if not any(c.isupper() for c in v):
            raise ValueError("password must include an uppercase letter")
        if not any(c.isdigit() for c in v):
            raise ValueError("password must include a digit")
        if not any(not c.isalnum() for c in v):
            raise ValueError("password must include a special character")
        return v

class UserLogin(BaseModel):
    # either identifier works; username is what the old login form sent
    username: str | None = None
    email: EmailStr | None = None
    password: Annotated[str, Field(min_length=1, max_length=256)]

    @model_validator(mode="after")
    def one_identifier(self):
        if not self.username and not self.email:
            raise ValueError("username or email is required")
        return self

class UserRead(UserBase):
    id: uuid.UUID
    created_at: datetime
    model_config = {"from_attributes": True}
