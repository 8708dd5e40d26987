# api/schemas/user.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

class UserBase(BaseModel):
    email: str

class User(UserBase):
    id: int
    
    model_config = ConfigDict(from_attributes=True)

class Credentials(UserBase):
    password: str = Field(min_length=1)

    @field_validator('email')
    @classmethod
    def email_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Email must not be empty")
        return value

class AuthResponse(BaseModel):
    message: Optional[str] = None
    user: User

class MessageResponse(BaseModel):
    message: str
