# app/models/users.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# Request bodies are deliberately permissive: numbers are taken as strings,
# and missing fields reach the database and fail there as a storage error.
class RegisterIn(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    email: Optional[str] = None

    class Config:
        coerce_numbers_to_str = True


class LoginIn(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

    class Config:
        coerce_numbers_to_str = True


class AccountSummary(BaseModel):
    id: int
    username: str
    email: Optional[str] = None

    class Config:
        from_attributes = True


class AccountResponse(BaseModel):
    message: str
    user: AccountSummary


class AccountRecord(BaseModel):
    id: int
    username: str
    password: str
    email: Optional[str] = None
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    class Config:
        from_attributes = True
