# app/schemas/user.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class UserIn(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    role: str = "USER"          # USER | ADMIN


class UserUpdate(BaseModel):
    username: Optional[str] = None
    role: str = "USER"


class PasswordChange(BaseModel):
    old_password: Optional[str] = None
    new_password: Optional[str] = None


class UserOut(BaseModel):
    id: int
    username: str
    role: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    id: int
    username: str
    role: str
    message: str
