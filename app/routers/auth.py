# app/routers/auth.py
"""Login: verifies credentials and returns the user's identity and role. No tokens are issued."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.user import LoginRequest, LoginResponse
from app.services.user_service import authenticate

router = APIRouter()


@router.post("/auth/login", response_model=LoginResponse, summary="Log in")
def login(body: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate(db, body.username, body.password)
    return LoginResponse(id=user.id, username=user.username, role=user.role, message="Login successful")
