# app/routers/users.py
"""Operator account management."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.user import PasswordChange, UserIn, UserOut, UserUpdate
from app.services import user_service

router = APIRouter()


@router.get("/users", response_model=list[UserOut], summary="List users")
def list_users(db: Session = Depends(get_db)):
    return user_service.list_users(db)


@router.get("/users/{user_id}", response_model=UserOut, summary="Get a user")
def get_user(user_id: int, db: Session = Depends(get_db)):
    return user_service.get_user(db, user_id)


@router.post("/users", response_model=UserOut, status_code=201, summary="Create a user")
def create_user(body: UserIn, db: Session = Depends(get_db)):
    return user_service.create_user(db, body.username, body.password, body.role)


@router.put("/users/{user_id}", response_model=UserOut, summary="Update username / role")
def update_user(user_id: int, body: UserUpdate, db: Session = Depends(get_db)):
    return user_service.update_user(db, user_id, body.username, body.role)


@router.patch("/users/{user_id}/password", summary="Change a user's password")
def change_password(user_id: int, body: PasswordChange, db: Session = Depends(get_db)):
    user_service.change_password(db, user_id, body.old_password, body.new_password)
    return {"status": "password_changed", "id": user_id}


@router.delete("/users/{user_id}", status_code=204, summary="Delete a user")
def delete_user(user_id: int, db: Session = Depends(get_db)):
    user_service.delete_user(db, user_id)
