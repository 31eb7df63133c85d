# app/models/user.py
"""
Users table: operator accounts for the parking dashboard.
Passwords are stored only as salted PBKDF2 hashes (see app/utils/security.py).
"""

from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint
from app.database import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("username", name="uq_users_username"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), default="USER", nullable=False)   # USER | ADMIN
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<User {self.username} role={self.role}>"
