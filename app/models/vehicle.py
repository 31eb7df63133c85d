# app/models/vehicle.py
"""
Vehicles table, one row per vehicle currently tracked by the facility.
The plate column carries a UNIQUE constraint so that two concurrent entries
for the same plate cannot both be committed.
"""

from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint
from app.database import Base

PLATE_MAX_LENGTH = 10


class Vehicle(Base):
    __tablename__ = "vehicles"
    __table_args__ = (UniqueConstraint("plate", name="uq_vehicles_plate"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    model = Column(String(100), nullable=False)
    color = Column(String(50), nullable=False)
    plate = Column(String(PLATE_MAX_LENGTH), nullable=False)
    owner_name = Column(String(200), nullable=False)
    entry_time = Column(DateTime(timezone=True), nullable=False)
    exit_time = Column(DateTime(timezone=True))

    @property
    def is_parked(self) -> bool:
        return self.exit_time is None

    def __repr__(self):
        return f"<Vehicle {self.id} plate={self.plate} parked={self.is_parked}>"
