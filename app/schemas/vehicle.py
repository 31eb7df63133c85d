# app/schemas/vehicle.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class VehicleIn(BaseModel):
    """Body of POST /vehicles and PUT /vehicles/{id}.

    Fields are optional here so the service can report every missing field at once.
    """
    model: Optional[str] = None
    color: Optional[str] = None
    plate: Optional[str] = None
    owner_name: Optional[str] = None


class VehicleOut(BaseModel):
    id: int
    model: str
    color: str
    plate: str
    owner_name: str
    entry_time: datetime
    exit_time: Optional[datetime]
    is_parked: bool

    class Config:
        from_attributes = True


class ParkingStatsOut(BaseModel):
    total: int
    parked: int
    departed: int
