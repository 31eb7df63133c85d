# app/repositories/vehicle_repository.py
"""
Vehicle record store: SQLAlchemy-backed persistence for the vehicles table.

Keyed by id with a secondary lookup by plate. The UNIQUE constraint on
vehicles.plate is the final arbiter of plate uniqueness: save() turns a
constraint violation into DuplicatePlate, so a caller that lost the
check-then-insert race sees the same error as one caught by the pre-check.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import is_unique_violation
from app.exceptions import DuplicatePlate
from app.models.vehicle import Vehicle

PARKED = "parked"
DEPARTED = "departed"


class VehicleRepository:
    def __init__(self, db: Session):
        self.db = db

    def _query(self, status: Optional[str] = None):
        q = self.db.query(Vehicle)
        if status == PARKED:
            q = q.filter(Vehicle.exit_time.is_(None))
        elif status == DEPARTED:
            q = q.filter(Vehicle.exit_time.isnot(None))
        return q

    def find_all(self, status: Optional[str] = None) -> List[Vehicle]:
        return self._query(status).order_by(Vehicle.id).all()

    def find_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        return self.db.get(Vehicle, vehicle_id)

    def find_by_plate(self, plate: str) -> Optional[Vehicle]:
        return self.db.query(Vehicle).filter(Vehicle.plate == plate).first()

    def exists_by_plate(self, plate: str) -> bool:
        return self.db.query(Vehicle.id).filter(Vehicle.plate == plate).first() is not None

    def count(self, status: Optional[str] = None) -> int:
        return self._query(status).with_entities(func.count(Vehicle.id)).scalar()

    def save(self, vehicle: Vehicle) -> Vehicle:
        """Insert or update a vehicle and commit. Assigns id on first save."""
        plate = vehicle.plate
        self.db.add(vehicle)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if is_unique_violation(exc, "uq_vehicles_plate", "vehicles.plate"):
                raise DuplicatePlate(plate) from exc
            raise
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(vehicle)
        return vehicle

    def delete(self, vehicle: Vehicle) -> None:
        self.db.delete(vehicle)
        self.db.commit()

    def delete_by_id(self, vehicle_id: int) -> None:
        vehicle = self.find_by_id(vehicle_id)
        if vehicle is not None:
            self.delete(vehicle)
