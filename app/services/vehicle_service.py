# app/services/vehicle_service.py
"""
Vehicle lifecycle: entry, detail updates, exit and removal.

Rules enforced here:
  - model, color, plate and owner_name are required (blank counts as missing)
  - a plate may belong to at most one record in the store; an update that
    keeps the vehicle's own plate is always allowed
  - entry_time is stamped once at registration and never touched again
  - exit_time is stamped by register_exit; a repeated exit overwrites it
    unless the caller asks for the strict policy

All timestamps are UTC. Errors propagate to the caller unchanged.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from app.exceptions import DuplicatePlate, NotFound, ValidationFailed, VehicleAlreadyExited
from app.models.vehicle import PLATE_MAX_LENGTH, Vehicle
from app.repositories.vehicle_repository import DEPARTED, PARKED, VehicleRepository
from app.utils.logger import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = {
    "model": "Model is required",
    "color": "Color is required",
    "plate": "Plate is required",
    "owner_name": "Owner name is required",
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_vehicle_fields(data: Dict[str, Optional[str]]) -> Dict[str, str]:
    """Return the cleaned field values or raise ValidationFailed naming every bad field."""
    errors = {}
    cleaned = {}
    for field, message in REQUIRED_FIELDS.items():
        value = data.get(field)
        if value is None or not str(value).strip():
            errors[field] = message
        else:
            cleaned[field] = value

    plate = cleaned.get("plate")
    if plate is not None and len(plate) > PLATE_MAX_LENGTH:
        errors["plate"] = f"Plate must be at most {PLATE_MAX_LENGTH} characters"

    if errors:
        raise ValidationFailed(errors)
    return cleaned


def new_vehicle(data: Dict[str, Optional[str]]) -> Vehicle:
    """Build an unsaved Vehicle with entry_time stamped now."""
    fields = validate_vehicle_fields(data)
    return Vehicle(entry_time=utcnow(), exit_time=None, **fields)


def list_vehicles(repo: VehicleRepository, status: Optional[str] = None) -> List[Vehicle]:
    """All vehicles in the store. status='parked'/'departed' narrows the list."""
    return repo.find_all(status)


def get_vehicle(repo: VehicleRepository, vehicle_id: int) -> Vehicle:
    vehicle = repo.find_by_id(vehicle_id)
    if vehicle is None:
        raise NotFound(f"Vehicle not found with id: {vehicle_id}")
    return vehicle


def get_vehicle_by_plate(repo: VehicleRepository, plate: str) -> Vehicle:
    vehicle = repo.find_by_plate(plate)
    if vehicle is None:
        raise NotFound(f"Vehicle not found with plate: {plate}")
    return vehicle


def register_entry(repo: VehicleRepository, data: Dict[str, Optional[str]]) -> Vehicle:
    """Register a vehicle arriving at the facility."""
    vehicle = new_vehicle(data)
    if repo.exists_by_plate(vehicle.plate):
        raise DuplicatePlate(vehicle.plate)

    # A concurrent entry for the same plate is caught by the unique constraint in save()
    vehicle = repo.save(vehicle)
    logger.info(f"[ENTRY] id={vehicle.id} plate={vehicle.plate} owner={vehicle.owner_name}")
    return vehicle


def update_vehicle(repo: VehicleRepository, vehicle_id: int, data: Dict[str, Optional[str]]) -> Vehicle:
    """Overwrite model, color, plate and owner_name. Timestamps are left alone."""
    fields = validate_vehicle_fields(data)
    vehicle = get_vehicle(repo, vehicle_id)

    if fields["plate"] != vehicle.plate and repo.exists_by_plate(fields["plate"]):
        raise DuplicatePlate(fields["plate"])

    vehicle.model = fields["model"]
    vehicle.color = fields["color"]
    vehicle.plate = fields["plate"]
    vehicle.owner_name = fields["owner_name"]

    vehicle = repo.save(vehicle)
    logger.info(f"[UPDATE] id={vehicle.id} plate={vehicle.plate}")
    return vehicle


def register_exit(repo: VehicleRepository, vehicle_id: int, reject_if_departed: bool = False) -> Vehicle:
    """Stamp exit_time. With reject_if_departed, a second exit raises VehicleAlreadyExited."""
    vehicle = get_vehicle(repo, vehicle_id)

    if vehicle.exit_time is not None:
        if reject_if_departed:
            raise VehicleAlreadyExited(vehicle_id)
        logger.warning(f"[EXIT] id={vehicle_id} already exited at {vehicle.exit_time}, overwriting")

    vehicle.exit_time = utcnow()
    vehicle = repo.save(vehicle)
    logger.info(f"[EXIT] id={vehicle.id} plate={vehicle.plate}")
    return vehicle


def delete_vehicle(repo: VehicleRepository, vehicle_id: int) -> None:
    vehicle = get_vehicle(repo, vehicle_id)
    repo.delete(vehicle)
    logger.info(f"[DELETE] id={vehicle_id}")


def parking_stats(repo: VehicleRepository) -> Dict[str, int]:
    """Counts of all, currently parked and departed vehicles."""
    return {
        "total": repo.count(),
        "parked": repo.count(PARKED),
        "departed": repo.count(DEPARTED),
    }
