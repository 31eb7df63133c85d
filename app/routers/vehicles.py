# app/routers/vehicles.py
"""Vehicle entry/exit registry: CRUD plus the exit action."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.repositories.vehicle_repository import VehicleRepository
from app.schemas.vehicle import ParkingStatsOut, VehicleIn, VehicleOut
from app.services import vehicle_service

router = APIRouter()


def get_vehicle_repository(db: Session = Depends(get_db)) -> VehicleRepository:
    return VehicleRepository(db)


@router.get("/vehicles", response_model=list[VehicleOut], summary="List vehicles")
def list_vehicles(
    status: Optional[Literal["parked", "departed"]] = None,
    repo: VehicleRepository = Depends(get_vehicle_repository),
):
    """All tracked vehicles. Filter with status=parked or status=departed."""
    return vehicle_service.list_vehicles(repo, status)


@router.get("/vehicles/stats", response_model=ParkingStatsOut, summary="Parked / departed counts")
def get_stats(repo: VehicleRepository = Depends(get_vehicle_repository)):
    return vehicle_service.parking_stats(repo)


@router.get("/vehicles/plate/{plate}", response_model=VehicleOut, summary="Look up a vehicle by plate")
def get_vehicle_by_plate(plate: str, repo: VehicleRepository = Depends(get_vehicle_repository)):
    return vehicle_service.get_vehicle_by_plate(repo, plate)


@router.get("/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Get a vehicle")
def get_vehicle(vehicle_id: int, repo: VehicleRepository = Depends(get_vehicle_repository)):
    return vehicle_service.get_vehicle(repo, vehicle_id)


@router.post("/vehicles", response_model=VehicleOut, status_code=201,
             summary="Register a vehicle entry")
def register_entry(body: VehicleIn, repo: VehicleRepository = Depends(get_vehicle_repository)):
    return vehicle_service.register_entry(repo, body.model_dump())


@router.put("/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Update vehicle details")
def update_vehicle(vehicle_id: int, body: VehicleIn, repo: VehicleRepository = Depends(get_vehicle_repository)):
    return vehicle_service.update_vehicle(repo, vehicle_id, body.model_dump())


@router.patch("/vehicles/{vehicle_id}/exit", response_model=VehicleOut, summary="Register a vehicle exit")
def register_exit(vehicle_id: int, repo: VehicleRepository = Depends(get_vehicle_repository)):
    return vehicle_service.register_exit(repo, vehicle_id, reject_if_departed=settings.REJECT_REPEATED_EXIT)


@router.delete("/vehicles/{vehicle_id}", status_code=204, summary="Remove a vehicle")
def delete_vehicle(vehicle_id: int, repo: VehicleRepository = Depends(get_vehicle_repository)):
    vehicle_service.delete_vehicle(repo, vehicle_id)
