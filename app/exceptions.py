# app/exceptions.py
"""
Domain exception hierarchy.
Raised by the services, mapped to HTTP responses by the handlers in app/main.py.
"""

from __future__ import annotations


class ParkingError(Exception):
    """Base exception for all parking API errors."""


class NotFound(ParkingError):
    """Requested vehicle or user does not exist."""


class DuplicatePlate(ParkingError):
    """Another vehicle in the store already uses this plate."""

    def __init__(self, plate: str) -> None:
        self.plate = plate
        super().__init__(f"A vehicle with plate {plate} is already registered")


class ValidationFailed(ParkingError):
    """One or more input fields are missing or invalid.

    ``errors`` maps each offending field name to a human-readable message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Validation failed for: {fields}")


class VehicleAlreadyExited(ParkingError):
    """Exit requested for a vehicle that already has an exit time."""

    def __init__(self, vehicle_id: int) -> None:
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle {vehicle_id} has already exited")


class DuplicateUsername(ParkingError):
    """Username is taken by another account."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username {username} already exists")


class AuthenticationFailed(ParkingError):
    """Unknown username or wrong password."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password")
