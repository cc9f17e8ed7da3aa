"""Creation of drones, optionally at a given position."""

from __future__ import annotations

from typing import Optional

from .drone import Drone
from .logger import get_logger

__all__ = ["create_drone"]


def create_drone(
    drone_id: str,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    altitude: Optional[float] = None,
) -> Drone:
    """Create a drone at its default position, or at the one given.

    The position must be given whole (latitude, longitude and altitude) or not at all.
    """
    position = (latitude, longitude, altitude)
    if all(value is None for value in position):
        get_logger().info(f"Creating drone with ID: {drone_id}")
        return Drone(drone_id)
    if any(value is None for value in position):
        raise TypeError("latitude, longitude and altitude must be given together")

    get_logger().info(
        f"Creating drone with ID: {drone_id} at position "
        f"lat={latitude:.6f}, lon={longitude:.6f}, alt={altitude:.1f}"
    )
    drone = Drone(drone_id)
    drone.latitude = latitude
    drone.longitude = longitude
    drone.altitude = altitude
    return drone