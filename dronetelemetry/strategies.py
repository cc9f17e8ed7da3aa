"""Movement strategies that advance a drone's telemetry by one step."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional

from .drone import Drone, Signal
from .logger import get_logger

__all__ = ["MovementStrategy", "HoverStrategy", "RandomWalkStrategy"]


class MovementStrategy(ABC):
    """Base class for a way of moving a drone."""

    name: str = ""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.strategy_changed = Signal()

    def _bounded(self, upper: int) -> int:
        """A random integer in ``[0, upper)``."""
        return self._rng.randrange(upper)

    @abstractmethod
    def update_position(self, drone: Optional[Drone]) -> None:
        """Move ``drone`` one step; ``None`` is ignored."""

    def __str__(self) -> str:
        return self.name


class HoverStrategy(MovementStrategy):
    """Near-stationary hovering with tiny drifts and a very low speed."""

    name = "Hover"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__(rng)
        get_logger().debug("HoverStrategy created")

    def update_position(self, drone: Optional[Drone]) -> None:
        if drone is None:
            return
        lat_change = (self._bounded(100) - 50) * 0.000001
        lon_change = (self._bounded(100) - 50) * 0.000001
        alt_change = (self._bounded(20) - 10) * 0.1

        drone.latitude = drone.latitude + lat_change
        drone.longitude = drone.longitude + lon_change
        drone.altitude = drone.altitude + alt_change

        drone.heading = drone.heading + (self._bounded(20) - 10) * 0.1
        drone.speed = self._bounded(5) * 0.1


class RandomWalkStrategy(MovementStrategy):
    """Larger random moves, heading kept within [0, 360), speed 5-19 m/s."""

    name = "Random Walk"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__(rng)
        get_logger().debug("RandomWalkStrategy created")

    def update_position(self, drone: Optional[Drone]) -> None:
        if drone is None:
            return
        lat_change = (self._bounded(200) - 100) * 0.00001
        lon_change = (self._bounded(200) - 100) * 0.00001
        alt_change = (self._bounded(50) - 25) * 0.5

        drone.latitude = drone.latitude + lat_change
        drone.longitude = drone.longitude + lon_change
        drone.altitude = drone.altitude + alt_change

        drone.heading = drone.heading + (self._bounded(60) - 30)
        while drone.heading >= 360.0:
            drone.heading = drone.heading - 360.0
        while drone.heading < 0.0:
            drone.heading = drone.heading + 360.0

        drone.speed = float(self._bounded(15) + 5)