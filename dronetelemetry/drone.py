"""Drone telemetry state and a minimal signal mechanism for observers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, List

from .logger import get_logger

__all__ = ["Signal", "GPSFixStatus", "Drone"]

DEFAULT_LATITUDE = 28.6139
DEFAULT_LONGITUDE = 77.2090
DEFAULT_ALTITUDE = 100.0
LOW_BATTERY_THRESHOLD = 20


class Signal:
    """A list of callbacks invoked in connection order on :meth:`emit`."""

    def __init__(self) -> None:
        self._slots: List[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Remove ``slot``; disconnecting a slot that is not connected does nothing."""
        if slot in self._slots:
            self._slots.remove(slot)

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)


class GPSFixStatus(Enum):
    """Quality of the GPS fix; the value is its display text."""

    NO_FIX = "No Fix"
    FIX_2D = "2D Fix"
    FIX_3D = "3D Fix"


class Drone:
    """A drone's telemetry; every change emits ``telemetry_updated``."""

    def __init__(self, drone_id: str) -> None:
        self.telemetry_updated = Signal()
        self.battery_low = Signal()
        self.gps_fix_lost = Signal()
        self.failure_simulated = Signal()
        self.failure_reset = Signal()

        self._id = drone_id
        self._latitude = DEFAULT_LATITUDE
        self._longitude = DEFAULT_LONGITUDE
        self._altitude = DEFAULT_ALTITUDE
        self._heading = 0.0
        self._speed = 0.0
        self._battery = 100
        self._gps_fix_status = GPSFixStatus.FIX_3D
        self._failure_mode = False

        get_logger().info(
            f"Drone {self._id} created with initial position: "
            f"lat={self._latitude:.6f}, lon={self._longitude:.6f}, alt={self._altitude:.1f}"
        )

    def _change(self, attr: str, value: float) -> None:
        if getattr(self, attr) != value:
            setattr(self, attr, value)
            self.telemetry_updated.emit()

    @property
    def id(self) -> str:
        return self._id

    @property
    def latitude(self) -> float:
        return self._latitude

    @latitude.setter
    def latitude(self, value: float) -> None:
        self._change("_latitude", value)

    @property
    def longitude(self) -> float:
        return self._longitude

    @longitude.setter
    def longitude(self, value: float) -> None:
        self._change("_longitude", value)

    @property
    def altitude(self) -> float:
        return self._altitude

    @altitude.setter
    def altitude(self, value: float) -> None:
        self._change("_altitude", value)

    @property
    def heading(self) -> float:
        return self._heading

    @heading.setter
    def heading(self, value: float) -> None:
        self._change("_heading", value)

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        self._change("_speed", value)

    @property
    def battery(self) -> int:
        """Battery charge in percent, kept within 0..100."""
        return self._battery

    @battery.setter
    def battery(self, value: int) -> None:
        value = int(value)
        if value == self._battery:
            return
        old = self._battery
        self._battery = max(0, min(100, value))
        if self._battery <= LOW_BATTERY_THRESHOLD < old:
            self.battery_low.emit(self._battery)
            get_logger().warning(f"Drone {self._id} battery low: {self._battery}%")
        self.telemetry_updated.emit()

    @property
    def gps_fix_status(self) -> GPSFixStatus:
        return self._gps_fix_status

    @gps_fix_status.setter
    def gps_fix_status(self, status: GPSFixStatus) -> None:
        if status == self._gps_fix_status:
            return
        old = self._gps_fix_status
        self._gps_fix_status = status
        if old is not GPSFixStatus.NO_FIX and status is GPSFixStatus.NO_FIX:
            self.gps_fix_lost.emit()
            get_logger().warning(f"Drone {self._id} GPS fix lost")
        self.telemetry_updated.emit()

    @property
    def gps_fix_status_string(self) -> str:
        return self._gps_fix_status.value

    @property
    def failure_mode(self) -> bool:
        return self._failure_mode

    def drain_battery(self) -> None:
        """Use up 1% of charge, or 5% while in failure mode."""
        self.battery = self._battery - (5 if self._failure_mode else 1)

    def simulate_failure(self) -> None:
        """Enter failure mode: GPS fix is lost and the battery drains faster."""
        if self._failure_mode:
            return
        self._failure_mode = True
        self.gps_fix_status = GPSFixStatus.NO_FIX
        get_logger().warning(f"Drone {self._id} failure mode activated")
        self.failure_simulated.emit()

    def reset_failure(self) -> None:
        """Leave failure mode and restore a 3D fix."""
        if not self._failure_mode:
            return
        self._failure_mode = False
        self.gps_fix_status = GPSFixStatus.FIX_3D
        get_logger().info(f"Drone {self._id} failure mode reset")
        self.failure_reset.emit()