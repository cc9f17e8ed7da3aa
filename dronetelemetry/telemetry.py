"""Telemetry model: one drone, a movement strategy and a periodic update timer."""

from __future__ import annotations

import threading
from typing import Optional

from .drone import Drone, Signal
from .factory import create_drone
from .logger import get_logger
from .strategies import HoverStrategy, MovementStrategy

__all__ = ["TelemetryModel", "DEFAULT_INTERVAL", "DEFAULT_DRONE_ID"]

DEFAULT_INTERVAL = 0.5
DEFAULT_DRONE_ID = "DRONE-001"


class TelemetryModel:
    """Holds the simulated drone and advances it every ``interval`` seconds while running.

    Observers connect to the signals ``telemetry_updated``, ``simulation_started``,
    ``simulation_stopped``, ``failure_simulation_toggled`` (with a bool) and
    ``strategy_changed`` (with the strategy name).
    """

    def __init__(self, interval: float = DEFAULT_INTERVAL) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")
        self.telemetry_updated = Signal()
        self.simulation_started = Signal()
        self.simulation_stopped = Signal()
        self.failure_simulation_toggled = Signal()
        self.strategy_changed = Signal()

        self._interval = float(interval)
        self._lock = threading.RLock()
        self._timer_thread: Optional[threading.Thread] = None
        self._timer_stop: Optional[threading.Event] = None
        self._failure_simulation_active = False
        self._drone: Optional[Drone] = None
        self._current_strategy: Optional[MovementStrategy] = None

        get_logger().debug("TelemetryModel created")
        self.set_drone(create_drone(DEFAULT_DRONE_ID))
        self.set_movement_strategy(HoverStrategy())
        get_logger().info("TelemetryModel initialized with default drone and hover strategy")

    @property
    def interval(self) -> float:
        """Seconds between simulation steps."""
        return self._interval

    @property
    def drone(self) -> Optional[Drone]:
        return self._drone

    @property
    def current_strategy(self) -> Optional[MovementStrategy]:
        return self._current_strategy

    @property
    def is_simulation_running(self) -> bool:
        thread = self._timer_thread
        return thread is not None and thread.is_alive()

    @property
    def failure_simulation_active(self) -> bool:
        return self._failure_simulation_active

    def set_drone(self, drone: Optional[Drone]) -> None:
        """Replace the simulated drone, moving the observer connection to the new one."""
        if drone is self._drone:
            return
        if self._drone is not None:
            self._drone.telemetry_updated.disconnect(self._on_drone_telemetry_updated)
        self._drone = drone
        if drone is not None:
            drone.telemetry_updated.connect(self._on_drone_telemetry_updated)
            get_logger().info(f"Drone changed to: {drone.id}")

    def set_movement_strategy(self, strategy: Optional[MovementStrategy]) -> None:
        """Use ``strategy`` for subsequent steps and announce its name."""
        if strategy is self._current_strategy:
            return
        self._current_strategy = strategy
        if strategy is not None:
            strategy.strategy_changed.connect(self.strategy_changed.emit)
            get_logger().info(f"Movement strategy changed to: {strategy.name}")
            self.strategy_changed.emit(strategy.name)

    def start_simulation(self) -> None:
        """Start periodic updates; does nothing if already running."""
        with self._lock:
            if self.is_simulation_running:
                return
            stop = threading.Event()
            thread = threading.Thread(
                target=self._run_timer, args=(stop,), name="telemetry-timer", daemon=True
            )
            self._timer_stop = stop
            self._timer_thread = thread
            thread.start()
        get_logger().info("Simulation started")
        self.simulation_started.emit()

    def stop_simulation(self) -> None:
        """Stop periodic updates; does nothing if not running."""
        with self._lock:
            thread, stop = self._timer_thread, self._timer_stop
            if thread is None or stop is None or not thread.is_alive():
                return
            stop.set()
            self._timer_thread = None
            self._timer_stop = None
        if thread is not threading.current_thread():
            thread.join()
        get_logger().info("Simulation stopped")
        self.simulation_stopped.emit()

    def toggle_failure_simulation(self) -> None:
        """Switch failure simulation on or off and apply it to the drone."""
        with self._lock:
            self._failure_simulation_active = not self._failure_simulation_active
            active = self._failure_simulation_active
            if self._drone is not None:
                if active:
                    self._drone.simulate_failure()
                else:
                    self._drone.reset_failure()
        get_logger().info(f"Failure simulation {'activated' if active else 'deactivated'}")
        self.failure_simulation_toggled.emit(active)

    def update_telemetry(self) -> None:
        """Advance one step: move the drone, drain its battery and notify observers."""
        with self._lock:
            drone, strategy = self._drone, self._current_strategy
            if drone is None or strategy is None:
                return
            strategy.update_position(drone)
            drone.drain_battery()
        self.telemetry_updated.emit()

    def close(self) -> None:
        """Stop the simulation and release the timer thread."""
        self.stop_simulation()
        get_logger().debug("TelemetryModel destroyed")

    def __enter__(self) -> "TelemetryModel":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _run_timer(self, stop: threading.Event) -> None:
        while not stop.wait(self._interval):
            self.update_telemetry()

    def _on_drone_telemetry_updated(self) -> None:
        self.telemetry_updated.emit()