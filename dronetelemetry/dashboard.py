"""Text dashboard that observes a telemetry model and drives a simulator."""

from __future__ import annotations

import threading
from typing import List, Optional

from .drone import Signal
from .logger import get_logger
from .simulator import DroneSimulator
from .strategies import HoverStrategy, MovementStrategy, RandomWalkStrategy
from .telemetry import TelemetryModel

__all__ = ["Dashboard", "ABOUT_TEXT", "STRATEGY_NAMES"]

RED = "#DC3545"
YELLOW = "#FFC107"
GREEN = "#28A745"
GREY = "#6C757D"
CYAN = "#17A2B8"

STRATEGY_NAMES = ("Hover", "Random Walk")

ABOUT_TEXT = (
    "Drone Telemetry Simulator v1.0\n\n"
    "Simulates real-time drone telemetry data.\n\n"
    "Features:\n"
    "• Real-time telemetry display\n"
    "• Multiple movement strategies\n"
    "• Failure simulation\n"
    "• Multithreaded architecture"
)


class Dashboard:
    """Display state for one telemetry model, updated through its signals.

    Every field a window would show is kept as text (with a colour where the
    display is coloured).  Warnings are collected in ``warnings`` and announced
    through the ``warning_shown`` signal.
    """

    def __init__(
        self,
        model: Optional[TelemetryModel] = None,
        simulator: Optional[DroneSimulator] = None,
    ) -> None:
        self._lock = threading.RLock()
        self.warning_shown = Signal()
        self.warnings: List[str] = []

        self.drone_id_text = ""
        self.latitude_text = ""
        self.longitude_text = ""
        self.altitude_text = ""
        self.heading_text = ""
        self.speed_text = ""
        self.battery_value = 0
        self.battery_color = GREEN
        self.gps_fix_text = ""
        self.gps_fix_color = GREEN
        self.status_text = ""
        self.status_color = GREY
        self.start_stop_text = "Start Simulation"
        self.start_stop_style = ""
        self.failure_text = "Simulate Failure"
        self.failure_style = f"background-color: {RED}; color: white; font-weight: bold;"

        self.model = model if model is not None else TelemetryModel()
        self.simulator = simulator if simulator is not None else DroneSimulator()
        self.simulator.set_telemetry_model(self.model)
        self._setup_connections()

        self.update_telemetry_display()
        self.set_status_message("Ready")

    def _setup_connections(self) -> None:
        model = self.model
        model.telemetry_updated.connect(self.update_telemetry_display)
        model.simulation_started.connect(self._on_simulation_started)
        model.simulation_stopped.connect(self._on_simulation_stopped)
        model.failure_simulation_toggled.connect(self._on_failure_simulation_toggled)
        model.strategy_changed.connect(self._on_strategy_changed)
        drone = model.drone
        if drone is not None:
            drone.battery_low.connect(self._on_battery_low)
            drone.gps_fix_lost.connect(self._on_gps_fix_lost)

    # Observer callbacks

    def _on_simulation_started(self) -> None:
        with self._lock:
            self.start_stop_text = "Stop Simulation"
            self.start_stop_style = f"background-color: {RED}; color: white; font-weight: bold;"
            self.set_status_message("Simulation Running", GREEN)
        get_logger().info("Simulation started from UI")

    def _on_simulation_stopped(self) -> None:
        with self._lock:
            self.start_stop_text = "Start Simulation"
            self.start_stop_style = ""
            self.set_status_message("Simulation Stopped", GREY)
        get_logger().info("Simulation stopped from UI")

    def _on_failure_simulation_toggled(self, active: bool) -> None:
        with self._lock:
            if active:
                self.failure_text = "Reset Failure"
                self.failure_style = f"background-color: {YELLOW}; color: black; font-weight: bold;"
                self.set_status_message("Failure Mode Active", RED)
            else:
                self.failure_text = "Simulate Failure"
                self.failure_style = f"background-color: {RED}; color: white; font-weight: bold;"
                self.set_status_message("Normal Operation", GREEN)

    def _on_strategy_changed(self, strategy_name: str) -> None:
        self.set_status_message(f"Strategy: {strategy_name}", CYAN)

    def _on_battery_low(self, battery: int) -> None:
        self._show_warning(f"Warning: Drone battery is low ({battery}%)")
        self.set_status_message(f"Low Battery: {battery}%", YELLOW)

    def _on_gps_fix_lost(self) -> None:
        self._show_warning("Warning: GPS fix has been lost!")
        self.set_status_message("GPS Fix Lost", RED)

    def _show_warning(self, message: str) -> None:
        with self._lock:
            self.warnings.append(message)
        self.warning_shown.emit(message)

    # User actions

    def on_start_stop_clicked(self) -> None:
        """Stop the simulation if it runs, start it otherwise."""
        if self.simulator.is_simulation_running():
            self.simulator.stop_simulation()
        else:
            self.simulator.start_simulation()

    def on_failure_clicked(self) -> None:
        """Toggle failure simulation on the model."""
        self.model.toggle_failure_simulation()

    def on_strategy_selected(self, index: int) -> None:
        """Switch to strategy ``index`` of :data:`STRATEGY_NAMES`; other indices are ignored."""
        strategy: MovementStrategy
        if index == 0:
            strategy = HoverStrategy()
        elif index == 1:
            strategy = RandomWalkStrategy()
        else:
            get_logger().warning("Unknown strategy index selected")
            return
        self.model.set_movement_strategy(strategy)

    @property
    def about_text(self) -> str:
        return ABOUT_TEXT

    # Display

    def update_telemetry_display(self) -> None:
        """Refresh every telemetry field from the model's drone."""
        drone = self.model.drone
        if drone is None:
            return
        with self._lock:
            self.drone_id_text = drone.id
            self.latitude_text = f"{drone.latitude:.6f}"
            self.longitude_text = f"{drone.longitude:.6f}"
            self.altitude_text = f"{drone.altitude:.1f} m"
            self.heading_text = f"{drone.heading:.1f}°"
            self.speed_text = f"{drone.speed:.1f} m/s"

            battery = drone.battery
            self.battery_value = battery
            if battery <= 20:
                self.battery_color = RED
            elif battery <= 50:
                self.battery_color = YELLOW
            else:
                self.battery_color = GREEN

            gps_status = drone.gps_fix_status_string
            self.gps_fix_text = gps_status
            if gps_status == "No Fix":
                self.gps_fix_color = RED
            elif gps_status == "2D Fix":
                self.gps_fix_color = YELLOW
            else:
                self.gps_fix_color = GREEN

    def set_status_message(self, message: str, color: str = GREY) -> None:
        with self._lock:
            self.status_text = message
            self.status_color = color

    def render(self) -> str:
        """The dashboard as lines of text."""
        with self._lock:
            rows = [
                ("Drone ID", self.drone_id_text),
                ("Latitude", self.latitude_text),
                ("Longitude", self.longitude_text),
                ("Altitude", self.altitude_text),
                ("Heading", self.heading_text),
                ("Speed", self.speed_text),
                ("Battery", f"{self.battery_value}%"),
                ("GPS Fix", self.gps_fix_text),
                ("Status", self.status_text),
            ]
        return "\n".join(f"{label + ':':<11} {value}" for label, value in rows)

    def close(self) -> None:
        """Stop the simulation and release the simulator and model threads."""
        self.simulator.close()
        self.model.close()

    def __enter__(self) -> "Dashboard":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()