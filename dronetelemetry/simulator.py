"""Lifecycle management of the simulation: a worker thread and the telemetry model."""

from __future__ import annotations

import threading
from typing import Optional

from .drone import Signal
from .logger import get_logger
from .telemetry import TelemetryModel

__all__ = ["DroneSimulator"]


class DroneSimulator:
    """Starts and stops simulation of a :class:`TelemetryModel`.

    A worker thread is kept alive from the first start until :meth:`close`;
    the model's own timer does the actual stepping.  Signals:
    ``simulation_started``, ``simulation_stopped`` and ``error`` (with a message).
    """

    def __init__(self) -> None:
        self.simulation_started = Signal()
        self.simulation_stopped = Signal()
        self.error = Signal()

        self._lock = threading.RLock()
        self._telemetry_model: Optional[TelemetryModel] = None
        self._running = False
        self._worker: Optional[threading.Thread] = None
        self._quit = threading.Event()
        get_logger().debug("DroneSimulator created")

    @property
    def telemetry_model(self) -> Optional[TelemetryModel]:
        return self._telemetry_model

    def start_simulation(self) -> None:
        """Start the worker thread (if needed) and the model's simulation."""
        with self._lock:
            if self._running:
                return
            self._running = True
            self._ensure_worker()
            if self._telemetry_model is not None:
                self._telemetry_model.start_simulation()
            get_logger().info("DroneSimulator simulation started")
            self.simulation_started.emit()

    def stop_simulation(self) -> None:
        """Stop the model's simulation; the worker thread stays alive."""
        with self._lock:
            if not self._running:
                return
            self._running = False
            if self._telemetry_model is not None:
                self._telemetry_model.stop_simulation()
            get_logger().info("DroneSimulator simulation stopped")
            self.simulation_stopped.emit()

    def is_simulation_running(self) -> bool:
        """Whether a simulation was started and its worker thread is alive."""
        with self._lock:
            return self._running and self._worker is not None and self._worker.is_alive()

    def set_telemetry_model(self, model: Optional[TelemetryModel]) -> None:
        """Manage ``model`` from now on."""
        with self._lock:
            if model is self._telemetry_model:
                return
            if self._telemetry_model is not None:
                self._telemetry_model.telemetry_updated.disconnect(self._on_model_telemetry_updated)
            self._telemetry_model = model
            if model is not None:
                model.telemetry_updated.connect(self._on_model_telemetry_updated)
                get_logger().info("TelemetryModel set in DroneSimulator")

    def close(self) -> None:
        """Stop the simulation and end the worker thread."""
        self.stop_simulation()
        with self._lock:
            worker = self._worker
            self._quit.set()
        if worker is not None and worker.is_alive() and worker is not threading.current_thread():
            worker.join()
        get_logger().debug("DroneSimulator destroyed")

    def __enter__(self) -> "DroneSimulator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _ensure_worker(self) -> None:
        if self._worker is not None and self._worker.is_alive():
            return
        self._quit = threading.Event()
        self._worker = threading.Thread(
            target=self._run_simulation, args=(self._quit,), name="drone-simulator", daemon=True
        )
        self._worker.start()

    def _run_simulation(self, quit_event: threading.Event) -> None:
        get_logger().debug("Simulation thread started")
        quit_event.wait()
        get_logger().debug("Simulation thread finished")

    def _on_model_telemetry_updated(self) -> None:
        """Hook for extra processing of model updates; none is needed."""