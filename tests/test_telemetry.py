import random
import time

import pytest

from dronetelemetry.drone import GPSFixStatus
from dronetelemetry.factory import create_drone
from dronetelemetry.strategies import HoverStrategy, RandomWalkStrategy
from dronetelemetry.telemetry import TelemetryModel


def _wait_for(condition, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.01)
    return condition()


@pytest.fixture
def model():
    m = TelemetryModel(interval=0.01)
    yield m
    m.close()


def test_defaults(model):
    assert model.drone.id == "DRONE-001"
    assert model.current_strategy.name == "Hover"
    assert model.is_simulation_running is False
    assert model.failure_simulation_active is False
    assert model.interval == 0.01


@pytest.mark.parametrize("interval", [0, -1.0])
def test_invalid_interval(interval):
    with pytest.raises(ValueError):
        TelemetryModel(interval=interval)


def test_update_telemetry_drains_battery_and_notifies(model):
    events = []
    model.telemetry_updated.connect(lambda: events.append(1))
    before = model.drone.battery
    model.update_telemetry()
    assert before - model.drone.battery == 1
    assert len(events) >= 1


def test_failure_mode_drains_faster(model):
    model.toggle_failure_simulation()
    before = model.drone.battery
    model.update_telemetry()
    assert before - model.drone.battery == 5


def test_toggle_failure(model):
    toggles = []
    model.failure_simulation_toggled.connect(toggles.append)
    model.toggle_failure_simulation()
    assert model.failure_simulation_active is True
    assert model.drone.failure_mode is True
    assert model.drone.gps_fix_status is GPSFixStatus.NO_FIX
    model.toggle_failure_simulation()
    assert model.failure_simulation_active is False
    assert model.drone.gps_fix_status is GPSFixStatus.FIX_3D
    assert toggles == [True, False]


def test_set_strategy_emits_name_once(model):
    names = []
    model.strategy_changed.connect(names.append)
    strategy = RandomWalkStrategy(random.Random(3))
    model.set_movement_strategy(strategy)
    model.set_movement_strategy(strategy)
    assert names == ["Random Walk"]
    assert model.current_strategy is strategy


def test_strategy_signal_forwarded(model):
    strategy = HoverStrategy(random.Random(1))
    model.set_movement_strategy(strategy)
    names = []
    model.strategy_changed.connect(names.append)
    strategy.strategy_changed.emit("Custom")
    assert names == ["Custom"]


def test_set_drone_moves_connection(model):
    old = model.drone
    new = create_drone("TEST-DRONE")
    model.set_drone(new)
    events = []
    model.telemetry_updated.connect(lambda: events.append(1))
    old.speed = old.speed + 1.0
    assert events == []
    new.speed = new.speed + 1.0
    assert events == [1]
    assert model.drone is new


def test_update_without_drone_does_nothing(model):
    model.set_drone(None)
    events = []
    model.telemetry_updated.connect(lambda: events.append(1))
    model.update_telemetry()
    assert events == []


def test_update_without_strategy_leaves_battery(model):
    model.set_movement_strategy(None)
    before = model.drone.battery
    model.update_telemetry()
    assert model.drone.battery == before


def test_start_and_stop(model):
    started, stopped = [], []
    model.simulation_started.connect(lambda: started.append(1))
    model.simulation_stopped.connect(lambda: stopped.append(1))
    model.start_simulation()
    model.start_simulation()
    assert model.is_simulation_running is True
    assert started == [1]
    before = 100
    assert _wait_for(lambda: model.drone.battery < before)
    model.stop_simulation()
    model.stop_simulation()
    assert model.is_simulation_running is False
    assert stopped == [1]


def test_stopped_model_does_not_advance(model):
    model.start_simulation()
    model.stop_simulation()
    battery = model.drone.battery
    time.sleep(0.05)
    assert model.drone.battery == battery


def test_context_manager_stops():
    with TelemetryModel(interval=0.01) as m:
        m.start_simulation()
        assert m.is_simulation_running is True
    assert m.is_simulation_running is False