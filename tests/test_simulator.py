import pytest

from dronetelemetry.simulator import DroneSimulator
from dronetelemetry.telemetry import TelemetryModel


@pytest.fixture
def model():
    m = TelemetryModel(interval=10.0)
    yield m
    m.close()


@pytest.fixture
def simulator(model):
    sim = DroneSimulator()
    sim.set_telemetry_model(model)
    yield sim
    sim.close()


def test_initially_stopped(simulator, model):
    assert simulator.is_simulation_running() is False
    assert simulator.telemetry_model is model


def test_start_runs_model(simulator, model):
    started = []
    simulator.simulation_started.connect(lambda: started.append(1))
    simulator.start_simulation()
    simulator.start_simulation()
    assert simulator.is_simulation_running() is True
    assert model.is_simulation_running is True
    assert started == [1]


def test_stop_stops_model(simulator, model):
    stopped = []
    simulator.simulation_stopped.connect(lambda: stopped.append(1))
    simulator.start_simulation()
    simulator.stop_simulation()
    simulator.stop_simulation()
    assert simulator.is_simulation_running() is False
    assert model.is_simulation_running is False
    assert stopped == [1]


def test_stop_without_start_emits_nothing(simulator):
    stopped = []
    simulator.simulation_stopped.connect(lambda: stopped.append(1))
    simulator.stop_simulation()
    assert stopped == []


def test_restart(simulator, model):
    simulator.start_simulation()
    simulator.stop_simulation()
    simulator.start_simulation()
    assert simulator.is_simulation_running() is True
    assert model.is_simulation_running is True


def test_start_without_model():
    with DroneSimulator() as sim:
        sim.start_simulation()
        assert sim.is_simulation_running() is True
        assert sim.telemetry_model is None
    assert sim.is_simulation_running() is False


def test_set_model_moves_connection(simulator, model):
    other = TelemetryModel(interval=10.0)
    try:
        count_before_old = len(model.telemetry_updated)
        count_before_new = len(other.telemetry_updated)
        simulator.set_telemetry_model(other)
        assert len(model.telemetry_updated) == count_before_old - 1
        assert len(other.telemetry_updated) == count_before_new + 1
        assert simulator.telemetry_model is other
    finally:
        other.close()


def test_set_same_model_keeps_single_connection(simulator, model):
    count = len(model.telemetry_updated)
    simulator.set_telemetry_model(model)
    assert len(model.telemetry_updated) == count


def test_close_stops_everything(simulator, model):
    stopped = []
    simulator.simulation_stopped.connect(lambda: stopped.append(1))
    simulator.start_simulation()
    simulator.close()
    assert simulator.is_simulation_running() is False
    assert model.is_simulation_running is False
    assert stopped == [1]


def test_start_after_close(simulator):
    simulator.start_simulation()
    simulator.close()
    simulator.start_simulation()
    assert simulator.is_simulation_running() is True