import pytest

from dronetelemetry.drone import Drone, GPSFixStatus, Signal


@pytest.fixture
def drone():
    return Drone("DRONE-001")


def record(signal):
    events = []
    signal.connect(lambda *args: events.append(args))
    return events


def test_signal_emits_in_order_and_disconnects():
    signal = Signal()
    calls = []
    first = lambda x: calls.append(("first", x))
    second = lambda x: calls.append(("second", x))
    signal.connect(first)
    signal.connect(second)
    signal.emit(1)
    signal.disconnect(first)
    signal.disconnect(first)
    signal.emit(2)
    assert calls == [("first", 1), ("second", 1), ("second", 2)]
    assert len(signal) == 1


def test_defaults(drone):
    assert drone.id == "DRONE-001"
    assert drone.latitude == 28.6139
    assert drone.longitude == 77.2090
    assert drone.altitude == 100.0
    assert drone.heading == 0.0
    assert drone.speed == 0.0
    assert drone.battery == 100
    assert drone.gps_fix_status is GPSFixStatus.FIX_3D
    assert drone.failure_mode is False


def test_setters_emit_only_on_change(drone):
    events = record(drone.telemetry_updated)
    drone.latitude = 10.5
    drone.latitude = 10.5
    drone.longitude = 20.5
    drone.altitude = drone.altitude
    drone.heading = 45.0
    drone.speed = 3.0
    assert len(events) == 4
    assert (drone.latitude, drone.longitude, drone.heading, drone.speed) == (10.5, 20.5, 45.0, 3.0)


@pytest.mark.parametrize("value, expected", [(150, 100), (-5, 0), (42, 42)])
def test_battery_is_clamped(drone, value, expected):
    drone.battery = value
    assert drone.battery == expected


def test_battery_low_emitted_once_when_crossing(drone):
    low = record(drone.battery_low)
    drone.battery = 21
    drone.battery = 20
    drone.battery = 10
    assert low == [(20,)]


def test_gps_fix_strings(drone):
    expected = {GPSFixStatus.NO_FIX: "No Fix", GPSFixStatus.FIX_2D: "2D Fix", GPSFixStatus.FIX_3D: "3D Fix"}
    for status, text in expected.items():
        drone.gps_fix_status = status
        assert drone.gps_fix_status_string == text


def test_gps_fix_lost_only_on_transition(drone):
    lost = record(drone.gps_fix_lost)
    drone.gps_fix_status = GPSFixStatus.FIX_2D
    drone.gps_fix_status = GPSFixStatus.NO_FIX
    drone.gps_fix_status = GPSFixStatus.NO_FIX
    assert len(lost) == 1


def test_drain_rate_depends_on_failure_mode(drone):
    drone.drain_battery()
    assert drone.battery == 99
    drone.simulate_failure()
    drone.drain_battery()
    assert drone.battery == 94


def test_simulate_and_reset_failure(drone):
    simulated = record(drone.failure_simulated)
    reset = record(drone.failure_reset)
    lost = record(drone.gps_fix_lost)
    drone.simulate_failure()
    drone.simulate_failure()
    assert drone.failure_mode is True
    assert drone.gps_fix_status is GPSFixStatus.NO_FIX
    assert len(simulated) == 1
    assert len(lost) == 1
    drone.reset_failure()
    drone.reset_failure()
    assert drone.failure_mode is False
    assert drone.gps_fix_status is GPSFixStatus.FIX_3D
    assert len(reset) == 1


def test_battery_never_below_zero(drone):
    drone.simulate_failure()
    for _ in range(30):
        drone.drain_battery()
    assert drone.battery == 0