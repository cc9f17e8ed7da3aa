# dronetelemetry

A small simulator that produces real-time drone telemetry: position,
altitude, heading, speed, battery level and GPS fix status. The drone is
moved by a pluggable movement strategy, its battery drains on every step,
and a failure mode can be switched on to drop the GPS fix and drain the
battery five times faster. A text dashboard shows the telemetry and
responds to simple commands.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
dronetelemetry
```

Without `--steps` the program runs interactively: it prints the list of
commands and the dashboard, then reads one command per line from standard
input:

| Command               | Effect                                   |
|-----------------------|------------------------------------------|
| `s`, `start`, `stop`  | start or stop the simulation             |
| `f`, `failure`        | toggle failure simulation                |
| `h`, `hover`          | use the hover strategy                   |
| `r`, `random`         | use the random-walk strategy             |
| `show` (or empty)     | show the telemetry                       |
| `about`               | about this program                       |
| `help`                | list the commands                        |
| `q`, `quit`, `exit`   | leave                                    |

After an action the current status line is printed. Warnings (low battery,
lost GPS fix) are printed as they occur. While the simulation runs, the
drone is stepped in the background every interval.

Options:

- `--interval SECONDS` – seconds between simulation steps (default 0.5)
- `--strategy {hover,random-walk}` – movement strategy (default `hover`)
- `--failure` – start in failure mode
- `--steps N` – run N steps at once, printing the dashboard after each,
  then exit

For example, `dronetelemetry --strategy random-walk --steps 3` prints three
steps of a random walk. The exit status is 0 on success and 1 if the
program fails (for instance a negative `--steps`).

## Library use

```python
from dronetelemetry.factory import create_drone
from dronetelemetry.strategies import RandomWalkStrategy
from dronetelemetry.telemetry import TelemetryModel
from dronetelemetry.simulator import DroneSimulator

model = TelemetryModel(interval=0.5)        # default drone, hover strategy
model.set_movement_strategy(RandomWalkStrategy())
model.update_telemetry()                    # one simulation step

simulator = DroneSimulator()
simulator.set_telemetry_model(model)
simulator.start_simulation()                # the model steps every interval
print(simulator.is_simulation_running())
simulator.stop_simulation()
simulator.close()
model.close()
```

### Drones (`dronetelemetry.drone`, `dronetelemetry.factory`)

`create_drone(drone_id)` builds a `Drone` at the default position;
`create_drone(drone_id, latitude, longitude, altitude)` places it. The
three coordinates must be given together, otherwise `TypeError` is raised.
A new drone starts at latitude 28.6139, longitude 77.2090, altitude
100.0 m, heading 0, speed 0, battery 100 % and a 3D GPS fix.

A `Drone` has the attributes `id`, `latitude`, `longitude`, `altitude`,
`heading`, `speed`, `battery`, `gps_fix_status` (a `GPSFixStatus`),
`gps_fix_status_string` ("No Fix", "2D Fix" or "3D Fix") and
`failure_mode`. It notifies listeners through `Signal` objects
(`connect`, `disconnect`, `emit`):

- `telemetry_updated` – a telemetry value changed
- `battery_low` – battery fell to 20 % or below from above (called with the level)
- `gps_fix_lost` – the GPS fix went to `GPSFixStatus.NO_FIX`
- `failure_simulated` / `failure_reset` – failure mode switched on or off

The battery is always kept between 0 and 100. `drain_battery()` takes 1 %
per call, or 5 % in failure mode. `simulate_failure()` and
`reset_failure()` switch failure mode.

### Movement strategies (`dronetelemetry.strategies`)

- `HoverStrategy` ("Hover") – tiny position, altitude and heading drift,
  speed below 0.5 m/s.
- `RandomWalkStrategy` ("Random Walk") – larger steps, heading kept in
  [0, 360), speed 5–19 m/s.

Both accept an optional `random.Random` for reproducible runs. Subclass
`MovementStrategy`, set `name` and implement `update_position(drone)` to
add your own.

### Telemetry model (`dronetelemetry.telemetry`)

`TelemetryModel(interval)` holds drone "DRONE-001" with the hover strategy.
`start_simulation()` and `stop_simulation()` control a background timer
that calls `update_telemetry()` every `interval` seconds;
`toggle_failure_simulation()` switches failure mode on the drone. Its
signals are `telemetry_updated`, `simulation_started`,
`simulation_stopped`, `failure_simulation_toggled` and `strategy_changed`.
A non-positive interval raises `ValueError`.

### Dashboard (`dronetelemetry.dashboard`)

`Dashboard(model, simulator)` keeps the displayed fields as text with
their colours, updated through the model's signals. `render()` returns the
dashboard as lines of text; `on_start_stop_clicked()`,
`on_failure_clicked()` and `on_strategy_selected(index)` (0 = Hover,
1 = Random Walk) act on the model and simulator. Warnings are collected in
`warnings` and announced through `warning_shown`.

### Logging (`dronetelemetry.logger`)

`get_logger()` returns the shared `Logger`, which writes timestamped lines
at `LogLevel` DEBUG, INFO, WARNING and ERROR to standard error and to
`logs/drone_telemetry_<timestamp>.log` beside the running program (or in
the working directory). `Logger(log_dir)` writes to another directory.

## What it does not do

There is no graphical window: the dashboard is plain text on the terminal,
and warnings are printed rather than shown in dialogs. Only a single drone
is simulated at a time.