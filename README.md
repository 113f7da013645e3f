# mm1sim

A small discrete-event simulator for a single-server queue. Customers
arrive, wait in line, are served one at a time and depart. The simulator
tracks the time-weighted mean number of customers waiting in the queue and
the time-weighted mean number in the whole system, and records the queue
size over time.

Inter-arrival times and service times can each be drawn from one of three
distributions:

| Distribution | First parameter | Second parameter |
|--------------|-----------------|------------------|
| uniform      | start           | end              |
| exponential  | lambda (rate)   | — (ignored)      |
| normal       | mean            | variance         |

Uniform values are drawn on `[start, end)` in 2**15 equal steps. Normal
values use the Box-Muller transform; the second parameter, labelled
"variance", multiplies the standard normal draw directly, so it acts as the
spread of the values. Nothing stops a normal draw from being negative. An
exponential rate of zero raises `ValueError`.

By default both inter-arrival and service times are exponential, with an
arrival rate of 1 and a service rate of 1.5, and the run ends once the
simulated time reaches 10000.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
mm1sim --help
```

Options:

- `--end-time T` – simulated time at which the run stops (default 10000).
- `--arrival {uniform,exponential,normal}` – inter-arrival distribution
  (default `exponential`).
- `--arrival-params P1 [P2]` – its parameters (default `1 0`).
- `--service {uniform,exponential,normal}` – service-time distribution
  (default `exponential`).
- `--service-params P1 [P2]` – its parameters (default `1.5 2`).
- `--seed N` – seed for the random generator, for reproducible runs.
- `--series` – also print the queue-size trace as CSV (`time,queue_size`).

When only one parameter is given, the second keeps its default. Running
`mm1sim` with no arguments simulates the default configuration and prints
the mean queue size, the mean system size, the final simulated time and
`End`.

```
mm1sim --arrival uniform --arrival-params 0.5 1.5 --seed 7
```

## Library use

The main entry points live in `mm1sim.simulation`:

- `SimulationConfig` holds the end time, the two distributions
  (`interarrival`, `service`) and their parameter pairs
  (`interarrival_params`, `service_params`).
- `simulate(config, seed)` runs one simulation with a fresh
  `random.Random(seed)` and returns a `SimulationResult`.
- `Simulator(config, rng)` runs with a random generator of your choosing;
  call its `run()` method.

A `SimulationResult` has `mean_queue_size`, `mean_system_size`,
`final_time`, `events_processed`, `queue_size_series` (pairs of time and
queue size, recorded before and after each event's change) and
`mean_queue_series` (pairs of time and running mean queue size, recorded at
each departure).

```python
from mm1sim.simulation import SimulationConfig, simulate
from mm1sim.distributions import Distribution

config = SimulationConfig(
    end_time=1000,
    interarrival=Distribution.EXPONENTIAL,
    interarrival_params=(1.0, 0.0),
    service=Distribution.EXPONENTIAL,
    service_params=(1.5, 0.0),
)
result = simulate(config, seed=1)
print(result.mean_queue_size, result.mean_system_size)
```

The random-variate helpers in `mm1sim.distributions` take a
`random.Random` instance so that runs are reproducible:

```python
import random
from mm1sim.distributions import Distribution, uniform, exponential, normal, draw

rng = random.Random(1)
x = uniform(rng, 0.0, 1.0)
y = exponential(rng, 1.5)
z = normal(rng, 5.0, 2.0)
w = draw(Distribution.EXPONENTIAL, 1.0, 0.0, rng)
```

`Distribution.parameter_labels()` returns the names of the parameters a
distribution takes: `("Start", "End")`, `("lambda",)` or
`("mean", "variance")`.

The future event list used by the simulator is available on its own in
`mm1sim.events`. Events are kept in order of time; events with equal times
stay in the order they were pushed. `pop()` on an empty list raises
`IndexError`.

```python
from mm1sim.events import EventKind, FutureEventList

fel = FutureEventList()
fel.push(EventKind.DEPARTURE, 4.5)
fel.push(EventKind.ARRIVAL, 4.0)
print(fel.describe())  # event: 0, time: 4.000 -> event: 2, time: 4.500 ->
first = fel.pop()
print(len(fel))        # 1
```

## What it does not do

There is no graphical interface: no chart window and no dialogs for
choosing parameters. The queue-size and mean-queue-size traces are returned
as data in `SimulationResult`, and the command line can print the
queue-size trace as CSV with `--series`; plotting them is left to you.