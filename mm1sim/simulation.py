"""Event-driven single-server queue simulation."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .distributions import Distribution, draw
from .events import EventKind, FutureEventList


@dataclass
class SimulationConfig:
    """Run length and the distributions of inter-arrival and service times."""

    end_time: float = 10000.0
    interarrival: Distribution = Distribution.EXPONENTIAL
    interarrival_params: tuple[float, float] = (1.0, 0.0)
    service: Distribution = Distribution.EXPONENTIAL
    service_params: tuple[float, float] = (1.5, 2.0)

    def __post_init__(self) -> None:
        self.end_time = float(self.end_time)
        self.interarrival = Distribution(self.interarrival)
        self.service = Distribution(self.service)
        self.interarrival_params = _pair(self.interarrival_params)
        self.service_params = _pair(self.service_params)


def _pair(params) -> tuple[float, float]:
    values = tuple(float(p) for p in params)
    if len(values) != 2:
        raise ValueError(f"expected two parameters, got {len(values)}")
    return values  # type: ignore[return-value]


@dataclass
class SimulationResult:
    """Time-averaged sizes and the traces gathered during a run."""

    mean_queue_size: float
    mean_system_size: float
    final_time: float
    events_processed: int
    queue_size_series: list[tuple[float, int]] = field(default_factory=list)
    mean_queue_series: list[tuple[float, float]] = field(default_factory=list)


class Simulator:
    """Runs the arrival / service / departure cycle until the end time."""

    def __init__(self, config: SimulationConfig, rng: random.Random) -> None:
        self.config = config
        self.rng = rng
        self._reset()

    def _reset(self) -> None:
        self._now = 0.0
        self._previous_time = 0.0
        self._next_time = 0.0
        self._next_event = EventKind.ARRIVAL
        self._queue_size = 0
        self._system_size = 0
        self._sum_queue = 0.0
        self._sum_system = 0.0
        self._mean_queue = 0.0
        self._mean_system = 0.0
        self._events = FutureEventList()
        self._queue_series: list[tuple[float, int]] = []
        self._mean_series: list[tuple[float, float]] = []

    def run(self) -> SimulationResult:
        """Simulate from time zero and return the collected statistics."""
        self._reset()
        handlers = {
            EventKind.ARRIVAL: self._arrival,
            EventKind.SERVICE: self._service,
            EventKind.DEPARTURE: self._departure,
        }
        processed = 0
        while self._now < self.config.end_time:
            handlers[self._next_event]()
            processed += 1
        return SimulationResult(
            mean_queue_size=self._mean_queue,
            mean_system_size=self._mean_system,
            final_time=self._now,
            events_processed=processed,
            queue_size_series=self._queue_series,
            mean_queue_series=self._mean_series,
        )

    def _take_next(self) -> None:
        if len(self._events):
            event = self._events.pop()
            self._next_event = event.kind
            self._next_time = event.time

    def _record_queue(self) -> None:
        self._queue_series.append((self._now, self._queue_size))

    def _update_statistics(self) -> None:
        elapsed = self._now - self._previous_time
        self._sum_queue += elapsed * self._queue_size
        self._sum_system += elapsed * self._system_size
        if self._now > 0:
            self._mean_queue = self._sum_queue / self._now
            self._mean_system = self._sum_system / self._now

    def _arrival(self) -> None:
        cfg = self.config
        self._now = self._next_time
        p1, p2 = cfg.interarrival_params
        delta = draw(cfg.interarrival, p1, p2, self.rng)
        self._events.push(EventKind.ARRIVAL, self._now + delta)
        if self._system_size == 0:
            self._next_event = EventKind.SERVICE
            self._next_time = self._now
        else:
            self._take_next()
        self._previous_time = self._now
        self._record_queue()
        self._queue_size += 1
        self._system_size += 1
        self._record_queue()

    def _service(self) -> None:
        cfg = self.config
        self._now = self._next_time
        p1, p2 = cfg.service_params
        service_time = draw(cfg.service, p1, p2, self.rng)
        self._events.push(EventKind.DEPARTURE, self._now + service_time)
        self._update_statistics()
        self._previous_time = self._now
        self._record_queue()
        if self._queue_size > 0:
            self._queue_size -= 1
        self._take_next()
        self._record_queue()

    def _departure(self) -> None:
        self._now = self._next_time
        self._update_statistics()
        self._previous_time = self._now
        self._record_queue()
        if self._system_size > 0:
            self._system_size -= 1
        self._record_queue()
        self._mean_series.append((self._now, self._mean_queue))
        if self._queue_size > 0:
            self._next_event = EventKind.SERVICE
            self._next_time = self._now
        else:
            self._take_next()


def simulate(
    config: SimulationConfig | None = None, seed: int | None = None
) -> SimulationResult:
    """Run one simulation with a fresh generator seeded by ``seed``."""
    return Simulator(config or SimulationConfig(), random.Random(seed)).run()