"""Command-line entry point for the queue simulation."""

from __future__ import annotations

import argparse
import sys

from .distributions import Distribution
from .simulation import SimulationConfig, simulate

_CHOICES = [d.name.lower() for d in Distribution]


def _params(parser, values, defaults, option):
    if values is None:
        return defaults
    if len(values) > 2:
        parser.error(f"{option} takes at most two values")
    return (values[0], values[1] if len(values) == 2 else defaults[1])


def main(argv=None) -> int:
    """Run a simulation and print the time-averaged queue and system sizes."""
    defaults = SimulationConfig()
    parser = argparse.ArgumentParser(
        prog="mm1sim", description="Simulate a single-server queue."
    )
    parser.add_argument("--end-time", type=float, default=defaults.end_time)
    parser.add_argument("--arrival", choices=_CHOICES, default="exponential")
    parser.add_argument("--arrival-params", type=float, nargs="+")
    parser.add_argument("--service", choices=_CHOICES, default="exponential")
    parser.add_argument("--service-params", type=float, nargs="+")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--series", action="store_true", help="print the queue size trace as CSV"
    )
    args = parser.parse_args(argv)

    config = SimulationConfig(
        end_time=args.end_time,
        interarrival=Distribution[args.arrival.upper()],
        interarrival_params=_params(
            parser, args.arrival_params, defaults.interarrival_params, "--arrival-params"
        ),
        service=Distribution[args.service.upper()],
        service_params=_params(
            parser, args.service_params, defaults.service_params, "--service-params"
        ),
    )
    try:
        result = simulate(config, seed=args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    out = sys.stdout
    if args.series:
        print("time,queue_size", file=out)
        for time, size in result.queue_size_series:
            print(f"{time:.3f},{size}", file=out)
    print(f"Mean queue size: {result.mean_queue_size:.6f}", file=out)
    print(f"Mean system size: {result.mean_system_size:.6f}", file=out)
    print(f"Time: {result.final_time:.3f}", file=out)
    print("End", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())