"""Discrete-event simulation of a single-server queue: event list, random variates, simulator and command line."""

__version__ = "0.1.0"
__all__ = ["cli", "distributions", "events", "simulation"]