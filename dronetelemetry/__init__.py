"""Simulated drone telemetry with movement strategies, failure simulation and a text dashboard."""

__version__ = "1.0.0"