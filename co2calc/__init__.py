"""Roof CO2 projection and impact scoring engine."""

__version__ = "1.1.0"
