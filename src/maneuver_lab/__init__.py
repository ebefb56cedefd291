"""Maneuver Lab: impulsive burns and Keplerian trajectories around a central body."""

__version__ = "1.0.0"
