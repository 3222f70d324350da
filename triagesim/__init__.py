"""Discrete-event simulation of a hospital emergency department, with a recency-distance tool."""

__version__ = "0.1.0"