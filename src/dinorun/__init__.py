"""Endless-runner arcade game: jump the obstacles, beat your best score."""

__version__ = "0.1.0"
