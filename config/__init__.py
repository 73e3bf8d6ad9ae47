"""Simulation and window configuration."""
