"""Geometry, axis positions and graph layout state."""
