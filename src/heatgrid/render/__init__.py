"""Renderer contract and the in-memory recording backend."""

from .base import HatchPattern, Renderer
from .recording import DrawCall, RecordingRenderer

__all__ = [
    "HatchPattern",
    "Renderer",
    "DrawCall",
    "RecordingRenderer",
]
