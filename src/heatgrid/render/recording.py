"""RecordingRenderer: an in-memory backend that keeps every draw call."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ..core.color_map import Color
from ..layout.geometry import Point, Rect
from .base import HatchPattern, Renderer


@dataclass(frozen=True)
class DrawCall:
    """One recorded drawing primitive."""

    kind: str  # "rect" or "text"
    color: Color
    rect: Rect | None = None
    hatch_pattern: HatchPattern = HatchPattern.NONE
    text: str | None = None
    location: Point | None = None
    options: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"kind": self.kind, "color": self.color.to_hex()}
        if self.rect is not None:
            d["rect"] = self.rect.to_dict()
            d["hatch"] = self.hatch_pattern.value
        if self.text is not None:
            d["text"] = self.text
        if self.location is not None:
            d["x"] = self.location.x
            d["y"] = self.location.y
        d.update(self.options)
        return d


class RecordingRenderer(Renderer):
    """Collects draw calls instead of producing output.

    Useful for inspecting what a plot would draw and for replaying the
    calls onto another backend.
    """

    def __init__(self) -> None:
        self._calls: list[DrawCall] = []

    @property
    def calls(self) -> list[DrawCall]:
        return list(self._calls)

    @property
    def rects(self) -> list[DrawCall]:
        return [call for call in self._calls if call.kind == "rect"]

    def clear(self) -> None:
        self._calls.clear()

    def draw_solid_rect(
        self,
        rect: Rect,
        fill_color: Color,
        hatch_pattern: HatchPattern = HatchPattern.NONE,
    ) -> None:
        self._calls.append(DrawCall("rect", fill_color, rect=rect, hatch_pattern=hatch_pattern))

    def draw_text(
        self,
        text: str,
        location: Point,
        text_size: float,
        color: Color,
        stroke_width: float = 1.0,
        angle: float = 0.0,
    ) -> None:
        self._calls.append(DrawCall(
            "text", color, text=text, location=location,
            options={"textSize": text_size, "strokeWidth": stroke_width, "angle": angle},
        ))

    def replay(self, renderer: Renderer) -> None:
        """Issue every recorded call, in order, on another renderer."""
        for call in self._calls:
            if call.kind == "rect":
                renderer.draw_solid_rect(call.rect, call.color, call.hatch_pattern)
            else:
                renderer.draw_text(
                    call.text, call.location, call.options["textSize"], call.color,
                    stroke_width=call.options["strokeWidth"], angle=call.options["angle"],
                )

    def to_dicts(self) -> list[dict[str, Any]]:
        return [call.to_dict() for call in self._calls]

    def to_json(self) -> str:
        """Serialize the recorded calls as a JSON string."""
        return json.dumps(self.to_dicts())
