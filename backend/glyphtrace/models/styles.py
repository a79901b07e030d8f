"""Style overrides attached to diagram shapes through labels."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LabelStyle(BaseModel):
    """Payload of a ``[identifier]: {...}`` definition."""

    model_config = ConfigDict(extra="forbid")

    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = Field(default=None, gt=0)
    stroke_dasharray: str | None = None
    text_color: str | None = None

    def svg_attributes(self) -> dict[str, str]:
        """Non-empty style fields as SVG presentation attributes."""
        attrs: dict[str, str] = {}
        if self.fill is not None:
            attrs["fill"] = self.fill
        if self.stroke is not None:
            attrs["stroke"] = self.stroke
        if self.stroke_width is not None:
            attrs["stroke-width"] = f"{self.stroke_width:g}"
        if self.stroke_dasharray is not None:
            attrs["stroke-dasharray"] = self.stroke_dasharray
        return attrs
