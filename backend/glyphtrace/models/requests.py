"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from glyphtrace.engine.config import RenderConfig


class RenderOptions(BaseModel):
    """Presentation options; mirrors RenderConfig field for field."""

    cell_width: float = Field(default=9.0, gt=0)
    cell_height: float = Field(default=16.0, gt=0)
    base_stroke_width: float = Field(default=2.0, gt=0)
    stroke_scale: float = Field(default=1.0, gt=0)
    stroke: str = "#000000"
    fill: str = "none"
    show_gridlines: bool = False
    gridline_color: str = "#e0e0e0"
    gridline_width: float = Field(default=0.5, gt=0)
    render_text: bool = True
    font_family: str = "monospace"
    font_size_ratio: float = Field(default=0.85, gt=0)
    text_color: str = "#000000"

    def to_config(self) -> RenderConfig:
        return RenderConfig(**self.model_dump())


class SceneRequest(BaseModel):
    text: str = Field(..., description="ASCII diagram text (label definitions allowed)")


class ConvertRequest(BaseModel):
    text: str = Field(..., description="ASCII diagram text (label definitions allowed)")
    title: str = Field(default="", description="Optional <title> for the SVG")
    options: RenderOptions = Field(default_factory=RenderOptions)
