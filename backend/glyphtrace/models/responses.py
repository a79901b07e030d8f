"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from glyphtrace.models.scene import SceneModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class SceneResponse(BaseModel):
    scene: SceneModel
    closed_paths: int = 0
    open_paths: int = 0
    processing_time_ms: float = 0.0


class ConvertResponse(BaseModel):
    svg: str
    scene: SceneModel
    processing_time_ms: float = 0.0
    stage_timings_ms: dict[str, float] = Field(default_factory=dict)
    unresolved_labels: list[str] = Field(default_factory=list)
