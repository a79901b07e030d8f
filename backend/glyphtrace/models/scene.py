"""Serializable scene model, as returned by the API and by ``glyphtrace --json``."""

from __future__ import annotations

from pydantic import BaseModel, Field

from glyphtrace.engine.scene import Scene


class PathModel(BaseModel):
    closed: bool
    # 1-based (column, row) cells, in trace order
    points: list[tuple[int, int]] = Field(default_factory=list)


class TextRunModel(BaseModel):
    column: int
    row: int
    text: str


class SceneModel(BaseModel):
    width: int
    height: int
    paths: list[PathModel] = Field(default_factory=list)
    texts: list[TextRunModel] = Field(default_factory=list)

    @classmethod
    def from_scene(cls, scene: Scene) -> SceneModel:
        return cls(
            width=scene.width,
            height=scene.height,
            paths=[
                PathModel(closed=p.closed, points=[(pt.column, pt.row) for pt in p.points])
                for p in scene.paths
            ],
            texts=[TextRunModel(column=t.start.column, row=t.start.row, text=t.text) for t in scene.texts],
        )
