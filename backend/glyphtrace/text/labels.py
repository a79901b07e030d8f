"""Labels — markdown-style style definitions and in-diagram references.

A diagram may end with definitions, one per line, in the style of markdown
reference links:

    +---------+
    |  [db]   |
    +---------+

    [db]: {"fill": "#ffeeaa", "stroke": "#aa8800"}

The definition block is split off before the grid is parsed. After
extraction, every ``[identifier]`` reference left in the residual text that
sits inside a closed path styles the innermost such path, and the reference
itself is dropped from the rendered text.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import ValidationError
from shapely.geometry import Point as ShapelyPoint

from glyphtrace.engine.errors import LabelError
from glyphtrace.engine.grid import Point, split_lines
from glyphtrace.engine.scene import Scene
from glyphtrace.models.styles import LabelStyle
from glyphtrace.text.runs import RUN_RE, TextRun
from glyphtrace.utils.geometry import grid_polygon

logger = logging.getLogger(__name__)

_IDENT = r"[A-Za-z0-9_][A-Za-z0-9_\-]*"
_DEFINITION_RE = re.compile(rf"^[ \t]*\[({_IDENT})\]:[ \t]*(.*?)[ \t]*$")
_REFERENCE_RE = re.compile(rf"\[({_IDENT})\]")


@dataclass(frozen=True)
class LabelReference:
    identifier: str
    run_index: int
    offset: int  # index of "[" inside the run text
    length: int
    row: int
    column: int  # column of "["

    @property
    def center(self) -> tuple[float, float]:
        """Centre of the bracketed span in grid coordinates."""
        return (self.column + (self.length - 1) / 2, float(self.row))


@dataclass(frozen=True)
class LabelResolution:
    path_styles: dict[int, LabelStyle]  # index into scene.paths → style
    texts: tuple[TextRun, ...]  # residual text minus resolved references
    unresolved: tuple[str, ...]


def split_label_definitions(text: str) -> tuple[str, dict[str, LabelStyle]]:
    """Split trailing ``[id]: {json}`` lines off the diagram text.

    Blank lines inside and directly before the definition block belong to
    the block. When there are no definitions the text is returned unchanged.

    Raises:
        LabelError: a definition has invalid JSON, an unknown key, or is
            defined twice.
    """
    lines = split_lines(text)
    cut = len(lines)
    definitions: list[tuple[str, str]] = []
    for index in range(len(lines) - 1, -1, -1):
        line = lines[index]
        if _is_blank(line):
            continue
        match = _DEFINITION_RE.match(line)
        if match is None:
            break
        definitions.append((match.group(1), match.group(2)))
        cut = index

    if not definitions:
        return text, {}

    # Drop the blank separator lines between diagram and definitions too
    while cut > 0 and _is_blank(lines[cut - 1]):
        cut -= 1

    styles: dict[str, LabelStyle] = {}
    for identifier, payload in reversed(definitions):
        if identifier in styles:
            raise LabelError("defined more than once", identifier)
        styles[identifier] = _parse_style(identifier, payload)

    logger.debug("Split %d label definitions off the diagram", len(styles))
    return "\n".join(lines[:cut]), styles


def _is_blank(line: str) -> bool:
    return not line.strip(" \t")


def _parse_style(identifier: str, payload: str) -> LabelStyle:
    try:
        data = json.loads(payload) if payload else {}
    except json.JSONDecodeError as e:
        raise LabelError(f"invalid JSON ({e.msg})", identifier) from e
    if not isinstance(data, dict):
        raise LabelError("payload must be a JSON object", identifier)
    try:
        return LabelStyle.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise LabelError(f"invalid style fields: {fields or 'payload'}", identifier) from e


def find_label_references(texts: Iterable[TextRun]) -> list[LabelReference]:
    refs: list[LabelReference] = []
    for run_index, run in enumerate(texts):
        for match in _REFERENCE_RE.finditer(run.text):
            refs.append(
                LabelReference(
                    identifier=match.group(1),
                    run_index=run_index,
                    offset=match.start(),
                    length=match.end() - match.start(),
                    row=run.start.row,
                    column=run.start.column + match.start(),
                )
            )
    return refs


def resolve_labels(scene: Scene, styles: dict[str, LabelStyle]) -> LabelResolution:
    """Attach label styles to the innermost closed path around each reference."""
    closed = [(i, grid_polygon(p.points)) for i, p in enumerate(scene.paths) if p.closed]

    path_styles: dict[int, LabelStyle] = {}
    consumed: dict[int, list[LabelReference]] = {}
    unresolved: list[str] = []

    for ref in find_label_references(scene.texts):
        style = styles.get(ref.identifier)
        if style is None:
            unresolved.append(ref.identifier)
            continue
        center = ShapelyPoint(*ref.center)
        containing = [(poly.area, i) for i, poly in closed if poly.contains(center)]
        if not containing:
            unresolved.append(ref.identifier)
            continue
        _, path_index = min(containing)
        path_styles[path_index] = style
        consumed.setdefault(ref.run_index, []).append(ref)

    if unresolved:
        logger.debug("Unresolved label references: %s", ", ".join(unresolved))

    return LabelResolution(
        path_styles=path_styles,
        texts=tuple(_strip_references(scene.texts, consumed)),
        unresolved=tuple(unresolved),
    )


def _strip_references(texts: Iterable[TextRun], consumed: dict[int, list[LabelReference]]) -> list[TextRun]:
    result: list[TextRun] = []
    for run_index, run in enumerate(texts):
        refs = consumed.get(run_index)
        if not refs:
            result.append(run)
            continue
        chars = list(run.text)
        for ref in refs:
            chars[ref.offset : ref.offset + ref.length] = " " * ref.length
        remaining = "".join(chars)
        for match in RUN_RE.finditer(remaining):
            result.append(TextRun(Point(run.start.column + match.start(), run.start.row), match.group(0)))
    return result
