"""Shared test fixtures."""

from __future__ import annotations

import pytest

from glyphtrace.engine.pipeline import load_stages

# Sample diagrams

BOX = """\
+-+
| |
+-+
"""

LINE = "---"

TWO_BOXES = """\
+-+   +-+
| |   | |
+-+   +-+
"""

STACKED_BOXES = """\
   +-+
   | |
   +-+
+-+
| |
+-+
"""

TABLE = """\
+--+--+
|  |  |
+--+--+
"""

ROUNDED_BOX = """\
.--.
|  |
'--'
"""

SLANTED_BOX = """\
/--\\
|  |
\\--/
"""

DIAMOND = """\
/\\
\\/
"""

ARROW = "-->"

LABELED_BOX = """\
+-----+
| [a] |
+-----+

[a]: {"fill": "#ff0000", "text_color": "#0000ff"}
"""

FLOWCHART = """\
+-------+      +--------+
| input |----->| output |
+-------+      +--------+
    |
    v
"""


@pytest.fixture(scope="session", autouse=True)
def _stages_loaded() -> None:
    load_stages()


@pytest.fixture
def box_text() -> str:
    return BOX


@pytest.fixture
def two_boxes_text() -> str:
    return TWO_BOXES


@pytest.fixture
def labeled_text() -> str:
    return LABELED_BOX


@pytest.fixture
def flowchart_text() -> str:
    return FLOWCHART
