"""Write SVG markup from element dictionaries."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr

# Keys of an element dict that are not SVG attributes
_RESERVED = ("tag", "content", "group")


def fmt_number(value: float) -> str:
    """Two decimals at most, no trailing zeros: 4.50 → "4.5", 9.0 → "9"."""
    text = f"{float(value):.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float,
    canvas_h: float,
    title: str = "",
    description: str = "",
    styles: dict[str, str] | None = None,
) -> str:
    """Generate SVG markup from element definitions.

    Each element is ``{"tag": ..., <attribute>: <value>, ...}``; an optional
    ``"content"`` key holds text content, ``"group"`` names the ``<g>``
    wrapper (elements with the same group are written together, in order of
    first appearance).
    """
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{fmt_number(canvas_w)}" height="{fmt_number(canvas_h)}"'
        f' viewBox="0 0 {fmt_number(canvas_w)} {fmt_number(canvas_h)}" xmlns="http://www.w3.org/2000/svg"'
        f' role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    if styles:
        lines.append("  <style>")
        for selector, props in styles.items():
            lines.append(f"    {selector} {{ {props} }}")
        lines.append("  </style>")

    groups: dict[str | None, list[dict[str, Any]]] = {}
    for elem in elements:
        groups.setdefault(elem.get("group"), []).append(elem)

    for group, members in groups.items():
        indent = "  "
        if group is not None:
            lines.append(f"  <g class={quoteattr(group)}>")
            indent = "    "
        for elem in members:
            lines.append(indent + _element(elem))
        if group is not None:
            lines.append("  </g>")

    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def _element(elem: dict[str, Any]) -> str:
    tag = elem.get("tag", "path")
    attrs = {k: v for k, v in elem.items() if k not in _RESERVED and v is not None}
    attr_str = " ".join(f"{k}={quoteattr(str(v))}" for k, v in attrs.items())
    content = elem.get("content")
    if content is None:
        return f"<{tag} {attr_str} />"
    return f"<{tag} {attr_str}>{escape(str(content))}</{tag}>"
