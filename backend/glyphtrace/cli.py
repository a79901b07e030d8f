"""
GlyphTrace command line — ASCII diagram in, SVG (or scene JSON) out.

Usage:
  glyphtrace diagram.txt                      # prints SVG to stdout
  glyphtrace diagram.txt -o diagram.svg       # writes SVG
  cat diagram.txt | glyphtrace - --gridlines  # reads stdin
  glyphtrace diagram.txt --json               # extracted paths as JSON
"""

from __future__ import annotations

import argparse
import logging
import sys

from glyphtrace.config import settings
from glyphtrace.engine.config import RenderConfig
from glyphtrace.engine.errors import GlyphTraceError
from glyphtrace.engine.pipeline import convert
from glyphtrace.models.scene import SceneModel

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(prog="glyphtrace", description="Convert ASCII diagrams to SVG")
    parser.add_argument("input", help="Diagram text file, or - for stdin")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--title", default="", help="SVG <title>")
    parser.add_argument("--cell-width", type=float, default=defaults.cell_width, help="Width of one character cell")
    parser.add_argument("--cell-height", type=float, default=defaults.cell_height, help="Height of one character cell")
    parser.add_argument("--stroke-scale", type=float, default=defaults.stroke_scale, help="Stroke width multiplier")
    parser.add_argument("--gridlines", action="store_true", help="Draw background gridlines")
    parser.add_argument("--no-text", action="store_true", help="Do not render residual text")
    parser.add_argument("--json", action="store_true", help="Print the extracted scene as JSON instead of SVG")
    parser.add_argument("--log-level", default=settings.glyphtrace_log_level, help="Logging level (default: %(default)s)")
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    config = RenderConfig(
        cell_width=args.cell_width,
        cell_height=args.cell_height,
        stroke_scale=args.stroke_scale,
        show_gridlines=args.gridlines,
        render_text=not args.no_text,
    )

    try:
        text = _read_input(args.input)
        ctx = convert(text, render_config=config, title=args.title)
    except OSError as e:
        print(f"glyphtrace: cannot read {args.input}: {e.strerror or e}", file=sys.stderr)
        return 1
    except GlyphTraceError as e:
        print(f"glyphtrace: {e}", file=sys.stderr)
        return 1

    if args.json:
        output = SceneModel.from_scene(ctx.require_scene()).model_dump_json(indent=2) + "\n"
    else:
        output = ctx.svg

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        logger.info("Wrote %s (%d paths)", args.output, ctx.num_paths)
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
