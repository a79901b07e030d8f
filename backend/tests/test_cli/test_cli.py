"""Tests for the command line entry point."""

import io
import json

from glyphtrace.cli import main
from tests.conftest import BOX, FLOWCHART


def test_svg_to_stdout(tmp_path, capsys):
    source = tmp_path / "box.txt"
    source.write_text(BOX)
    assert main([str(source)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<?xml")
    assert 'viewBox="0 0 27 48"' in out


def test_output_file(tmp_path):
    source = tmp_path / "flow.txt"
    source.write_text(FLOWCHART)
    target = tmp_path / "flow.svg"
    assert main([str(source), "-o", str(target), "--title", "Flow", "--gridlines"]) == 0
    svg = target.read_text()
    assert "<title>Flow</title>" in svg
    assert "<line" in svg


def test_json_output(tmp_path, capsys):
    source = tmp_path / "flow.txt"
    source.write_text(FLOWCHART)
    assert main([str(source), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [p["closed"] for p in data["paths"]] == [True, True, False, False]
    assert data["width"] == 25


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("---"))
    assert main(["-", "--no-text", "--cell-width", "10"]) == 0
    out = capsys.readouterr().out
    assert 'd="M 5 8 L 15 8 L 25 8"' in out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_bad_diagram(tmp_path, capsys):
    source = tmp_path / "bad.txt"
    source.write_text("|\x07|")
    assert main([str(source)]) == 1
    err = capsys.readouterr().err
    assert "glyphtrace: " in err
    assert "column 2, row 1" in err
