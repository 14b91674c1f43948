"""Tests for the stylescope command line."""

import json

import pytest
from click.testing import CliRunner

from stylescope import __version__
from stylescope.cli import main

BOLD = {"kind": "AnyTextModifier", "any_text_modifier": {"kind": "BoldTextModifier"}}
RED = {"kind": "ColorModifier", "color": "red"}
FONT = {
    "kind": "FontModifier",
    "font": {
        "kind": "Font",
        "provider": {
            "kind": "FontBox",
            "base": {"kind": "NamedProvider", "name": "Courier", "size": 12},
        },
    },
}


def verbatim(string, *modifiers):
    return {
        "kind": "Text",
        "storage": {"kind": "VerbatimStorage", "verbatim": string},
        "modifiers": list(modifiers),
    }


def concat(first, second):
    return {"kind": "Text", "storage": {"kind": "ConcatenatedStorage", "first": first, "second": second}}


@pytest.fixture
def snapshot(tmp_path):
    def write(data):
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return write


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_string(runner, snapshot):
    path = snapshot(concat(verbatim("Hello", BOLD), verbatim(" World")))
    result = runner.invoke(main, ["string", path])
    assert result.exit_code == 0
    assert result.output == "Hello World\n"


def test_chunks(runner, snapshot):
    path = snapshot(concat(verbatim("Hé", BOLD, RED), verbatim("!")))
    result = runner.invoke(main, ["chunks", path])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "2 chunks, 3 characters"
    assert "bytes 0:3" in lines[1]
    assert "bold, color" in lines[1]
    assert "bytes 3:4" in lines[2]
    assert lines[2].endswith("-")


def test_trait(runner, snapshot):
    path = snapshot(concat(verbatim("Hi", BOLD, RED), verbatim("!", RED)))
    result = runner.invoke(main, ["trait", path, "foreground-color"])
    assert result.exit_code == 0
    assert result.output == "#ff0000\n"

    result = runner.invoke(main, ["trait", path, "bold"])
    assert result.exit_code == 1
    assert "applied only to a subrange" in result.output

    result = runner.invoke(main, ["trait", path, "bold", "--range", "0:2"])
    assert result.exit_code == 0
    assert result.output == "True\n"


def test_trait_bad_range(runner, snapshot):
    path = snapshot(verbatim("Hi", BOLD))
    result = runner.invoke(main, ["trait", path, "bold", "-r", "oops"])
    assert result.exit_code == 2


def test_font(runner, snapshot):
    path = snapshot(verbatim("Hi", FONT))
    result = runner.invoke(main, ["font", path, "name"])
    assert result.output == "Courier\n"
    result = runner.invoke(main, ["font", path, "size"])
    assert result.output == "12.0\n"
    result = runner.invoke(main, ["font", path, "fixed-size"])
    assert result.output == "true\n"
    result = runner.invoke(main, ["font", path, "style"])
    assert result.exit_code == 1
    assert "Font does not have 'style' attribute" in result.output


def test_bad_snapshot(runner, snapshot):
    path = snapshot({"kind": "Paragraph"})
    result = runner.invoke(main, ["string", path])
    assert result.exit_code == 1
    assert "unknown node kind" in result.output


def test_snapshot_not_utf8(runner, tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_bytes(b"\xff")
    result = runner.invoke(main, ["string", str(path)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "not UTF-8 JSON" in result.output
