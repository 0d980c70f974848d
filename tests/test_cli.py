# tests/test_cli.py
from __future__ import annotations

import json

import pytest

"""
cli tests
=========

Does: Smoke-test the `ctp` entry point: list/show/export/formats/check and the
      stderr + exit(1) path for unknown tokens.
"""

from color_token_palette import cli
from color_token_palette.export import reload_token_formats


@pytest.fixture(autouse=True)
def _packaged_presets(monkeypatch):
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.delenv("PALETTE_DATA_DIR", raising=False)
    reload_token_formats()


def test_list_all(capsys):
    cli.main(["list"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 41
    assert lines[0].split() == ["Black", "colors.black", "#000000"]


def test_list_family(capsys):
    cli.main(["list", "--family", "orange"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 9
    assert lines[4].split()[0] == "Orange500"


def test_show_token(capsys):
    cli.main(["show", "orange-500"])
    info = json.loads(capsys.readouterr().out)
    assert info["name"] == "Orange500"
    assert info["hex"] == "#ed8936"
    assert info["argb"] == "0xffed8936"
    assert info["rgb"] == [237, 137, 54]
    assert info["weight"] == 500


def test_show_unknown_exits_with_error(capsys):
    with pytest.raises(SystemExit) as ei:
        cli.main(["show", "orang-500"])
    assert ei.value.code == 1
    err = capsys.readouterr().err
    assert "Unknown color token" in err
    assert "Orange500" in err


def test_export_stdout_and_file(capsys, tmp_path):
    cli.main(["export", "--format", "figma"])
    doc = json.loads(capsys.readouterr().out)
    assert doc["tokens"]["black"]["value"] == "#000000"

    out = tmp_path / "tokens.json"
    cli.main(["export", "--namespace", "brand", "-o", str(out)])
    assert "Wrote tokens" in capsys.readouterr().out
    written = json.loads(out.read_text(encoding="utf-8"))
    assert "brand-orange" in written["colors"]


def test_formats_and_check(capsys):
    cli.main(["formats"])
    assert "style-dictionary" in capsys.readouterr().out

    cli.main(["check"])
    out = capsys.readouterr().out
    assert "Palette OK: 41 tokens" in out
    assert "test-neutral" in out


def test_export_ignores_unrelated_data_dir(capsys, tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    reload_token_formats()
    cli.main(["export", "--format", "style-dictionary"])
    doc = json.loads(capsys.readouterr().out)
    assert doc["color"]["white"] == {"value": "#ffffff"}
