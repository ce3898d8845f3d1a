import json
import sys

import pytest

from contentparse import cli


def test_parse_prints_a_summary(content_tree, capsys):
    assert cli.parse(str(content_tree)) == 0

    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3
    assert out[0].startswith("/ ")
    assert "repository" in out[0]
    assert "guide" in out[1] and "(2 files)" in out[1]
    assert "presentation" in out[2]


def test_parse_json(content_zip, capsys):
    assert cli.parse(str(content_zip), as_json=True) == 0

    items = json.loads(capsys.readouterr().out)
    assert [i["type"] for i in items] == ["repository", "document", "presentation"]


def test_parse_reports_failures(content_tree, capsys):
    broken = content_tree / "broken"
    broken.mkdir()
    (broken / "broken.md").write_text("# Broken\n\n---\ntype: presentation\n")

    assert cli.parse(str(content_tree)) == 1
    assert "broken" not in capsys.readouterr().out


def test_unsupported_source(tmp_path):
    with pytest.raises(SystemExit):
        cli.parse(str(tmp_path / "missing"))


def test_show(content_tree, capsys):
    assert cli.show(str(content_tree), "/guide/") == 0

    item = json.loads(capsys.readouterr().out)
    assert item["title"] == "Guide"
    assert [f["name"] for f in item["files"]] == ["diagram.png", "notes.txt"]


def test_show_missing_item(content_tree):
    assert cli.show(str(content_tree), "nowhere") == 1
    assert cli.show(str(content_tree), "../up") == 1


def test_main_dispatches(content_tree, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["contentparse", "show", str(content_tree), "talk"])

    with pytest.raises(SystemExit) as excinfo:
        cli.main()

    assert excinfo.value.code == 0
    assert json.loads(capsys.readouterr().out)["type"] == "presentation"
