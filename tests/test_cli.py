from __future__ import annotations

from indoormap.cli import main


def test_summary(sample_xml, tmp_path, capsys):
    path = tmp_path / "map.xml"
    path.write_text(sample_xml, encoding="utf-8")

    assert main(["summary", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Map 20 x 15" in out
    assert "Floor 'ground' at 0m: 3 wall(s)" in out
    assert "Floor 'first' at 10m" in out


def test_export_svg(sample_xml, tmp_path):
    src = tmp_path / "map.xml"
    src.write_text(sample_xml, encoding="utf-8")
    out = tmp_path / "out" / "map.svg"

    assert main(["export", str(src), "--out", str(out)]) == 0
    assert out.read_text(encoding="utf-8").startswith("<svg")


def test_missing_file(tmp_path, capsys):
    assert main(["summary", str(tmp_path / "nope.xml")]) == 2
    assert "not found" in capsys.readouterr().out
    assert main(["export", str(tmp_path / "nope.xml")]) == 2


def test_malformed_file(tmp_path, capsys):
    src = tmp_path / "bad.xml"
    src.write_text('<map><floors><floor atHeight="x"/></floors></map>', encoding="utf-8")
    assert main(["summary", str(src)]) == 3
    assert "atHeight" in capsys.readouterr().out


def test_unknown_exporter(sample_xml, tmp_path, capsys):
    src = tmp_path / "map.xml"
    src.write_text(sample_xml, encoding="utf-8")
    assert main(["export", str(src), "--exporter", "pdf"]) == 2
    assert "available" in capsys.readouterr().out


def test_unreadable_file(tmp_path, capsys):
    src = tmp_path / "maps"
    src.mkdir()
    assert main(["export", str(src)]) == 2
    assert "[ERROR]" in capsys.readouterr().out
    assert main(["summary", str(src)]) == 2
