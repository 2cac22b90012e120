# tests/test_cli.py
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from alignclock.cli import main


def test_alignment_prints_labels(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["alignment"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Mercuria: Full",
        "Venusia: Partial",
        "Earthia: Partial",
        "Marsia: None (Multiple Shadows)",
    ]


def test_alignment_outputs(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    svg = tmp_path / "a.svg"
    png = tmp_path / "a.png"
    assert main(["alignment", "--svg", str(svg), "--png", str(png), "--frames", "2", "--report"]) == 0
    out = capsys.readouterr().out
    assert ET.fromstring(svg.read_text(encoding="utf-8")).tag.endswith("svg")
    assert png.exists()
    assert "frame 0: Mercuria" in out
    assert "frame 1: Mercuria" in out
    assert "Celestial Alignment Report" in out


def test_alignment_uses_output_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("ALIGNCLOCK_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("ALIGNCLOCK_SVG_WIDTH", "640")
    assert main(["alignment", "--svg"]) == 0
    path = tmp_path / "out" / "alignment.svg"
    assert ET.fromstring(path.read_text(encoding="utf-8")).get("width") == "640"


def test_alignment_rejects_negative_frames() -> None:
    with pytest.raises(SystemExit) as exc:
        main(["alignment", "--frames", "-1"])
    assert exc.value.code == 2


def test_clocks_default_sample(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["clocks"]) == 0
    out = capsys.readouterr().out
    assert "Clock 4 (14:40): -20 minutes (behind)" in out
    assert "Summary: 3 clocks need adjustment" in out


def test_clocks_with_invalid_reading(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--lang", "ko", "clocks", "--reference", "9:30", "9:35", "10:99"]) == 0
    out = capsys.readouterr().out
    assert "시계 1 (9:35): +5 minutes (ahead)" in out
    assert "시계 2 (10:99): 오류 - Invalid time format: 10:99" in out


def test_clocks_rejects_bad_reference(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["clocks", "--reference", "noon"])
    assert exc.value.code == 2
    assert "Invalid time format: noon" in capsys.readouterr().err


def test_alignment_writes_animation_html(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "shadows.html"
    assert main(["alignment", "--html", str(out), "--frames", "3"]) == 0
    html = out.read_text(encoding="utf-8")
    assert "plotly" in html.lower()
    assert "Mercuria" in html
    assert f"Saved: {out}" in capsys.readouterr().out


def test_bad_setting_exits_with_usage_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("ALIGNCLOCK_SVG_WIDTH", "wide")
    with pytest.raises(SystemExit) as exc:
        main(["alignment"])
    assert exc.value.code == 2
    assert "ALIGNCLOCK_SVG_WIDTH" in capsys.readouterr().err
