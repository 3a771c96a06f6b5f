"""
Tests for the analysis command line script.
"""

import json
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from glidetrack.config import Config
from scripts.analyze import main


@pytest.fixture
def igc_file(tmp_path, s_turn_records):
    igc_path = tmp_path / "s-turn.igc"
    igc_path.write_text("HFDTE150817\n" + "\n".join(s_turn_records) + "\n", encoding="latin-1")
    return igc_path


class TestAnalyzeScript:
    """Tests for scripts/analyze.py."""

    def test_summary(self, igc_file, capsys):
        main([str(igc_file)])

        out = capsys.readouterr().out
        assert "GLIDETRACK FLIGHT ANALYSIS" in out
        assert "0 circles" in out

    def test_json_report(self, igc_file, tmp_path):
        output = tmp_path / "report.json"
        main([str(igc_file), "--output", str(output), "--quiet"])

        data = json.loads(output.read_text())
        assert data["summary"]["circle_count"] == 0
        assert data["metadata"]["flight"] == "s-turn"

    def test_text_report_and_map(self, igc_file, tmp_path):
        report = tmp_path / "report.txt"
        map_file = tmp_path / "map.html"
        main([str(igc_file), "--format", "txt", "--output", str(report), "--map", str(map_file), "--quiet"])

        assert "GLIDETRACK FLIGHT ANALYSIS REPORT" in report.read_text(encoding="utf-8")
        assert map_file.exists()

    def test_quiet(self, igc_file, capsys):
        main([str(igc_file), "--quiet"])
        assert capsys.readouterr().out == ""

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.igc")])

        assert exc.value.code == 1
        assert "not found" in capsys.readouterr().out

    def test_empty_file_map_fails(self, tmp_path):
        """No fixes: analysis succeeds but there is nothing to map."""
        igc_path = tmp_path / "empty.igc"
        igc_path.write_text("HFDTE150817\n", encoding="latin-1")

        with pytest.raises(SystemExit) as exc:
            main([str(igc_path), "--quiet", "--map", str(tmp_path / "map.html")])
        assert exc.value.code == 1

    def test_set_and_save_config(self, igc_file, tmp_path, capsys):
        saved = tmp_path / "glidetrack.yaml"
        main([
            str(igc_file),
            "--set", "analysis.turn_rate_threshold=6.5",
            "--set", "output.report_format=txt",
            "--save-config", str(saved),
        ])

        out = capsys.readouterr().out
        assert "analysis.turn_rate_threshold = 6.5" in out
        assert "Config saved to" in out

        reloaded = Config(str(saved))
        assert reloaded.turn_rate_threshold == 6.5
        assert reloaded.report_format == "txt"

    @pytest.mark.parametrize(
        "override",
        ["analysis.turn_rate=5", "analysis.turn_rate_threshold=-1", "no-equals-sign"],
    )
    def test_bad_override(self, igc_file, capsys, override):
        with pytest.raises(SystemExit) as exc:
            main([str(igc_file), "--set", override])

        assert exc.value.code == 1
        assert "Invalid setting" in capsys.readouterr().out
