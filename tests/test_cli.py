"""Tests for the command-line interface."""

import shutil

import pytest

from photoaudit import config as config_module
from photoaudit.cli import EXIT_FATAL, EXIT_OK, main
from photoaudit.config import reset_config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user config files out of CLI tests."""
    monkeypatch.setattr(config_module, "CONFIG_LOCATIONS", [tmp_path / "none.yaml"])
    reset_config()
    yield
    reset_config()


class TestCLI:
    """Test main()."""

    def test_folder(self, evidence, tmp_path, capsys):
        """Test a folder run writes both outputs and a summary."""
        out = tmp_path / "out"
        assert main([str(evidence), "-o", str(out), "--title", "Case 42"]) == EXIT_OK
        assert (out / "image_report.csv").exists()
        assert "Case 42" in (out / "image_map.kml").read_text(encoding="utf-8")
        captured = capsys.readouterr().out
        assert "Processed:             3" in captured
        assert "Metadata unavailable:  1" in captured

    def test_archive(self, evidence, tmp_path):
        """Test an archive source is extracted and processed."""
        archive = shutil.make_archive(str(tmp_path / "bundle"), "zip", evidence)
        out = tmp_path / "out"
        code = main([archive, "-o", str(out), "--report-name", "r.csv", "--map-name", "m.kml"])
        assert code == EXIT_OK
        assert (out / "extracted" / "b_gps.jpg").exists()
        lines = (out / "r.csv").read_text(encoding="utf-8").splitlines()
        assert len(lines) == 4

    def test_missing_source(self, tmp_path, capsys):
        """Test a missing source is a fatal error."""
        assert main([str(tmp_path / "nowhere")]) == EXIT_FATAL
        assert "Source not found" in capsys.readouterr().err

    def test_status(self, capsys):
        """Test --status lists the Pillow provider."""
        assert main(["--status"]) == EXIT_OK
        assert "pillow" in capsys.readouterr().out

    def test_source_required(self):
        """Test running without a source is a usage error."""
        with pytest.raises(SystemExit):
            main([])
