"""Tests for the command-line interface."""

from unittest.mock import patch

from click.testing import CliRunner

from epicycles.cli import main
from epicycles.fourier import center_signal


class TestCLI:
    """Tests for the epicycles commands."""

    def test_components_table(self):
        """Test the components command lists the dominant frequency."""
        runner = CliRunner()
        result = runner.invoke(main, ["components", "circle", "--size", "50", "-n", "5", "--top", "1"])

        assert result.exit_code == 0
        assert "Frequency" in result.output
        assert "50.0000" in result.output
        assert "Kept: 5" in result.output

    def test_components_rejects_negative_count(self):
        """Test negative component counts are refused."""
        runner = CliRunner()
        result = runner.invoke(main, ["components", "square", "-n", "-3"])
        assert result.exit_code != 0

    def test_components_rejects_unknown_shape(self):
        """Test unknown shapes are refused."""
        runner = CliRunner()
        result = runner.invoke(main, ["components", "triangle"])
        assert result.exit_code != 0

    def test_config_show_reads_environment(self, monkeypatch):
        """Test config-show reflects EPICYCLES_ variables."""
        monkeypatch.setenv("EPICYCLES_NUM_COMPONENTS", "42")
        runner = CliRunner()
        result = runner.invoke(main, ["config-show"])

        assert result.exit_code == 0
        assert "42" in result.output

    def test_invalid_config_reported(self, monkeypatch):
        """Test invalid settings exit with an error."""
        monkeypatch.setenv("EPICYCLES_TIME_STEP", "-1")
        runner = CliRunner()
        result = runner.invoke(main, ["config-show"])

        assert result.exit_code == 1
        assert "Error loading config" in result.output

    def test_animate_saves_gif(self, tmp_path):
        """Test animate writes a GIF when given an output path."""
        output = tmp_path / "scene.gif"
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["animate", "-n", "5", "--time-step", "0.05", "-o", str(output), "--frames", "2"],
        )

        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_components_centers_once(self):
        """Test the path is centered a single time."""
        runner = CliRunner()
        with patch("epicycles.cli.center_signal", wraps=center_signal) as centering:
            result = runner.invoke(main, ["components", "heart", "--size", "3", "-n", "10"])

        assert result.exit_code == 0
        assert centering.call_count == 1
        assert "Kept: 10" in result.output
