"""Unit tests for the inspection CLI."""

import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from gridmath import __version__
from gridmath.cli.app import app, parse_box
from gridmath.cli.output import render_cells
from gridmath.config import RenderConfig
from gridmath.domain import GridBoundingBox, GridCoordinatePair
from gridmath.exceptions import InvalidArgumentError

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by the CLI callback."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == "gridmath":
            root_logger.removeHandler(handler)
            handler.close()


class TestCommands:
    """Tests for CLI commands."""

    def test_version(self) -> None:
        """--version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_interval(self) -> None:
        """Interval command lists the derived values."""
        result = runner.invoke(app, ["interval", "2", "5"])
        assert result.exit_code == 0
        assert "max_excl" in result.output
        assert "length" in result.output

    def test_interval_invalid(self) -> None:
        """Inverted bounds report an error."""
        result = runner.invoke(app, ["interval", "5", "2"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_quadrant(self) -> None:
        """Quadrant command draws the wedge with the origin marked."""
        result = runner.invoke(app, ["quadrant", "--radius", "1", "--direction", "top_right"])
        assert result.exit_code == 0
        assert ".@#" in result.output
        assert "3 cells" in result.output

    def test_quadrant_invalid_direction(self) -> None:
        """Unknown directions are rejected."""
        result = runner.invoke(app, ["quadrant", "--direction", "north"])
        assert result.exit_code == 1
        assert "Invalid direction" in result.output

    def test_overlaps(self) -> None:
        """Overlaps command lists clusters and the center of mass."""
        result = runner.invoke(app, ["overlaps", "0,0,3,2", "2,0,5,2", "4,0,7,2"])
        assert result.exit_code == 0
        assert "boxes 0, 1" in result.output
        assert "boxes 1, 2" in result.output
        assert "(3, 0)" in result.output

    def test_overlaps_malformed(self) -> None:
        """Malformed boxes report an error."""
        result = runner.invoke(app, ["overlaps", "1,2,3"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestLoggingOptions:
    """Tests for the shared logging options."""

    def test_unknown_log_level(self) -> None:
        """Unknown levels are a usage error, not a crash."""
        result = runner.invoke(app, ["--log-level", "LOUD", "interval", "1", "2"])
        assert result.exit_code == 2
        assert not isinstance(result.exception, AttributeError)

    def test_log_level_case_insensitive(self) -> None:
        """Level names are accepted in any case."""
        result = runner.invoke(app, ["--log-level", "debug", "interval", "1", "2"])
        assert result.exit_code == 0

    def test_log_file_per_invocation(self, tmp_path: Path) -> None:
        """A log file applies to its own invocation only."""
        log_file = tmp_path / "cli.log"
        result = runner.invoke(
            app, ["--log-file", str(log_file), "overlaps", "0,0,3,2", "2,0,5,2"]
        )
        assert result.exit_code == 0
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Box overlap clusters" in log_file.read_text(encoding="utf-8")

        result = runner.invoke(app, ["interval", "1", "2"])
        assert result.exit_code == 0
        ours = [h for h in logging.getLogger().handlers if h.get_name() == "gridmath"]
        assert not any(isinstance(h, logging.FileHandler) for h in ours)


class TestParseBox:
    """Tests for box argument parsing."""

    def test_parse(self) -> None:
        """Four integers describe min and exclusive max."""
        assert parse_box("1, 2, 4, 6") == GridBoundingBox.from_min_max_excl(1, 2, 4, 6)

    @pytest.mark.parametrize("text", ["1,2,3", "a,b,c,d", "0,0,0,1"])
    def test_parse_invalid(self, text: str) -> None:
        """Malformed boxes raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            parse_box(text)


class TestRenderCells:
    """Tests for the text renderer."""

    def test_render(self) -> None:
        """Rows run top to bottom with configured characters."""
        box = GridBoundingBox.from_size(0, 0, 3, 2)
        lines = render_cells(
            box,
            [GridCoordinatePair(1, 0), GridCoordinatePair(2, 1)],
            origin=GridCoordinatePair(0, 0),
            config=RenderConfig(filled_char="x", empty_char="-", origin_char="o"),
        )
        assert lines == ["ox-", "--x"]
