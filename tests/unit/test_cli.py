"""Tests for the glasscut command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from glasscut.cli.main import app

runner = CliRunner()


@pytest.fixture
def job_file(tmp_path: Path) -> Path:
    path = tmp_path / "job.json"
    path.write_text(
        json.dumps(
            {
                "schema_version": "1.0",
                "glass_type": "Clear-1/4",
                "stock": "48x72",
                "price_per_sqft": 10,
                "panels": [{"width": 20, "height": 30, "quantity": 3, "label": "Bay"}],
            }
        )
    )
    return path


class TestOptimizeCommand:
    """Tests for the optimize command."""

    def test_panels_from_options(self) -> None:
        """Panels given on the command line are packed and reported."""
        result = runner.invoke(
            app,
            ["optimize", "-p", "20x30", "-p", "20x30:Kitchen", "--stock", "48x72"],
        )
        assert result.exit_code == 0
        assert "GLASS PANEL CUTS" in result.output
        assert "Kitchen" in result.output
        assert '48" x 72"' in result.output

    def test_job_file(self, job_file: Path) -> None:
        """A job file supplies panels, stock and price."""
        result = runner.invoke(app, ["optimize", "--config", str(job_file)])
        assert result.exit_code == 0
        assert "Bay #3" in result.output
        assert "240.00" in result.output

    def test_json_format(self, job_file: Path) -> None:
        """JSON output parses and reflects the job."""
        result = runner.invoke(app, ["optimize", "-c", str(job_file), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total_sheets"] == 1
        assert data["price_per_sqft"] == 10

    def test_svg_to_file(self, job_file: Path, tmp_path: Path) -> None:
        """SVG diagrams can be written to a file."""
        out = tmp_path / "cuts.svg"
        result = runner.invoke(
            app, ["optimize", "-c", str(job_file), "-f", "svg", "-o", str(out)]
        )
        assert result.exit_code == 0
        assert out.read_text().startswith("<svg")

    def test_ascii_format(self, job_file: Path) -> None:
        """ASCII output includes the sheet diagram and the summary."""
        result = runner.invoke(app, ["optimize", "-c", str(job_file), "-f", "ascii"])
        assert result.exit_code == 0
        assert "Sheet 1 of 1" in result.output
        assert "GLASS STOCK" in result.output

    def test_oversized_panel_exits_two(self) -> None:
        """Unpackable panels are reported with exit code 2."""
        result = runner.invoke(app, ["optimize", "-p", "100x100", "-s", "48x72"])
        assert result.exit_code == 2
        assert "Packing Failed" in result.output

    def test_allowance_option(self) -> None:
        """A zero allowance lets a full-size panel fit its stock."""
        result = runner.invoke(
            app, ["optimize", "-p", "48x72", "-s", "48x72", "--allowance", "0"]
        )
        assert result.exit_code == 0

    @pytest.mark.parametrize(
        "args",
        [
            ["optimize"],
            ["optimize", "-p", "twenty"],
            ["optimize", "-p", "20x30", "-f", "pdf"],
            ["optimize", "-p", "20x30", "--allowance", "2"],
            ["optimize", "-p", "20x30", "--price", "-1"],
            ["optimize", "-p", "20x30", "-g", "Clear"],
        ],
    )
    def test_invalid_input_exits_one(self, args: list[str]) -> None:
        """Invalid input exits with code 1."""
        assert runner.invoke(app, args).exit_code == 1

    def test_bad_panel_reports_panel_error(self) -> None:
        """A malformed --panel value is reported as a panel error."""
        result = runner.invoke(app, ["optimize", "-p", "20by30:Hall"])
        assert result.exit_code == 1
        assert "Invalid panel '20by30:Hall'" in result.output
        assert "Invalid stock size" not in result.output

    def test_missing_job_file(self, tmp_path: Path) -> None:
        """A missing job file exits with code 1."""
        result = runner.invoke(app, ["optimize", "-c", str(tmp_path / "nope.json")])
        assert result.exit_code == 1


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_file(self, job_file: Path) -> None:
        """A valid file reports its panel count."""
        result = runner.invoke(app, ["validate", str(job_file)])
        assert result.exit_code == 0
        assert "Panels: 3" in result.output
        assert "Validation passed" in result.output

    def test_invalid_file(self, tmp_path: Path) -> None:
        """Validation errors exit with code 1."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"schema_version": "1.0", "panels": [{"width": 0, "height": 5}]}))
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "panels[0].width" in result.output


class TestStockCommand:
    """Tests for the stock command."""

    def test_lists_sizes(self) -> None:
        """Mirror glass lists its two sizes."""
        result = runner.invoke(app, ["stock", "Mirror-1/4"])
        assert result.exit_code == 0
        assert '48" x 72"' in result.output
        assert '48" x 84"' in result.output
        assert '48" x 96"' not in result.output

    def test_bad_glass_type(self) -> None:
        """A malformed glass type exits with code 1."""
        assert runner.invoke(app, ["stock", "Clear"]).exit_code == 1
