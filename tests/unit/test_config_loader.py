"""Tests for glass job loading, validation and conversion."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from glasscut.application.config import (
    ConfigError,
    PanelConfig,
    config_to_packing,
    config_to_panels,
    expand_panel,
    load_config,
    load_config_from_dict,
)


@pytest.fixture
def job_data() -> dict:
    return {
        "schema_version": "1.0",
        "glass_type": "Clear-1/4",
        "stock": "optimize",
        "price_per_sqft": 8.5,
        "panels": [
            {"width": 20, "height": 30, "label": "Kitchen"},
            {"width": 24, "height": 36, "quantity": 2},
        ],
    }


class TestLoadConfig:
    """Tests for loading job files from disk."""

    def test_loads_valid_file(self, tmp_path: Path, job_data: dict) -> None:
        """A valid job file loads with defaults filled in."""
        path = tmp_path / "job.json"
        path.write_text(json.dumps(job_data))

        config = load_config(path)

        assert config.glass_type == "Clear-1/4"
        assert config.price_per_sqft == 8.5
        assert len(config.panels) == 2
        assert config.packing.cutting_allowance == 0.125
        assert config.output.format == "text"

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises file_not_found."""
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON reports line and column."""
        path = tmp_path / "bad.json"
        path.write_text('{"schema_version": "1.0",\n  "panels": [}')

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 2


class TestValidation:
    """Tests for schema validation errors."""

    def test_error_path_points_at_field(self, job_data: dict) -> None:
        """Validation errors carry a JSON path to the offending field."""
        job_data["panels"][1]["width"] = -5

        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(job_data)

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "panels[1].width"
        assert "panels[1].width" in str(error)

    def test_unknown_field_rejected(self, job_data: dict) -> None:
        """Extra keys are not allowed."""
        job_data["colour"] = "blue"
        with pytest.raises(ConfigError):
            load_config_from_dict(job_data)

    def test_schema_version_required(self, job_data: dict) -> None:
        """schema_version must be present."""
        del job_data["schema_version"]
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(job_data)
        assert exc_info.value.details[0]["path"] == "schema_version"

    def test_newer_minor_version_accepted(self, job_data: dict) -> None:
        """A newer minor version of a supported major loads."""
        job_data["schema_version"] = "1.7"
        assert load_config_from_dict(job_data).schema_version == "1.7"

    def test_unsupported_major_version(self, job_data: dict) -> None:
        """An unknown major version is rejected."""
        job_data["schema_version"] = "2.0"
        with pytest.raises(ConfigError, match="Unsupported schema version"):
            load_config_from_dict(job_data)

    def test_bad_glass_type(self, job_data: dict) -> None:
        """Glass types without a thickness are rejected."""
        job_data["glass_type"] = "Clear"
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(job_data)
        assert exc_info.value.details[0]["path"] == "glass_type"

    def test_allowance_out_of_range(self, job_data: dict) -> None:
        """Cutting allowance is limited to half an inch."""
        job_data["packing"] = {"cutting_allowance": 0.75}
        with pytest.raises(ConfigError):
            load_config_from_dict(job_data)

    def test_unrecognized_stock_loads(self, job_data: dict) -> None:
        """Stock text is checked at packing time, not load time."""
        job_data["stock"] = "huge"
        assert load_config_from_dict(job_data).stock == "huge"


class TestAdapter:
    """Tests for converting configuration to domain objects."""

    def test_quantity_expands_with_numbered_labels(self) -> None:
        """Each copy of a panel gets a numbered label."""
        panels = expand_panel(PanelConfig(width=10, height=20, quantity=3, label="Door"), 2)
        assert [p.source_label for p in panels] == ["Door #1", "Door #2", "Door #3"]
        assert {p.source_index for p in panels} == {2}

    def test_unlabelled_copies_use_window_number(self) -> None:
        """Unlabelled copies are named after their window."""
        panels = expand_panel(PanelConfig(width=10, height=20, quantity=2), 5)
        assert [p.source_label for p in panels] == ["Window 5 #1", "Window 5 #2"]

    def test_single_panel_keeps_label(self) -> None:
        """Quantity 1 keeps the label as given."""
        panels = expand_panel(PanelConfig(width=10, height=20), 1)
        assert panels[0].source_label is None

    def test_windows_default_to_position(self, job_data: dict) -> None:
        """Windows are numbered from 1 in cut-list order."""
        job_data["panels"].append({"width": 5, "height": 5, "window": 9})
        panels = config_to_panels(load_config_from_dict(job_data))

        assert [p.source_index for p in panels] == [1, 2, 2, 9]
        assert len(panels) == 4

    def test_packing_conversion(self, job_data: dict) -> None:
        """Packing options convert to a PackingConfig."""
        job_data["packing"] = {"cutting_allowance": 0.25}
        config = load_config_from_dict(job_data)
        assert config_to_packing(config.packing).cutting_allowance == 0.25
