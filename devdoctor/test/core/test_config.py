"""Tests for devdoctor.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from devdoctor.core.config import (
    DEFAULT_VS_MINIMUM,
    Config,
    VisualStudioConfig,
    load_config,
    load_config_or_default,
)
from devdoctor.core.result import Err, Ok
from devdoctor.core.semver import SemVersion


class TestConfigFromDict:
    """Test Config.from_dict."""

    def test_empty_uses_defaults(self) -> None:
        config = Config.from_dict({})
        assert config.visualstudio.minimum == DEFAULT_VS_MINIMUM
        assert config.visualstudio.exact is None

    def test_reads_visualstudio_table(self) -> None:
        config = Config.from_dict({"visualstudio": {"minimum": "17.0", "exact": "17.2.1"}})
        assert config.visualstudio == VisualStudioConfig(minimum="17.0", exact="17.2.1")

    def test_missing_minimum_uses_default(self) -> None:
        config = Config.from_dict({"visualstudio": {"exact": "17.0.0"}})
        assert config.visualstudio == VisualStudioConfig(minimum=DEFAULT_VS_MINIMUM, exact="17.0.0")

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_version_rejected(self, value: str) -> None:
        with pytest.raises(ValueError, match="exact must be a non-empty version string"):
            Config.from_dict({"visualstudio": {"exact": value}})

    @pytest.mark.parametrize("value", [17, 17.0, True, ["17.0.0"]])
    def test_non_string_version_rejected(self, value: object) -> None:
        with pytest.raises(ValueError, match="minimum must be a non-empty version string"):
            Config.from_dict({"visualstudio": {"minimum": value}})

    def test_non_table_section_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be a table"):
            Config.from_dict({"visualstudio": "17.0.0"})

    def test_requirement(self) -> None:
        req = VisualStudioConfig(minimum="16.9.0", exact="17.0.0").requirement()
        assert req.minimum == SemVersion(16, 9, 0)
        assert req.exact == SemVersion(17, 0, 0)


class TestLoadConfig:
    """Test load_config function."""

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "doctor.toml"
        path.write_text('[visualstudio]\nminimum = "16.11.0"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.visualstudio.minimum == "16.11.0"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "nope.toml")

        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "doctor.toml"
        path.write_text("[visualstudio\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_invalid_version_rejected_at_load(self, tmp_path: Path) -> None:
        path = tmp_path / "doctor.toml"
        path.write_text('[visualstudio]\nminimum = "sixteen"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "sixteen" in result.error.message
        assert result.error.message.startswith("[visualstudio]")


class TestLoadConfigOrDefault:
    def test_missing_file_gives_default(self, tmp_path: Path) -> None:
        result = load_config_or_default(tmp_path / "doctor.toml")
        assert result == Ok(Config())

    def test_existing_invalid_file_is_error(self, tmp_path: Path) -> None:
        path = tmp_path / "doctor.toml"
        path.write_text('[visualstudio]\nexact = "1.x"\n', encoding="utf-8")

        assert isinstance(load_config_or_default(path), Err)


class TestLoadConfigRejectsMistypedRequirement:
    """A present but mistyped requirement is an error, never a default."""

    @pytest.mark.parametrize(
        ("body", "key"),
        [
            ('[visualstudio]\nminimum = "16.9.0"\nexact = 17.0\n', "exact"),
            ("[visualstudio]\nminimum = 17\n", "minimum"),
            ('[visualstudio]\nexact = ""\n', "exact"),
        ],
    )
    def test_mistyped_value(self, tmp_path: Path, body: str, key: str) -> None:
        path = tmp_path / "doctor.toml"
        path.write_text(body, encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert result.error.message == f"[visualstudio] {key} must be a non-empty version string"
        assert result.error.path == path

    def test_non_table_section(self, tmp_path: Path) -> None:
        path = tmp_path / "doctor.toml"
        path.write_text('visualstudio = "17.0.0"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert result.error.message == "[visualstudio] must be a table"
