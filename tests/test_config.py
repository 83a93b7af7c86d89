from __future__ import annotations

import pytest
from pydantic import ValidationError

from reliability_scanner.config import QuerierSpec, load_config, parse_config
from reliability_scanner.errors import ConfigurationError


def test_querier_spec_defaults() -> None:
    spec = QuerierSpec()

    assert spec.key == ""
    assert spec.validate_url is False
    assert spec.include_annotations is False


def test_querier_spec_is_immutable() -> None:
    spec = QuerierSpec(key="owner")

    with pytest.raises(ValidationError):
        spec.key = "other"


def test_querier_spec_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        QuerierSpec.model_validate({"key": "owner", "validateURL": True})


def test_load_config_reads_checks(tmp_path) -> None:
    path = tmp_path / "scanner.yaml"
    path.write_text(
        "name: nightly\n"
        "timeout_seconds: 45\n"
        "checks:\n"
        "  - kind: service/annotations\n"
        "    spec:\n"
        "      key: owner\n"
        "      include_annotations: true\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.name == "nightly"
    assert config.timeout_seconds == 45
    assert config.checks[0].kind == "service/annotations"
    spec = QuerierSpec.model_validate(config.checks[0].spec)
    assert spec == QuerierSpec(key="owner", include_annotations=True)


def test_empty_config_file_has_no_checks(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    config = load_config(path)

    assert config.name == "reliability-scanner"
    assert config.checks == []


def test_missing_config_file_raises_configuration_error(tmp_path) -> None:
    with pytest.raises(ConfigurationError, match="Cannot read config file"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml_raises_configuration_error(tmp_path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("checks: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="not valid YAML"):
        load_config(path)


def test_schema_violation_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="Invalid scanner configuration"):
        parse_config({"timeout_seconds": -1})
