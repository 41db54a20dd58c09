"""Tests for settings and the customizations loader."""

import pytest
from holdover.config.customizations import (
    FIREWALL_INSTANCES,
    AdoptionConfig,
    ConfiguredResourceEntry,
    entries_for,
)
from holdover.config.loader import load_config, parse_config
from holdover.config.settings import Settings
from holdover.core.errors import ConfigurationError


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.parameter_prefix == "/accelerator"
        assert settings.zone_marker == "_az"
        assert settings.name_tag == "Name"
        assert settings.parameter_backend == "memory"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("HOLDOVER_PARAMETER_PREFIX", "/org")
        monkeypatch.setenv("HOLDOVER_AWS_REGION", "eu-west-2")

        settings = Settings()

        assert settings.parameter_prefix == "/org"
        assert settings.aws_region == "eu-west-2"


class TestAdoptionConfig:
    """Tests for AdoptionConfig."""

    def test_absent_category_is_empty(self):
        assert AdoptionConfig().entries(FIREWALL_INSTANCES) == []
        assert entries_for(None, FIREWALL_INSTANCES) == []

    def test_entries_in_order(self):
        config = AdoptionConfig(
            categories={
                FIREWALL_INSTANCES: [
                    ConfiguredResourceEntry(name="b"),
                    ConfiguredResourceEntry(name="a"),
                ]
            }
        )

        assert [e.name for e in config.entries(FIREWALL_INSTANCES)] == ["b", "a"]


class TestLoadConfig:
    """Tests for load_config / parse_config."""

    def test_load_firewall_instances(self, tmp_path):
        path = tmp_path / "customizations-config.yaml"
        path.write_text("""
firewalls:
  instances:
    - name: fw-edge
      vpc: Perimeter
      launchTemplate:
        name: fw-lt
    - name: fw-core
applications: []
""")

        config = load_config(path)

        entries = config.entries(FIREWALL_INSTANCES)
        assert [e.name for e in entries] == ["fw-edge", "fw-core"]
        assert entries[0].attributes["vpc"] == "Perimeter"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path).categories == {}

    @pytest.mark.parametrize("document", ["[]", "false", "0"])
    def test_non_mapping_file_rejected(self, tmp_path, document):
        path = tmp_path / "customizations.yaml"
        path.write_text(document)

        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_missing_section(self):
        assert parse_config({"firewalls": {}}).entries(FIREWALL_INSTANCES) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("firewalls: [unclosed")

        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_non_mapping_document(self):
        with pytest.raises(ConfigurationError):
            parse_config(["not", "a", "mapping"])

    def test_instances_not_a_list(self):
        with pytest.raises(ConfigurationError):
            parse_config({"firewalls": {"instances": {"name": "fw"}}})

    def test_entry_without_name(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_config({"firewalls": {"instances": [{"vpc": "Perimeter"}]}})

        assert exc_info.value.details["category"] == FIREWALL_INSTANCES
