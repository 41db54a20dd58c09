"""Tests for the adopt CLI command."""

import json

from unittest.mock import patch

import pytest
from holdover.cli.adopt import adopt_command, list_handlers_command
from holdover.cli.main import build_parser, main
from holdover.core.errors import ExitCode

STACKS = [
    {
        "stackName": "Org-Network-Phase1",
        "phase": 1,
        "resources": [],
    },
    {
        "stackName": "Org-Perimeter-Phase2",
        "phase": 2,
        "resources": [
            {
                "resourceType": "AWS::EC2::Instance",
                "logicalResourceId": f"Firewall{zone}",
                "physicalResourceId": f"i-0{zone}",
                "resourceMetadata": {
                    "Properties": {"Tags": [{"Key": "Name", "Value": f"fw-edge_az1{zone}"}]}
                },
            }
            for zone in ("a", "b")
        ],
    },
]


@pytest.fixture
def inventory(tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text(json.dumps(STACKS))
    return path


@pytest.fixture
def customizations(tmp_path):
    path = tmp_path / "customizations-config.yaml"
    path.write_text("firewalls:\n  instances:\n    - name: fw-edge\n")
    return path


class TestAdoptCommand:
    """Tests for adopt_command."""

    def test_json_output(self, inventory, customizations, capsys):
        code = adopt_command(
            str(inventory), config_file=str(customizations), backend="memory", output_format="json"
        )

        assert code == ExitCode.SUCCESS
        output = json.loads(capsys.readouterr().out)
        assert [a["name"] for a in output["adopted"]] == ["fw-edge_az1a", "fw-edge_az1b"]
        assert all(a["configured"] for a in output["adopted"])
        assert output["skipped"] == 1
        assert output["success"] is True

    def test_text_output(self, inventory):
        assert adopt_command(str(inventory), backend="memory") == ExitCode.SUCCESS

    def test_template_backend_writes_file(self, inventory, tmp_path):
        out = tmp_path / "params.json"

        code = adopt_command(str(inventory), backend="template", template_out=str(out))

        assert code == ExitCode.SUCCESS
        resources = json.loads(out.read_text())["Resources"]
        assert set(resources) == {"SsmParamFwEdgeAz1a", "SsmParamFwEdgeAz1b"}

    def test_registry_persisted_between_runs(self, inventory, tmp_path):
        registry = tmp_path / "registry.json"

        assert adopt_command(str(inventory), backend="memory", registry_file=str(registry)) == 0
        assert adopt_command(str(inventory), backend="memory", registry_file=str(registry)) == 0

        records = json.loads(registry.read_text())["records"]
        assert len(records) == 2

    def test_registry_conflict_reported(self, inventory, tmp_path, capsys):
        registry = tmp_path / "registry.json"
        registry.write_text(json.dumps({"records": [
            {"resourceType": "compute-instance", "name": "fw-edge_az1a", "physicalId": "i-0old"}
        ]}))

        code = adopt_command(
            str(inventory), backend="memory", registry_file=str(registry), output_format="json"
        )

        assert code == ExitCode.PARTIAL_FAILURE
        output = json.loads(capsys.readouterr().out)
        assert output["success"] is False
        assert "i-0old" in output["errors"][0]

    def test_fail_fast_exit_code(self, inventory, tmp_path):
        registry = tmp_path / "registry.json"
        registry.write_text(json.dumps({"records": [
            {"resourceType": "compute-instance", "name": "fw-edge_az1a", "physicalId": "i-0old"}
        ]}))

        code = adopt_command(
            str(inventory), backend="memory", registry_file=str(registry), fail_fast=True
        )

        assert code == ExitCode.ADOPTION_ERROR

    def test_missing_inventory(self, tmp_path):
        assert adopt_command(str(tmp_path / "nope.json")) == ExitCode.DISCOVERY_ERROR

    def test_missing_config(self, inventory, tmp_path):
        code = adopt_command(str(inventory), config_file=str(tmp_path / "nope.yaml"))

        assert code == ExitCode.CONFIG_ERROR

    def test_list_handlers(self):
        assert list_handlers_command() == 0


class TestParser:
    """Tests for the argument parser."""

    def test_adopt_arguments(self):
        args = build_parser().parse_args(
            ["adopt", "inv.json", "--config", "c.yaml", "--backend", "ssm", "--fail-fast"]
        )

        assert args.command == "adopt"
        assert args.inventory == "inv.json"
        assert args.config_file == "c.yaml"
        assert args.backend == "ssm"
        assert args.fail_fast is True

    def test_main_exits_with_command_code(self, inventory):
        with patch("holdover.cli.main.configure_logging"), pytest.raises(SystemExit) as exc_info:
            main(["adopt", str(inventory), "--backend", "memory", "--output", "json"])

        assert exc_info.value.code == 0

    def test_no_command_prints_help(self):
        with patch("holdover.cli.main.configure_logging"), pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1
