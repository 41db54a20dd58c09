"""
Parameter publishing for adopted resources.

Each adopted resource gets one parameter holding its physical identifier,
at ``<prefix>/<resource-type-segment>/<instance-name>``. Writes are
idempotent-or-fail: re-publishing the same value is a no-op, publishing a
different value to an existing path raises ParameterConflictError, since
overwriting would orphan the resource adopted earlier.

Backends:
- InMemoryParameterStore: dict-backed, for tests and dry runs
- SsmParameterStore: AWS Systems Manager Parameter Store (boto3)
- TemplateParameterStore: AWS::SSM::Parameter resources in a template fragment
"""

from __future__ import annotations

import json
import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, runtime_checkable

import structlog

from holdover.core.errors import ConfigurationError, ParameterConflictError

logger = structlog.get_logger()


class AdoptedResourceType(str, Enum):
    """Discriminator for adopted resources; doubles as the path segment."""

    FIREWALL_INSTANCE = "compute-instance"


class ParameterPaths:
    """Builds parameter paths under a deployment-wide prefix."""

    def __init__(self, prefix: str = "/accelerator") -> None:
        self.prefix = "/" + prefix.strip("/") if prefix.strip("/") else ""

    def path(self, resource_type: AdoptedResourceType | str, name: str) -> str:
        segment = resource_type.value if isinstance(resource_type, Enum) else resource_type
        return f"{self.prefix}/{segment}/{name}"


def build_parameter_path(
    resource_type: AdoptedResourceType | str, name: str, prefix: str = "/accelerator"
) -> str:
    return ParameterPaths(prefix).path(resource_type, name)


@runtime_checkable
class ParameterStore(Protocol):
    """Write sink for adoption parameters."""

    def get(self, path: str) -> Optional[str]:
        """Current value at ``path``, or None."""
        ...

    def put(self, path: str, value: str) -> bool:
        """Publish ``value``; True if written, False if already present."""
        ...


def _check_existing(path: str, existing: Optional[str], value: str) -> bool:
    """True when a write is needed, False for an identical existing value."""
    if existing is None:
        return True
    if existing == value:
        return False
    raise ParameterConflictError(path, existing, value)


class InMemoryParameterStore:
    """Parameter store kept in a plain dict."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, path: str) -> Optional[str]:
        return self._values.get(path)

    def put(self, path: str, value: str) -> bool:
        if not _check_existing(path, self._values.get(path), value):
            return False
        self._values[path] = value
        return True

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def __len__(self) -> int:
        return len(self._values)


class SsmParameterStore:
    """AWS Systems Manager Parameter Store backend."""

    def __init__(self, region: str = "us-east-1", client: Any = None) -> None:
        self.region = region
        self._client = client

    def _get_client(self):
        if self._client is not None:
            return self._client

        import boto3

        self._client = boto3.client("ssm", region_name=self.region)
        return self._client

    def get(self, path: str) -> Optional[str]:
        client = self._get_client()
        try:
            response = client.get_parameter(Name=path)
        except client.exceptions.ParameterNotFound:
            return None
        return response["Parameter"]["Value"]

    def put(self, path: str, value: str) -> bool:
        if not _check_existing(path, self.get(path), value):
            return False

        client = self._get_client()
        try:
            client.put_parameter(Name=path, Value=value, Type="String", Overwrite=False)
        except client.exceptions.ParameterAlreadyExists:
            # written concurrently since our read; settle on what is there now
            return _check_existing(path, self.get(path), value)
        logger.debug("ssm_parameter_written", path=path, region=self.region)
        return True


def pascal_case(value: str) -> str:
    """
    Convert an arbitrary name to PascalCase.

    Examples:
        >>> pascal_case("fw-edge_az1a")
        'FwEdgeAz1a'
    """
    words = re.findall(r"[A-Z]?[a-z0-9]+|[A-Z]+(?![a-z])", value)
    return "".join(word[:1].upper() + word[1:].lower() for word in words)


def parameter_logical_id(name: str) -> str:
    return pascal_case(f"SsmParam{pascal_case(name)}")


class TemplateParameterStore:
    """
    Collects parameters as AWS::SSM::Parameter template resources.

    Logical ids derive from the instance name, so two names that PascalCase
    to the same id but publish different paths are also a conflict.
    """

    def __init__(self) -> None:
        self._resources: Dict[str, Dict[str, Any]] = {}

    def get(self, path: str) -> Optional[str]:
        for resource in self._resources.values():
            properties = resource["Properties"]
            if properties["Name"] == path:
                return properties["Value"]
        return None

    def put(self, path: str, value: str) -> bool:
        if not _check_existing(path, self.get(path), value):
            return False

        logical_id = parameter_logical_id(path.rsplit("/", 1)[-1])
        taken = self._resources.get(logical_id)
        if taken is not None:
            raise ParameterConflictError(logical_id, taken["Properties"]["Name"], path)

        self._resources[logical_id] = {
            "Type": "AWS::SSM::Parameter",
            "Properties": {"Name": path, "Type": "String", "Value": value},
        }
        return True

    def template(self) -> Dict[str, Any]:
        return {"Resources": dict(self._resources)}

    def render(self) -> str:
        return json.dumps(self.template(), indent=2, sort_keys=True)

    def write(self, path: str | Path) -> Path:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(self.render() + "\n")
        logger.info("parameter_template_written", path=str(out), parameters=len(self._resources))
        return out


def create_parameter_store(backend: str, region: str = "us-east-1") -> ParameterStore:
    """Instantiate a parameter store by backend name."""
    if backend == "memory":
        return InMemoryParameterStore()
    if backend == "ssm":
        return SsmParameterStore(region=region)
    if backend == "template":
        return TemplateParameterStore()

    raise ConfigurationError(
        f"Unknown parameter backend: {backend}",
        details={"backend": backend, "supported": "memory, ssm, template"},
    )
