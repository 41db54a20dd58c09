"""Root test configuration."""

import logging

import pytest
import structlog

from holdover.adoption.parameters import InMemoryParameterStore
from holdover.adoption.registry import AdoptionRegistry
from holdover.config.customizations import (
    FIREWALL_INSTANCES,
    AdoptionConfig,
    ConfiguredResourceEntry,
)
from holdover.discovery.models import DeploymentUnitInfo, DiscoveredResource
from holdover.orchestration.registry import AdoptionContext


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def make_instance(logical_id, physical_id, name=None, resource_type="AWS::EC2::Instance"):
    """Build a discovered resource, Name-tagged unless name is None."""
    tags = [{"Key": "Environment", "Value": "prod"}]
    if name is not None:
        tags.append({"Key": "Name", "Value": name})
    return DiscoveredResource(
        resource_type=resource_type,
        logical_id=logical_id,
        physical_id=physical_id,
        metadata={"Properties": {"InstanceType": "c5.large", "Tags": tags}},
    )


@pytest.fixture
def instance_factory():
    return make_instance


@pytest.fixture
def phase2_unit():
    """Phase 2 stack with two zone copies of one firewall plus unrelated resources."""
    return DeploymentUnitInfo(
        name="Org-Perimeter-Phase2",
        phase=2,
        resources=(
            make_instance("FirewallA", "i-0aaa", "fw-edge_az1a"),
            DiscoveredResource(
                resource_type="AWS::EC2::SecurityGroup",
                logical_id="FirewallSg",
                physical_id="sg-0123",
            ),
            make_instance("FirewallB", "i-0bbb", "fw-edge_az1b"),
        ),
    )


@pytest.fixture
def firewall_config():
    return AdoptionConfig(
        categories={FIREWALL_INSTANCES: [ConfiguredResourceEntry(name="fw-edge")]}
    )


@pytest.fixture
def store():
    return InMemoryParameterStore()


@pytest.fixture
def context(store):
    """Fresh, isolated adoption context."""
    return AdoptionContext(parameter_store=store, registry=AdoptionRegistry())
