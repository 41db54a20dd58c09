"""Tests for tag access and name normalization."""

import pytest
from holdover.adoption.naming import canonical_name, get_tag, instance_name_from_tags
from holdover.core.errors import HoldoverError, InvalidTagError, MissingTagError
from holdover.discovery.models import DiscoveredResource


class TestGetTag:
    """Tests for get_tag accessor."""

    def test_returns_tag_value(self, instance_factory):
        resource = instance_factory("FirewallA", "i-1", "fw1_az1a")

        assert get_tag(resource, "Name") == "fw1_az1a"
        assert get_tag(resource, "Environment") == "prod"

    def test_key_match_is_case_sensitive(self, instance_factory):
        resource = instance_factory("FirewallA", "i-1", "fw1")

        with pytest.raises(MissingTagError):
            get_tag(resource, "name")

    def test_missing_tag_raises(self, instance_factory):
        resource = instance_factory("FirewallA", "i-1", name=None)

        with pytest.raises(MissingTagError) as exc_info:
            instance_name_from_tags(resource)

        assert exc_info.value.logical_id == "FirewallA"
        assert exc_info.value.tag_name == "Name"
        assert exc_info.value.details == {"logical_id": "FirewallA", "tag": "Name"}

    def test_resource_without_properties(self):
        """Metadata without Properties.Tags has no tags at all."""
        resource = DiscoveredResource(
            resource_type="AWS::EC2::Instance", logical_id="Bare", physical_id="i-2"
        )

        assert resource.tags == []
        with pytest.raises(MissingTagError):
            get_tag(resource, "Name")

    def test_intrinsic_value_rejected(self):
        resource = DiscoveredResource(
            resource_type="AWS::EC2::Instance",
            logical_id="Joined",
            physical_id="i-1",
            metadata={
                "Properties": {
                    "Tags": [{"Key": "Name", "Value": {"Fn::Join": ["", ["fw", "_az1a"]]}}]
                }
            },
        )

        with pytest.raises(InvalidTagError) as exc_info:
            instance_name_from_tags(resource)

        assert isinstance(exc_info.value, HoldoverError)
        assert exc_info.value.logical_id == "Joined"

    @pytest.mark.parametrize(
        "metadata",
        [
            {"Properties": ["x"]},
            {"Properties": {"Tags": {"Key": "Name", "Value": "fw"}}},
        ],
    )
    def test_malformed_metadata_has_no_tags(self, metadata):
        resource = DiscoveredResource(
            resource_type="AWS::EC2::Instance", logical_id="Odd", physical_id="i-1", metadata=metadata
        )

        assert resource.tags == []
        with pytest.raises(MissingTagError):
            get_tag(resource, "Name")

    def test_custom_tag_name(self, instance_factory):
        resource = instance_factory("FirewallA", "i-1", "fw1")

        assert instance_name_from_tags(resource, tag_name="Environment") == "prod"


class TestCanonicalName:
    """Tests for zone-suffix stripping."""

    def test_name_without_marker_unchanged(self):
        assert canonical_name("fw1") == "fw1"

    def test_strips_zone_suffix(self):
        assert canonical_name("fw1_az1a") == "fw1"

    def test_truncates_at_first_marker(self):
        assert canonical_name("fw1_az1a_az2b") == "fw1"

    def test_custom_marker(self):
        assert canonical_name("fw1-zone-b", marker="-zone") == "fw1"

    def test_idempotent(self):
        once = canonical_name("fw-edge_az1a")
        assert canonical_name(once) == once
