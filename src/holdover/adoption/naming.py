"""
Name normalization for discovered resources.

The legacy engine creates one instance per availability zone and suffixes
each Name tag with a zone marker (``fw-edge_az1a``, ``fw-edge_az1b``). The
instance name keeps addressing each copy individually; the canonical name
drops the marker so every copy joins against the same configuration entry.
"""

from __future__ import annotations

from holdover.core.errors import InvalidTagError, MissingTagError
from holdover.discovery.models import DiscoveredResource

NAME_TAG = "Name"
ZONE_MARKER = "_az"


def get_tag(resource: DiscoveredResource, key: str) -> str:
    """Return the value of the tag whose key is exactly ``key``."""
    for tag_key, tag_value in resource.tags:
        if tag_key == key:
            if not isinstance(tag_value, str):
                raise InvalidTagError(resource.logical_id, key, tag_value)
            return tag_value
    raise MissingTagError(resource.logical_id, key)


def instance_name_from_tags(resource: DiscoveredResource, tag_name: str = NAME_TAG) -> str:
    return get_tag(resource, tag_name)


def canonical_name(name: str, marker: str = ZONE_MARKER) -> str:
    """
    Strip the zone suffix from an instance name.

    Examples:
        >>> canonical_name("fw1_az1a")
        'fw1'
        >>> canonical_name("fw1_az1a_az2b")
        'fw1'
        >>> canonical_name("fw1")
        'fw1'
    """
    return name.split(marker, 1)[0]
