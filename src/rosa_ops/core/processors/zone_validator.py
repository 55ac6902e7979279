#!/usr/bin/env python3
"""Availability zone validation against a region's authoritative zone list."""

from typing import Iterable, Sequence

from rosa_ops.utils.exceptions import ConfigurationError


def validate_availability_zones(
    requested: Sequence[str], region_zones: Iterable[str], region: str
) -> None:
    """Check every requested zone belongs to ``region``.

    Stops at the first zone that is not in ``region_zones`` and raises
    ``ConfigurationError`` naming it. Requested zones are checked in order
    and are not deduplicated.
    """
    authoritative = set(region_zones)
    for zone in requested:
        if zone not in authoritative:
            raise ConfigurationError(
                f"Expected a valid availability zone, "
                f"'{zone}' doesn't belong to region '{region}' availability zones"
            )
