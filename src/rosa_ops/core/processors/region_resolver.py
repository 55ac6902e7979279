#!/usr/bin/env python3
"""Resolve the single AWS region a command runs against."""

from typing import Sequence

from rosa_ops.utils import interactive
from rosa_ops.utils.exceptions import ConfigurationError
from rosa_ops.utils.logger import setup_logger

logger = setup_logger(__name__, "region_resolver.log")

REGION_HELP = "Use a specific AWS region, overriding the AWS_REGION environment variable."


def resolve_region(
    flag_region: str,
    default_region: str,
    supported_regions: Sequence[str],
    interactive_enabled: bool = False,
) -> str:
    """Pick the effective region.

    The ``--region`` flag wins over the provider default. In interactive mode
    the user picks from ``supported_regions`` with that value preselected.
    An empty result is a configuration error.
    """
    region = flag_region or default_region
    logger.debug(
        f"Region candidates: flag='{flag_region}', default='{default_region}', "
        f"interactive={interactive_enabled}"
    )

    if interactive_enabled:
        region = interactive.get_option(
            "AWS region",
            options=supported_regions,
            default=region,
            help_text=REGION_HELP,
            required=True,
        )

    if not region:
        raise ConfigurationError("Expected a valid AWS region")

    logger.debug(f"Using region '{region}'")
    return region
