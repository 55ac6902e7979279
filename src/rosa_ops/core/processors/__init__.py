"""Processing helpers shared by the jobs."""

from .formatting import byte_count_iec, format_key_values
from .region_resolver import resolve_region
from .zone_validator import validate_availability_zones

__all__ = [
    "byte_count_iec",
    "format_key_values",
    "resolve_region",
    "validate_availability_zones",
]
