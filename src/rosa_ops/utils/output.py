"""Structured (JSON/YAML) output for ``--output``."""

import json
from typing import Any

import click
import yaml

from rosa_ops.core.constants import OUTPUT_FORMATS
from rosa_ops.utils.exceptions import CLIError


def serialize(data: Any, output_format: str) -> str:
    """Render ``data`` as a JSON or YAML document."""
    if output_format == "json":
        return json.dumps(data, indent=2)
    if output_format == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    raise CLIError(
        f"Invalid output format '{output_format}'. "
        f"Allowed formats are {', '.join(OUTPUT_FORMATS)}"
    )


def print_structured(data: Any, output_format: str) -> None:
    try:
        document = serialize(data, output_format)
    except (TypeError, ValueError, yaml.YAMLError) as e:
        raise CLIError(f"Failed to serialize output: {e}") from e
    click.echo(document)
