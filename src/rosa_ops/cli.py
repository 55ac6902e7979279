#!/usr/bin/env python3
"""
rosa-ops - CLI
List instance types available for cluster creation and show account identity.
"""

import click
from click.core import ParameterSource

from rosa_ops import __version__
from rosa_ops.core.constants import OUTPUT_FORMATS
from rosa_ops.jobs.list_instance_types import AVAILABILITY_ZONES_HELP, ListInstanceTypesJob
from rosa_ops.jobs.whoami import WhoAmIJob
from rosa_ops.utils.config import ConfigManager, GlobalOptions, ListInstanceTypesOptions
from rosa_ops.utils.decorators import command_operation
from rosa_ops.utils.logger import set_console_level


def setup_logging(config: ConfigManager, verbose: bool = False):
    set_console_level("DEBUG" if verbose else config.get_logging_level())


# Common CLI options
def add_common_options(func):
    func = click.option(
        "--output",
        "-o",
        type=click.Choice(OUTPUT_FORMATS),
        default=None,
        help="Output format. Allowed formats are json, yaml",
    )(func)
    func = click.option(
        "--region",
        default="",
        help="Use a specific AWS region, overriding the AWS_REGION environment variable.",
    )(func)
    func = click.option(
        "--interactive", "-i", is_flag=True, help="Enable interactive mode."
    )(func)
    func = click.option(
        "--yes", "-y", "assume_yes", is_flag=True,
        help="Automatically answer yes to confirm operation.",
    )(func)
    func = click.option("--verbose", is_flag=True, help="Enable verbose output")(func)
    return func


def build_global_options(region, interactive, assume_yes, output, verbose) -> GlobalOptions:
    return GlobalOptions(
        region=region or "",
        interactive=interactive,
        assume_yes=assume_yes,
        output=output or "",
        verbose=verbose,
    )


def split_zones(value):
    if value is None:
        return ()
    return tuple(zone.strip() for zone in value.split(",") if zone.strip())


@click.group()
@click.version_option(__version__, prog_name="rosa-ops")
@click.pass_context
def cli(ctx):
    """rosa-ops - Managed OpenShift on AWS helper"""
    ctx.ensure_object(dict)
    ctx.obj.setdefault("config", ConfigManager())


@cli.group("list")
def list_group():
    """List resources"""


@list_group.command("instance-types")
@click.option("--availability-zones", default=None, help=AVAILABILITY_ZONES_HELP)
@click.option(
    "--has-quota/--no-has-quota",
    default=True,
    help="Limit listing to only those with available quota for cluster creation.",
)
@click.option("--role-arn", default="", help="STS Role ARN to use when listing instance types.")
@click.option(
    "--all",
    "list_all",
    is_flag=True,
    help="List all directly from AWS regardless of availability for cluster creation. "
    "(No other arguments accepted.)",
)
@add_common_options
@click.pass_context
@command_operation(requires_confirmation=False)
def instance_types(
    ctx, availability_zones, has_quota, role_arn, list_all,
    region, interactive, assume_yes, output, verbose,
):
    """List Instance types

    \b
    List instance types that are available for use with ROSA.
    Example:
      rosa-ops list instance-types --all
    """
    setup_logging(ctx.obj["config"], verbose)
    options = build_global_options(region, interactive, assume_yes, output, verbose)
    ctx.obj["options"] = options

    list_options = ListInstanceTypesOptions(
        availability_zones=split_zones(availability_zones),
        availability_zones_set=availability_zones is not None,
        has_quota=has_quota,
        has_quota_set=ctx.get_parameter_source("has_quota") != ParameterSource.DEFAULT,
        role_arn=role_arn,
        list_all=list_all,
    )
    job = ListInstanceTypesJob(ctx.obj["config"], **ctx.obj.get("clients", {}))
    job.execute(options, list_options)


list_group.add_command(instance_types, name="instancetypes")


@cli.command()
@add_common_options
@click.pass_context
@command_operation(requires_confirmation=False)
def whoami(ctx, region, interactive, assume_yes, output, verbose):
    """Displays user account information"""
    setup_logging(ctx.obj["config"], verbose)
    options = build_global_options(region, interactive, assume_yes, output, verbose)
    ctx.obj["options"] = options

    job = WhoAmIJob(ctx.obj["config"], **ctx.obj.get("clients", {}))
    job.execute(options)


@cli.command()
def version():
    """Show version information"""
    click.echo(f"rosa-ops {__version__}")


if __name__ == "__main__":
    cli()
