#!/usr/bin/env python3
"""List the instance types available for cluster creation."""

from typing import List

import click
from tabulate import tabulate

from rosa_ops.core.aws.ec2 import EC2Manager, create_ec2_manager
from rosa_ops.core.constants import INSTANCE_TYPE_COLUMNS
from rosa_ops.core.models.machine_type import AvailableMachineType
from rosa_ops.core.processors.formatting import byte_count_iec
from rosa_ops.core.processors.region_resolver import resolve_region
from rosa_ops.core.processors.zone_validator import validate_availability_zones
from rosa_ops.jobs.base import BaseJob
from rosa_ops.utils import interactive
from rosa_ops.utils.config import GlobalOptions, ListInstanceTypesOptions
from rosa_ops.utils.exceptions import (
    ConfigurationError,
    EmptyResultWarning,
    ValidationRules,
)
from rosa_ops.utils.output import print_structured
from rosa_ops.utils.session import SessionManager

AVAILABILITY_ZONES_HELP = (
    "Limit listing to specified availability zones. "
    "Format should be a comma-separated list."
)
NO_MACHINE_TYPES_MESSAGE = (
    "There are no machine types supported for your account. Contact support."
)


class ListInstanceTypesJob(BaseJob):
    """Resolve region and zones, fetch instance types, print them."""

    def __init__(self, config_manager=None, **kwargs):
        super().__init__(config_manager=config_manager, job_name="list_instance_types", **kwargs)

    def execute(
        self, options: GlobalOptions, list_options: ListInstanceTypesOptions = None, **kwargs
    ) -> List[AvailableMachineType]:
        list_options = list_options or ListInstanceTypesOptions()
        self._validate_options(list_options)

        supported_regions = self.ocm_client.get_region_list()
        session = self.aws_session(options.region)
        region = resolve_region(
            flag_region=options.region,
            default_region=self.default_region(session),
            supported_regions=supported_regions,
            interactive_enabled=options.interactive,
        )
        ec2 = create_ec2_manager(session, region)

        zones = self._resolve_availability_zones(options, list_options, ec2, region)

        self.log_debug(f"Fetching instance types in {region} (zones={zones})")
        if list_options.list_all:
            machine_types = [
                AvailableMachineType(machine, True)
                for machine in ec2.describe_instance_types()
            ]
        else:
            credentials = (
                {} if list_options.role_arn else SessionManager.get_credentials(session)
            )
            machine_types = self.ocm_client.get_available_machine_types(
                region,
                availability_zones=zones,
                role_arn=list_options.role_arn,
                aws_credentials=credentials,
                has_quota=list_options.has_quota,
            )
        self.log_info(f"Fetched {len(machine_types)} instance types in {region}")

        if options.structured_output:
            print_structured(
                [machine.machine_type.to_dict() for machine in machine_types],
                options.output,
            )
            return machine_types

        available = [machine for machine in machine_types if machine.available]
        if not available:
            raise EmptyResultWarning(NO_MACHINE_TYPES_MESSAGE)

        click.echo(render_machine_types(available))
        return available

    def _validate_options(self, list_options: ListInstanceTypesOptions) -> None:
        if list_options.list_all and (
            list_options.availability_zones_set
            or list_options.role_arn
            or list_options.has_quota_set
        ):
            raise ConfigurationError(
                "'--all' lists instance types directly from AWS and accepts no other "
                "filter arguments"
            )
        if list_options.role_arn and not ValidationRules.validate_role_arn(
            list_options.role_arn
        ):
            raise ConfigurationError(
                f"Expected a valid role ARN, got '{list_options.role_arn}'"
            )

    def _resolve_availability_zones(
        self,
        options: GlobalOptions,
        list_options: ListInstanceTypesOptions,
        ec2: EC2Manager,
        region: str,
    ) -> List[str]:
        """Zones to filter by, checked against the region's zones."""
        zones: List[str] = []
        region_zones = None

        if list_options.availability_zones_set:
            zones = list(list_options.availability_zones)

        select_zones = False
        if options.interactive and not list_options.list_all:
            select_zones = interactive.get_bool(
                "Select availability zones",
                default=False,
                help_text=AVAILABILITY_ZONES_HELP,
            )
            if select_zones:
                region_zones = ec2.describe_availability_zones()
                zones = interactive.get_multiple_options(
                    "Availability zones",
                    options=region_zones,
                    help_text=AVAILABILITY_ZONES_HELP,
                    validators=[interactive.availability_zones_count_validator(True)],
                )

        if list_options.availability_zones_set or select_zones:
            if region_zones is None:
                region_zones = ec2.describe_availability_zones()
            validate_availability_zones(zones, region_zones, region)

        return zones


def render_machine_types(machine_types: List[AvailableMachineType]) -> str:
    rows = []
    for machine in machine_types:
        machine_type = machine.machine_type
        rows.append(
            (
                machine_type.id,
                machine_type.category,
                str(machine_type.cpu_cores),
                byte_count_iec(int(machine_type.memory.value), machine_type.memory.unit),
            )
        )
    # disable_numparse keeps every column left aligned under its header
    return tabulate(
        rows, headers=list(INSTANCE_TYPE_COLUMNS), tablefmt="plain", disable_numparse=True
    )
