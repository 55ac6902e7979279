"""EC2 queries used by rosa-ops."""

from typing import List

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from rosa_ops.core.models.machine_type import MachineType
from rosa_ops.utils.exceptions import RemoteFetchError
from rosa_ops.utils.logger import setup_logger


class EC2Manager:
    """Region-scoped EC2 lookups."""

    def __init__(self, session: boto3.Session, region: str):
        """Initialize EC2Manager."""
        self.region = region
        self.ec2_client = session.client("ec2", region_name=region)
        self.logger = setup_logger(__name__, "ec2_manager.log")

    def describe_availability_zones(self) -> List[str]:
        """Names of the available zones in this region."""
        try:
            response = self.ec2_client.describe_availability_zones(
                Filters=[
                    {"Name": "region-name", "Values": [self.region]},
                    {"Name": "state", "Values": ["available"]},
                ]
            )
        except (ClientError, BotoCoreError) as e:
            self.logger.error(f"Error describing availability zones in {self.region}: {e}")
            raise RemoteFetchError(
                f"Failed to get the list of the availability zone: {e}", e
            ) from e

        zones = [zone["ZoneName"] for zone in response.get("AvailabilityZones", [])]
        self.logger.debug(f"Availability zones in {self.region}: {zones}")
        return zones

    def describe_instance_types(self) -> List[MachineType]:
        """Every instance type offered in this region, sorted by id."""
        machine_types = []
        try:
            paginator = self.ec2_client.get_paginator("describe_instance_types")
            for page in paginator.paginate():
                for info in page.get("InstanceTypes", []):
                    machine_types.append(MachineType.from_ec2_instance_type(info))
        except (ClientError, BotoCoreError) as e:
            self.logger.error(f"Error describing instance types in {self.region}: {e}")
            raise RemoteFetchError(f"Failed to fetch instance types: {e}", e) from e

        self.logger.debug(f"Found {len(machine_types)} instance types in {self.region}")
        return sorted(machine_types, key=lambda machine: machine.id)


def create_ec2_manager(session: boto3.Session, region: str) -> EC2Manager:
    """Create EC2Manager instance."""
    return EC2Manager(session, region)
