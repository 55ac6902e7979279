import os
import tempfile

# Keep log files out of the working tree; must be set before rosa_ops is imported.
os.environ.setdefault("LOG_PATH", tempfile.mkdtemp(prefix="rosa-ops-logs-"))

from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from rosa_ops.core.models.machine_type import AvailableMachineType, MachineType, Quantity
from rosa_ops.core.ocm.client import OCMClient
from rosa_ops.utils.config import ConfigManager

GIB = 1024 ** 3


def make_machine_type(machine_id, category="general_purpose", cpu=4, memory=16 * GIB, unit="B"):
    return MachineType(
        id=machine_id,
        name=machine_id,
        category=category,
        generic_name=machine_id.replace(".", "-"),
        cpu=Quantity(value=cpu, unit="vCPU"),
        memory=Quantity(value=memory, unit=unit),
    )


@pytest.fixture
def cli_runner():
    """Create Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_manager(tmp_path, monkeypatch):
    """ConfigManager pointing at an empty config directory."""
    for var in ("OCM_URL", "OCM_TOKEN", "AWS_REGION", "AWS_PROFILE"):
        monkeypatch.delenv(var, raising=False)
    return ConfigManager(config_dir=tmp_path)


@pytest.fixture
def aws_session():
    session = MagicMock()
    session.region_name = "us-east-1"
    frozen = session.get_credentials.return_value.get_frozen_credentials.return_value
    frozen.access_key = "AKIAEXAMPLE"
    frozen.secret_key = "secret"
    return session


@pytest.fixture
def ocm_client():
    client = MagicMock(spec=OCMClient)
    client.url = "http://localhost:9000"
    client.get_region_list.return_value = ["us-east-1", "us-west-2", "eu-west-1"]
    client.get_available_machine_types.return_value = [
        AvailableMachineType(make_machine_type("m5.xlarge"), True),
        AvailableMachineType(
            make_machine_type("r5.xlarge", "memory_optimized", 4, 32 * GIB), True
        ),
        AvailableMachineType(
            make_machine_type("p3.2xlarge", "accelerated_computing", 8, 61 * GIB), False
        ),
    ]
    return client


@pytest.fixture
def ec2_manager():
    manager = MagicMock()
    manager.describe_availability_zones.return_value = [
        "us-east-1a",
        "us-east-1b",
        "us-east-1c",
    ]
    manager.describe_instance_types.return_value = [
        make_machine_type("t3.micro", cpu=2, memory=1 * GIB),
    ]
    return manager


@pytest.fixture
def cli_obj(config_manager, ocm_client, aws_session):
    """Context object injecting the fake clients into the CLI."""
    return {
        "config": config_manager,
        "clients": {"ocm_client": ocm_client, "aws_session": aws_session},
    }
