"""Machine type data models."""

import re
from dataclasses import asdict, dataclass
from typing import Any, Dict

from rosa_ops.core.constants import BYTE_UNIT, INSTANCE_FAMILY_CATEGORIES


@dataclass(frozen=True)
class Quantity:
    """A value with its unit symbol, e.g. 16 vCPU or 17179869184 B."""
    value: float
    unit: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Quantity":
        data = data or {}
        return cls(value=data.get("value", 0), unit=data.get("unit", ""))


@dataclass(frozen=True)
class MachineType:
    """An instance type offered for cluster creation."""
    id: str
    name: str
    category: str
    generic_name: str
    cpu: Quantity
    memory: Quantity
    ccs_only: bool = False

    @property
    def cpu_cores(self) -> int:
        return int(self.cpu.value)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["kind"] = "MachineType"
        return data

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "MachineType":
        """Create MachineType from a clusters_mgmt MachineType document."""
        return cls(
            id=item["id"],
            name=item.get("name", item["id"]),
            category=item.get("category", ""),
            generic_name=item.get("generic_name", ""),
            cpu=Quantity.from_dict(item.get("cpu")),
            memory=Quantity.from_dict(item.get("memory")),
            ccs_only=item.get("ccs_only", False),
        )

    @classmethod
    def from_ec2_instance_type(cls, info: Dict[str, Any]) -> "MachineType":
        """Create MachineType from an EC2 DescribeInstanceTypes entry."""
        instance_type = info["InstanceType"]
        memory_mib = info.get("MemoryInfo", {}).get("SizeInMiB", 0)
        vcpus = info.get("VCpuInfo", {}).get("DefaultVCpus", 0)
        return cls(
            id=instance_type,
            name=instance_type,
            category=category_for_instance_type(instance_type),
            generic_name=instance_type,
            cpu=Quantity(value=vcpus, unit="vCPU"),
            memory=Quantity(value=memory_mib * 1024 * 1024, unit=BYTE_UNIT),
        )


@dataclass(frozen=True)
class AvailableMachineType:
    """A machine type plus whether the account can use it."""
    machine_type: MachineType
    available: bool


def category_for_instance_type(instance_type: str) -> str:
    """Map an EC2 instance type such as ``m5.xlarge`` to a machine category."""
    family = instance_type.split(".", 1)[0]
    prefix = re.match(r"^[a-z]+", family)
    if not prefix:
        return "other"
    letters = prefix.group(0)
    for length in range(len(letters), 0, -1):
        category = INSTANCE_FAMILY_CATEGORIES.get(letters[:length])
        if category:
            return category
    return "other"
