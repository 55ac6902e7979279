"""Simple data models for rosa-ops."""

from .account import AccountIdentity
from .machine_type import (
    AvailableMachineType,
    MachineType,
    Quantity,
    category_for_instance_type,
)

__all__ = [
    "AccountIdentity",
    "AvailableMachineType",
    "MachineType",
    "Quantity",
    "category_for_instance_type",
]
