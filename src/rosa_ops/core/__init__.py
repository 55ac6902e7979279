"""Core rosa-ops modules: models, cloud clients and processing helpers."""

from .models import AccountIdentity, AvailableMachineType, MachineType, Quantity

__all__ = [
    "AccountIdentity",
    "AvailableMachineType",
    "MachineType",
    "Quantity",
]
