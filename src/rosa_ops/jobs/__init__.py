"""rosa-ops jobs package."""

from .base import BaseJob
from .list_instance_types import ListInstanceTypesJob
from .whoami import WhoAmIJob

__all__ = [
    "BaseJob",
    "ListInstanceTypesJob",
    "WhoAmIJob",
]
