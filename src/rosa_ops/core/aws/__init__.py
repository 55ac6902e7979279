"""AWS core modules."""

from .ec2 import EC2Manager, create_ec2_manager
from .sts import STSManager, create_sts_manager

__all__ = [
    "EC2Manager",
    "create_ec2_manager",
    "STSManager",
    "create_sts_manager",
]
