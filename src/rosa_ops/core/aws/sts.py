"""STS identity lookup."""

from typing import Any, Dict

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from rosa_ops.utils.exceptions import RemoteFetchError
from rosa_ops.utils.logger import setup_logger


class STSManager:
    """Caller identity for the active credentials."""

    def __init__(self, session: boto3.Session):
        self.sts_client = session.client("sts")
        self.logger = setup_logger(__name__, "sts_manager.log")

    def get_caller_identity(self) -> Dict[str, Any]:
        try:
            identity = self.sts_client.get_caller_identity()
        except (ClientError, BotoCoreError) as e:
            self.logger.error(f"Error getting caller identity: {e}")
            raise RemoteFetchError(f"Failed to get AWS caller identity: {e}", e) from e
        self.logger.debug(f"Caller identity: {identity.get('Arn')}")
        return identity


def create_sts_manager(session: boto3.Session) -> STSManager:
    """Create STSManager instance."""
    return STSManager(session)
