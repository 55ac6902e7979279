#!/usr/bin/env python3
"""
utils/session.py

Session management utilities for AWS interactions.

Provides boto3 session creation, default region lookup and the static
credentials sent along with the machine type inquiry.
"""

from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError

from .exceptions import RemoteFetchError
from .logger import setup_logger

logger = setup_logger(__name__, "session.log")


class SessionManager:
    """Manages AWS sessions for the user's default credential chain."""

    @classmethod
    def get_session(
        cls, region: Optional[str] = None, profile: Optional[str] = None
    ) -> boto3.Session:
        """Create a boto3 Session from the default credential chain."""
        try:
            return boto3.Session(region_name=region or None, profile_name=profile or None)
        except BotoCoreError as e:
            raise RemoteFetchError(f"Failed to create AWS session: {e}", e) from e

    @classmethod
    def get_default_region(cls, session: boto3.Session, fallback: str = "") -> str:
        """Region the provider would pick on its own, else ``fallback``."""
        region = session.region_name or fallback
        logger.debug(f"Provider default region resolved to '{region}'")
        return region

    @classmethod
    def get_credentials(cls, session: boto3.Session) -> dict:
        """Static credentials of ``session`` as sent to the machine type inquiry."""
        credentials = session.get_credentials()
        if credentials is None:
            return {}
        frozen = credentials.get_frozen_credentials()
        return {
            "access_key_id": frozen.access_key,
            "secret_access_key": frozen.secret_key,
        }
