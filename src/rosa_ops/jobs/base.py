"""Base job class for rosa-ops commands."""

import uuid
from abc import ABC, abstractmethod
from typing import Any, Optional

import boto3

from rosa_ops.core.ocm.client import OCMClient
from rosa_ops.utils.config import ConfigManager, GlobalOptions
from rosa_ops.utils.logger import setup_logger
from rosa_ops.utils.session import SessionManager


class BaseJob(ABC):
    """Base class for all rosa-ops jobs.

    Holds the configuration, a per-run correlation id and lazily created
    clients for the managed-service API and AWS. Clients may be injected.
    """

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        job_name: Optional[str] = None,
        ocm_client: Optional[OCMClient] = None,
        aws_session: Optional[boto3.Session] = None,
    ):
        self.config_manager = config_manager or ConfigManager()
        self.job_name = job_name or self.__class__.__name__.lower().replace("job", "")
        self.correlation_id = str(uuid.uuid4())[:8]  # Short correlation ID for tracking
        self._ocm_client = ocm_client
        self._aws_session = aws_session

        self.logger = setup_logger(
            name=self.__class__.__module__,
            log_file=f"{self.job_name}.log",
        )

    @property
    def ocm_client(self) -> OCMClient:
        if self._ocm_client is None:
            url = self.config_manager.get_ocm_url()
            self.log_debug(f"Creating OCM client for {url}")
            self._ocm_client = OCMClient(
                url=url,
                token=self.config_manager.get_ocm_token(),
                timeout=self.config_manager.get_ocm_timeout(),
            )
        return self._ocm_client

    def aws_session(self, region: str = "") -> boto3.Session:
        """AWS session from the default credential chain, created once per job."""
        if self._aws_session is None:
            self.log_debug(f"Creating AWS session (region='{region or 'default'}')")
            self._aws_session = SessionManager.get_session(
                region=region, profile=self.config_manager.get_aws_profile()
            )
        return self._aws_session

    def default_region(self, session: boto3.Session) -> str:
        return SessionManager.get_default_region(
            session, fallback=self.config_manager.get_aws_region()
        )

    def log_debug(self, message: str) -> None:
        self.logger.debug(f"[{self.correlation_id}] {message}")

    def log_info(self, message: str) -> None:
        self.logger.info(f"[{self.correlation_id}] {message}")

    @abstractmethod
    def execute(self, options: GlobalOptions, **kwargs) -> Any:
        """Execute the job with given parameters."""
        pass
