#!/usr/bin/env python3
"""
utils/config.py

Configuration management for rosa-ops.
Loads configs/settings.yaml and applies environment variable overrides.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from rosa_ops.core.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_OCM_TIMEOUT,
    DEFAULT_OCM_URL,
)
from rosa_ops.utils.logger import setup_logger

logger = setup_logger(__name__, "config.log")


@dataclass(frozen=True)
class GlobalOptions:
    """Flags shared by every command, resolved once by the CLI layer."""

    region: str = ""
    interactive: bool = False
    assume_yes: bool = False
    output: str = ""
    verbose: bool = False

    @property
    def structured_output(self) -> bool:
        return bool(self.output)


@dataclass(frozen=True)
class ListInstanceTypesOptions:
    """Options of ``list instance-types``."""

    availability_zones: Tuple[str, ...] = field(default_factory=tuple)
    availability_zones_set: bool = False
    has_quota: bool = True
    has_quota_set: bool = False
    role_arn: str = ""
    list_all: bool = False


class ConfigManager:
    """
    Simple configuration manager.

    Features:
    - YAML configuration loading
    - Environment variable override support
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize ConfigManager.

        Args:
            config_dir: Custom config directory path (defaults to
                $ROSA_OPS_CONFIG_DIR, then ./configs)
        """
        env_dir = os.environ.get("ROSA_OPS_CONFIG_DIR")
        self.config_dir = Path(config_dir or env_dir or (Path.cwd() / "configs"))

        # Try both .yml and .yaml extensions
        yml_file = self.config_dir / "settings.yml"
        yaml_file = self.config_dir / "settings.yaml"

        if yml_file.exists():
            self.settings_file = yml_file
        else:
            self.settings_file = yaml_file

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load a YAML file safely.
        """
        if not file_path.exists():
            logger.debug(f"Config file not found: {file_path}")
            return {}

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
                return content or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Error loading {file_path}: {e}")
            return {}

    def load_settings(self) -> Dict[str, Any]:
        """
        Load application settings.
        """
        return self._load_yaml_file(self.settings_file)

    def get_value(
        self, key_path: str, default: Any = None, env_var: Optional[str] = None
    ) -> Any:
        """
        Get configuration value with dot notation support and environment variable override.
        """
        if env_var and os.environ.get(env_var):
            return os.environ[env_var]

        current = self.config
        try:
            for key in key_path.split("."):
                current = current[key]
            return current
        except (KeyError, TypeError):
            return default

    def get_ocm_url(self) -> str:
        """Get the managed-service API base URL."""
        return self.get_value("ocm.url", DEFAULT_OCM_URL, env_var="OCM_URL").rstrip("/")

    def get_ocm_token(self) -> str:
        """Get the managed-service API bearer token."""
        return self.get_value("ocm.token", "", env_var="OCM_TOKEN")

    def get_ocm_timeout(self) -> float:
        return float(self.get_value("ocm.timeout", DEFAULT_OCM_TIMEOUT))

    def get_aws_region(self) -> str:
        """Get the configured default AWS region (empty if none)."""
        return self.get_value("aws.region", "", env_var="AWS_REGION")

    def get_aws_profile(self) -> Optional[str]:
        return self.get_value("aws.profile", None, env_var="AWS_PROFILE")

    def get_logging_level(self) -> str:
        """Get console logging level."""
        return self.get_value("logging.level", DEFAULT_CONSOLE_LOG_LEVEL, env_var="LOG_LEVEL")

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration as a cached property."""
        if not hasattr(self, "_cached_config"):
            self._cached_config = self.load_settings()
        return self._cached_config

