"""Exception classes and validation utilities for rosa-ops.

Every user-facing failure is a ``CLIError``. The command decorator turns
them into an ``ERR:``/``WARN:`` line on stderr and a non-zero exit status.
"""

import re


class CLIError(Exception):
    """Custom exception for CLI-related errors."""

    pass


class ConfigurationError(CLIError):
    """Invalid user input: empty region, zone outside region, bad flag combination."""

    pass


class RemoteFetchError(CLIError):
    """A managed-service or cloud provider call failed."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause


class EmptyResultWarning(CLIError):
    """Nothing to show. Reported as a warning but still exits non-zero."""

    pass


class ValidationRules:
    """Validation utilities for AWS identifiers."""

    @staticmethod
    def validate_role_arn(role_arn: str) -> bool:
        """Validate IAM role ARN format."""
        return bool(
            re.match(r"^arn:aws(-[a-z]+)*:iam::\d{12}:role/[\w+=,.@/-]+$", role_arn or "")
        )
