"""Managed-service API client."""

from .client import OCMClient, has_quota_for

__all__ = ["OCMClient", "has_quota_for"]
