#!/usr/bin/env python3
"""
Managed-service (OCM) API client.

Thin wrapper around the clusters_mgmt and accounts_mgmt REST endpoints
used by rosa-ops. Every transport or HTTP failure surfaces as
``RemoteFetchError``.
"""

from typing import Any, Dict, List, Optional, Sequence

import requests

from rosa_ops.core.constants import (
    AWS_CLOUD_PROVIDER,
    DEFAULT_OCM_TIMEOUT,
    OCM_PRODUCT,
    QUOTA_WILDCARD,
)
from rosa_ops.core.models.machine_type import AvailableMachineType, MachineType
from rosa_ops.utils.exceptions import RemoteFetchError
from rosa_ops.utils.logger import setup_logger

REGIONS_PATH = "/api/clusters_mgmt/v1/cloud_providers/aws/regions"
MACHINE_TYPES_INQUIRY_PATH = "/api/clusters_mgmt/v1/aws_inquiries/machine_types"
CURRENT_ACCOUNT_PATH = "/api/accounts_mgmt/v1/current_account"
QUOTA_COST_PATH = "/api/accounts_mgmt/v1/organizations/{organization_id}/quota_cost"


class OCMClient:
    """Client for the managed-service API."""

    def __init__(
        self,
        url: str,
        token: str = "",
        timeout: float = DEFAULT_OCM_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.url = url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})
        self.logger = setup_logger(__name__, "ocm_client.log")

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.url}{path}"
        self.logger.debug(f"{method} {url}")
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
            return resp.json()
        except requests.HTTPError as e:
            reason = _error_reason(e.response)
            self.logger.error(f"{method} {url} failed: {reason}")
            raise RemoteFetchError(reason, e) from e
        except (requests.RequestException, ValueError) as e:
            self.logger.error(f"{method} {url} failed: {e}")
            raise RemoteFetchError(str(e), e) from e

    def get_region_list(self, enabled_only: bool = True) -> List[str]:
        """Ids of the AWS regions the service supports."""
        try:
            body = self._request("GET", REGIONS_PATH, params={"size": -1})
        except RemoteFetchError as e:
            raise RemoteFetchError(
                f"Unable to retrieve supported regions: {e}", e.cause
            ) from e

        return [
            region["id"]
            for region in body.get("items", [])
            if region.get("enabled", True) or not enabled_only
        ]

    def get_machine_types(
        self,
        region: str,
        availability_zones: Sequence[str] = (),
        role_arn: str = "",
        aws_credentials: Optional[Dict[str, str]] = None,
    ) -> List[MachineType]:
        """Machine types offered in ``region``, optionally limited to zones."""
        aws: Dict[str, Any] = {}
        if role_arn:
            aws["sts"] = {"role_arn": role_arn}
        elif aws_credentials:
            aws.update(aws_credentials)

        payload: Dict[str, Any] = {"region": {"id": region}}
        if availability_zones:
            payload["availability_zones"] = list(availability_zones)
        if aws:
            payload["aws"] = aws

        try:
            body = self._request(
                "POST", MACHINE_TYPES_INQUIRY_PATH, params={"size": -1}, json=payload
            )
        except RemoteFetchError as e:
            raise RemoteFetchError(f"Failed to fetch instance types: {e}", e.cause) from e

        return [MachineType.from_api(item) for item in body.get("items", [])]

    def get_current_account(self) -> Dict[str, Any]:
        try:
            return self._request("GET", CURRENT_ACCOUNT_PATH)
        except RemoteFetchError as e:
            raise RemoteFetchError(f"Failed to get current account: {e}", e.cause) from e

    def get_quota_cost(self, organization_id: str) -> List[Dict[str, Any]]:
        path = QUOTA_COST_PATH.format(organization_id=organization_id)
        try:
            body = self._request(
                "GET", path, params={"fetchRelatedResources": "true", "size": -1}
            )
        except RemoteFetchError as e:
            raise RemoteFetchError(f"Failed to get quota: {e}", e.cause) from e
        return body.get("items", [])

    def get_available_machine_types(
        self,
        region: str,
        availability_zones: Sequence[str] = (),
        role_arn: str = "",
        aws_credentials: Optional[Dict[str, str]] = None,
        has_quota: bool = True,
    ) -> List[AvailableMachineType]:
        """Machine types in ``region`` marked with whether the account may use them."""
        machine_types = self.get_machine_types(
            region, availability_zones, role_arn, aws_credentials
        )
        if not has_quota:
            return [AvailableMachineType(machine, True) for machine in machine_types]

        account = self.get_current_account()
        organization_id = (account.get("organization") or {}).get("id", "")
        quota_cost = self.get_quota_cost(organization_id)

        return [
            AvailableMachineType(machine, has_quota_for(machine, quota_cost))
            for machine in machine_types
        ]


def has_quota_for(machine: MachineType, quota_cost: List[Dict[str, Any]]) -> bool:
    """True when some quota entry covers ``machine`` and has room left."""
    for quota in quota_cost:
        for resource in quota.get("related_resources", []):
            if not _matches(resource.get("resource_name"), machine.generic_name):
                continue
            if not _matches(resource.get("product"), OCM_PRODUCT):
                continue
            if not _matches(resource.get("cloud_provider"), AWS_CLOUD_PROVIDER):
                continue
            cost = resource.get("cost", 0)
            if cost == 0 or quota.get("allowed", 0) - quota.get("consumed", 0) >= cost:
                return True
    return False


def _matches(value: Optional[str], expected: str) -> bool:
    if value is None:
        return True
    return value == QUOTA_WILDCARD or value.lower() == expected.lower()


def _error_reason(response: Optional[requests.Response]) -> str:
    if response is None:
        return "request failed"
    try:
        body = response.json()
    except ValueError:
        return f"status {response.status_code}: {response.text.strip()}"
    return body.get("reason") or f"status {response.status_code}"
