"""Account identity model for ``whoami``."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class AccountIdentity:
    aws_arn: str
    aws_account_id: str
    aws_default_region: str
    ocm_api: str
    ocm_account_email: str
    ocm_account_id: str
    ocm_account_name: str
    ocm_account_username: str
    ocm_organization_external_id: str
    ocm_organization_id: str
    ocm_organization_name: str

    def to_display_dict(self) -> Dict[str, str]:
        """Labelled fields in display order."""
        return {
            "AWS ARN": self.aws_arn,
            "AWS Account ID": self.aws_account_id,
            "AWS Default Region": self.aws_default_region,
            "OCM API": self.ocm_api,
            "OCM Account Email": self.ocm_account_email,
            "OCM Account ID": self.ocm_account_id,
            "OCM Account Name": self.ocm_account_name,
            "OCM Account Username": self.ocm_account_username,
            "OCM Organization External ID": self.ocm_organization_external_id,
            "OCM Organization ID": self.ocm_organization_id,
            "OCM Organization Name": self.ocm_organization_name,
        }

    @classmethod
    def from_sources(
        cls,
        caller_identity: Dict[str, Any],
        default_region: str,
        ocm_api: str,
        account: Dict[str, Any],
    ) -> "AccountIdentity":
        organization = account.get("organization") or {}
        full_name = " ".join(
            part for part in (account.get("first_name"), account.get("last_name")) if part
        )
        return cls(
            aws_arn=caller_identity.get("Arn") or "",
            aws_account_id=caller_identity.get("Account") or "",
            aws_default_region=default_region,
            ocm_api=ocm_api,
            ocm_account_email=account.get("email") or "",
            ocm_account_id=account.get("id") or "",
            ocm_account_name=full_name,
            ocm_account_username=account.get("username") or "",
            ocm_organization_external_id=organization.get("external_id") or "",
            ocm_organization_id=organization.get("id") or "",
            ocm_organization_name=organization.get("name") or "",
        )
