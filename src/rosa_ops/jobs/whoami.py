#!/usr/bin/env python3
"""Print AWS and managed-service account identity."""

import click

from rosa_ops.core.aws.sts import create_sts_manager
from rosa_ops.core.models.account import AccountIdentity
from rosa_ops.core.processors.formatting import format_key_values
from rosa_ops.jobs.base import BaseJob
from rosa_ops.utils.config import GlobalOptions
from rosa_ops.utils.output import print_structured


class WhoAmIJob(BaseJob):
    """Collect identity from STS and the current OCM account."""

    def __init__(self, config_manager=None, **kwargs):
        super().__init__(config_manager=config_manager, job_name="whoami", **kwargs)

    def execute(self, options: GlobalOptions, **kwargs) -> AccountIdentity:
        session = self.aws_session(options.region)
        caller_identity = create_sts_manager(session).get_caller_identity()
        account = self.ocm_client.get_current_account()

        identity = AccountIdentity.from_sources(
            caller_identity=caller_identity,
            default_region=options.region or self.default_region(session),
            ocm_api=self.ocm_client.url,
            account=account,
        )
        self.log_info(f"Resolved identity {identity.aws_arn} / {identity.ocm_account_username}")

        if options.structured_output:
            print_structured(identity.to_display_dict(), options.output)
        else:
            click.echo(format_key_values(identity.to_display_dict()))
        return identity
