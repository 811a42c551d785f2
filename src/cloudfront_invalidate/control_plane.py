"""CloudFront and CloudFormation access."""
from __future__ import annotations

from typing import Any, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from cloudfront_invalidate.errors import (
    ConfigurationError,
    DistributionListError,
    StackLookupError,
    SubmissionError,
)
from cloudfront_invalidate.models.cloudfront import (
    Distribution,
    InvalidationJob,
    StackOutput,
)

DEFAULT_REGION = "us-east-1"


class ControlPlaneClient(Protocol):
    def submit_invalidation(self, job: InvalidationJob) -> str:
        """Submit an invalidation, returning its id."""
        ...

    def list_distributions(self) -> list[Distribution]:
        ...

    def describe_stack_outputs(self, stack_name: str) -> list[StackOutput]:
        ...


class AwsControlPlane:
    def __init__(self, cloudfront: Any, cloudformation: Any):
        """Initializes with boto3 ``cloudfront`` and ``cloudformation`` clients."""
        self.cloudfront = cloudfront
        self.cloudformation = cloudformation

    @classmethod
    def create(
        cls,
        region: str | None = None,
        profile: str | None = None,
        proxy_url: str | None = None,
        cacert: str | None = None,
    ) -> AwsControlPlane:
        """Creates boto3 clients from a (possibly named) profile."""
        client_kwargs: dict[str, Any] = {}
        if proxy_url:
            client_kwargs["config"] = Config(
                proxies={"http": proxy_url, "https": proxy_url}
            )
        if cacert:
            client_kwargs["verify"] = cacert

        try:
            session = boto3.session.Session(profile_name=profile, region_name=region)
            # the region only applies to CloudFormation, CloudFront is global
            client_kwargs["region_name"] = session.region_name or DEFAULT_REGION
            return cls(
                cloudfront=session.client("cloudfront", **client_kwargs),
                cloudformation=session.client("cloudformation", **client_kwargs),
            )
        except BotoCoreError as e:
            raise ConfigurationError(f"Could not create AWS clients: {e}") from e

    def submit_invalidation(self, job: InvalidationJob) -> str:
        try:
            res = self.cloudfront.create_invalidation(**job.to_request())
        except (ClientError, BotoCoreError) as e:
            raise SubmissionError(
                f"Could not invalidate {job.distribution_id}: {e}"
            ) from e
        return res["Invalidation"]["Id"]

    def list_distributions(self) -> list[Distribution]:
        distributions = []
        try:
            paginator = self.cloudfront.get_paginator("list_distributions")
            for page in paginator.paginate():
                # Items is absent when the account has no distributions
                summaries = page.get("DistributionList", {}).get("Items", [])
                distributions.extend(Distribution.from_aws(s) for s in summaries)
        except (ClientError, BotoCoreError) as e:
            raise DistributionListError(f"Could not list distributions: {e}") from e
        return distributions

    def describe_stack_outputs(self, stack_name: str) -> list[StackOutput]:
        try:
            res = self.cloudformation.describe_stacks(StackName=stack_name)
        except (ClientError, BotoCoreError) as e:
            raise StackLookupError(f"Could not describe stack {stack_name!r}: {e}") from e

        stacks = res.get("Stacks", [])
        if not stacks:
            raise StackLookupError(f"Stack {stack_name!r} not found")

        return [StackOutput.from_aws(o) for o in stacks[0].get("Outputs", [])]
