"""Resolves target descriptors to distribution ids."""
from __future__ import annotations

from cloudfront_invalidate.control_plane import ControlPlaneClient
from cloudfront_invalidate.errors import ConfigurationError, StackLookupError
from cloudfront_invalidate.models.context import DeploymentContext
from cloudfront_invalidate.models.descriptor import (
    DirectTarget,
    OriginTarget,
    StackOutputTarget,
    TargetDescriptor,
)


class DistributionResolver:
    def __init__(self, client: ControlPlaneClient, context: DeploymentContext):
        self.client = client
        self.context = context

    def matches_stage(self, descriptor: TargetDescriptor) -> bool:
        """Whether the descriptor applies to the current stage."""
        return descriptor.stage is None or descriptor.stage == self.context.stage

    def resolve(self, descriptor: TargetDescriptor) -> list[str | None]:
        """
        Distribution ids to invalidate for a descriptor.

        A stack output lookup without a matching output yields ``[None]``,
        the submission is still attempted and fails at CloudFront.
        Raises DistributionListError or StackLookupError when the
        control plane call fails.
        """
        strategy = descriptor.strategy

        if isinstance(strategy, DirectTarget):
            return [strategy.distribution_id]

        if isinstance(strategy, OriginTarget):
            return self.resolve_origins(strategy.domain_names)

        if isinstance(strategy, StackOutputTarget):
            return [self.resolve_stack_output(strategy.output_key)]

        return []

    def resolve_origins(self, domain_names: tuple[str, ...]) -> list[str]:
        return [
            distribution.id
            for distribution in self.client.list_distributions()
            if distribution.has_origin(domain_names)
        ]

    def resolve_stack_output(self, output_key: str) -> str | None:
        try:
            stack_name = self.context.resolved_stack_name
        except ConfigurationError as e:
            raise StackLookupError(str(e)) from e

        for output in self.client.describe_stack_outputs(stack_name):
            if output.output_key == output_key:
                return output.output_value
        return None
