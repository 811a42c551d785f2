"""Submits CloudFront invalidations for a list of target descriptors."""
from __future__ import annotations

import time
from typing import Callable, Iterable

from rich.console import Console
from rich.markup import escape

from cloudfront_invalidate.control_plane import ControlPlaneClient
from cloudfront_invalidate.errors import (
    DistributionListError,
    StackLookupError,
    SubmissionError,
)
from cloudfront_invalidate.models.cloudfront import InvalidationJob
from cloudfront_invalidate.models.context import DeploymentContext
from cloudfront_invalidate.models.descriptor import (
    DirectTarget,
    OriginTarget,
    StackOutputTarget,
    TargetDescriptor,
)
from cloudfront_invalidate.resolver import DistributionResolver
from cloudfront_invalidate.utils.reference import generate_reference

STACK_OUTPUT_FAILURE = (
    "Failed to get DistributionId from stack output. "
    "Please check your serverless template."
)


class Dispatcher:
    """
    Resolves and invalidates descriptors one at a time.

    Every submission attempt, successful or not, is followed by a pause of
    ``delay`` seconds. A failure only abandons the job or descriptor it
    belongs to, the rest of the batch is still processed.
    """

    def __init__(
        self,
        client: ControlPlaneClient,
        context: DeploymentContext,
        console: Console | None = None,
        no_deploy: bool = False,
        delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        make_reference: Callable[[], str] = generate_reference,
    ):
        self.client = client
        self.context = context
        self.resolver = DistributionResolver(client, context)
        self.console = console or Console(soft_wrap=True)
        self.no_deploy = no_deploy
        self.delay = delay
        self.sleep = sleep
        self.make_reference = make_reference

    def log(self, message: str, value: str | None = None):
        if value is None:
            self.console.print(message)
        else:
            self.console.print(f"{message}: [yellow]{escape(value)}[/yellow]")

    def invalidate(self, descriptors: Iterable[TargetDescriptor]):
        """Explicit invalidation of every descriptor."""
        self.run(descriptors)

    def invalidate_after_deploy(self, descriptors: Iterable[TargetDescriptor]):
        """Post-deploy invalidation, honoring ``autoInvalidate: false``."""
        selected = []
        for descriptor in descriptors:
            if descriptor.auto_invalidate:
                selected.append(descriptor)
                continue
            self.log(
                f'Will skip invalidation for the distributionId "{escape(descriptor.label)}" '
                "as autoInvalidate is set to false."
            )
        self.run(selected)

    def run(self, descriptors: Iterable[TargetDescriptor]):
        if self.no_deploy:
            self.log("skipping invalidation due to noDeploy option")
            return

        for descriptor in descriptors:
            self.process(descriptor)

    def process(self, descriptor: TargetDescriptor):
        """Resolve and submit a single descriptor."""
        reference = self.make_reference()

        if not self.resolver.matches_stage(descriptor):
            return

        strategy = descriptor.strategy
        if strategy is None:
            self.log("distributionId, containsOrigin or distributionIdKey is required")
            return

        if not descriptor.items:
            self.log("No paths to invalidate, skipping", descriptor.label)
            return

        if isinstance(strategy, DirectTarget):
            self.log("DistributionId", strategy.distribution_id)
        elif isinstance(strategy, OriginTarget):
            self.log("containsOriginArray", ",".join(strategy.domain_names))
        else:
            self.log("DistributionIdKey", strategy.output_key)

        try:
            distribution_ids = self.resolver.resolve(descriptor)
        except DistributionListError as e:
            self.log(escape(str(e)))
            return
        except StackLookupError as e:
            self.log(escape(str(e)))
            self.log(STACK_OUTPUT_FAILURE)
            return

        for distribution_id in distribution_ids:
            if isinstance(strategy, OriginTarget):
                self.log("Going to invalidate distributionId", distribution_id)

            job = InvalidationJob(
                distribution_id=distribution_id,
                reference=reference,
                items=descriptor.items,
            )
            try:
                self.submit(job)
            except SubmissionError:
                if isinstance(strategy, StackOutputTarget):
                    self.log(STACK_OUTPUT_FAILURE)
            finally:
                self.sleep(self.delay)

    def submit(self, job: InvalidationJob) -> str:
        """Submit a job, re-raising SubmissionError after reporting it."""
        try:
            invalidation_id = self.client.submit_invalidation(job)
        except SubmissionError as e:
            self.log(escape(str(e)))
            self.log("CloudfrontInvalidate", "Invalidation failed")
            raise
        self.log("CloudfrontInvalidate", "Invalidation started")
        return invalidation_id
