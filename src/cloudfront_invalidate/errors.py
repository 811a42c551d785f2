"""Invalidation errors."""
from __future__ import annotations


class InvalidationError(RuntimeError):
    """Base class for all invalidation errors."""


class ConfigurationError(InvalidationError):
    """Invalid or missing run configuration."""


class ControlPlaneError(InvalidationError):
    """A call to the AWS control plane failed."""


class DistributionListError(ControlPlaneError):
    """Listing CloudFront distributions failed."""


class StackLookupError(ControlPlaneError):
    """Reading the outputs of a CloudFormation stack failed."""


class SubmissionError(ControlPlaneError):
    """CloudFront rejected an invalidation request."""
