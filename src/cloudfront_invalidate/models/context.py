from __future__ import annotations

from pydantic import BaseModel

from cloudfront_invalidate.errors import ConfigurationError


class DeploymentContext(BaseModel):
    """The stage and stack an invalidation run is bound to."""

    stage: str
    service: str | None = None
    stack_name: str | None = None

    @property
    def resolved_stack_name(self) -> str:
        """The explicit stack name, else the serverless ``{service}-{stage}`` default."""
        if self.stack_name:
            return self.stack_name
        if not self.service:
            raise ConfigurationError(
                "A service or stack name is required to look up stack outputs"
            )
        return f"{self.service}-{self.stage}"
