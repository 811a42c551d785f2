from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, Field


class Origin(BaseModel):
    id: str = ""
    domain_name: str


class Distribution(BaseModel):
    id: str
    domain_name: str = ""
    origins: list[Origin] = Field(default_factory=list)

    @classmethod
    def from_aws(cls, summary: dict[str, Any]) -> Distribution:
        """Build from a ``DistributionSummary`` of ListDistributions."""
        origins = summary.get("Origins", {}).get("Items", [])
        return cls(
            id=summary["Id"],
            domain_name=summary.get("DomainName", ""),
            origins=[
                Origin(id=origin.get("Id", ""), domain_name=origin["DomainName"])
                for origin in origins
            ],
        )

    def has_origin(self, domain_names: Iterable[str]) -> bool:
        """Whether any origin of this distribution is one of the domain names."""
        wanted = set(domain_names)
        return any(origin.domain_name in wanted for origin in self.origins)


class StackOutput(BaseModel):
    output_key: str
    output_value: str

    @classmethod
    def from_aws(cls, output: dict[str, Any]) -> StackOutput:
        return cls(output_key=output["OutputKey"], output_value=output["OutputValue"])


class InvalidationJob(BaseModel):
    """A single invalidation batch for one distribution."""

    distribution_id: str | None
    reference: str
    items: list[str]

    def to_request(self) -> dict[str, Any]:
        """Returns the CreateInvalidation request parameters."""
        return {
            "DistributionId": self.distribution_id,
            "InvalidationBatch": {
                "CallerReference": self.reference,
                "Paths": {
                    "Quantity": len(self.items),
                    "Items": list(self.items),
                },
            },
        }
