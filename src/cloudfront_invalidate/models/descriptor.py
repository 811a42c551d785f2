from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, Field, StrictBool
from typing_extensions import Annotated


def split_origins(value: Any) -> list[str]:
    """Accept a comma separated string or a list of domain names."""
    if isinstance(value, str):
        parts = value.split(",")
    elif isinstance(value, (list, tuple)):
        parts = [part for part in value if isinstance(part, str)]
    else:
        return []
    return [part.strip() for part in parts if part.strip()]


OriginList = Annotated[list[str], BeforeValidator(split_origins)]


class DirectTarget(BaseModel):
    kind: Literal["direct"] = "direct"
    distribution_id: str

    class Config:
        frozen = True


class OriginTarget(BaseModel):
    kind: Literal["origin"] = "origin"
    domain_names: tuple[str, ...]

    class Config:
        frozen = True


class StackOutputTarget(BaseModel):
    kind: Literal["stack_output"] = "stack_output"
    output_key: str

    class Config:
        frozen = True


ResolutionStrategy = Annotated[
    Union[DirectTarget, OriginTarget, StackOutputTarget],
    Field(discriminator="kind"),
]


class TargetDescriptor(BaseModel):
    """One entry of the ``cloudfrontInvalidate`` list."""

    distribution_id: str | None = Field(alias="distributionId", default=None)
    contains_origin: OriginList = Field(alias="containsOrigin", default_factory=list)
    distribution_id_key: str | None = Field(alias="distributionIdKey", default=None)
    items: list[str]
    stage: str | None = None
    auto_invalidate: StrictBool = Field(alias="autoInvalidate", default=True)

    class Config:
        frozen = True
        populate_by_name = True

    @property
    def strategy(self) -> ResolutionStrategy | None:
        """
        Resolution strategy, by priority: distribution id, origin match,
        stack output key. None when the descriptor names none of them.
        """
        if self.distribution_id:
            return DirectTarget(distribution_id=self.distribution_id)
        if self.contains_origin:
            return OriginTarget(domain_names=tuple(self.contains_origin))
        if self.distribution_id_key:
            return StackOutputTarget(output_key=self.distribution_id_key)
        return None

    @property
    def label(self) -> str:
        if self.distribution_id or self.distribution_id_key:
            return self.distribution_id or self.distribution_id_key
        return ",".join(self.contains_origin)
