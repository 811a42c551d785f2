"""Reads invalidation targets from a serverless.yml or JSON file."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from cloudfront_invalidate.errors import ConfigurationError
from cloudfront_invalidate.models.descriptor import TargetDescriptor


class DescriptorFile(BaseModel):
    descriptors: list[TargetDescriptor] = Field(default_factory=list)
    rejected: list[str] = Field(default_factory=list)
    service: str | None = None
    stage: str | None = None


def read_document(path: Path) -> Any:
    if not path.is_file():
        raise ConfigurationError(f"Config file {str(path)!r} does not exist")

    with open(path, encoding="utf-8") as f:
        try:
            if path.suffix.lower() in (".yaml", ".yml"):
                return yaml.safe_load(f)
            return json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not parse {str(path)!r}: {e}") from e


def find_targets(document: Any, key: str) -> list[Any] | None:
    """Locate the target list: ``custom.<key>``, top-level ``<key>``, or the document."""
    if isinstance(document, list):
        return document
    if not isinstance(document, dict):
        return None

    custom = document.get("custom")
    if isinstance(custom, dict) and key in custom:
        return custom[key]
    return document.get(key)


def literal(value: Any) -> str | None:
    """Plain string values only, unresolved ${...} variables are ignored."""
    if isinstance(value, str) and "${" not in value:
        return value
    return None


def service_name(document: Any) -> str | None:
    if not isinstance(document, dict):
        return None
    service = document.get("service")
    # serverless v1 allows `service: {name: ...}`
    if isinstance(service, dict):
        service = service.get("name")
    return literal(service)


def provider_stage(document: Any) -> str | None:
    if not isinstance(document, dict):
        return None
    provider = document.get("provider")
    if isinstance(provider, dict):
        return literal(provider.get("stage"))
    return None


def load_descriptors(
    path: str | Path, key: str = "cloudfrontInvalidate"
) -> DescriptorFile:
    """Load and validate the invalidation targets of a config file."""
    path = Path(path)
    document = read_document(path)

    targets = find_targets(document, key)
    if not isinstance(targets, list):
        raise ConfigurationError(f"No {key!r} list found in {str(path)!r}")

    descriptors = []
    rejected = []
    for index, target in enumerate(targets):
        # an invalid entry is dropped on its own, the rest of the list still loads
        try:
            descriptors.append(TargetDescriptor.model_validate(target))
        except ValidationError as e:
            rejected.append(f"Invalid {key}[{index}], skipping: {e}")

    return DescriptorFile(
        descriptors=descriptors,
        rejected=rejected,
        service=service_name(document),
        stage=provider_stage(document),
    )
