import pytest
from pydantic import ValidationError

from cloudfront_invalidate.models.descriptor import (
    DirectTarget,
    OriginTarget,
    StackOutputTarget,
    TargetDescriptor,
)


def test_camel_case_fields():
    descriptor = TargetDescriptor.model_validate(
        {
            "distributionId": "D1",
            "items": ["/a", "/b/*"],
            "stage": "prod",
            "autoInvalidate": False,
        }
    )
    assert descriptor.distribution_id == "D1"
    assert descriptor.items == ["/a", "/b/*"]
    assert descriptor.stage == "prod"
    assert descriptor.auto_invalidate is False


def test_snake_case_fields():
    descriptor = TargetDescriptor(distribution_id_key="CFId", items=["/a"])
    assert descriptor.distribution_id_key == "CFId"
    assert descriptor.auto_invalidate is True


def test_items_required():
    with pytest.raises(ValidationError):
        TargetDescriptor.model_validate({"distributionId": "D1"})


@pytest.mark.parametrize(
    "expected,value",
    [
        (["a.com"], "a.com"),
        (["a.com", "b.com"], "a.com,b.com"),
        (["a.com", "b.com"], " a.com , b.com ,"),
        (["a.com", "b.com"], ["a.com", "b.com"]),
        ([], ""),
        ([], 42),
    ],
)
def test_contains_origin(expected, value):
    descriptor = TargetDescriptor.model_validate({"containsOrigin": value, "items": ["/"]})
    assert descriptor.contains_origin == expected


@pytest.mark.parametrize(
    "expected,raw",
    [
        (DirectTarget(distribution_id="D1"), {"distributionId": "D1", "containsOrigin": "a.com", "distributionIdKey": "K"}),
        (OriginTarget(domain_names=("a.com",)), {"containsOrigin": "a.com", "distributionIdKey": "K"}),
        (StackOutputTarget(output_key="K"), {"distributionIdKey": "K"}),
        (StackOutputTarget(output_key="K"), {"containsOrigin": "", "distributionIdKey": "K"}),
        (None, {}),
        (None, {"distributionId": ""}),
    ],
)
def test_strategy_priority(expected, raw):
    descriptor = TargetDescriptor.model_validate({**raw, "items": ["/"]})
    assert descriptor.strategy == expected


def test_descriptor_is_frozen():
    descriptor = TargetDescriptor(distribution_id="D1", items=["/"])
    with pytest.raises(ValidationError):
        descriptor.stage = "prod"


@pytest.mark.parametrize(
    "expected,raw",
    [
        ("D1", {"distributionId": "D1"}),
        ("K", {"distributionIdKey": "K"}),
        ("a.com,b.com", {"containsOrigin": "a.com,b.com"}),
    ],
)
def test_label(expected, raw):
    assert TargetDescriptor.model_validate({**raw, "items": ["/"]}).label == expected


@pytest.mark.parametrize("value", [True, False])
def test_auto_invalidate_bool(value):
    descriptor = TargetDescriptor.model_validate({"distributionId": "D1", "items": ["/"], "autoInvalidate": value})
    assert descriptor.auto_invalidate is value


@pytest.mark.parametrize("value", ["false", "0", "no", 0])
def test_auto_invalidate_rejects_non_bool(value):
    with pytest.raises(ValidationError):
        TargetDescriptor.model_validate({"distributionId": "D1", "items": ["/"], "autoInvalidate": value})
