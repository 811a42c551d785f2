import json

import pytest

from cloudfront_invalidate.errors import ConfigurationError
from cloudfront_invalidate.utils.descriptor_file import load_descriptors

SERVERLESS_YML = """
service: site
provider:
  name: aws
  stage: prod
custom:
  cloudfrontInvalidate:
    - distributionId: E1
      items:
        - /index.html
    - containsOrigin: a.example.com,b.example.com
      stage: prod
      items:
        - /*
    - distributionIdKey: CFId
      autoInvalidate: false
      items:
        - /css/*
"""


def test_load_serverless_yml(tmp_path):
    path = tmp_path / "serverless.yml"
    path.write_text(SERVERLESS_YML)

    loaded = load_descriptors(path)

    assert loaded.service == "site"
    assert loaded.stage == "prod"
    assert [d.distribution_id for d in loaded.descriptors] == ["E1", None, None]
    assert loaded.descriptors[1].contains_origin == ["a.example.com", "b.example.com"]
    assert loaded.descriptors[2].auto_invalidate is False


def test_unresolved_variables_are_ignored(tmp_path):
    path = tmp_path / "serverless.yaml"
    path.write_text(
        "service:\n  name: site\nprovider:\n  stage: ${opt:stage, 'dev'}\n"
        "custom:\n  cloudfrontInvalidate: []\n"
    )

    loaded = load_descriptors(path)

    assert loaded.service == "site"
    assert loaded.stage is None
    assert loaded.descriptors == []


@pytest.mark.parametrize(
    "document",
    [
        [{"distributionId": "E1", "items": ["/a"]}],
        {"cloudfrontInvalidate": [{"distributionId": "E1", "items": ["/a"]}]},
    ],
)
def test_load_json(tmp_path, document):
    path = tmp_path / "targets.json"
    path.write_text(json.dumps(document))

    loaded = load_descriptors(path)

    assert [d.distribution_id for d in loaded.descriptors] == ["E1"]


def test_custom_key(tmp_path):
    path = tmp_path / "targets.json"
    path.write_text(json.dumps({"custom": {"cdn": [{"distributionId": "E1", "items": ["/a"]}]}}))

    assert len(load_descriptors(path, key="cdn").descriptors) == 1


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="does not exist"):
        load_descriptors(tmp_path / "serverless.yml")


def test_missing_list(tmp_path):
    path = tmp_path / "serverless.yml"
    path.write_text("service: site\n")

    with pytest.raises(ConfigurationError, match="cloudfrontInvalidate"):
        load_descriptors(path)


def test_invalid_entry_is_skipped(tmp_path):
    path = tmp_path / "targets.json"
    path.write_text(
        json.dumps(
            [
                {"distributionId": "E1", "items": ["/a"]},
                {"distributionId": "E2"},
                {"distributionId": ["E3"], "items": ["/c"]},
                {"distributionId": "E4", "items": ["/d"]},
            ]
        )
    )

    loaded = load_descriptors(path)

    assert [d.distribution_id for d in loaded.descriptors] == ["E1", "E4"]
    assert len(loaded.rejected) == 2
    assert loaded.rejected[0].startswith("Invalid cloudfrontInvalidate[1]")
    assert "items" in loaded.rejected[0]
    assert loaded.rejected[1].startswith("Invalid cloudfrontInvalidate[2]")


def test_unparseable_file(tmp_path):
    path = tmp_path / "targets.json"
    path.write_text("{not json")

    with pytest.raises(ConfigurationError, match="Could not parse"):
        load_descriptors(path)
