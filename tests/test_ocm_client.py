from unittest.mock import MagicMock

import pytest
import requests

from conftest import make_machine_type
from rosa_ops.core.ocm.client import OCMClient, has_quota_for
from rosa_ops.utils.exceptions import RemoteFetchError


def make_response(body, status=200):
    response = MagicMock(spec=requests.Response)
    response.status_code = status
    response.json.return_value = body
    response.text = str(body)
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


@pytest.fixture
def http_session():
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def client(http_session):
    return OCMClient("http://localhost:9000/", token="abc", session=http_session)


def test_sets_bearer_token(client, http_session):
    assert http_session.headers["Authorization"] == "Bearer abc"
    assert client.url == "http://localhost:9000"


def test_get_region_list_returns_enabled_regions(client, http_session):
    http_session.request.return_value = make_response(
        {
            "items": [
                {"id": "us-east-1", "enabled": True},
                {"id": "ap-east-1", "enabled": False},
                {"id": "eu-west-1", "enabled": True},
            ]
        }
    )

    assert client.get_region_list() == ["us-east-1", "eu-west-1"]
    method, url = http_session.request.call_args.args
    assert method == "GET"
    assert url == "http://localhost:9000/api/clusters_mgmt/v1/cloud_providers/aws/regions"


def test_get_region_list_failure(client, http_session):
    http_session.request.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(RemoteFetchError, match="Unable to retrieve supported regions"):
        client.get_region_list()


def test_http_error_uses_reason(client, http_session):
    http_session.request.return_value = make_response(
        {"reason": "Account is not allowed"}, status=403
    )

    with pytest.raises(RemoteFetchError, match="Account is not allowed"):
        client.get_current_account()


def test_get_machine_types_sends_sts_role(client, http_session):
    http_session.request.return_value = make_response(
        {
            "items": [
                {
                    "id": "m5.xlarge",
                    "category": "general_purpose",
                    "generic_name": "standard-4",
                    "cpu": {"value": 4, "unit": "vCPU"},
                    "memory": {"value": 17179869184, "unit": "B"},
                }
            ]
        }
    )

    machine_types = client.get_machine_types(
        "us-east-1",
        ["us-east-1a"],
        role_arn="arn:aws:iam::123456789012:role/Installer",
        aws_credentials={"access_key_id": "ignored"},
    )

    assert machine_types[0].id == "m5.xlarge"
    assert machine_types[0].cpu_cores == 4
    payload = http_session.request.call_args.kwargs["json"]
    assert payload == {
        "region": {"id": "us-east-1"},
        "availability_zones": ["us-east-1a"],
        "aws": {"sts": {"role_arn": "arn:aws:iam::123456789012:role/Installer"}},
    }


def test_get_machine_types_sends_credentials_without_role(client, http_session):
    http_session.request.return_value = make_response({"items": []})

    client.get_machine_types("us-east-1", aws_credentials={"access_key_id": "AKIA"})

    payload = http_session.request.call_args.kwargs["json"]
    assert payload == {"region": {"id": "us-east-1"}, "aws": {"access_key_id": "AKIA"}}


def test_available_machine_types_without_quota_check(client, monkeypatch):
    machine = make_machine_type("m5.xlarge")
    monkeypatch.setattr(client, "get_machine_types", lambda *args: [machine])
    monkeypatch.setattr(
        client, "get_current_account", lambda: pytest.fail("quota should not be checked")
    )

    result = client.get_available_machine_types("us-east-1", has_quota=False)

    assert [(m.machine_type.id, m.available) for m in result] == [("m5.xlarge", True)]


def test_available_machine_types_with_quota(client, monkeypatch):
    covered = make_machine_type("m5.xlarge")
    uncovered = make_machine_type("p3.2xlarge")
    monkeypatch.setattr(client, "get_machine_types", lambda *args: [covered, uncovered])
    monkeypatch.setattr(client, "get_current_account", lambda: {"organization": {"id": "org1"}})
    quota = [
        {
            "allowed": 10,
            "consumed": 2,
            "related_resources": [
                {"resource_name": covered.generic_name, "product": "ROSA",
                 "cloud_provider": "aws", "cost": 1},
            ],
        }
    ]
    monkeypatch.setattr(client, "get_quota_cost", lambda organization_id: quota)

    result = client.get_available_machine_types("us-east-1")

    assert [(m.machine_type.id, m.available) for m in result] == [
        ("m5.xlarge", True),
        ("p3.2xlarge", False),
    ]


class TestHasQuotaFor:
    def test_wildcard_resource(self):
        quota = [{"allowed": 0, "consumed": 0, "related_resources": [
            {"resource_name": "any", "product": "any", "cloud_provider": "any", "cost": 0}
        ]}]
        assert has_quota_for(make_machine_type("m5.xlarge"), quota)

    def test_exhausted_quota(self):
        machine = make_machine_type("m5.xlarge")
        quota = [{"allowed": 2, "consumed": 2, "related_resources": [
            {"resource_name": machine.generic_name, "product": "ROSA",
             "cloud_provider": "aws", "cost": 1}
        ]}]
        assert not has_quota_for(machine, quota)

    def test_other_product(self):
        machine = make_machine_type("m5.xlarge")
        quota = [{"allowed": 5, "consumed": 0, "related_resources": [
            {"resource_name": machine.generic_name, "product": "OSD",
             "cloud_provider": "aws", "cost": 1}
        ]}]
        assert not has_quota_for(machine, quota)
