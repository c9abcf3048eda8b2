from typing import Dict, List
from urllib.parse import parse_qs, urlparse

import pytest
from azure.core.exceptions import HttpResponseError, ResourceNotFoundError
from conftest import StaticFileArmClient

from fix_azure_arm.azure_client import AzureResourceSpec, Pager
from fix_azure_arm.errors import (
    ArmAuthenticationError,
    ArmResourceExistsError,
    ArmResourceNotFoundError,
    ArmResponseError,
)
from fix_azure_arm.resource.vmware import PrivateCloud, PrivateCloudList, PrivateCloudUpdate
from fix_azure_arm.service.vmware import AvsClient

CloudPath = "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}/providers/Microsoft.AVS/privateClouds/{private_cloud_name}"  # noqa: E501


def query(url: str) -> Dict[str, List[str]]:
    return parse_qs(urlparse(url).query)


def test_request_path(azure_client: StaticFileArmClient) -> None:
    spec = AzureResourceSpec("vmware", CloudPath, "2023-09-01", response_type=PrivateCloud)
    assert spec.path_parameters == ["subscription_id", "resource_group_name", "private_cloud_name"]
    request = spec.request(azure_client, resource_group_name="my group", private_cloud_name="cloud/1")
    url = urlparse(request.url)
    assert request.method == "GET"
    assert url.netloc == "management.azure.com"
    # path values are encoded completely, including the slash
    assert url.path == "/subscriptions/test/resourceGroups/my%20group/providers/Microsoft.AVS/privateClouds/cloud%2F1"
    assert query(request.url) == {"api-version": ["2023-09-01"]}
    assert request.headers["Accept"] == "application/json"


def test_request_missing_path_parameter(azure_client: StaticFileArmClient) -> None:
    spec = AzureResourceSpec("vmware", CloudPath, "2023-09-01")
    with pytest.raises(KeyError):
        spec.request(azure_client, resource_group_name="rg")
    with pytest.raises(KeyError):
        spec.request(azure_client, resource_group_name="rg", private_cloud_name=None)


def test_request_query_and_headers(azure_client: StaticFileArmClient) -> None:
    spec = AzureResourceSpec(
        "vmware",
        "/subscriptions/{subscription_id}/providers/Microsoft.AVS/privateClouds",
        "2023-09-01",
        query_parameters={"filter": "$filter", "top": "$top"},
        header_parameters={"if_match": "If-Match"},
    )
    request = spec.request(azure_client, filter="name eq 'a&b'", if_match="*", headers={"x-ms-custom": "1"})
    assert query(request.url) == {"api-version": ["2023-09-01"], "$filter": ["name eq 'a&b'"]}
    assert request.headers["If-Match"] == "*"
    assert request.headers["x-ms-custom"] == "1"
    # absent optional values are not sent
    assert "$top" not in request.url


def test_request_body(azure_client: StaticFileArmClient) -> None:
    spec = AzureResourceSpec("vmware", CloudPath, "2023-09-01", method="PUT", response_type=PrivateCloud)
    body = PrivateCloud.from_json({"location": "eastus", "sku": {"name": "AV36"}, "properties": {"managementCluster": {"clusterSize": 3}, "networkBlock": "192.168.48.0/22"}})  # fmt: skip # noqa: E501
    result = azure_client.execute(spec, body, resource_group_name="rg", private_cloud_name="cloud1")
    assert azure_client.last_request.method == "PUT"
    assert azure_client.last_body() == body.to_json()
    assert result == body


def test_next_request(azure_client: StaticFileArmClient) -> None:
    spec = AzureResourceSpec("vmware", CloudPath, "2023-09-01", response_type=PrivateCloudList)
    absolute = spec.next_request(
        azure_client,
        "https://management.azure.com/subscriptions/test/providers/Microsoft.AVS/privateClouds?api-version=2023-09-01&$skipToken=2",  # noqa: E501
    )
    assert query(absolute.url) == {"api-version": ["2023-09-01"], "$skipToken": ["2"]}
    relative = spec.next_request(azure_client, "/subscriptions/test/providers/Microsoft.AVS/privateClouds?$skipToken=3")
    assert relative.url.startswith("https://management.azure.com/subscriptions/test/providers/Microsoft.AVS/privateClouds?")  # fmt: skip # noqa: E501
    assert query(relative.url) == {"api-version": ["2023-09-01"], "$skipToken": ["3"]}
    assert relative.method == "GET"


def test_pager(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    clouds = avs.private_clouds.list_in_subscription().all()
    assert [c.name for c in clouds] == ["cloud1", "cloud2"]
    assert len(azure_client.requests) == 2
    assert query(azure_client.requests[1].url)["$skipToken"] == ["2"]
    # pages are available as well
    pages = list(avs.private_clouds.list_in_subscription().by_page())
    assert len(pages) == 2
    assert pages[0].continuation() is not None
    assert pages[1].continuation() is None


def test_pager_is_lazy(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    pager = avs.private_clouds.list_in_subscription()
    assert azure_client.requests == []
    assert next(iter(pager)).name == "cloud1"
    assert len(azure_client.requests) == 1


def test_pager_needs_list_type(azure_client: StaticFileArmClient) -> None:
    with pytest.raises(ValueError):
        Pager(azure_client, AzureResourceSpec("vmware", CloudPath, "2023-09-01", response_type=PrivateCloud))
    with pytest.raises(ValueError):
        Pager(azure_client, AzureResourceSpec("vmware", CloudPath, "2023-09-01"))


def test_not_found(avs: AvsClient) -> None:
    with pytest.raises(ArmResourceNotFoundError) as ex:
        avs.private_clouds.get("group1", "does-not-exist")
    assert isinstance(ex.value, ResourceNotFoundError)
    assert ex.value.status_code == 404
    assert ex.value.error_response is not None
    assert ex.value.error_response.error is not None
    assert ex.value.error_response.error.code == "ResourceNotFound"


@pytest.mark.parametrize(
    "status,error", [(401, ArmAuthenticationError), (409, ArmResourceExistsError), (400, ArmResponseError)]
)
def test_error_mapping(avs: AvsClient, azure_client: StaticFileArmClient, status: int, error: type) -> None:
    azure_client.responses["cloud1"] = (status, {"error": {"code": "Failed", "message": "failed"}})
    with pytest.raises(error) as ex:
        avs.private_clouds.get("group1", "cloud1")
    assert isinstance(ex.value, HttpResponseError)
    assert ex.value.error_response.error.code == "Failed"  # type: ignore


def test_legacy_error_body(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    azure_client.responses["cloud1"] = (500, {"code": "InternalError", "message": "something went wrong"})
    with pytest.raises(ArmResponseError) as ex:
        avs.private_clouds.get("group1", "cloud1")
    assert ex.value.status_code == 500
    assert ex.value.error_response is not None
    assert ex.value.error_response.error.code == "InternalError"  # type: ignore
    assert ex.value.error_response.error.message == "something went wrong"  # type: ignore


def test_error_without_body(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    azure_client.responses["cloud1"] = (503, None)
    with pytest.raises(ArmResponseError) as ex:
        avs.private_clouds.get("group1", "cloud1")
    assert ex.value.error_response is None


def test_no_content(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    azure_client.responses["cloud1"] = (202, None)
    assert avs.private_clouds.update("group1", "cloud1", PrivateCloudUpdate(tags={"owner": "ops"})) is None
    assert azure_client.last_body() == {"tags": {"owner": "ops"}}
    assert avs.private_clouds.delete("group1", "cloud1") is None  # type: ignore
    assert azure_client.last_request.method == "DELETE"
