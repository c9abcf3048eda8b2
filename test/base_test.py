from datetime import datetime, timezone
from typing import Optional, Type

import pytest

from fix_azure_arm.json import to_json
from fix_azure_arm.resource.base import (
    CreatedByType,
    ErrorResponse,
    ListResult,
    ProxyResource,
    SystemData,
    parse_json,
)
from fix_azure_arm.resource.migrate import (
    AssessedMachineResultList,
    GroupResultList,
    HyperVCollectorList,
    Project,
    ProjectResultList,
)
from fix_azure_arm.resource.vmware import (
    AddonList,
    Cluster,
    ClusterList,
    ClusterProperties,
    ManagementCluster,
    PrivateCloud,
    PrivateCloudList,
    PrivateCloudProperties,
    Sku,
)
from fix_azure_arm.resource.vmware_network import WorkloadNetworkSegmentsList
from fix_azure_arm.resource.vmware_script import ScriptExecutionsList

list_types = [
    PrivateCloudList,
    ClusterList,
    AddonList,
    WorkloadNetworkSegmentsList,
    ScriptExecutionsList,
    ProjectResultList,
    GroupResultList,
    AssessedMachineResultList,
    HyperVCollectorList,
]


@pytest.mark.parametrize("list_type", list_types)
@pytest.mark.parametrize("next_link,expected", [(None, None), ("", None), ("https://next", "https://next")])
def test_continuation(list_type: Type[ListResult], next_link: Optional[str], expected: Optional[str]) -> None:
    js = {"value": []} if next_link is None else {"value": [], "nextLink": next_link}
    assert parse_json(js, list_type).continuation() == expected


def test_list_result_keeps_order() -> None:
    js = {"value": [{"name": name, "sku": {"name": "AV36"}} for name in ("c", "a", "b")], "nextLink": ""}
    result = ClusterList.from_json(js)
    assert [c.name for c in result.items] == ["c", "a", "b"]
    assert result.continuation() is None
    # value is always written, also when empty
    assert ClusterList().to_json() == {"value": []}


def test_flat_resource() -> None:
    cluster = Cluster(
        id="/subscriptions/sub/resourceGroups/rg1/providers/Microsoft.AVS/privateClouds/cloud1/clusters/cluster1",
        name="cluster1",
        type="Microsoft.AVS/privateClouds/clusters",
        system_data=SystemData(created_by="me", created_by_type=CreatedByType.USER),
        properties=ClusterProperties(cluster_size=3),
        sku=Sku(name="AV36"),
    )
    assert cluster.to_json() == {
        "id": "/subscriptions/sub/resourceGroups/rg1/providers/Microsoft.AVS/privateClouds/cloud1/clusters/cluster1",
        "name": "cluster1",
        "type": "Microsoft.AVS/privateClouds/clusters",
        "systemData": {"createdBy": "me", "createdByType": "User"},
        "properties": {"clusterSize": 3},
        "sku": {"name": "AV36"},
    }
    assert Cluster.from_json(cluster.to_json()) == cluster
    assert cluster.resource_group_name == "rg1"
    assert cluster.resource_subscription_id == "sub"
    assert cluster.extract_part("clusters") == "cluster1"
    assert cluster.extract_part("datastores") is None
    assert ProxyResource().resource_group_name is None


def test_tracked_resource() -> None:
    cloud = PrivateCloud(
        location="eastus2",
        tags={"owner": "ops"},
        sku=Sku(name="AV36"),
        properties=PrivateCloudProperties(
            management_cluster=ManagementCluster(cluster_size=3), network_block="192.168.48.0/22"
        ),
    )
    assert cloud.to_json() == {
        "location": "eastus2",
        "tags": {"owner": "ops"},
        "sku": {"name": "AV36"},
        "properties": {
            "managementCluster": {"clusterSize": 3},
            "networkBlock": "192.168.48.0/22",
        },
    }
    with pytest.raises(Exception):
        # location is required
        parse_json({"sku": {"name": "AV36"}}, PrivateCloud)


def test_sku() -> None:
    assert to_json(Sku(name="Standard")) == {"name": "Standard"}


def test_system_data() -> None:
    js = {
        "createdBy": "user@example.com",
        "createdByType": "ManagedIdentity",
        "createdAt": "2023-10-02T12:01:45Z",
        "lastModifiedByType": "SomethingElse",
    }
    data = parse_json(js, SystemData)
    assert data.created_by_type == CreatedByType.MANAGED_IDENTITY
    assert data.created_at == datetime(2023, 10, 2, 12, 1, 45, tzinfo=timezone.utc)
    assert data.last_modified_by_type is not None and data.last_modified_by_type.is_unknown
    assert to_json(data) == js


def test_migrate_resource() -> None:
    project = Project.from_json(
        {
            "id": "/subscriptions/sub/resourcegroups/rg1/providers/Microsoft.Migrate/assessmentprojects/p1",
            "name": "p1",
            "eTag": '"1e000c2c"',
            "location": "westeurope",
        }
    )
    assert project.e_tag == '"1e000c2c"'
    assert project.resource_group_name == "rg1"
    assert project.to_json()["eTag"] == '"1e000c2c"'
    assert "systemData" not in project.to_json()


def test_error_response() -> None:
    js = {
        "error": {
            "code": "InvalidParameter",
            "message": "The value is invalid",
            "target": "networkBlock",
            "details": [{"code": "Nested", "message": "nested error"}],
            "additionalInfo": [{"type": "PolicyViolation", "info": {"policy": "deny"}}],
        }
    }
    response = ErrorResponse.from_json(js)
    assert response.error is not None
    assert response.error.code == "InvalidParameter"
    assert response.error.details is not None and response.error.details[0].code == "Nested"
    assert response.error.additional_info is not None
    assert response.error.additional_info[0].info == {"policy": "deny"}
    assert response.to_json() == js
