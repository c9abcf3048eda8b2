from datetime import datetime, timezone
from typing import Any, Dict
from urllib.parse import unquote, urlparse

import pytest
from conftest import StaticFileArmClient

from fix_azure_arm.resource.vmware import (
    AddonArcProperties,
    AddonHcxProperties,
    AddonSrmProperties,
    AddonVrProperties,
    AffinityStrength,
    Cluster,
    ClusterProperties,
    ClusterUpdate,
    ClusterUpdateProperties,
    Datastore,
    DatastoreProperties,
    DatastoreStatus,
    DiskPoolVolume,
    InternetEnum,
    IscsiPath,
    IscsiPathProperties,
    MountOption,
    Origin,
    PlacementPolicyState,
    PlacementPolicyUpdate,
    PlacementPolicyUpdateProperties,
    PrivateCloudProvisioningState,
    PrivateCloudUpdate,
    PrivateCloudUpdateProperties,
    Sku,
    TrialStatus,
    VirtualMachineRestrictMovement,
    VirtualMachineRestrictMovementState,
    VmHostPlacementPolicyProperties,
    VmVmPlacementPolicyProperties,
)
from fix_azure_arm.resource.vmware_network import (
    VmTypeEnum,
    WorkloadNetworkDhcp,
    WorkloadNetworkDhcpRelay,
    WorkloadNetworkDhcpServer,
    WorkloadNetworkSegment,
    WorkloadNetworkSegmentProperties,
)
from fix_azure_arm.resource.vmware_script import (
    PsCredentialExecutionParameter,
    ScriptExecution,
    ScriptExecutionProperties,
    ScriptOutputStreamType,
    ScriptSecureStringExecutionParameter,
    ScriptStringExecutionParameter,
)
from fix_azure_arm.service.vmware import AvsClient

CloudArgs: Dict[str, Any] = dict(resource_group_name="group1", private_cloud_name="cloud1")
ClusterArgs: Dict[str, Any] = dict(cluster_name="cluster1", **CloudArgs)
CloudPath = "/subscriptions/test/resourceGroups/group1/providers/Microsoft.AVS/privateClouds/cloud1"


def path_of(client: StaticFileArmClient) -> str:
    return unquote(urlparse(client.last_request.url).path)


def test_operations(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    operations = avs.operations.list().all()
    assert len(operations) == 2
    assert operations[0].origin == Origin.USER_SYSTEM
    assert operations[0].display is not None
    assert path_of(azure_client) == "/providers/Microsoft.AVS/operations"


def test_locations(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    trial = avs.locations.check_trial_availability("eastus", sku=Sku(name="avs52t"))
    assert trial.status == TrialStatus.TRIAL_AVAILABLE
    assert trial.available_hosts == 4
    assert azure_client.last_request.method == "POST"
    assert path_of(azure_client).endswith("/providers/Microsoft.AVS/locations/eastus/checkTrialAvailability")
    assert azure_client.last_body() == {"name": "avs52t"}
    # the sku is optional
    avs.locations.check_trial_availability("eastus")
    assert azure_client.last_body() is None
    quota = avs.locations.check_quota_availability("eastus")
    assert quota.hosts_remaining == {"he": 0, "he2": 0, "av36p": 10, "av52": 5}
    assert quota.quota_enabled is not None and quota.quota_enabled.value == "Enabled"


def test_private_clouds(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    clouds = avs.private_clouds.list("group1").all()
    assert len(clouds) == 2
    assert path_of(azure_client) == "/subscriptions/test/providers/Microsoft.AVS/privateClouds"
    assert unquote(urlparse(azure_client.requests[0].url).path) == "/subscriptions/test/resourceGroups/group1/providers/Microsoft.AVS/privateClouds"  # fmt: skip # noqa: E501
    first = clouds[0]
    assert first.resource_group_name == "group1"
    assert first.sku.name == "AV36"
    assert first.properties.circuit is not None
    assert first.properties.circuit.express_route_id.endswith("/expressroutecircuits/tnt42-cust-p01-dmo01-er")  # type: ignore # noqa: E501
    assert first.properties.identity_sources[0].base_user_dn == "ou=baseUser"  # type: ignore
    assert first.system_data is not None
    assert first.system_data.created_at == datetime(2023, 10, 2, 12, 1, 45, tzinfo=timezone.utc)
    assert clouds[1].properties.secondary_circuit is not None
    assert len(avs.private_clouds.list_in_subscription().all()) == 2


def test_private_cloud(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    cloud = avs.private_clouds.get("group1", "cloud1")
    assert path_of(azure_client) == CloudPath
    assert cloud.properties.internet == InternetEnum.ENABLED
    # a provisioning state introduced later by the service
    assert cloud.properties.provisioning_state is not None
    assert cloud.properties.provisioning_state.is_unknown
    assert cloud.properties.provisioning_state == "SomethingNew"
    assert cloud.properties.provisioning_state != PrivateCloudProvisioningState.SUCCEEDED
    assert cloud.properties.encryption is not None
    # written back unchanged
    created = avs.private_clouds.create_or_update("group1", "cloud1", cloud)
    assert azure_client.last_request.method == "PUT"
    assert azure_client.last_body()["properties"]["provisioningState"] == "SomethingNew"
    assert created == cloud


def test_private_cloud_update_sends_only_defined_fields(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    azure_client.responses["cloud1"] = (202, None)
    update = PrivateCloudUpdate(properties=PrivateCloudUpdateProperties(extended_network_blocks=["10.1.0.0/24"]))
    assert avs.private_clouds.update("group1", "cloud1", update) is None
    assert azure_client.last_request.method == "PATCH"
    # internet is not touched, if it is not defined
    assert azure_client.last_body() == {"properties": {"extendedNetworkBlocks": ["10.1.0.0/24"]}}
    avs.private_clouds.update("group1", "cloud1", PrivateCloudUpdate(properties=PrivateCloudUpdateProperties(internet=InternetEnum.ENABLED)))  # fmt: skip # noqa: E501
    assert azure_client.last_body() == {"properties": {"internet": "Enabled"}}


def test_private_cloud_actions(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    assert avs.private_clouds.rotate_vcenter_password("group1", "cloud1") is None  # type: ignore
    assert path_of(azure_client) == CloudPath + "/rotateVcenterPassword"
    assert avs.private_clouds.rotate_nsxt_password("group1", "cloud1") is None  # type: ignore
    assert path_of(azure_client) == CloudPath + "/rotateNsxtPassword"
    assert azure_client.last_request.method == "POST"
    credentials = avs.private_clouds.list_admin_credentials("group1", "cloud1")
    assert credentials.nsxt_username == "admin"
    assert credentials.vcenter_username == "cloudadmin@vsphere.local"
    assert avs.private_clouds.delete("group1", "cloud1") is None  # type: ignore
    assert azure_client.last_request.method == "DELETE"


def test_clusters(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    clusters = avs.clusters.list(**CloudArgs).all()
    assert [c.name for c in clusters] == ["cluster1"]
    assert clusters[0].sku.name == "AV20"
    cluster = avs.clusters.get("cluster1", **CloudArgs)
    assert path_of(azure_client) == CloudPath + "/clusters/cluster1"
    zones = avs.clusters.list_zones("cluster1", **CloudArgs)
    assert zones.zones is not None
    assert [z.zone for z in zones.zones] == ["preferred", "secondary"]
    assert path_of(azure_client) == CloudPath + "/clusters/cluster1/listZones"
    body = Cluster(sku=Sku(name="AV20"), properties=ClusterProperties(cluster_size=3))
    assert avs.clusters.create_or_update("cluster2", body, **CloudArgs) == body
    assert azure_client.last_body() == {"sku": {"name": "AV20"}, "properties": {"clusterSize": 3}}
    azure_client.responses["cluster1"] = (202, None)
    update = ClusterUpdate(properties=ClusterUpdateProperties(cluster_size=4))
    assert avs.clusters.update("cluster1", update, **CloudArgs) is None
    assert azure_client.last_request.method == "PATCH"
    assert azure_client.last_body() == {"properties": {"clusterSize": 4}}
    assert cluster.name == "cluster1"
    avs.clusters.delete("cluster1", **CloudArgs)
    assert path_of(azure_client) == CloudPath + "/clusters/cluster1"


def test_missing_parent(avs: AvsClient) -> None:
    with pytest.raises(KeyError):
        avs.clusters.get("cluster1", resource_group_name="group1")


def test_datastores(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    datastores = avs.datastores.list(**ClusterArgs).all()
    assert path_of(azure_client) == CloudPath + "/clusters/cluster1/datastores"
    net_app, disk_pool, elastic_san = (d.properties for d in datastores)
    assert net_app is not None and net_app.net_app_volume is not None
    assert net_app.status == DatastoreStatus.ACCESSIBLE
    assert disk_pool is not None and disk_pool.disk_pool_volume is not None
    assert disk_pool.disk_pool_volume.mount_option == MountOption.ATTACH
    assert elastic_san is not None and elastic_san.elastic_san_volume is not None
    assert elastic_san.status is not None and elastic_san.status.is_unknown
    # an undefined mount option is not sent
    body = Datastore(properties=DatastoreProperties(disk_pool_volume=DiskPoolVolume(target_id="target1", lun_name="lun0")))  # fmt: skip # noqa: E501
    assert avs.datastores.create_or_update("datastore2", body, **ClusterArgs) == body
    assert azure_client.last_body() == {"properties": {"diskPoolVolume": {"targetId": "target1", "lunName": "lun0"}}}


def test_addons(avs: AvsClient) -> None:
    addons = {a.name: a.properties for a in avs.addons.list(**CloudArgs)}
    assert isinstance(addons["srm"], AddonSrmProperties)
    assert addons["srm"].license_key == "41915178-A8FF-4A4D-B683-6D735AF5E3F5"
    assert isinstance(addons["vr"], AddonVrProperties)
    assert addons["vr"].vrs_count == 1
    assert isinstance(addons["hcx"], AddonHcxProperties)
    assert isinstance(addons["arc"], AddonArcProperties)


def test_placement_policies(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    policies = {p.name: p.properties for p in avs.placement_policies.list(**ClusterArgs)}
    assert path_of(azure_client) == CloudPath + "/clusters/cluster1/placementPolicies"
    assert isinstance(policies["policy1"], VmHostPlacementPolicyProperties)
    assert policies["policy1"].host_members
    assert isinstance(policies["policy2"], VmVmPlacementPolicyProperties)
    azure_client.responses["policy1"] = (202, None)
    update = PlacementPolicyUpdate(properties=PlacementPolicyUpdateProperties(state=PlacementPolicyState.DISABLED))
    assert avs.placement_policies.update("policy1", update, **ClusterArgs) is None
    assert azure_client.last_request.method == "PATCH"
    assert path_of(azure_client) == CloudPath + "/clusters/cluster1/placementPolicies/policy1"
    assert azure_client.last_body() == {"properties": {"state": "Disabled"}}
    update = PlacementPolicyUpdate(properties=PlacementPolicyUpdateProperties(vm_members=["vm1"], affinity_strength=AffinityStrength.MUST))  # fmt: skip # noqa: E501
    avs.placement_policies.update("policy1", update, **ClusterArgs)
    assert azure_client.last_body() == {"properties": {"vmMembers": ["vm1"], "affinityStrength": "Must"}}


def test_express_route(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    assert [a.name for a in avs.authorizations.list(**CloudArgs)] == ["authorization1"]
    assert path_of(azure_client) == CloudPath + "/authorizations"
    assert len(avs.global_reach_connections.list(**CloudArgs).all()) >= 1
    assert path_of(azure_client) == CloudPath + "/globalReachConnections"
    assert len(avs.hcx_enterprise_sites.list(**CloudArgs).all()) >= 1
    assert len(avs.cloud_links.list(**CloudArgs).all()) >= 1
    assert path_of(azure_client) == CloudPath + "/cloudLinks"
    avs.authorizations.delete("authorization1", **CloudArgs)
    assert path_of(azure_client) == CloudPath + "/authorizations/authorization1"


def test_iscsi_paths(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    assert len(avs.iscsi_paths.list(**CloudArgs).all()) >= 1
    iscsi = avs.iscsi_paths.get(**CloudArgs)
    assert path_of(azure_client) == CloudPath + "/iscsiPaths/default"
    assert iscsi.properties is not None
    assert iscsi.properties.network_block == "192.168.0.0/24"
    body = IscsiPath(properties=IscsiPathProperties(network_block="10.0.0.0/24"))
    assert avs.iscsi_paths.create_or_update(body, **CloudArgs) == body
    assert azure_client.last_body() == {"properties": {"networkBlock": "10.0.0.0/24"}}
    avs.iscsi_paths.delete(**CloudArgs)
    assert azure_client.last_request.method == "DELETE"


def test_virtual_machines(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    vms = avs.virtual_machines.list(**ClusterArgs).all()
    assert [vm.name for vm in vms] == ["vm-209", "vm-128"]
    assert vms[0].properties is not None
    assert vms[0].properties.restrict_movement == VirtualMachineRestrictMovementState.DISABLED
    azure_client.responses["restrictMovement"] = (202, None)
    body = VirtualMachineRestrictMovement(restrict_movement=VirtualMachineRestrictMovementState.ENABLED)
    assert avs.virtual_machines.restrict_movement("vm-209", body, **ClusterArgs) is None  # type: ignore
    assert path_of(azure_client) == CloudPath + "/clusters/cluster1/virtualMachines/vm-209/restrictMovement"
    assert azure_client.last_body() == {"restrictMovement": "Enabled"}


def test_scripts(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    packages = avs.script_packages.list(**CloudArgs).all()
    assert packages[0].name == "Microsoft.AVS.Management@3.0.48"
    cmdlets = avs.script_cmdlets.list(script_package_name="Microsoft.AVS.Management@3.0.48", **CloudArgs).all()
    assert path_of(azure_client) == CloudPath + "/scriptPackages/Microsoft.AVS.Management@3.0.48/scriptCmdlets"
    assert "%40" in azure_client.last_request.url
    assert cmdlets[0].properties is not None and cmdlets[0].properties.parameters


def test_script_executions(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    executions = avs.script_executions.list(**CloudArgs).all()
    props = executions[0].properties
    assert props is not None
    assert [type(p) for p in props.parameters or []] == [ScriptStringExecutionParameter] * 2
    assert [type(p) for p in props.hidden_parameters or []] == [
        ScriptSecureStringExecutionParameter,
        PsCredentialExecutionParameter,
    ]
    assert props.submitted_at == datetime(2021, 3, 21, 17, 34, 6, tzinfo=timezone.utc)

    body = ScriptExecution(
        properties=ScriptExecutionProperties(
            timeout="P0Y0M0DT0H60M60S",
            parameters=[ScriptStringExecutionParameter(name="DomainName", value="placeholderDomain.local")],
            hidden_parameters=[ScriptSecureStringExecutionParameter(name="Password", secure_value="secret")],
        )
    )
    avs.script_executions.create_or_update("addSsoServer", body, **CloudArgs)
    assert azure_client.last_body() == {
        "properties": {
            "timeout": "P0Y0M0DT0H60M60S",
            "parameters": [{"name": "DomainName", "type": "Value", "value": "placeholderDomain.local"}],
            "hiddenParameters": [{"name": "Password", "type": "SecureValue", "secureValue": "secret"}],
        }
    }

    logs = avs.script_executions.get_execution_logs(
        "addSsoServer", [ScriptOutputStreamType.OUTPUT, ScriptOutputStreamType.ERROR], **CloudArgs
    )
    assert path_of(azure_client) == CloudPath + "/scriptExecutions/addSsoServer/getExecutionLogs"
    assert azure_client.last_body() == ["Output", "Error"]
    assert logs.properties is not None
    assert logs.properties.named_outputs == {"str": "hello world", "int": 42, "bool": True, "obj": {"key": "value"}}
    # all streams, if nothing is defined
    avs.script_executions.get_execution_logs("addSsoServer", **CloudArgs)
    assert azure_client.last_body() is None


def test_workload_network(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    assert len(avs.workload_networks.list(**CloudArgs).all()) >= 1
    network = avs.workload_networks.get(**CloudArgs)
    assert path_of(azure_client) == CloudPath + "/workloadNetworks/default"
    assert network.name == "default"


def test_workload_network_children(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    wn = avs.workload_networks
    segments = wn.segments.list(**CloudArgs).all()
    assert path_of(azure_client) == CloudPath + "/workloadNetworks/default/segments"
    assert segments[0].properties is not None
    assert segments[0].properties.port_vif[0].port_name == "vm1"  # type: ignore
    dhcp = {d.name: d.properties for d in wn.dhcp_configurations.list(**CloudArgs)}
    assert isinstance(dhcp["dhcp1"], WorkloadNetworkDhcpServer)
    assert isinstance(dhcp["dhcp2"], WorkloadNetworkDhcpRelay)
    assert len(wn.gateways.list(**CloudArgs).all()) >= 1
    assert len(wn.port_mirroring_profiles.list(**CloudArgs).all()) >= 1
    assert len(wn.vm_groups.list(**CloudArgs).all()) >= 1
    assert len(wn.dns_services.list(**CloudArgs).all()) >= 1
    assert len(wn.dns_zones.list(**CloudArgs).all()) >= 1
    vms = wn.virtual_machines.list(**CloudArgs).all()
    assert path_of(azure_client) == CloudPath + "/workloadNetworks/default/virtualMachines"
    assert [vm.properties.vm_type for vm in vms] == [VmTypeEnum.REGULAR, VmTypeEnum.EDGE]  # type: ignore
    public_ips = wn.public_ips.list(**CloudArgs).all()
    assert public_ips[0].properties is not None
    assert public_ips[0].properties.number_of_public_ips == 32
    # public ips can not be patched
    assert not hasattr(wn.public_ips, "update")


def test_workload_network_changes(avs: AvsClient, azure_client: StaticFileArmClient) -> None:
    wn = avs.workload_networks
    segment = WorkloadNetworkSegment(properties=WorkloadNetworkSegmentProperties(display_name="segment1"))
    assert wn.segments.create_or_update("segment1", segment, **CloudArgs) == segment
    assert path_of(azure_client) == CloudPath + "/workloadNetworks/default/segments/segment1"
    assert azure_client.last_request.method == "PUT"
    dhcp = WorkloadNetworkDhcp(properties=WorkloadNetworkDhcpRelay(server_addresses=["40.1.5.1"]))
    wn.dhcp_configurations.update("dhcp2", dhcp, **CloudArgs)
    assert azure_client.last_request.method == "PATCH"
    assert azure_client.last_body() == {"properties": {"dhcpType": "RELAY", "serverAddresses": ["40.1.5.1"]}}
    wn.dns_zones.delete("zone1", **CloudArgs)
    assert path_of(azure_client) == CloudPath + "/workloadNetworks/default/dnsZones/zone1"
    assert azure_client.last_request.method == "DELETE"
