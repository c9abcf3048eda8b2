import logging
from typing import Any, List, Optional

from fix_azure_arm.azure_client import ArmClient, OperationGroup, Pager
from fix_azure_arm.config import ArmClientConfig, AzureCredentials
from fix_azure_arm.resource.vmware import (
    Addon,
    AddonList,
    AdminCredentials,
    CloudLink,
    CloudLinkList,
    Cluster,
    ClusterList,
    ClusterZoneList,
    Datastore,
    DatastoreList,
    ExpressRouteAuthorization,
    ExpressRouteAuthorizationList,
    GlobalReachConnection,
    GlobalReachConnectionList,
    HcxEnterpriseSite,
    HcxEnterpriseSiteList,
    IscsiPath,
    IscsiPathListResult,
    Operation,
    OperationListResult,
    PlacementPoliciesList,
    PlacementPolicy,
    PrivateCloud,
    PrivateCloudList,
    PrivateCloudUpdate,
    Quota,
    Sku,
    Trial,
    VirtualMachine,
    VirtualMachineRestrictMovement,
    VirtualMachinesList,
)
from fix_azure_arm.resource.vmware_network import (
    WorkloadNetwork,
    WorkloadNetworkDhcp,
    WorkloadNetworkDhcpList,
    WorkloadNetworkDnsService,
    WorkloadNetworkDnsServicesList,
    WorkloadNetworkDnsZone,
    WorkloadNetworkDnsZonesList,
    WorkloadNetworkGateway,
    WorkloadNetworkGatewayList,
    WorkloadNetworkList,
    WorkloadNetworkPortMirroring,
    WorkloadNetworkPortMirroringList,
    WorkloadNetworkPublicIp,
    WorkloadNetworkPublicIPsList,
    WorkloadNetworkSegment,
    WorkloadNetworkSegmentsList,
    WorkloadNetworkVirtualMachine,
    WorkloadNetworkVirtualMachinesList,
    WorkloadNetworkVmGroup,
    WorkloadNetworkVmGroupsList,
)
from fix_azure_arm.resource.vmware_script import (
    ScriptCmdlet,
    ScriptCmdletsList,
    ScriptExecution,
    ScriptExecutionsList,
    ScriptOutputStreamType,
    ScriptPackage,
    ScriptPackagesList,
)
from fix_azure_arm.service.base import (
    ActionStatus,
    ChildOperations,
    CreatedStatus,
    DeletedStatus,
    MutableChildOperations,
    UpdatableChildOperations,
    UpdatedStatus,
)

log = logging.getLogger("fix.azure.arm")

AvsService = "vmware"
AvsApiVersion = "2023-09-01"

SubscriptionPath = "/subscriptions/{subscription_id}/providers/Microsoft.AVS"
ResourceGroupPath = "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}/providers/Microsoft.AVS"
PrivateCloudPath = ResourceGroupPath + "/privateClouds/{private_cloud_name}"
ClusterPath = PrivateCloudPath + "/clusters/{cluster_name}"
WorkloadNetworkPath = PrivateCloudPath + "/workloadNetworks/default"


class AvsOperationGroup(OperationGroup):
    service = AvsService
    version = AvsApiVersion


class Operations(AvsOperationGroup):
    def list(self, **kwargs: Any) -> Pager[Operation]:
        return self.client.pages(self.spec("/providers/Microsoft.AVS/operations", OperationListResult), **kwargs)


class Locations(AvsOperationGroup):
    def check_trial_availability(self, location: str, sku: Optional[Sku] = None, **kwargs: Any) -> Trial:
        """
        Return trial status for the subscription by region.
        The optional sku narrows the check to one SKU.
        """
        spec = self.spec(SubscriptionPath + "/locations/{location}/checkTrialAvailability", Trial, method="POST")
        return self.client.execute(spec, sku, location=location, **kwargs)  # type: ignore

    def check_quota_availability(self, location: str, **kwargs: Any) -> Quota:
        spec = self.spec(SubscriptionPath + "/locations/{location}/checkQuotaAvailability", Quota, method="POST")
        return self.client.execute(spec, location=location, **kwargs)  # type: ignore


class PrivateClouds(AvsOperationGroup):
    def list_in_subscription(self, **kwargs: Any) -> Pager[PrivateCloud]:
        return self.client.pages(self.spec(SubscriptionPath + "/privateClouds", PrivateCloudList), **kwargs)

    def list(self, resource_group_name: str, **kwargs: Any) -> Pager[PrivateCloud]:
        spec = self.spec(ResourceGroupPath + "/privateClouds", PrivateCloudList)
        return self.client.pages(spec, resource_group_name=resource_group_name, **kwargs)

    def get(self, resource_group_name: str, private_cloud_name: str, **kwargs: Any) -> PrivateCloud:
        spec = self.spec(PrivateCloudPath, PrivateCloud)
        return self.client.execute(  # type: ignore
            spec, resource_group_name=resource_group_name, private_cloud_name=private_cloud_name, **kwargs
        )

    def create_or_update(
        self, resource_group_name: str, private_cloud_name: str, private_cloud: PrivateCloud, **kwargs: Any
    ) -> PrivateCloud:
        spec = self.spec(PrivateCloudPath, PrivateCloud, method="PUT", expected_status=CreatedStatus)
        return self.client.execute(  # type: ignore
            spec,
            private_cloud,
            resource_group_name=resource_group_name,
            private_cloud_name=private_cloud_name,
            **kwargs,
        )

    def update(
        self,
        resource_group_name: str,
        private_cloud_name: str,
        private_cloud_update: PrivateCloudUpdate,
        **kwargs: Any,
    ) -> Optional[PrivateCloud]:
        spec = self.spec(PrivateCloudPath, PrivateCloud, method="PATCH", expected_status=UpdatedStatus)
        return self.client.execute(  # type: ignore
            spec,
            private_cloud_update,
            resource_group_name=resource_group_name,
            private_cloud_name=private_cloud_name,
            **kwargs,
        )

    def delete(self, resource_group_name: str, private_cloud_name: str, **kwargs: Any) -> None:
        spec = self.spec(PrivateCloudPath, method="DELETE", expected_status=DeletedStatus)
        self.client.execute(
            spec, resource_group_name=resource_group_name, private_cloud_name=private_cloud_name, **kwargs
        )

    def rotate_vcenter_password(self, resource_group_name: str, private_cloud_name: str, **kwargs: Any) -> None:
        self._action("rotateVcenterPassword", resource_group_name, private_cloud_name, **kwargs)

    def rotate_nsxt_password(self, resource_group_name: str, private_cloud_name: str, **kwargs: Any) -> None:
        self._action("rotateNsxtPassword", resource_group_name, private_cloud_name, **kwargs)

    def list_admin_credentials(
        self, resource_group_name: str, private_cloud_name: str, **kwargs: Any
    ) -> AdminCredentials:
        spec = self.spec(PrivateCloudPath + "/listAdminCredentials", AdminCredentials, method="POST")
        return self.client.execute(  # type: ignore
            spec, resource_group_name=resource_group_name, private_cloud_name=private_cloud_name, **kwargs
        )

    def _action(self, action: str, resource_group_name: str, private_cloud_name: str, **kwargs: Any) -> None:
        spec = self.spec(PrivateCloudPath + "/" + action, method="POST", expected_status=ActionStatus)
        log.info(f"[Azure] {action} on private cloud {resource_group_name}/{private_cloud_name}")
        self.client.execute(
            spec, resource_group_name=resource_group_name, private_cloud_name=private_cloud_name, **kwargs
        )


class Clusters(UpdatableChildOperations[Cluster]):
    def list_zones(self, name: str, **kwargs: Any) -> ClusterZoneList:
        spec = self.spec(self.item_path + "/listZones", ClusterZoneList, method="POST")
        return self.client.execute(spec, name=name, **kwargs)  # type: ignore


class IscsiPaths(AvsOperationGroup):
    """
    A private cloud has at most one iSCSI path, which is always called `default`.
    """

    path = PrivateCloudPath + "/iscsiPaths"

    def list(self, **kwargs: Any) -> Pager[IscsiPath]:
        return self.client.pages(self.spec(self.path, IscsiPathListResult), **kwargs)

    def get(self, **kwargs: Any) -> IscsiPath:
        return self.client.execute(self.spec(self.path + "/default", IscsiPath), **kwargs)  # type: ignore

    def create_or_update(self, body: IscsiPath, **kwargs: Any) -> IscsiPath:
        spec = self.spec(self.path + "/default", IscsiPath, method="PUT", expected_status=CreatedStatus)
        return self.client.execute(spec, body, **kwargs)  # type: ignore

    def delete(self, **kwargs: Any) -> None:
        spec = self.spec(self.path + "/default", method="DELETE", expected_status=DeletedStatus)
        self.client.execute(spec, **kwargs)


class VirtualMachines(ChildOperations[VirtualMachine]):
    def restrict_movement(self, name: str, body: VirtualMachineRestrictMovement, **kwargs: Any) -> None:
        spec = self.spec(self.item_path + "/restrictMovement", method="POST", expected_status=UpdatedStatus)
        self.client.execute(spec, body, name=name, **kwargs)


class ScriptExecutions(MutableChildOperations[ScriptExecution]):
    def get_execution_logs(
        self,
        name: str,
        script_output_stream_type: Optional[List[ScriptOutputStreamType]] = None,
        **kwargs: Any,
    ) -> ScriptExecution:
        """
        Return the script execution with the requested output streams filled.
        Without stream types, all streams are returned.
        """
        spec = self.spec(self.item_path + "/getExecutionLogs", ScriptExecution, method="POST")
        return self.client.execute(spec, script_output_stream_type, name=name, **kwargs)  # type: ignore


class WorkloadNetworks(AvsOperationGroup):
    """
    The NSX-T workload network of a private cloud and all its child resources.
    There is only one workload network per private cloud, called `default`.
    """

    def __init__(self, client: ArmClient) -> None:
        super().__init__(client)

        def children(kind: Any, collection: str, item: Any, items: Any) -> Any:
            return kind(client, WorkloadNetworkPath + collection, item, items, AvsService, AvsApiVersion)

        self.segments: UpdatableChildOperations[WorkloadNetworkSegment] = children(
            UpdatableChildOperations, "/segments", WorkloadNetworkSegment, WorkloadNetworkSegmentsList
        )
        self.dhcp_configurations: UpdatableChildOperations[WorkloadNetworkDhcp] = children(
            UpdatableChildOperations, "/dhcpConfigurations", WorkloadNetworkDhcp, WorkloadNetworkDhcpList
        )
        self.gateways: ChildOperations[WorkloadNetworkGateway] = children(
            ChildOperations, "/gateways", WorkloadNetworkGateway, WorkloadNetworkGatewayList
        )
        self.port_mirroring_profiles: UpdatableChildOperations[WorkloadNetworkPortMirroring] = children(
            UpdatableChildOperations,
            "/portMirroringProfiles",
            WorkloadNetworkPortMirroring,
            WorkloadNetworkPortMirroringList,
        )
        self.vm_groups: UpdatableChildOperations[WorkloadNetworkVmGroup] = children(
            UpdatableChildOperations, "/vmGroups", WorkloadNetworkVmGroup, WorkloadNetworkVmGroupsList
        )
        self.virtual_machines: ChildOperations[WorkloadNetworkVirtualMachine] = children(
            ChildOperations, "/virtualMachines", WorkloadNetworkVirtualMachine, WorkloadNetworkVirtualMachinesList
        )
        self.dns_services: UpdatableChildOperations[WorkloadNetworkDnsService] = children(
            UpdatableChildOperations, "/dnsServices", WorkloadNetworkDnsService, WorkloadNetworkDnsServicesList
        )
        self.dns_zones: UpdatableChildOperations[WorkloadNetworkDnsZone] = children(
            UpdatableChildOperations, "/dnsZones", WorkloadNetworkDnsZone, WorkloadNetworkDnsZonesList
        )
        self.public_ips: MutableChildOperations[WorkloadNetworkPublicIp] = children(
            MutableChildOperations, "/publicIPs", WorkloadNetworkPublicIp, WorkloadNetworkPublicIPsList
        )

    def list(self, **kwargs: Any) -> Pager[WorkloadNetwork]:
        return self.client.pages(self.spec(PrivateCloudPath + "/workloadNetworks", WorkloadNetworkList), **kwargs)

    def get(self, **kwargs: Any) -> WorkloadNetwork:
        return self.client.execute(self.spec(WorkloadNetworkPath, WorkloadNetwork), **kwargs)  # type: ignore


class AvsClient:
    """
    Client of the Azure VMware Solution resource provider (Microsoft.AVS).

    Operations on child resources of a private cloud take the parent names as keyword arguments:

        avs = AvsClient(credential, subscription_id)
        for cluster in avs.clusters.list(resource_group_name="rg", private_cloud_name="cloud"):
            ...
        avs.datastores.get("ds1", resource_group_name="rg", private_cloud_name="cloud", cluster_name="cluster1")
    """

    def __init__(
        self, credential: AzureCredentials, subscription_id: str, config: Optional[ArmClientConfig] = None
    ) -> None:
        self.config = config or ArmClientConfig()
        self.client = ArmClient.create(self.config, credential, subscription_id)

        def children(kind: Any, collection: str, item: Any, items: Any) -> Any:
            return kind(self.client, collection, item, items, AvsService, AvsApiVersion)

        self.operations = Operations(self.client)
        self.locations = Locations(self.client)
        self.private_clouds = PrivateClouds(self.client)
        self.clusters = Clusters(self.client, PrivateCloudPath + "/clusters", Cluster, ClusterList, AvsService, AvsApiVersion)  # fmt: skip
        self.datastores: MutableChildOperations[Datastore] = children(
            MutableChildOperations, ClusterPath + "/datastores", Datastore, DatastoreList
        )
        self.hcx_enterprise_sites: MutableChildOperations[HcxEnterpriseSite] = children(
            MutableChildOperations, PrivateCloudPath + "/hcxEnterpriseSites", HcxEnterpriseSite, HcxEnterpriseSiteList
        )
        self.authorizations: MutableChildOperations[ExpressRouteAuthorization] = children(
            MutableChildOperations,
            PrivateCloudPath + "/authorizations",
            ExpressRouteAuthorization,
            ExpressRouteAuthorizationList,
        )
        self.global_reach_connections: MutableChildOperations[GlobalReachConnection] = children(
            MutableChildOperations,
            PrivateCloudPath + "/globalReachConnections",
            GlobalReachConnection,
            GlobalReachConnectionList,
        )
        self.cloud_links: MutableChildOperations[CloudLink] = children(
            MutableChildOperations, PrivateCloudPath + "/cloudLinks", CloudLink, CloudLinkList
        )
        self.addons: MutableChildOperations[Addon] = children(
            MutableChildOperations, PrivateCloudPath + "/addons", Addon, AddonList
        )
        self.iscsi_paths = IscsiPaths(self.client)
        self.virtual_machines = VirtualMachines(self.client, ClusterPath + "/virtualMachines", VirtualMachine, VirtualMachinesList, AvsService, AvsApiVersion)  # fmt: skip
        self.placement_policies: UpdatableChildOperations[PlacementPolicy] = children(
            UpdatableChildOperations, ClusterPath + "/placementPolicies", PlacementPolicy, PlacementPoliciesList
        )
        self.script_packages: ChildOperations[ScriptPackage] = children(
            ChildOperations, PrivateCloudPath + "/scriptPackages", ScriptPackage, ScriptPackagesList
        )
        self.script_cmdlets: ChildOperations[ScriptCmdlet] = children(
            ChildOperations,
            PrivateCloudPath + "/scriptPackages/{script_package_name}/scriptCmdlets",
            ScriptCmdlet,
            ScriptCmdletsList,
        )
        self.script_executions = ScriptExecutions(self.client, PrivateCloudPath + "/scriptExecutions", ScriptExecution, ScriptExecutionsList, AvsService, AvsApiVersion)  # fmt: skip
        self.workload_networks = WorkloadNetworks(self.client)

    @staticmethod
    def from_config(config: ArmClientConfig) -> "AvsClient":
        if config.account.subscription_id is None:
            raise ValueError("No subscription_id configured for the azure account")
        return AvsClient(config.account.credentials(), config.account.subscription_id, config)

    def close(self) -> None:
        self.client.close()
