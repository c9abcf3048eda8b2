from __future__ import annotations

from typing import Dict, List, Optional

from attr import define, field

from fix_azure_arm.enums import ClosedEnum, OpenEnum
from fix_azure_arm.json import register_tagged_union
from fix_azure_arm.resource.base import ArmModel, ListResult, OperationDisplay, ProxyResource, TrackedResource

service_name = "vmware"


class SkuTier(ClosedEnum):
    FREE = "Free"
    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"


class PrivateCloudProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    CANCELLED = "Cancelled"
    PENDING = "Pending"
    BUILDING = "Building"
    DELETING = "Deleting"
    UPDATING = "Updating"


class ClusterProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    CANCELLED = "Cancelled"
    DELETING = "Deleting"
    UPDATING = "Updating"


class DatastoreProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    CANCELLED = "Cancelled"
    PENDING = "Pending"
    CREATING = "Creating"
    UPDATING = "Updating"
    DELETING = "Deleting"


class DatastoreStatus(OpenEnum):
    UNKNOWN = "Unknown"
    ACCESSIBLE = "Accessible"
    INACCESSIBLE = "Inaccessible"
    ATTACHED = "Attached"
    DETACHED = "Detached"
    LOST_COMMUNICATION = "LostCommunication"
    DEAD_OR_ERROR = "DeadOrError"


class MountOption(OpenEnum):
    MOUNT = "MOUNT"
    ATTACH = "ATTACH"


class AddonType(OpenEnum):
    SRM = "SRM"
    VR = "VR"
    HCX = "HCX"
    ARC = "Arc"


class AddonProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    CANCELLED = "Cancelled"
    BUILDING = "Building"
    DELETING = "Deleting"
    UPDATING = "Updating"


class AffinityStrength(OpenEnum):
    SHOULD = "Should"
    MUST = "Must"


class AffinityType(OpenEnum):
    AFFINITY = "Affinity"
    ANTI_AFFINITY = "AntiAffinity"


class AvailabilityStrategy(OpenEnum):
    SINGLE_ZONE = "SingleZone"
    DUAL_ZONE = "DualZone"


class AzureHybridBenefitType(OpenEnum):
    SQL_HOST = "SqlHost"
    NONE = "None"


class CloudLinkProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"


class CloudLinkStatus(OpenEnum):
    ACTIVE = "Active"
    BUILDING = "Building"
    DELETING = "Deleting"
    FAILED = "Failed"
    DISCONNECTED = "Disconnected"


class DnsZoneType(OpenEnum):
    PUBLIC = "Public"
    PRIVATE = "Private"


class EncryptionKeyStatus(OpenEnum):
    CONNECTED = "Connected"
    ACCESS_DENIED = "AccessDenied"


class EncryptionState(OpenEnum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class EncryptionVersionType(OpenEnum):
    FIXED = "Fixed"
    AUTO_DETECTED = "AutoDetected"


class ExpressRouteAuthorizationProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    UPDATING = "Updating"


class GlobalReachConnectionProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    UPDATING = "Updating"


class GlobalReachConnectionStatus(OpenEnum):
    CONNECTED = "Connected"
    CONNECTING = "Connecting"
    DISCONNECTED = "Disconnected"


class HcxEnterpriseSiteProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"


class HcxEnterpriseSiteStatus(OpenEnum):
    AVAILABLE = "Available"
    CONSUMED = "Consumed"
    DEACTIVATED = "Deactivated"
    DELETED = "Deleted"


class InternetEnum(OpenEnum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class IscsiPathProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    PENDING = "Pending"
    BUILDING = "Building"
    DELETING = "Deleting"
    UPDATING = "Updating"


class NsxPublicIpQuotaRaisedEnum(OpenEnum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class Origin(OpenEnum):
    USER = "user"
    SYSTEM = "system"
    USER_SYSTEM = "user,system"


class ActionType(OpenEnum):
    INTERNAL = "Internal"


class PlacementPolicyProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    BUILDING = "Building"
    DELETING = "Deleting"
    UPDATING = "Updating"


class PlacementPolicyState(OpenEnum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class PlacementPolicyType(OpenEnum):
    VM_VM = "VmVm"
    VM_HOST = "VmHost"


class QuotaEnabled(OpenEnum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class SslEnum(OpenEnum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class SystemAssignedServiceIdentityType(OpenEnum):
    NONE = "None"
    SYSTEM_ASSIGNED = "SystemAssigned"


class TrialStatus(OpenEnum):
    TRIAL_AVAILABLE = "TrialAvailable"
    TRIAL_USED = "TrialUsed"
    TRIAL_DISABLED = "TrialDisabled"


class VirtualMachineProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"


class VirtualMachineRestrictMovementState(OpenEnum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


@define(kw_only=True)
class Sku:
    name: str = field(metadata={"description": "The name of the SKU. E.g. P3. It is typically a letter+number code"})
    tier: Optional[SkuTier] = field(default=None, metadata={"description": "Required to be implemented by the resource provider if the service has more than one tier."})  # fmt: skip
    size: Optional[str] = field(default=None, metadata={"description": "The SKU size."})
    family: Optional[str] = field(default=None, metadata={"description": "The hardware generation of the SKU."})
    capacity: Optional[int] = field(default=None, metadata={"description": "The scale out/in capacity of the SKU."})


@define(kw_only=True)
class SystemAssignedServiceIdentity:
    principal_id: Optional[str] = field(default=None, metadata={"description": "The service principal ID of the system assigned identity."})  # fmt: skip
    tenant_id: Optional[str] = field(default=None, metadata={"description": "The tenant ID of the system assigned identity."})  # fmt: skip
    type: SystemAssignedServiceIdentityType = field(metadata={"description": "Type of managed service identity."})


@define(kw_only=True)
class ManagementCluster:
    """
    The management cluster of a private cloud. Same fields as a cluster, but it is not a resource of its own.
    """

    cluster_size: Optional[int] = field(default=None, metadata={"description": "The cluster size"})
    provisioning_state: Optional[ClusterProvisioningState] = field(default=None, metadata={"description": "The state of the cluster provisioning"})  # fmt: skip
    cluster_id: Optional[int] = field(default=None, metadata={"description": "The identity"})
    hosts: Optional[List[str]] = field(default=None, metadata={"description": "The hosts"})
    vsan_datastore_name: Optional[str] = field(default=None, metadata={"description": "Name of the vsan datastore associated with the cluster"})  # fmt: skip


@define(kw_only=True)
class Circuit:
    primary_subnet: Optional[str] = field(default=None, metadata={"description": "CIDR of primary subnet"})
    secondary_subnet: Optional[str] = field(default=None, metadata={"description": "CIDR of secondary subnet"})
    express_route_id: Optional[str] = field(default=None, metadata={"alias": "expressRouteID", "description": "Identifier of the ExpressRoute Circuit (Microsoft Colo only)"})  # fmt: skip
    express_route_private_peering_id: Optional[str] = field(default=None, metadata={"alias": "expressRoutePrivatePeeringID", "description": "ExpressRoute Circuit private peering identifier"})  # fmt: skip


@define(kw_only=True)
class Endpoints:
    nsxt_manager: Optional[str] = field(default=None, metadata={"description": "Endpoint FQDN for the NSX-T Data Center manager"})  # fmt: skip
    vcsa: Optional[str] = field(default=None, metadata={"description": "Endpoint FQDN for Virtual Center Server Appliance"})  # fmt: skip
    hcx_cloud_manager: Optional[str] = field(default=None, metadata={"description": "Endpoint FQDN for the HCX Cloud Manager"})  # fmt: skip
    nsxt_manager_ip: Optional[str] = field(default=None, metadata={"description": "Endpoint IP for the NSX-T Data Center manager"})  # fmt: skip
    vcenter_ip: Optional[str] = field(default=None, metadata={"description": "Endpoint IP for Virtual Center Server Appliance"})  # fmt: skip
    hcx_cloud_manager_ip: Optional[str] = field(default=None, metadata={"description": "Endpoint IP for the HCX Cloud Manager"})  # fmt: skip


@define(kw_only=True)
class IdentitySource:
    name: Optional[str] = field(default=None, metadata={"description": "The name of the identity source"})
    alias: Optional[str] = field(default=None, metadata={"description": "The domain's NetBIOS name"})
    domain: Optional[str] = field(default=None, metadata={"description": "The domain's DNS name"})
    base_user_dn: Optional[str] = field(default=None, metadata={"alias": "baseUserDN", "description": "The base distinguished name for users"})  # fmt: skip
    base_group_dn: Optional[str] = field(default=None, metadata={"alias": "baseGroupDN", "description": "The base distinguished name for groups"})  # fmt: skip
    primary_server: Optional[str] = field(default=None, metadata={"description": "Primary server URL"})
    secondary_server: Optional[str] = field(default=None, metadata={"description": "Secondary server URL"})
    ssl: Optional[SslEnum] = field(default=None, metadata={"description": "Protect LDAP communication using SSL certificate (LDAPS)"})  # fmt: skip
    username: Optional[str] = field(default=None, metadata={"description": "The ID of an Active Directory user with a minimum of read-only access"})  # fmt: skip
    password: Optional[str] = field(default=None, metadata={"description": "The password of the Active Directory user"})  # fmt: skip


@define(kw_only=True)
class AvailabilityProperties:
    strategy: Optional[AvailabilityStrategy] = field(default=None, metadata={"description": "The availability strategy for the private cloud"})  # fmt: skip
    zone: Optional[int] = field(default=None, metadata={"description": "The primary availability zone"})
    secondary_zone: Optional[int] = field(default=None, metadata={"description": "The secondary availability zone"})  # fmt: skip


@define(kw_only=True)
class EncryptionKeyVaultProperties:
    key_name: Optional[str] = field(default=None, metadata={"description": "The name of the key."})
    key_version: Optional[str] = field(default=None, metadata={"description": "The version of the key."})
    auto_detected_key_version: Optional[str] = field(default=None, metadata={"description": "The auto-detected version of the key if versionType is auto-detected."})  # fmt: skip
    key_vault_url: Optional[str] = field(default=None, metadata={"description": "The URL of the vault."})
    key_state: Optional[EncryptionKeyStatus] = field(default=None, metadata={"description": "The state of key provided"})  # fmt: skip
    version_type: Optional[EncryptionVersionType] = field(default=None, metadata={"description": "Property of the key if user provided or auto detected"})  # fmt: skip


@define(kw_only=True)
class Encryption:
    status: Optional[EncryptionState] = field(default=None, metadata={"description": "Status of customer managed encryption key"})  # fmt: skip
    key_vault_properties: Optional[EncryptionKeyVaultProperties] = field(default=None, metadata={"description": "The key vault where the encryption key is stored"})  # fmt: skip


@define(kw_only=True)
class PrivateCloudProperties:
    management_cluster: ManagementCluster = field(metadata={"description": "The default cluster used for management"})
    internet: Optional[InternetEnum] = field(default=None, metadata={"description": "Connectivity to internet is enabled or disabled"})  # fmt: skip
    identity_sources: Optional[List[IdentitySource]] = field(default=None, metadata={"description": "vCenter Single Sign On Identity Sources"})  # fmt: skip
    availability: Optional[AvailabilityProperties] = field(default=None, metadata={"description": "Properties describing how the cloud is distributed across availability zones"})  # fmt: skip
    encryption: Optional[Encryption] = field(default=None, metadata={"description": "Customer managed key encryption, can be enabled or disabled"})  # fmt: skip
    extended_network_blocks: Optional[List[str]] = field(default=None, metadata={"description": "Array of additional networks noncontiguous with networkBlock."})  # fmt: skip
    provisioning_state: Optional[PrivateCloudProvisioningState] = field(default=None, metadata={"description": "The provisioning state"})  # fmt: skip
    circuit: Optional[Circuit] = field(default=None, metadata={"description": "An ExpressRoute Circuit"})
    endpoints: Optional[Endpoints] = field(default=None, metadata={"description": "The endpoints"})
    network_block: str = field(metadata={"description": "The block of addresses should be unique across VNet in your subscription as well as on-premise. Make sure the CIDR format is conformed to (A.B.C.D/X) where A,B,C,D are between 0 and 255, and X is between 0 and 22"})  # fmt: skip
    management_network: Optional[str] = field(default=None, metadata={"description": "Network used to access vCenter Server and NSX-T Manager"})  # fmt: skip
    provisioning_network: Optional[str] = field(default=None, metadata={"description": "Used for virtual machine cold migration, cloning, and snapshot migration"})  # fmt: skip
    vmotion_network: Optional[str] = field(default=None, metadata={"description": "Used for live migration of virtual machines"})  # fmt: skip
    vcenter_password: Optional[str] = field(default=None, metadata={"description": "Optionally, set the vCenter admin password when the private cloud is created"})  # fmt: skip
    nsxt_password: Optional[str] = field(default=None, metadata={"description": "Optionally, set the NSX-T Manager password when the private cloud is created"})  # fmt: skip
    vcenter_certificate_thumbprint: Optional[str] = field(default=None, metadata={"description": "Thumbprint of the vCenter Server SSL certificate"})  # fmt: skip
    nsxt_certificate_thumbprint: Optional[str] = field(default=None, metadata={"description": "Thumbprint of the NSX-T Manager SSL certificate"})  # fmt: skip
    external_cloud_links: Optional[List[str]] = field(default=None, metadata={"description": "Array of cloud link IDs from other clouds that connect to this one"})  # fmt: skip
    secondary_circuit: Optional[Circuit] = field(default=None, metadata={"description": "A secondary expressRoute circuit from a separate AZ. Only present in a stretched private cloud"})  # fmt: skip
    nsx_public_ip_quota_raised: Optional[NsxPublicIpQuotaRaisedEnum] = field(default=None, metadata={"description": "Flag to indicate whether the private cloud has the quota for provisioned NSX Public IP count raised from 64 to 1024"})  # fmt: skip
    virtual_network_id: Optional[str] = field(default=None, metadata={"description": "Azure resource ID of the virtual network"})  # fmt: skip
    dns_zone_type: Optional[DnsZoneType] = field(default=None, metadata={"description": "The type of DNS zone to use."})  # fmt: skip


@define(kw_only=True)
class PrivateCloud(TrackedResource):
    properties: Optional[PrivateCloudProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip
    sku: Sku = field(metadata={"description": "The SKU (Stock Keeping Unit) assigned to this resource."})
    identity: Optional[SystemAssignedServiceIdentity] = field(default=None, metadata={"description": "The managed service identities assigned to this resource."})  # fmt: skip


@define(kw_only=True)
class PrivateCloudList(ListResult):
    value: List[PrivateCloud] = field(factory=list, metadata={"description": "The PrivateCloud items on this page"})


@define(kw_only=True)
class PrivateCloudUpdateProperties:
    management_cluster: Optional[ManagementCluster] = field(default=None, metadata={"description": "The default cluster used for management"})  # fmt: skip
    internet: Optional[InternetEnum] = field(default=None, metadata={"description": "Connectivity to internet is enabled or disabled"})  # fmt: skip
    identity_sources: Optional[List[IdentitySource]] = field(default=None, metadata={"description": "vCenter Single Sign On Identity Sources"})  # fmt: skip
    availability: Optional[AvailabilityProperties] = field(default=None, metadata={"description": "Properties describing how the cloud is distributed across availability zones"})  # fmt: skip
    encryption: Optional[Encryption] = field(default=None, metadata={"description": "Customer managed key encryption, can be enabled or disabled"})  # fmt: skip
    extended_network_blocks: Optional[List[str]] = field(default=None, metadata={"description": "Array of additional networks noncontiguous with networkBlock."})  # fmt: skip
    dns_zone_type: Optional[DnsZoneType] = field(default=None, metadata={"description": "The type of DNS zone to use."})  # fmt: skip


@define(kw_only=True)
class PrivateCloudUpdate(ArmModel):
    """
    The patch body of a private cloud. Only the defined properties are changed.
    """

    tags: Optional[Dict[str, str]] = field(default=None, metadata={"description": "Resource tags."})
    sku: Optional[Sku] = field(default=None, metadata={"description": "The SKU (Stock Keeping Unit) assigned to this resource."})  # fmt: skip
    identity: Optional[SystemAssignedServiceIdentity] = field(default=None, metadata={"description": "The managed service identity assigned to this resource."})  # fmt: skip
    properties: Optional[PrivateCloudUpdateProperties] = field(default=None, metadata={"description": "The updatable properties of a private cloud resource"})  # fmt: skip


@define(kw_only=True)
class AdminCredentials(ArmModel):
    nsxt_username: Optional[str] = field(default=None, metadata={"description": "NSX-T Manager username"})
    nsxt_password: Optional[str] = field(default=None, metadata={"description": "NSX-T Manager password"})
    vcenter_username: Optional[str] = field(default=None, metadata={"description": "vCenter admin username"})
    vcenter_password: Optional[str] = field(default=None, metadata={"description": "vCenter admin password"})


@define(kw_only=True)
class Quota(ArmModel):
    hosts_remaining: Optional[Dict[str, int]] = field(default=None, metadata={"description": "Remaining hosts quota by sku type"})  # fmt: skip
    quota_enabled: Optional[QuotaEnabled] = field(default=None, metadata={"description": "Host quota is active for current subscription"})  # fmt: skip


@define(kw_only=True)
class Trial(ArmModel):
    status: Optional[TrialStatus] = field(default=None, metadata={"description": "Trial status"})
    available_hosts: Optional[int] = field(default=None, metadata={"description": "Number of trial hosts available"})  # fmt: skip


@define(kw_only=True)
class ClusterProperties:
    cluster_size: Optional[int] = field(default=None, metadata={"description": "The cluster size"})
    provisioning_state: Optional[ClusterProvisioningState] = field(default=None, metadata={"description": "The state of the cluster provisioning"})  # fmt: skip
    cluster_id: Optional[int] = field(default=None, metadata={"description": "The identity"})
    hosts: Optional[List[str]] = field(default=None, metadata={"description": "The hosts"})
    vsan_datastore_name: Optional[str] = field(default=None, metadata={"description": "Name of the vsan datastore associated with the cluster"})  # fmt: skip


@define(kw_only=True)
class Cluster(ProxyResource):
    properties: Optional[ClusterProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip
    sku: Sku = field(metadata={"description": "The SKU (Stock Keeping Unit) assigned to this resource."})


@define(kw_only=True)
class ClusterList(ListResult):
    value: List[Cluster] = field(factory=list, metadata={"description": "The Cluster items on this page"})


@define(kw_only=True)
class ClusterUpdateProperties:
    cluster_size: Optional[int] = field(default=None, metadata={"description": "The cluster size"})
    hosts: Optional[List[str]] = field(default=None, metadata={"description": "The hosts"})


@define(kw_only=True)
class ClusterUpdate(ArmModel):
    sku: Optional[Sku] = field(default=None, metadata={"description": "The SKU (Stock Keeping Unit) assigned to this resource."})  # fmt: skip
    properties: Optional[ClusterUpdateProperties] = field(default=None, metadata={"description": "The properties of a cluster resource that may be updated"})  # fmt: skip


@define(kw_only=True)
class ClusterZone:
    hosts: Optional[List[str]] = field(default=None, metadata={"description": "List of hosts belonging to the availability zone in a cluster"})  # fmt: skip
    zone: Optional[str] = field(default=None, metadata={"description": "Availability zone identifier"})


@define(kw_only=True)
class ClusterZoneList(ArmModel):
    zones: Optional[List[ClusterZone]] = field(default=None, metadata={"description": "Zone and associated hosts info"})  # fmt: skip


@define(kw_only=True)
class NetAppVolume:
    id: str = field(metadata={"description": "Azure resource ID of the NetApp volume"})


@define(kw_only=True)
class DiskPoolVolume:
    target_id: str = field(metadata={"description": "Azure resource ID of the iSCSI target"})
    lun_name: str = field(metadata={"description": "Name of the LUN to be used for datastore"})
    mount_option: Optional[MountOption] = field(default=None, metadata={"description": "Mode that describes whether the LUN has to be mounted as a datastore or attached as a LUN"})  # fmt: skip
    path: Optional[str] = field(default=None, metadata={"description": "Device path"})


@define(kw_only=True)
class ElasticSanVolume:
    target_id: str = field(metadata={"description": "Azure resource ID of the Elastic SAN Volume"})


@define(kw_only=True)
class DatastoreProperties:
    provisioning_state: Optional[DatastoreProvisioningState] = field(default=None, metadata={"description": "The state of the datastore provisioning"})  # fmt: skip
    net_app_volume: Optional[NetAppVolume] = field(default=None, metadata={"description": "An Azure NetApp Files volume"})  # fmt: skip
    disk_pool_volume: Optional[DiskPoolVolume] = field(default=None, metadata={"description": "An iSCSI volume"})
    elastic_san_volume: Optional[ElasticSanVolume] = field(default=None, metadata={"description": "An Elastic SAN volume"})  # fmt: skip
    status: Optional[DatastoreStatus] = field(default=None, metadata={"description": "The operational status of the datastore"})  # fmt: skip


@define(kw_only=True)
class Datastore(ProxyResource):
    properties: Optional[DatastoreProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class DatastoreList(ListResult):
    value: List[Datastore] = field(factory=list, metadata={"description": "The Datastore items on this page"})


@define(kw_only=True)
class AddonProperties:
    """
    The properties of an addon. The concrete class is selected by the addon type.
    """

    addon_type: Optional[AddonType] = field(default=None, metadata={"description": "Addon type"})
    provisioning_state: Optional[AddonProvisioningState] = field(default=None, metadata={"description": "The state of the addon provisioning"})  # fmt: skip


@define(kw_only=True)
class AddonSrmProperties(AddonProperties):
    addon_type: Optional[AddonType] = field(default=AddonType.SRM, metadata={"description": "Addon type"})
    license_key: Optional[str] = field(default=None, metadata={"description": "The Site Recovery Manager (SRM) license"})  # fmt: skip


@define(kw_only=True)
class AddonVrProperties(AddonProperties):
    addon_type: Optional[AddonType] = field(default=AddonType.VR, metadata={"description": "Addon type"})
    vrs_count: int = field(metadata={"description": "The vSphere Replication Server (VRS) count"})


@define(kw_only=True)
class AddonHcxProperties(AddonProperties):
    addon_type: Optional[AddonType] = field(default=AddonType.HCX, metadata={"description": "Addon type"})
    offer: str = field(metadata={"description": "The HCX offer, example VMware MaaS Cloud Provider (Enterprise)"})


@define(kw_only=True)
class AddonArcProperties(AddonProperties):
    addon_type: Optional[AddonType] = field(default=AddonType.ARC, metadata={"description": "Addon type"})
    v_center: Optional[str] = field(default=None, metadata={"description": "The VMware vCenter resource ID"})


register_tagged_union(
    AddonProperties,
    "addonType",
    {"SRM": AddonSrmProperties, "VR": AddonVrProperties, "HCX": AddonHcxProperties, "Arc": AddonArcProperties},
)


@define(kw_only=True)
class Addon(ProxyResource):
    properties: Optional[AddonProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class AddonList(ListResult):
    value: List[Addon] = field(factory=list, metadata={"description": "The Addon items on this page"})


@define(kw_only=True)
class ExpressRouteAuthorizationProperties:
    provisioning_state: Optional[ExpressRouteAuthorizationProvisioningState] = field(default=None, metadata={"description": "The state of the ExpressRoute Circuit Authorization provisioning"})  # fmt: skip
    express_route_authorization_id: Optional[str] = field(default=None, metadata={"description": "The ID of the ExpressRoute Circuit Authorization"})  # fmt: skip
    express_route_authorization_key: Optional[str] = field(default=None, metadata={"description": "The key of the ExpressRoute Circuit Authorization"})  # fmt: skip
    express_route_id: Optional[str] = field(default=None, metadata={"description": "The ID of the ExpressRoute Circuit"})  # fmt: skip


@define(kw_only=True)
class ExpressRouteAuthorization(ProxyResource):
    properties: Optional[ExpressRouteAuthorizationProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class ExpressRouteAuthorizationList(ListResult):
    value: List[ExpressRouteAuthorization] = field(factory=list, metadata={"description": "The ExpressRouteAuthorization items on this page"})  # fmt: skip


@define(kw_only=True)
class GlobalReachConnectionProperties:
    provisioning_state: Optional[GlobalReachConnectionProvisioningState] = field(default=None, metadata={"description": "The state of the ExpressRoute Circuit Authorization provisioning"})  # fmt: skip
    address_prefix: Optional[str] = field(default=None, metadata={"description": "The network used for global reach carved out from the original network block provided for the private cloud"})  # fmt: skip
    authorization_key: Optional[str] = field(default=None, metadata={"description": "Authorization key from the peer express route used for the global reach connection"})  # fmt: skip
    circuit_connection_status: Optional[GlobalReachConnectionStatus] = field(default=None, metadata={"description": "The connection status of the global reach connection"})  # fmt: skip
    peer_express_route_circuit: Optional[str] = field(default=None, metadata={"description": "Identifier of the ExpressRoute Circuit to peer with in the global reach connection"})  # fmt: skip
    express_route_id: Optional[str] = field(default=None, metadata={"description": "The ID of the Private Cloud's ExpressRoute Circuit that is participating in the global reach connection"})  # fmt: skip


@define(kw_only=True)
class GlobalReachConnection(ProxyResource):
    properties: Optional[GlobalReachConnectionProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class GlobalReachConnectionList(ListResult):
    value: List[GlobalReachConnection] = field(factory=list, metadata={"description": "The GlobalReachConnection items on this page"})  # fmt: skip


@define(kw_only=True)
class HcxEnterpriseSiteProperties:
    provisioning_state: Optional[HcxEnterpriseSiteProvisioningState] = field(default=None, metadata={"description": "The provisioning state of the resource."})  # fmt: skip
    activation_key: Optional[str] = field(default=None, metadata={"description": "The activation key"})
    status: Optional[HcxEnterpriseSiteStatus] = field(default=None, metadata={"description": "The status of the HCX Enterprise Site"})  # fmt: skip


@define(kw_only=True)
class HcxEnterpriseSite(ProxyResource):
    properties: Optional[HcxEnterpriseSiteProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class HcxEnterpriseSiteList(ListResult):
    value: List[HcxEnterpriseSite] = field(factory=list, metadata={"description": "The HcxEnterpriseSite items on this page"})  # fmt: skip


@define(kw_only=True)
class CloudLinkProperties:
    provisioning_state: Optional[CloudLinkProvisioningState] = field(default=None, metadata={"description": "The provisioning state of the resource."})  # fmt: skip
    status: Optional[CloudLinkStatus] = field(default=None, metadata={"description": "The state of the cloud link."})
    linked_cloud: Optional[str] = field(default=None, metadata={"description": "Identifier of the other private cloud participating in the link."})  # fmt: skip


@define(kw_only=True)
class CloudLink(ProxyResource):
    properties: Optional[CloudLinkProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class CloudLinkList(ListResult):
    value: List[CloudLink] = field(factory=list, metadata={"description": "The CloudLink items on this page"})


@define(kw_only=True)
class IscsiPathProperties:
    provisioning_state: Optional[IscsiPathProvisioningState] = field(default=None, metadata={"description": "The state of the iSCSI path provisioning"})  # fmt: skip
    network_block: str = field(metadata={"description": "CIDR Block for iSCSI path."})


@define(kw_only=True)
class IscsiPath(ProxyResource):
    properties: Optional[IscsiPathProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class IscsiPathListResult(ListResult):
    value: List[IscsiPath] = field(factory=list, metadata={"description": "The IscsiPath items on this page"})


@define(kw_only=True)
class VirtualMachineProperties:
    provisioning_state: Optional[VirtualMachineProvisioningState] = field(default=None, metadata={"description": "The provisioning state of the resource."})  # fmt: skip
    display_name: Optional[str] = field(default=None, metadata={"description": "Display name of the VM."})
    mo_ref_id: Optional[str] = field(default=None, metadata={"description": "vCenter managed object reference ID of the virtual machine"})  # fmt: skip
    folder_path: Optional[str] = field(default=None, metadata={"description": "Path to virtual machine's folder starting from datacenter virtual machine folder"})  # fmt: skip
    restrict_movement: Optional[VirtualMachineRestrictMovementState] = field(default=None, metadata={"description": "Whether VM DRS-driven movement is restricted (enabled) or not (disabled)"})  # fmt: skip


@define(kw_only=True)
class VirtualMachine(ProxyResource):
    properties: Optional[VirtualMachineProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class VirtualMachinesList(ListResult):
    value: List[VirtualMachine] = field(factory=list, metadata={"description": "The VirtualMachine items on this page"})  # fmt: skip


@define(kw_only=True)
class VirtualMachineRestrictMovement(ArmModel):
    restrict_movement: Optional[VirtualMachineRestrictMovementState] = field(default=None, metadata={"description": "Whether VM DRS-driven movement is restricted (enabled) or not (disabled)"})  # fmt: skip


@define(kw_only=True)
class PlacementPolicyProperties:
    """
    The properties of a placement policy. The concrete class is selected by the policy type.
    """

    type: Optional[PlacementPolicyType] = field(default=None, metadata={"description": "Placement Policy type"})
    state: Optional[PlacementPolicyState] = field(default=None, metadata={"description": "Whether the placement policy is enabled or disabled"})  # fmt: skip
    display_name: Optional[str] = field(default=None, metadata={"description": "Display name of the placement policy"})  # fmt: skip
    provisioning_state: Optional[PlacementPolicyProvisioningState] = field(default=None, metadata={"description": "The provisioning state"})  # fmt: skip


@define(kw_only=True)
class VmVmPlacementPolicyProperties(PlacementPolicyProperties):
    type: Optional[PlacementPolicyType] = field(default=PlacementPolicyType.VM_VM, metadata={"description": "Placement Policy type"})  # fmt: skip
    vm_members: List[str] = field(factory=list, metadata={"description": "Virtual machine members list"})
    affinity_type: AffinityType = field(metadata={"description": "placement policy affinity type"})


@define(kw_only=True)
class VmHostPlacementPolicyProperties(PlacementPolicyProperties):
    type: Optional[PlacementPolicyType] = field(default=PlacementPolicyType.VM_HOST, metadata={"description": "Placement Policy type"})  # fmt: skip
    vm_members: List[str] = field(factory=list, metadata={"description": "Virtual machine members list"})
    host_members: List[str] = field(factory=list, metadata={"description": "Host members list"})
    affinity_type: AffinityType = field(metadata={"description": "placement policy affinity type"})
    affinity_strength: Optional[AffinityStrength] = field(default=None, metadata={"description": "vm-host placement policy affinity strength (should/must)"})  # fmt: skip
    azure_hybrid_benefit_type: Optional[AzureHybridBenefitType] = field(default=None, metadata={"description": "placement policy azure hybrid benefit opt-in type"})  # fmt: skip


register_tagged_union(
    PlacementPolicyProperties,
    "type",
    {"VmVm": VmVmPlacementPolicyProperties, "VmHost": VmHostPlacementPolicyProperties},
)


@define(kw_only=True)
class PlacementPolicy(ProxyResource):
    properties: Optional[PlacementPolicyProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class PlacementPoliciesList(ListResult):
    value: List[PlacementPolicy] = field(factory=list, metadata={"description": "The PlacementPolicy items on this page"})  # fmt: skip


@define(kw_only=True)
class PlacementPolicyUpdateProperties:
    state: Optional[PlacementPolicyState] = field(default=None, metadata={"description": "Whether the placement policy is enabled or disabled"})  # fmt: skip
    vm_members: Optional[List[str]] = field(default=None, metadata={"description": "Virtual machine members list"})
    host_members: Optional[List[str]] = field(default=None, metadata={"description": "Host members list"})
    affinity_strength: Optional[AffinityStrength] = field(default=None, metadata={"description": "vm-host placement policy affinity strength (should/must)"})  # fmt: skip
    azure_hybrid_benefit_type: Optional[AzureHybridBenefitType] = field(default=None, metadata={"description": "placement policy azure hybrid benefit opt-in type"})  # fmt: skip


@define(kw_only=True)
class PlacementPolicyUpdate(ArmModel):
    properties: Optional[PlacementPolicyUpdateProperties] = field(default=None, metadata={"description": "The properties of a placement policy resource that may be updated"})  # fmt: skip


@define(kw_only=True)
class Operation:
    name: Optional[str] = field(default=None, metadata={"description": "The name of the operation, as per Resource-Based Access Control (RBAC)."})  # fmt: skip
    is_data_action: Optional[bool] = field(default=None, metadata={"description": "Whether the operation applies to data-plane."})  # fmt: skip
    display: Optional[OperationDisplay] = field(default=None, metadata={"description": "Localized display information for this particular operation."})  # fmt: skip
    origin: Optional[Origin] = field(default=None, metadata={"description": "The intended executor of the operation."})  # fmt: skip
    action_type: Optional[ActionType] = field(default=None, metadata={"description": "Indicates the action type."})


@define(kw_only=True)
class OperationListResult(ListResult):
    value: List[Operation] = field(factory=list, metadata={"description": "List of operations supported by the resource provider"})  # fmt: skip
