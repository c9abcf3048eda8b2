from __future__ import annotations

from typing import List, Optional

from attr import define, field

from fix_azure_arm.enums import OpenEnum
from fix_azure_arm.json import register_tagged_union
from fix_azure_arm.resource.base import ListResult, ProxyResource


class WorkloadNetworkProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    BUILDING = "Building"
    DELETING = "Deleting"
    UPDATING = "Updating"


# all workload network children share the same provisioning states
WorkloadNetworkSegmentProvisioningState = WorkloadNetworkProvisioningState
WorkloadNetworkDhcpProvisioningState = WorkloadNetworkProvisioningState
WorkloadNetworkPortMirroringProvisioningState = WorkloadNetworkProvisioningState
WorkloadNetworkVmGroupProvisioningState = WorkloadNetworkProvisioningState
WorkloadNetworkDnsServiceProvisioningState = WorkloadNetworkProvisioningState
WorkloadNetworkDnsZoneProvisioningState = WorkloadNetworkProvisioningState
WorkloadNetworkPublicIpProvisioningState = WorkloadNetworkProvisioningState


class SegmentStatusEnum(OpenEnum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class PortMirroringStatusEnum(OpenEnum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class VmGroupStatusEnum(OpenEnum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class DnsServiceStatusEnum(OpenEnum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class DhcpTypeEnum(OpenEnum):
    SERVER = "SERVER"
    RELAY = "RELAY"


class PortMirroringDirectionEnum(OpenEnum):
    INGRESS = "INGRESS"
    EGRESS = "EGRESS"
    BIDIRECTIONAL = "BIDIRECTIONAL"


class DnsServiceLogLevelEnum(OpenEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    FATAL = "FATAL"


class VmTypeEnum(OpenEnum):
    REGULAR = "REGULAR"
    EDGE = "EDGE"
    SERVICE = "SERVICE"


@define(kw_only=True)
class WorkloadNetworkProperties:
    provisioning_state: Optional[WorkloadNetworkProvisioningState] = field(default=None, metadata={"description": "The provisioning state of the resource."})  # fmt: skip


@define(kw_only=True)
class WorkloadNetwork(ProxyResource):
    properties: Optional[WorkloadNetworkProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkList(ListResult):
    value: List[WorkloadNetwork] = field(factory=list, metadata={"description": "The WorkloadNetwork items on this page"})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkSegmentSubnet:
    dhcp_ranges: Optional[List[str]] = field(default=None, metadata={"description": "DHCP Range assigned for subnet."})  # fmt: skip
    gateway_address: Optional[str] = field(default=None, metadata={"description": "Gateway address."})


@define(kw_only=True)
class WorkloadNetworkSegmentPortVif:
    port_name: Optional[str] = field(default=None, metadata={"description": "Name of port or VIF attached to segment."})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkSegmentProperties:
    display_name: Optional[str] = field(default=None, metadata={"description": "Display name of the segment."})
    connected_gateway: Optional[str] = field(default=None, metadata={"description": "Gateway which to connect segment to."})  # fmt: skip
    subnet: Optional[WorkloadNetworkSegmentSubnet] = field(default=None, metadata={"description": "Subnet which to connect segment to."})  # fmt: skip
    port_vif: Optional[List[WorkloadNetworkSegmentPortVif]] = field(default=None, metadata={"description": "Port Vif which segment is associated with."})  # fmt: skip
    status: Optional[SegmentStatusEnum] = field(default=None, metadata={"description": "Segment status."})
    provisioning_state: Optional[WorkloadNetworkSegmentProvisioningState] = field(default=None, metadata={"description": "The provisioning state"})  # fmt: skip
    revision: Optional[int] = field(default=None, metadata={"description": "NSX revision number."})


@define(kw_only=True)
class WorkloadNetworkSegment(ProxyResource):
    properties: Optional[WorkloadNetworkSegmentProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkSegmentsList(ListResult):
    value: List[WorkloadNetworkSegment] = field(factory=list, metadata={"description": "The WorkloadNetworkSegment items on this page"})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkDhcpEntity:
    """
    Base of the DHCP configurations. The concrete class is selected by the dhcp type.
    """

    dhcp_type: Optional[DhcpTypeEnum] = field(default=None, metadata={"description": "Type of DHCP: SERVER or RELAY."})  # fmt: skip
    display_name: Optional[str] = field(default=None, metadata={"description": "Display name of the DHCP entity."})
    segments: Optional[List[str]] = field(default=None, metadata={"description": "NSX Segments consuming DHCP."})
    provisioning_state: Optional[WorkloadNetworkDhcpProvisioningState] = field(default=None, metadata={"description": "The provisioning state"})  # fmt: skip
    revision: Optional[int] = field(default=None, metadata={"description": "NSX revision number."})


@define(kw_only=True)
class WorkloadNetworkDhcpServer(WorkloadNetworkDhcpEntity):
    dhcp_type: Optional[DhcpTypeEnum] = field(default=DhcpTypeEnum.SERVER, metadata={"description": "Type of DHCP: SERVER or RELAY."})  # fmt: skip
    server_address: Optional[str] = field(default=None, metadata={"description": "DHCP Server Address."})
    lease_time: Optional[int] = field(default=None, metadata={"description": "DHCP Server Lease Time."})


@define(kw_only=True)
class WorkloadNetworkDhcpRelay(WorkloadNetworkDhcpEntity):
    dhcp_type: Optional[DhcpTypeEnum] = field(default=DhcpTypeEnum.RELAY, metadata={"description": "Type of DHCP: SERVER or RELAY."})  # fmt: skip
    server_addresses: Optional[List[str]] = field(default=None, metadata={"description": "DHCP Relay Addresses. Max 3."})  # fmt: skip


register_tagged_union(
    WorkloadNetworkDhcpEntity,
    "dhcpType",
    {"SERVER": WorkloadNetworkDhcpServer, "RELAY": WorkloadNetworkDhcpRelay},
)


@define(kw_only=True)
class WorkloadNetworkDhcp(ProxyResource):
    properties: Optional[WorkloadNetworkDhcpEntity] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkDhcpList(ListResult):
    value: List[WorkloadNetworkDhcp] = field(factory=list, metadata={"description": "The WorkloadNetworkDhcp items on this page"})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkGatewayProperties:
    provisioning_state: Optional[WorkloadNetworkProvisioningState] = field(default=None, metadata={"description": "The provisioning state of the resource."})  # fmt: skip
    display_name: Optional[str] = field(default=None, metadata={"description": "Display name of the DHCP entity."})
    path: Optional[str] = field(default=None, metadata={"description": "NSX Gateway Path."})


@define(kw_only=True)
class WorkloadNetworkGateway(ProxyResource):
    properties: Optional[WorkloadNetworkGatewayProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkGatewayList(ListResult):
    value: List[WorkloadNetworkGateway] = field(factory=list, metadata={"description": "The WorkloadNetworkGateway items on this page"})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkPortMirroringProperties:
    display_name: Optional[str] = field(default=None, metadata={"description": "Display name of the port mirroring profile."})  # fmt: skip
    direction: Optional[PortMirroringDirectionEnum] = field(default=None, metadata={"description": "Direction of port mirroring profile."})  # fmt: skip
    source: Optional[str] = field(default=None, metadata={"description": "Source VM Group."})
    destination: Optional[str] = field(default=None, metadata={"description": "Destination VM Group."})
    status: Optional[PortMirroringStatusEnum] = field(default=None, metadata={"description": "Port Mirroring Status."})  # fmt: skip
    provisioning_state: Optional[WorkloadNetworkPortMirroringProvisioningState] = field(default=None, metadata={"description": "The provisioning state"})  # fmt: skip
    revision: Optional[int] = field(default=None, metadata={"description": "NSX revision number."})


@define(kw_only=True)
class WorkloadNetworkPortMirroring(ProxyResource):
    properties: Optional[WorkloadNetworkPortMirroringProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkPortMirroringList(ListResult):
    value: List[WorkloadNetworkPortMirroring] = field(factory=list, metadata={"description": "The WorkloadNetworkPortMirroring items on this page"})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkVmGroupProperties:
    display_name: Optional[str] = field(default=None, metadata={"description": "Display name of the VM group."})
    members: Optional[List[str]] = field(default=None, metadata={"description": "Virtual machine members of this group."})  # fmt: skip
    status: Optional[VmGroupStatusEnum] = field(default=None, metadata={"description": "VM Group status."})
    provisioning_state: Optional[WorkloadNetworkVmGroupProvisioningState] = field(default=None, metadata={"description": "The provisioning state"})  # fmt: skip
    revision: Optional[int] = field(default=None, metadata={"description": "NSX revision number."})


@define(kw_only=True)
class WorkloadNetworkVmGroup(ProxyResource):
    properties: Optional[WorkloadNetworkVmGroupProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkVmGroupsList(ListResult):
    value: List[WorkloadNetworkVmGroup] = field(factory=list, metadata={"description": "The WorkloadNetworkVMGroup items on this page"})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkVirtualMachineProperties:
    provisioning_state: Optional[WorkloadNetworkProvisioningState] = field(default=None, metadata={"description": "The provisioning state of the resource."})  # fmt: skip
    display_name: Optional[str] = field(default=None, metadata={"description": "Display name of the VM."})
    vm_type: Optional[VmTypeEnum] = field(default=None, metadata={"description": "Virtual machine type."})


@define(kw_only=True)
class WorkloadNetworkVirtualMachine(ProxyResource):
    properties: Optional[WorkloadNetworkVirtualMachineProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkVirtualMachinesList(ListResult):
    value: List[WorkloadNetworkVirtualMachine] = field(factory=list, metadata={"description": "The WorkloadNetworkVirtualMachine items on this page"})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkDnsServiceProperties:
    display_name: Optional[str] = field(default=None, metadata={"description": "Display name of the DNS Service."})
    dns_service_ip: Optional[str] = field(default=None, metadata={"description": "DNS service IP of the DNS Service."})  # fmt: skip
    default_dns_zone: Optional[str] = field(default=None, metadata={"description": "Default DNS zone of the DNS Service."})  # fmt: skip
    fqdn_zones: Optional[List[str]] = field(default=None, metadata={"description": "FQDN zones of the DNS Service."})  # fmt: skip
    log_level: Optional[DnsServiceLogLevelEnum] = field(default=None, metadata={"description": "DNS Service log level."})  # fmt: skip
    status: Optional[DnsServiceStatusEnum] = field(default=None, metadata={"description": "DNS Service status."})
    provisioning_state: Optional[WorkloadNetworkDnsServiceProvisioningState] = field(default=None, metadata={"description": "The provisioning state"})  # fmt: skip
    revision: Optional[int] = field(default=None, metadata={"description": "NSX revision number."})


@define(kw_only=True)
class WorkloadNetworkDnsService(ProxyResource):
    properties: Optional[WorkloadNetworkDnsServiceProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkDnsServicesList(ListResult):
    value: List[WorkloadNetworkDnsService] = field(factory=list, metadata={"description": "The WorkloadNetworkDnsService items on this page"})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkDnsZoneProperties:
    display_name: Optional[str] = field(default=None, metadata={"description": "Display name of the DNS Zone."})
    domain: Optional[List[str]] = field(default=None, metadata={"description": "Domain names of the DNS Zone."})
    dns_server_ips: Optional[List[str]] = field(default=None, metadata={"description": "DNS Server IP array of the DNS Zone."})  # fmt: skip
    source_ip: Optional[str] = field(default=None, metadata={"description": "Source IP of the DNS Zone."})
    dns_services: Optional[int] = field(default=None, metadata={"description": "Number of DNS Services using the DNS zone."})  # fmt: skip
    provisioning_state: Optional[WorkloadNetworkDnsZoneProvisioningState] = field(default=None, metadata={"description": "The provisioning state"})  # fmt: skip
    revision: Optional[int] = field(default=None, metadata={"description": "NSX revision number."})


@define(kw_only=True)
class WorkloadNetworkDnsZone(ProxyResource):
    properties: Optional[WorkloadNetworkDnsZoneProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkDnsZonesList(ListResult):
    value: List[WorkloadNetworkDnsZone] = field(factory=list, metadata={"description": "The WorkloadNetworkDnsZone items on this page"})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkPublicIpProperties:
    display_name: Optional[str] = field(default=None, metadata={"description": "Display name of the Public IP Block."})  # fmt: skip
    number_of_public_ips: Optional[int] = field(default=None, metadata={"alias": "numberOfPublicIPs", "description": "Number of Public IPs requested."})  # fmt: skip
    public_ip_block: Optional[str] = field(default=None, metadata={"alias": "publicIPBlock", "description": "CIDR Block of the Public IP Block."})  # fmt: skip
    provisioning_state: Optional[WorkloadNetworkPublicIpProvisioningState] = field(default=None, metadata={"description": "The provisioning state"})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkPublicIp(ProxyResource):
    properties: Optional[WorkloadNetworkPublicIpProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class WorkloadNetworkPublicIPsList(ListResult):
    value: List[WorkloadNetworkPublicIp] = field(factory=list, metadata={"description": "The WorkloadNetworkPublicIP items on this page"})  # fmt: skip
