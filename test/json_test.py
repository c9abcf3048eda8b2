from datetime import datetime, timezone
from typing import ClassVar, List, Optional

import pytest
from attr import define, field

from fix_azure_arm.json import from_json, from_json_str, to_json, to_json_str
from fix_azure_arm.resource.vmware import (
    AddonArcProperties,
    AddonHcxProperties,
    AddonProperties,
    AddonSrmProperties,
    AddonVrProperties,
    Circuit,
    PlacementPolicyProperties,
    VmHostPlacementPolicyProperties,
    VmVmPlacementPolicyProperties,
)
from fix_azure_arm.resource.vmware_network import (
    WorkloadNetworkDhcpEntity,
    WorkloadNetworkDhcpRelay,
    WorkloadNetworkDhcpServer,
    WorkloadNetworkPublicIpProperties,
)
from fix_azure_arm.resource.vmware_script import (
    PsCredentialExecutionParameter,
    ScriptExecutionParameter,
    ScriptSecureStringExecutionParameter,
    ScriptStringExecutionParameter,
)


@define
class Nested:
    kind: ClassVar[str] = "nested"
    some_value: int
    other_values: List[str] = field(factory=list)


@define
class Outer:
    kind: ClassVar[str] = "outer"
    display_name: str
    nested: Optional[Nested] = None
    created_at: Optional[datetime] = None
    e_tag: Optional[str] = field(default=None, metadata={"alias": "eTag"})
    _private: int = 23


def test_wire_names() -> None:
    outer = Outer("test", Nested(1, ["a"]), e_tag="abc")
    assert to_json(outer) == {
        "displayName": "test",
        "nested": {"someValue": 1, "otherValues": ["a"]},
        "eTag": "abc",
    }
    # private attributes are never written
    assert "_private" not in to_json(outer, strip_nulls=False)
    assert "private" not in to_json(outer, strip_nulls=False)


def test_strip_nulls() -> None:
    outer = Outer("test")
    assert to_json(outer) == {"displayName": "test"}
    assert to_json(outer, strip_nulls=False) == {"displayName": "test", "nested": None, "createdAt": None, "eTag": None}
    assert to_json(Outer("test", Nested(1)), strip_attr="otherValues") == {"displayName": "test", "nested": {"someValue": 1}}  # fmt: skip # noqa: E501


def test_read_json() -> None:
    js = {"displayName": "test", "nested": {"someValue": 2}, "eTag": "x", "unknownProperty": True}
    outer = from_json(js, Outer)
    assert outer == Outer("test", Nested(2), e_tag="x")
    assert from_json_str(to_json_str(outer), Outer) == outer


def test_read_invalid_json() -> None:
    with pytest.raises(Exception):
        from_json({"nested": {"someValue": 2}}, Outer)


def test_datetime() -> None:
    outer = from_json({"displayName": "test", "createdAt": "2023-10-02T12:01:45Z"}, Outer)
    assert outer.created_at == datetime(2023, 10, 2, 12, 1, 45, tzinfo=timezone.utc)
    assert to_json(outer)["createdAt"] == "2023-10-02T12:01:45Z"
    # offsets other than utc are kept
    outer = from_json({"displayName": "test", "createdAt": "2023-10-02T12:01:45+02:00"}, Outer)
    assert to_json(outer)["createdAt"] == "2023-10-02T12:01:45+02:00"


def test_alias() -> None:
    circuit = Circuit(express_route_id="er1", express_route_private_peering_id="pp1")
    assert to_json(circuit) == {"expressRouteID": "er1", "expressRoutePrivatePeeringID": "pp1"}
    js = {"numberOfPublicIPs": 32, "publicIPBlock": "20.20.40.50/32"}
    public_ip = from_json(js, WorkloadNetworkPublicIpProperties)
    assert public_ip.number_of_public_ips == 32
    assert public_ip.public_ip_block == "20.20.40.50/32"


@pytest.mark.parametrize(
    "base,js,expected",
    [
        (AddonProperties, {"addonType": "SRM", "licenseKey": "key"}, AddonSrmProperties),
        (AddonProperties, {"addonType": "VR", "vrsCount": 1}, AddonVrProperties),
        (AddonProperties, {"addonType": "HCX", "offer": "VMware MaaS Cloud Provider"}, AddonHcxProperties),
        (AddonProperties, {"addonType": "Arc", "vCenter": "vc1"}, AddonArcProperties),
        (PlacementPolicyProperties, {"type": "VmVm", "vmMembers": ["vm1"], "affinityType": "Affinity"}, VmVmPlacementPolicyProperties),  # fmt: skip # noqa: E501
        (PlacementPolicyProperties, {"type": "VmHost", "vmMembers": ["vm1"], "hostMembers": ["h1"], "affinityType": "AntiAffinity"}, VmHostPlacementPolicyProperties),  # fmt: skip # noqa: E501
        (WorkloadNetworkDhcpEntity, {"dhcpType": "SERVER", "serverAddress": "40.1.5.1/24"}, WorkloadNetworkDhcpServer),
        (WorkloadNetworkDhcpEntity, {"dhcpType": "RELAY", "serverAddresses": ["40.1.5.1"]}, WorkloadNetworkDhcpRelay),
        (ScriptExecutionParameter, {"name": "a", "type": "Value", "value": "v"}, ScriptStringExecutionParameter),
        (ScriptExecutionParameter, {"name": "a", "type": "SecureValue", "secureValue": "v"}, ScriptSecureStringExecutionParameter),  # fmt: skip # noqa: E501
        (ScriptExecutionParameter, {"name": "a", "type": "Credential", "username": "u", "password": "p"}, PsCredentialExecutionParameter),  # fmt: skip # noqa: E501
    ],
)
def test_tagged_union(base: type, js: dict, expected: type) -> None:
    value = from_json(js, base)
    assert type(value) is expected
    # written with the discriminator and all properties of the variant
    assert to_json(value) == js


def test_tagged_union_variant_defaults() -> None:
    assert to_json(AddonVrProperties(vrs_count=2)) == {"addonType": "VR", "vrsCount": 2}
    assert to_json(WorkloadNetworkDhcpRelay(server_addresses=["1.2.3.4"])) == {
        "dhcpType": "RELAY",
        "serverAddresses": ["1.2.3.4"],
    }
    # a variant can be read directly
    assert from_json({"vrsCount": 3}, AddonVrProperties) == AddonVrProperties(vrs_count=3)


def test_tagged_union_unknown_discriminator() -> None:
    with pytest.raises(ValueError):
        from_json({"addonType": "Unknown"}, AddonProperties)
    with pytest.raises(ValueError):
        from_json({"licenseKey": "no discriminator"}, AddonProperties)
