from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Type, TypeVar

from attr import define, field

from fix_azure_arm.enums import OpenEnum
from fix_azure_arm.json import from_json, to_json
from fix_azure_arm.types import Json

log = logging.getLogger("fix.azure.arm")

T = TypeVar("T")


def parse_json(json: Json, clazz: Type[T]) -> T:
    """
    Use this method to parse json into a class.
    If the json can not be parsed, the error is logged and raised.
    :param json: the json to parse.
    :param clazz: the class to parse into.
    :return: The parsed object.
    """
    try:
        return from_json(json, clazz)
    except Exception as e:
        log.warning(f"[Azure] Failed to parse json into {clazz.__name__}: {e}. Source: {json}")
        raise


class CreatedByType(OpenEnum):
    USER = "User"
    APPLICATION = "Application"
    MANAGED_IDENTITY = "ManagedIdentity"
    KEY = "Key"


@define(kw_only=True)
class SystemData:
    created_by: Optional[str] = field(default=None, metadata={"description": "The identity that created the resource."})
    created_by_type: Optional[CreatedByType] = field(default=None, metadata={"description": "The type of identity that created the resource."})  # fmt: skip
    created_at: Optional[datetime] = field(default=None, metadata={"description": "The timestamp of resource creation (UTC)."})  # fmt: skip
    last_modified_by: Optional[str] = field(default=None, metadata={"description": "The identity that last modified the resource."})  # fmt: skip
    last_modified_by_type: Optional[CreatedByType] = field(default=None, metadata={"description": "The type of identity that last modified the resource."})  # fmt: skip
    last_modified_at: Optional[datetime] = field(default=None, metadata={"description": "The timestamp of resource last modification (UTC)"})  # fmt: skip


@define(kw_only=True)
class ArmModel:
    """
    Base class of all request and response bodies.
    """

    def to_json(self) -> Json:
        return to_json(self)  # type: ignore

    @classmethod
    def from_json(cls: Type[T], json: Json) -> T:
        return parse_json(json, cls)


@define(kw_only=True)
class Resource(ArmModel):
    """
    Common fields that are returned in the response for all Azure Resource Manager resources.
    The fields are written inline: a resource is a single flat json object.
    """

    id: Optional[str] = field(default=None, metadata={"description": "Fully qualified resource ID for the resource."})
    name: Optional[str] = field(default=None, metadata={"description": "The name of the resource."})
    type: Optional[str] = field(default=None, metadata={"description": "The type of the resource. E.g. Microsoft.AVS/privateClouds"})  # fmt: skip
    system_data: Optional[SystemData] = field(default=None, metadata={"description": "Azure Resource Manager metadata containing createdBy and modifiedBy information."})  # fmt: skip

    @property
    def resource_group_name(self) -> Optional[str]:
        return self.extract_part("resourceGroups")

    @property
    def resource_subscription_id(self) -> Optional[str]:
        return self.extract_part("subscriptions")

    def extract_part(self, part: str) -> Optional[str]:
        """
        Extracts a specific part from the resource id.

        Example:
        For the resource id "/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/...",
        calling extract_part("resourceGroups") returns the resource group name.
        """
        if self.id is None:
            return None
        parts = self.id.split("/")
        for idx, segment in enumerate(parts[:-1]):
            if segment.lower() == part.lower():
                return parts[idx + 1]
        return None


@define(kw_only=True)
class ProxyResource(Resource):
    """
    A resource without tags and location.
    """


@define(kw_only=True)
class TrackedResource(Resource):
    """
    A top level resource which has tags and a location.
    """

    location: str = field(metadata={"description": "The geo-location where the resource lives"})
    tags: Optional[Dict[str, str]] = field(default=None, metadata={"description": "Resource tags."})


@define(kw_only=True)
class ListResult(ArmModel):
    """
    One page of a paged list operation.
    The items are in server order, the next link points to the next page.
    An absent and an empty next link both mark the last page.
    """

    next_link: Optional[str] = field(default=None, metadata={"description": "The link to the next page of items"})

    @property
    def items(self) -> List[Any]:
        return getattr(self, "value", None) or []

    def continuation(self) -> Optional[str]:
        return self.next_link or None


@define(kw_only=True)
class ErrorAdditionalInfo:
    type: Optional[str] = field(default=None, metadata={"description": "The additional info type."})
    info: Any = field(default=None, metadata={"description": "The additional info."})


@define(kw_only=True)
class ErrorDetail:
    code: Optional[str] = field(default=None, metadata={"description": "The error code."})
    message: Optional[str] = field(default=None, metadata={"description": "The error message."})
    target: Optional[str] = field(default=None, metadata={"description": "The error target."})
    details: Optional[List[ErrorDetail]] = field(default=None, metadata={"description": "The error details."})
    additional_info: Optional[List[ErrorAdditionalInfo]] = field(default=None, metadata={"description": "The error additional info."})  # fmt: skip


@define(kw_only=True)
class ErrorResponse(ArmModel):
    """
    Common error response for all Azure Resource Manager APIs to return error details for failed operations.
    """

    error: Optional[ErrorDetail] = field(default=None, metadata={"description": "The error object."})


@define(kw_only=True)
class OperationDisplay:
    provider: Optional[str] = field(default=None, metadata={"description": "The localized friendly form of the resource provider name."})  # fmt: skip
    resource: Optional[str] = field(default=None, metadata={"description": "The localized friendly name of the resource type related to this operation."})  # fmt: skip
    operation: Optional[str] = field(default=None, metadata={"description": "The concise, localized friendly name for the operation."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "The short, localized friendly description of the operation."})  # fmt: skip
