import logging
from typing import Any, Dict, Optional, Type

from azure.core.exceptions import (
    ClientAuthenticationError,
    HttpResponseError,
    ResourceExistsError,
    ResourceNotFoundError,
)
from azure.mgmt.core.exceptions import ARMErrorFormat

from fix_azure_arm.json import from_json
from fix_azure_arm.resource.base import ErrorResponse, ErrorDetail

log = logging.getLogger("fix.azure.arm")


def parse_error_response(response: Any) -> Optional[ErrorResponse]:
    """
    Read the structured error payload from a failed response.
    Both the wrapped form {"error": {...}} and the legacy flat form {"code": ..., "message": ...} are understood.
    Returns None, if the body is not a json object.
    """
    if response is None:
        return None
    try:
        js = response.json()
    except Exception as e:
        log.debug(f"[Azure] Error response has no json body: {e}")
        return None
    if not isinstance(js, dict):
        return None
    if isinstance(js.get("error"), dict):
        return from_json(js, ErrorResponse)
    if "code" in js or "message" in js:
        return ErrorResponse(error=from_json(js, ErrorDetail))
    return None


class ArmResponseError(HttpResponseError):
    """
    A request returned a status code that is not expected by the operation.
    The server provided error payload is available as error_response.
    """

    def __init__(self, message: Optional[str] = None, response: Optional[Any] = None, **kwargs: Any) -> None:
        kwargs.setdefault("error_format", ARMErrorFormat)
        super().__init__(message=message, response=response, **kwargs)
        self.error_response: Optional[ErrorResponse] = parse_error_response(response)


class ArmAuthenticationError(ArmResponseError, ClientAuthenticationError):
    pass


class ArmResourceNotFoundError(ArmResponseError, ResourceNotFoundError):
    pass


class ArmResourceExistsError(ArmResponseError, ResourceExistsError):
    pass


ErrorMap: Dict[int, Type[HttpResponseError]] = {
    401: ArmAuthenticationError,
    404: ArmResourceNotFoundError,
    409: ArmResourceExistsError,
}
