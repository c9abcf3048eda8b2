from __future__ import annotations

import json
import os
from http import HTTPStatus
from typing import Any, Dict, Iterator, List, Optional, Tuple
from urllib.parse import parse_qs, urlparse

import requests
from azure.core.rest import HttpRequest, HttpResponse
from azure.core.rest._requests_basic import RestRequestsTransportResponse
from azure.identity import DefaultAzureCredential
from pytest import fixture

from fix_azure_arm.azure_client import ArmClient
from fix_azure_arm.config import ArmClientConfig
from fix_azure_arm.service.migrate import MigrateClient
from fix_azure_arm.service.vmware import AvsClient
from fix_azure_arm.types import Json

FilesDir = os.path.dirname(__file__) + "/files"


def transport_response(request: HttpRequest, status: int, js: Any = None) -> HttpResponse:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = HTTPStatus(status).phrase
    resp.url = request.url
    resp._content = json.dumps(js).encode("utf-8") if js is not None else b""
    resp._content_consumed = True
    if js is not None:
        resp.headers["Content-Type"] = "application/json; charset=utf-8"
    result = RestRequestsTransportResponse(internal_response=resp, request=request)  # type: ignore
    result.read()  # explicit read required
    return result


def load_file(service: str, name: str) -> Optional[Json]:
    path = f"{FilesDir}/{service}/{name}.json"
    if not os.path.exists(path):
        return None
    with open(path) as f:
        return json.load(f)  # type: ignore


class StaticFileArmClient(ArmClient):
    """
    Answers all requests from the json files in test/files/<service>.
    The file is selected by the last segment of the request path, optionally prefixed by the parent segment
    (e.g. `iscsiPaths_default.json`) and suffixed with the skip token of a follow-up page.
    Bodies of PUT and PATCH requests are echoed, DELETE returns 204.
    Explicit responses can be defined per last path segment.
    """

    def __init__(self, config: Optional[ArmClientConfig] = None, subscription_id: str = "test") -> None:
        super().__init__(config or ArmClientConfig(), None, subscription_id)
        self.requests: List[HttpRequest] = []
        self.responses: Dict[str, Tuple[int, Any]] = {}

    def send(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        url = urlparse(request.url)
        *_, parent, last = url.path.rstrip("/").split("/")
        if last in self.responses:
            status, js = self.responses[last]
            return transport_response(request, status, js)
        if request.method in ("PUT", "PATCH"):
            body = json.loads(request.content) if request.content else None
            return transport_response(request, 200, body)
        if request.method == "DELETE":
            return transport_response(request, 204)
        service = "vmware" if "/Microsoft.AVS" in url.path else "migrate"
        name = last
        if token := parse_qs(url.query).get("$skipToken"):
            name = f"{last}_{token[0]}"
        for candidate in (f"{parent}_{name}", name):
            if (js := load_file(service, candidate)) is not None:
                return transport_response(request, 200, js)
        if request.method == "POST":
            return transport_response(request, 204)
        return transport_response(request, 404, {"error": {"code": "ResourceNotFound", "message": f"{name} not found"}})

    @property
    def last_request(self) -> HttpRequest:
        return self.requests[-1]

    def last_body(self) -> Any:
        content = self.last_request.content
        return json.loads(content) if content else None


@fixture
def credentials() -> DefaultAzureCredential:
    return DefaultAzureCredential()


@fixture
def azure_client() -> Iterator[StaticFileArmClient]:
    client = StaticFileArmClient()
    original = ArmClient.__dict__["create"]
    ArmClient.create = staticmethod(lambda *args, **kwargs: client)  # type: ignore
    yield client
    ArmClient.create = original  # type: ignore


@fixture
def avs(azure_client: StaticFileArmClient, credentials: DefaultAzureCredential) -> AvsClient:
    return AvsClient(credentials, "test")


@fixture
def migrate(azure_client: StaticFileArmClient, credentials: DefaultAzureCredential) -> MigrateClient:
    return MigrateClient(credentials, "test")
