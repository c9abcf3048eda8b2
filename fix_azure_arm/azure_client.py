from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from string import Formatter
from typing import Any, Dict, Generic, Iterator, List, Optional, Type, TypeVar, cast
from urllib.parse import parse_qs, quote, urljoin, urlparse

from attr import define, field
from azure.core.exceptions import map_error
from azure.core.pipeline import policies
from azure.core.pipeline.transport import RequestsTransport
from azure.core.rest import HttpRequest, HttpResponse
from azure.mgmt.core import ARMPipelineClient
from azure.mgmt.core.policies import ARMChallengeAuthenticationPolicy, ARMHttpLoggingPolicy

from fix_azure_arm.config import ArmClientConfig, AzureCredentials
from fix_azure_arm.errors import ArmResponseError, ErrorMap
from fix_azure_arm.json import to_json
from fix_azure_arm.resource.base import ListResult, parse_json

log = logging.getLogger("fix.azure.arm")

SdkMoniker = "fix-azure-arm/4.0.0"
ApiVersion = "api-version"

T = TypeVar("T")


@define
class AzureResourceSpec:
    """
    Describes one operation of a resource manager API.
    The path is a template: every {name} is filled from the arguments of the call.

    Optional per-call parameters (filters, conditional headers) are declared with query_parameters and
    header_parameters: they map a keyword argument of the call to the wire name and are only sent if
    the caller provides a value. The AVS and Migrate operations of this package declare none, a spec for
    another operation can, e.g. `query_parameters={"filter": "$filter"}` and `spec.request(client, filter="...")`.
    """

    service: str
    path: str
    version: str
    method: str = "GET"
    response_type: Optional[Type[Any]] = None
    expected_status: List[int] = field(factory=lambda: [200])
    # name of the call argument -> name of the query parameter
    query_parameters: Dict[str, str] = field(factory=dict)
    # name of the call argument -> name of the header
    header_parameters: Dict[str, str] = field(factory=dict)

    @property
    def path_parameters(self) -> List[str]:
        return [name for _, name, _, _ in Formatter().parse(self.path) if name]

    def request(self, client: ArmClient, body: Any = None, **kwargs: Any) -> HttpRequest:
        # Construct lookup map used to fill query, header and path parameters
        lookup_map = {"subscription_id": client.subscription_id, **kwargs}

        # Construct the path map
        path_map: Dict[str, str] = {}
        for param in self.path_parameters:
            if lookup_map.get(param, None) is not None:
                path_map[param] = quote(str(lookup_map[param]), safe="")
            else:
                raise KeyError(f"{self.service}:{self.path}: Path parameter {param} was not provided as argument.")

        # Construct parameters: optional parameters are only sent if defined
        # the pipeline does not encode query values
        params = {ApiVersion: self.version}
        for arg, name in self.query_parameters.items():
            if (value := lookup_map.get(arg)) is not None:
                params[name] = quote(str(value), safe="")

        url = client.endpoint + self.path.format_map(path_map)
        headers = self.headers(**kwargs)
        if body is not None:
            return HttpRequest(method=self.method, url=url, params=params, headers=headers, json=to_json(body))
        return HttpRequest(method=self.method, url=url, params=params, headers=headers)

    def next_request(self, client: ArmClient, next_link: str, **kwargs: Any) -> HttpRequest:
        # the link is either absolute or relative to the endpoint
        url = urljoin(client.endpoint + "/", next_link)
        params = {} if ApiVersion in parse_qs(urlparse(url).query) else {ApiVersion: self.version}
        return HttpRequest(method="GET", url=url, params=params, headers=self.headers(**kwargs))

    def headers(self, **kwargs: Any) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        for arg, name in self.header_parameters.items():
            if (value := kwargs.get(arg)) is not None:
                headers[name] = str(value)
        if custom := kwargs.get("headers"):
            headers.update(custom)
        return headers

    @property
    def action(self) -> str:
        return f"{self.method} {self.path}"


class ArmClient(ABC):
    """
    Sends requests described by an AzureResourceSpec and returns the typed response.
    Status codes not expected by the AzureResourceSpec are turned into an ArmResponseError.
    """

    def __init__(self, config: ArmClientConfig, credential: Optional[AzureCredentials], subscription_id: str) -> None:
        self.config = config
        self.credential = credential
        self.subscription_id = subscription_id
        self.endpoint = config.endpoint.rstrip("/")

    @abstractmethod
    def send(self, request: HttpRequest) -> HttpResponse:
        pass

    def execute(self, spec: AzureResourceSpec, body: Any = None, **kwargs: Any) -> Any:
        return self.call(spec, spec.request(self, body, **kwargs))

    def pages(self, spec: AzureResourceSpec, **kwargs: Any) -> Pager[Any]:
        return Pager(self, spec, **kwargs)

    def close(self) -> None:
        pass

    def call(self, spec: AzureResourceSpec, request: HttpRequest) -> Any:
        log.debug(f"[Azure] {spec.service}: {request.method} {request.url}")
        response = self.send(request)
        # Handle error responses
        if response.status_code not in spec.expected_status:
            log.warning(
                f"[Azure] Client Error: service={spec.service}, action={spec.action}, status={response.status_code}"
            )
            map_error(status_code=response.status_code, response=response, error_map=ErrorMap)
            raise ArmResponseError(response=response)

        # Operations without body (e.g. 202 Accepted or 204 No Content)
        if spec.response_type is None or not response.content:
            return None
        return parse_json(response.json(), spec.response_type)

    @staticmethod
    def __create_pipeline_client(
        config: ArmClientConfig, credential: AzureCredentials, subscription_id: str
    ) -> ArmClient:
        return PipelineArmClient(config, credential, subscription_id)

    create = __create_pipeline_client


class PipelineArmClient(ArmClient):
    """
    Sends all requests through an azure-core pipeline.
    Retries, authentication and http logging are handled by the policies of the pipeline.
    """

    def __init__(self, config: ArmClientConfig, credential: AzureCredentials, subscription_id: str) -> None:
        super().__init__(config, credential, subscription_id)
        self.pipeline_client = ARMPipelineClient(
            base_url=self.endpoint,
            policies=[
                policies.RequestIdPolicy(),
                policies.HeadersPolicy(),
                policies.UserAgentPolicy(user_agent=config.user_agent, sdk_moniker=SdkMoniker),
                policies.RetryPolicy(
                    retry_total=config.retry_total,
                    retry_backoff_factor=config.retry_backoff_factor,
                    retry_backoff_max=config.retry_backoff_max,
                ),
                ARMChallengeAuthenticationPolicy(credential, *config.credential_scopes()),
                policies.NetworkTraceLoggingPolicy(logging_enable=config.logging_enable),
                ARMHttpLoggingPolicy(),
            ],
            transport=RequestsTransport(
                connection_timeout=config.connection_timeout, read_timeout=config.read_timeout
            ),
        )

    def send(self, request: HttpRequest) -> HttpResponse:
        return self.pipeline_client.send_request(request, stream=False)

    def close(self) -> None:
        self.pipeline_client.close()


class Pager(Generic[T]):
    """
    Walks all pages of a paged list operation.
    Iterating the pager yields the items of all pages, by_page() yields the pages.
    A page with an absent or empty next link is the last one.
    """

    def __init__(self, client: ArmClient, spec: AzureResourceSpec, **kwargs: Any) -> None:
        if spec.response_type is None or not issubclass(spec.response_type, ListResult):
            raise ValueError(f"{spec.service}:{spec.path}: paged operations need a list result type")
        self.client = client
        self.spec = spec
        self.kwargs = kwargs

    def by_page(self) -> Iterator[ListResult]:
        next_request: Optional[HttpRequest] = self.spec.request(self.client, **self.kwargs)
        while next_request is not None:
            page = cast(Optional[ListResult], self.client.call(self.spec, next_request))
            if page is None:
                break
            yield page
            # is there a next page?
            if next_link := page.continuation():
                next_request = self.spec.next_request(self.client, next_link, **self.kwargs)
            else:
                next_request = None

    def __iter__(self) -> Iterator[T]:
        for page in self.by_page():
            yield from page.items

    def all(self) -> List[T]:
        return list(self)


class OperationGroup:
    """
    Base class of all operation groups: a set of operations on one kind of resource.
    """

    service: str = "arm"
    version: str = ""

    def __init__(self, client: ArmClient) -> None:
        self.client = client

    def spec(self, path: str, response_type: Optional[Type[Any]] = None, **kwargs: Any) -> AzureResourceSpec:
        return AzureResourceSpec(self.service, path, self.version, response_type=response_type, **kwargs)
