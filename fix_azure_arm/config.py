from typing import Optional, List, Union

from attr import define, field
from azure.identity import DefaultAzureCredential, ClientSecretCredential

from fix_azure_arm.json import from_json_str

AzureCredentials = Union[DefaultAzureCredential, ClientSecretCredential]

AzurePublicCloud = "https://management.azure.com"


@define
class AzureClientSecretConfig:
    tenant_id: str = field(metadata={"description": "Azure tenant ID"})
    client_id: str = field(metadata={"description": "Azure client ID"})
    client_secret: str = field(metadata={"description": "Azure client secret"})


@define
class AzureAccountConfig:
    subscription_id: Optional[str] = field(
        default=None, metadata={"description": "The subscription that all operations of the client target."}
    )
    client_secret: Optional[AzureClientSecretConfig] = field(
        default=None,
        metadata={
            "description": "If you can not provide access via the environment, define access with a client secret.\nIf no secret is provided the default credential chain will be used.\nSee https://docs.microsoft.com/en-us/azure/developer/python/azure-sdk-authenticate?tabs=cmd#environment-variables for more information."  # noqa: E501
        },
    )

    def credentials(self) -> AzureCredentials:
        if cs := self.client_secret:
            return ClientSecretCredential(
                tenant_id=cs.tenant_id,
                client_id=cs.client_id,
                client_secret=cs.client_secret,
            )

        return DefaultAzureCredential(process_timeout=300)


@define
class ArmClientConfig:
    endpoint: str = field(
        default=AzurePublicCloud,
        metadata={"description": "The Azure Resource Manager endpoint. Defaults to the public cloud."},
    )
    scopes: List[str] = field(
        factory=list,
        metadata={
            "description": "Scopes of the access token requested for every call.\n"
            "If not defined, the default scope of the endpoint is used: <endpoint>/.default"
        },
    )
    retry_total: int = field(
        default=10, metadata={"description": "Total number of retries of the http pipeline per request."}
    )
    retry_backoff_factor: float = field(
        default=0.8, metadata={"description": "Backoff factor applied between retry attempts in seconds."}
    )
    retry_backoff_max: int = field(
        default=60, metadata={"description": "Maximum wait time between two retry attempts in seconds."}
    )
    connection_timeout: int = field(default=300, metadata={"description": "Connection timeout in seconds."})
    read_timeout: int = field(default=300, metadata={"description": "Read timeout in seconds."})
    user_agent: Optional[str] = field(
        default=None, metadata={"description": "Value prepended to the user agent header of every request."}
    )
    logging_enable: bool = field(
        default=False,
        metadata={"description": "Log the body and headers of every request and response on debug level."},
    )
    account: AzureAccountConfig = field(
        factory=AzureAccountConfig, metadata={"description": "Subscription and credentials to use."}
    )

    def credential_scopes(self) -> List[str]:
        if self.scopes:
            return self.scopes
        return [f"{self.endpoint.rstrip('/')}/.default"]

    @staticmethod
    def from_file(path: str) -> "ArmClientConfig":
        with open(path) as f:
            return from_json_str(f.read(), ArmClientConfig)
