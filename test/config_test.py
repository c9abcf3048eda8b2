import json
from pathlib import Path

import pytest
from azure.identity import ClientSecretCredential, DefaultAzureCredential
from conftest import StaticFileArmClient

from fix_azure_arm.azure_client import PipelineArmClient
from fix_azure_arm.config import ArmClientConfig, AzureAccountConfig, AzureClientSecretConfig
from fix_azure_arm.json import to_json
from fix_azure_arm.service.migrate import MigrateClient
from fix_azure_arm.service.vmware import AvsClient


def test_defaults() -> None:
    config = ArmClientConfig()
    assert config.endpoint == "https://management.azure.com"
    assert config.credential_scopes() == ["https://management.azure.com/.default"]
    assert config.account.subscription_id is None
    assert isinstance(config.account.credentials(), DefaultAzureCredential)


def test_scopes() -> None:
    assert ArmClientConfig(endpoint="https://management.usgovcloudapi.net/").credential_scopes() == [
        "https://management.usgovcloudapi.net/.default"
    ]
    assert ArmClientConfig(scopes=["https://other/.default"]).credential_scopes() == ["https://other/.default"]


def test_from_file(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "endpoint": "https://management.chinacloudapi.cn",
                "retryTotal": 3,
                "readTimeout": 30,
                "account": {
                    "subscriptionId": "sub1",
                    "clientSecret": {"tenantId": "tenant", "clientId": "client", "clientSecret": "secret"},
                },
            }
        )
    )
    config = ArmClientConfig.from_file(str(path))
    assert config.endpoint == "https://management.chinacloudapi.cn"
    assert config.retry_total == 3
    assert config.read_timeout == 30
    assert config.connection_timeout == 300
    assert config.account.subscription_id == "sub1"
    assert config.account.client_secret == AzureClientSecretConfig(
        tenant_id="tenant", client_id="client", client_secret="secret"
    )
    assert isinstance(config.account.credentials(), ClientSecretCredential)
    # written in the same format
    assert to_json(config)["account"]["clientSecret"]["tenantId"] == "tenant"


def test_pipeline_client() -> None:
    config = ArmClientConfig(user_agent="my-agent")
    client = PipelineArmClient(config, DefaultAzureCredential(), "sub1")
    assert client.endpoint == "https://management.azure.com"
    assert client.subscription_id == "sub1"
    client.close()


def test_from_config(azure_client: StaticFileArmClient) -> None:
    with pytest.raises(ValueError):
        AvsClient.from_config(ArmClientConfig())
    with pytest.raises(ValueError):
        MigrateClient.from_config(ArmClientConfig())
    account = AzureAccountConfig(
        subscription_id="sub1", client_secret=AzureClientSecretConfig("tenant", "client", "secret")
    )
    avs = AvsClient.from_config(ArmClientConfig(account=account))
    assert avs.client is azure_client
    migrate = MigrateClient.from_config(ArmClientConfig(account=account))
    assert migrate.client is azure_client
    migrate.close()
    avs.close()
