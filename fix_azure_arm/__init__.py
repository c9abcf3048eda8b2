from fix_azure_arm.azure_client import ArmClient, AzureResourceSpec, Pager
from fix_azure_arm.config import ArmClientConfig, AzureAccountConfig, AzureClientSecretConfig
from fix_azure_arm.errors import (
    ArmAuthenticationError,
    ArmResourceExistsError,
    ArmResourceNotFoundError,
    ArmResponseError,
)
from fix_azure_arm.service.migrate import MigrateClient
from fix_azure_arm.service.vmware import AvsClient

__all__ = [
    "ArmClient",
    "AzureResourceSpec",
    "Pager",
    "ArmClientConfig",
    "AzureAccountConfig",
    "AzureClientSecretConfig",
    "ArmAuthenticationError",
    "ArmResourceExistsError",
    "ArmResourceNotFoundError",
    "ArmResponseError",
    "MigrateClient",
    "AvsClient",
]
