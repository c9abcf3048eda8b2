from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from attr import define, field

from fix_azure_arm.enums import OpenEnum
from fix_azure_arm.json import register_tagged_union
from fix_azure_arm.resource.base import ListResult, ProxyResource


class ScriptPackageProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"


class ScriptCmdletProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"


class ScriptCmdletAudience(OpenEnum):
    AUTOMATION = "Automation"
    ANY = "Any"


class ScriptParameterTypes(OpenEnum):
    STRING = "String"
    SECURE_STRING = "SecureString"
    CREDENTIAL = "Credential"
    INT = "Int"
    BOOL = "Bool"
    FLOAT = "Float"


class VisibilityParameterEnum(OpenEnum):
    VISIBLE = "Visible"
    HIDDEN = "Hidden"


class OptionalParamEnum(OpenEnum):
    OPTIONAL = "Optional"
    REQUIRED = "Required"


class ScriptExecutionParameterType(OpenEnum):
    VALUE = "Value"
    SECURE_VALUE = "SecureValue"
    CREDENTIAL = "Credential"


class ScriptExecutionProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    PENDING = "Pending"
    RUNNING = "Running"
    CANCELLING = "Cancelling"
    CANCELLED = "Cancelled"
    DELETING = "Deleting"


class ScriptOutputStreamType(OpenEnum):
    INFORMATION = "Information"
    WARNING = "Warning"
    OUTPUT = "Output"
    ERROR = "Error"


@define(kw_only=True)
class ScriptPackageProperties:
    provisioning_state: Optional[ScriptPackageProvisioningState] = field(default=None, metadata={"description": "The provisioning state of the resource."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "User friendly description of the package"})  # fmt: skip
    version: Optional[str] = field(default=None, metadata={"description": "Module version"})
    company: Optional[str] = field(default=None, metadata={"description": "Company that created and supports the package"})  # fmt: skip
    uri: Optional[str] = field(default=None, metadata={"description": "Link to support by the package vendor"})


@define(kw_only=True)
class ScriptPackage(ProxyResource):
    properties: Optional[ScriptPackageProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class ScriptPackagesList(ListResult):
    value: List[ScriptPackage] = field(factory=list, metadata={"description": "The ScriptPackage items on this page"})  # fmt: skip


@define(kw_only=True)
class ScriptParameter:
    type: Optional[ScriptParameterTypes] = field(default=None, metadata={"description": "The type of parameter the script is expecting."})  # fmt: skip
    name: Optional[str] = field(default=None, metadata={"description": "The parameter name that the script will expect a parameter value for"})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "User friendly description of the parameter"})  # fmt: skip
    visibility: Optional[VisibilityParameterEnum] = field(default=None, metadata={"description": "Should this parameter be visible to arm and passed in the parameters argument when executing"})  # fmt: skip
    optional: Optional[OptionalParamEnum] = field(default=None, metadata={"description": "Is this parameter required or optional"})  # fmt: skip


@define(kw_only=True)
class ScriptCmdletProperties:
    provisioning_state: Optional[ScriptCmdletProvisioningState] = field(default=None, metadata={"description": "The provisioning state of the resource."})  # fmt: skip
    description: Optional[str] = field(default=None, metadata={"description": "Description of the scripts functionality"})  # fmt: skip
    timeout: Optional[str] = field(default=None, metadata={"description": "Recommended time limit for execution"})
    audience: Optional[ScriptCmdletAudience] = field(default=None, metadata={"description": "Specifies whether a script cmdlet is intended to be invoked only through automation or visible to customers"})  # fmt: skip
    parameters: Optional[List[ScriptParameter]] = field(default=None, metadata={"description": "Parameters the script will accept"})  # fmt: skip


@define(kw_only=True)
class ScriptCmdlet(ProxyResource):
    properties: Optional[ScriptCmdletProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class ScriptCmdletsList(ListResult):
    value: List[ScriptCmdlet] = field(factory=list, metadata={"description": "The ScriptCmdlet items on this page"})


@define(kw_only=True)
class ScriptExecutionParameter:
    """
    A parameter passed to a script execution. The concrete class is selected by the parameter type.
    """

    name: str = field(metadata={"description": "The parameter name"})
    type: Optional[ScriptExecutionParameterType] = field(default=None, metadata={"description": "script execution parameter type"})  # fmt: skip


@define(kw_only=True)
class ScriptStringExecutionParameter(ScriptExecutionParameter):
    type: Optional[ScriptExecutionParameterType] = field(default=ScriptExecutionParameterType.VALUE, metadata={"description": "script execution parameter type"})  # fmt: skip
    value: Optional[str] = field(default=None, metadata={"description": "The value for the passed parameter"})


@define(kw_only=True)
class ScriptSecureStringExecutionParameter(ScriptExecutionParameter):
    type: Optional[ScriptExecutionParameterType] = field(default=ScriptExecutionParameterType.SECURE_VALUE, metadata={"description": "script execution parameter type"})  # fmt: skip
    secure_value: Optional[str] = field(default=None, metadata={"description": "A secure value for the passed parameter, not to be stored in logs"})  # fmt: skip


@define(kw_only=True)
class PsCredentialExecutionParameter(ScriptExecutionParameter):
    type: Optional[ScriptExecutionParameterType] = field(default=ScriptExecutionParameterType.CREDENTIAL, metadata={"description": "script execution parameter type"})  # fmt: skip
    username: Optional[str] = field(default=None, metadata={"description": "username for login"})
    password: Optional[str] = field(default=None, metadata={"description": "password for login"})


register_tagged_union(
    ScriptExecutionParameter,
    "type",
    {
        "Value": ScriptStringExecutionParameter,
        "SecureValue": ScriptSecureStringExecutionParameter,
        "Credential": PsCredentialExecutionParameter,
    },
)


@define(kw_only=True)
class ScriptExecutionProperties:
    script_cmdlet_id: Optional[str] = field(default=None, metadata={"description": "A reference to the script cmdlet resource if user is running a AVS script"})  # fmt: skip
    parameters: Optional[List[ScriptExecutionParameter]] = field(default=None, metadata={"description": "Parameters the script will accept"})  # fmt: skip
    hidden_parameters: Optional[List[ScriptExecutionParameter]] = field(default=None, metadata={"description": "Parameters that will be hidden/not visible to ARM, such as passwords and credentials"})  # fmt: skip
    failure_reason: Optional[str] = field(default=None, metadata={"description": "Error message if the script was able to run, but if the script itself had errors or powershell threw an exception"})  # fmt: skip
    timeout: str = field(metadata={"description": "Time limit for execution"})
    retention: Optional[str] = field(default=None, metadata={"description": "Time to live for the resource. If not provided, will be available for 60 days"})  # fmt: skip
    submitted_at: Optional[datetime] = field(default=None, metadata={"description": "Time the script execution was submitted"})  # fmt: skip
    started_at: Optional[datetime] = field(default=None, metadata={"description": "Time the script execution was started"})  # fmt: skip
    finished_at: Optional[datetime] = field(default=None, metadata={"description": "Time the script execution was finished"})  # fmt: skip
    provisioning_state: Optional[ScriptExecutionProvisioningState] = field(default=None, metadata={"description": "The state of the script execution resource"})  # fmt: skip
    output: Optional[List[str]] = field(default=None, metadata={"description": "Standard output stream from the powershell execution"})  # fmt: skip
    named_outputs: Optional[Dict[str, Any]] = field(default=None, metadata={"description": "User-defined dictionary."})  # fmt: skip
    information: Optional[List[str]] = field(default=None, metadata={"description": "Standard information out stream from the powershell execution"})  # fmt: skip
    warnings: Optional[List[str]] = field(default=None, metadata={"description": "Standard warning out stream from the powershell execution"})  # fmt: skip
    errors: Optional[List[str]] = field(default=None, metadata={"description": "Standard error output stream from the powershell execution"})  # fmt: skip


@define(kw_only=True)
class ScriptExecution(ProxyResource):
    properties: Optional[ScriptExecutionProperties] = field(default=None, metadata={"description": "The resource-specific properties for this resource."})  # fmt: skip


@define(kw_only=True)
class ScriptExecutionsList(ListResult):
    value: List[ScriptExecution] = field(factory=list, metadata={"description": "The ScriptExecution items on this page"})  # fmt: skip
