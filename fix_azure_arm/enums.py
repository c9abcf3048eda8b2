from enum import Enum
from typing import Any, Optional

from azure.core import CaseInsensitiveEnumMeta

from fix_azure_arm.json import register_enum

UnknownValue = "UnknownValue"


class OpenEnum(str, Enum, metaclass=CaseInsensitiveEnumMeta):
    """
    String enum that accepts values it does not know.

    Services add new values to their enums over time.
    A value that is not defined by the enum is kept in an `UnknownValue` member,
    that carries the original string and is written back unchanged.
    """

    @classmethod
    def _missing_(cls, value: object) -> Optional[Any]:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = UnknownValue
        member._value_ = value
        return member

    @property
    def is_unknown(self) -> bool:
        return self._name_ == UnknownValue

    def __str__(self) -> str:
        return str(self.value)


class ClosedEnum(str, Enum, metaclass=CaseInsensitiveEnumMeta):
    """
    String enum with a fixed set of values. Reading an undefined value is an error.
    """

    def __str__(self) -> str:
        return str(self.value)


register_enum(OpenEnum)
register_enum(ClosedEnum)
