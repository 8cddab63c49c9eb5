"""
Data Models for Wrapper Extraction

WrapperScan is the mutable accumulator filled during the tree walk.
The pydantic models are the frozen result handed to binding generators;
their aliases are the camelCase keys those generators read.
"""

import json
from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ParameterInfo(BaseModel):
    """A parameter of a send/get operation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str
    default_value: Optional[str] = Field(default=None, alias="defaultValue")
    optional: Optional[bool] = None


class ConfigFieldInfo(BaseModel):
    """A field of the wrapper's config record type."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    field_type: str = Field(alias="fieldType")
    optional: Optional[bool] = None


# Parameter name -> info, in declaration order
ParameterSet = dict[str, ParameterInfo]
# Operation name -> parameters
OperationTable = dict[str, ParameterSet]
# Config field name -> info
ConfigTypeInfo = dict[str, ConfigFieldInfo]


class WrapperInfo(BaseModel):
    """
    Complete metadata for one wrapper class.

    Shallowly frozen: fields cannot be reassigned, but the operation and
    config tables are plain dicts. Each result gets its own copies, so
    changes to one never reach the scan or another result.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    send_functions: OperationTable = Field(alias="sendFunctions")
    get_functions: OperationTable = Field(alias="getFunctions")
    path: str
    can_be_created_from_config: bool = Field(alias="canBeCreatedFromConfig")
    code_hex: Optional[str] = Field(default=None, alias="codeHex")
    config_type: Optional[ConfigTypeInfo] = Field(default=None, alias="configType")

    def to_dict(self) -> dict:
        """Serialize with camelCase keys, dropping absent values."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=4)


@dataclass
class WrapperScan:
    """Everything collected from one walk over a parsed wrapper file."""

    class_name: str
    class_found: bool = False
    send_functions: OperationTable = field(default_factory=dict)
    get_functions: OperationTable = field(default_factory=dict)
    config_type: Optional[ConfigTypeInfo] = None
    can_be_created_from_config: bool = False
    can_be_created_from_address: bool = False
