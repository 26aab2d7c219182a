"""Unified data models for parsed task documentation.

The snippet parser converts its input into these models; the C#
generator renders them. Both models are frozen once built.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from sharpliner_task_codegen.naming import pascal_case

UNKNOWN_SUMMARY = "N/A"
UNKNOWN_TASK_NAME = "UnknownTask"
UNKNOWN_TASK_VERSION = "0"


class BaseType(str, Enum):
    """Semantic type of a task input before nullability wrapping."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    ENUM = "enum"


class RequiredStatus(str, Enum):
    """How the documentation classifies an input's presence."""

    REQUIRED = "required"
    CONDITIONAL = "conditional"  # "Required when ..."
    OPTIONAL = "optional"


class ParameterDescriptor(BaseModel):
    """The typed model of a single task input."""

    model_config = ConfigDict(frozen=True)

    declared_name: str
    display_name: str
    description: str = ""
    base_type: BaseType
    enum_options: tuple[str, ...] | None = None
    is_nullable: bool
    default_literal: str | None = None
    required_status: RequiredStatus = RequiredStatus.OPTIONAL
    raw_default: str | None = None
    commented_out: bool = False

    @model_validator(mode="after")
    def _check_invariants(self) -> "ParameterDescriptor":
        if not self.declared_name:
            raise ValueError("declared_name must not be empty")
        if (self.enum_options is not None) != (self.base_type == BaseType.ENUM):
            raise ValueError("enum_options must be set exactly when base_type is enum")
        if self.default_literal is not None and self.is_nullable:
            raise ValueError("default_literal requires a non-nullable parameter")
        return self

    @property
    def enum_name(self) -> str | None:
        """Name of the generated enum type. Equal to the display name."""
        if self.base_type != BaseType.ENUM:
            return None
        return self.display_name

    @property
    def type_name(self) -> str:
        """C# type without the nullable marker."""
        if self.base_type == BaseType.ENUM:
            return self.display_name
        return self.base_type.value

    @property
    def csharp_type(self) -> str:
        return f"{self.type_name}?" if self.is_nullable else self.type_name


class TaskDescriptor(BaseModel):
    """A parsed task: identity, summary and its inputs in declaration order."""

    model_config = ConfigDict(frozen=True)

    summary: str = UNKNOWN_SUMMARY
    name: str = UNKNOWN_TASK_NAME
    version: str = UNKNOWN_TASK_VERSION
    parameters: tuple[ParameterDescriptor, ...] = ()

    @property
    def default_class_name(self) -> str:
        return pascal_case(self.name) + "Task"
