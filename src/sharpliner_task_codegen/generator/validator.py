"""Validates the C# identifiers a TaskDescriptor will produce."""

import re

from sharpliner_task_codegen.naming import pascal_case
from sharpliner_task_codegen.parser.base import TaskDescriptor

IDENTIFIER_RE = re.compile(r"[^\W\d]\w*")

CSHARP_KEYWORDS = {
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch", "char", "checked",
    "class", "const", "continue", "decimal", "default", "delegate", "do", "double", "else",
    "enum", "event", "explicit", "extern", "false", "finally", "fixed", "float", "for",
    "foreach", "goto", "if", "implicit", "in", "int", "interface", "internal", "is", "lock",
    "long", "namespace", "new", "null", "object", "operator", "out", "override", "params",
    "private", "protected", "public", "readonly", "ref", "return", "sbyte", "sealed", "short",
    "sizeof", "stackalloc", "static", "string", "struct", "switch", "this", "throw", "true",
    "try", "typeof", "uint", "ulong", "unchecked", "unsafe", "ushort", "using", "virtual",
    "void", "volatile", "while",
}


def check_identifier(name: str) -> str | None:
    """Return an error message if name is not usable as a C# identifier."""
    if not name:
        return "empty identifier"
    if not IDENTIFIER_RE.fullmatch(name):
        return f"'{name}' is not a valid identifier"
    if name in CSHARP_KEYWORDS:
        return f"'{name}' is a C# keyword"
    return None


def validate_identifiers(task: TaskDescriptor, class_name: str | None = None) -> dict[str, str]:
    """Check class, property, enum and enum member names.

    Returns dict of {location: error_message} for names that would not compile.
    """
    errors = {}
    error = check_identifier(class_name or task.default_class_name)
    if error:
        errors["class"] = error

    seen: set[str] = set()
    for param in task.parameters:
        location = f"property {param.declared_name}"
        error = check_identifier(param.display_name)
        if error:
            errors[location] = error
        elif param.display_name in seen:
            errors[location] = f"duplicate property name '{param.display_name}'"
        seen.add(param.display_name)

        for option in param.enum_options or ():
            error = check_identifier(pascal_case(option))
            if error:
                errors[f"enum {param.enum_name}.{option}"] = error
    return errors
