"""Default value formatting — renders a documented default as a C# literal."""

from sharpliner_task_codegen.naming import pascal_case
from sharpliner_task_codegen.parser.base import BaseType

# Example values that show up in task docs and must always stay string literals.
KNOWN_STRING_DEFAULTS = {
    "$(BuildConfiguration)": '"$(BuildConfiguration)"',
    "$(Build.ArtifactStagingDirectory)/*.nupkg": '"$(Build.ArtifactStagingDirectory)/*.nupkg"',
    "**/*.csproj": '"**/*.csproj"',
    "$(Build.ArtifactStagingDirectory)": '"$(Build.ArtifactStagingDirectory)"',
}


def format_default(value: str, base_type: BaseType, enum_name: str | None = None) -> str:
    """Format a raw default value for use as a getter default argument.

    ``enum_name`` is the generated enum type; it is only consulted when
    ``base_type`` is ``BaseType.ENUM``.
    """
    if value in KNOWN_STRING_DEFAULTS:
        return KNOWN_STRING_DEFAULTS[value]

    if base_type == BaseType.STRING:
        escaped = value.replace('"', '\\"')
        return f'"{escaped}"'
    if base_type == BaseType.BOOL:
        return value.lower()
    if base_type == BaseType.ENUM and enum_name:
        member = pascal_case(value.strip("'"))
        return f"{enum_name}.{member}"
    return value
