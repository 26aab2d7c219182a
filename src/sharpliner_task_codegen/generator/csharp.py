"""C# generator — renders a TaskDescriptor as a Sharpliner task record class."""

from datetime import datetime
from email.utils import format_datetime

from sharpliner_task_codegen.config import DEFAULT_BASE_CLASS
from sharpliner_task_codegen.naming import pascal_case
from sharpliner_task_codegen.parser.base import BaseType, ParameterDescriptor, TaskDescriptor


class CSharpGenerator:
    """Generates a C# record class deriving from a Sharpliner task base class."""

    def __init__(self, base_class: str = DEFAULT_BASE_CLASS):
        self.base_class = base_class

    def generate(
        self,
        task: TaskDescriptor,
        class_name: str | None = None,
        generated_at: datetime | None = None,
    ) -> str:
        """Render the complete C# source file for a task."""
        class_name = class_name or task.default_class_name
        generated_at = generated_at or datetime.now().astimezone()

        enums_code = "".join(self._render_enum(p) for p in task.parameters if p.enum_options is not None)
        properties_code = "".join(self._render_property(p) for p in task.parameters)
        class_summary = "\n".join(
            f"/// {line}"
            for line in (
                f"Generated C# model for the Azure DevOps task: {task.name} v{task.version}.",
                _escape_xml(task.summary),
            )
        )

        return f"""using Sharpliner.AzureDevOps.Tasks;
using YamlDotNet.Serialization;

// Auto-Generated by sharpliner-task-codegen on {format_datetime(generated_at)}
// Source Task: {task.name} v{task.version}

// --- Enums ---

{enums_code.strip()}

/// <summary>
{class_summary}
/// </summary>
public record class {class_name} : {self.base_class} {{
    public {class_name}() : base("{task.name}@{task.version}")
    {{
    }}
{properties_code.rstrip()}
}}
"""

    # -- sections -------------------------------------------------------------

    def _render_enum(self, param: ParameterDescriptor) -> str:
        lines = [
            "/// <summary>",
            f"/// Defines options for the {param.declared_name} parameter.",
            "/// </summary>",
            f"public enum {param.enum_name} {{",
        ]
        for option in param.enum_options:
            lines.append(f'    [YamlMember(Alias = "{_escape_string(option)}")]')
            lines.append(f"    {pascal_case(option)},")
            lines.append("")
        lines.append("}")
        return "\n".join(lines) + "\n\n"

    def _render_property(self, param: ParameterDescriptor) -> str:
        description = param.description.splitlines() or [""]
        lines = ["    /// <summary>"]
        lines.extend(f"    /// {_escape_xml(line.strip())}" for line in description)
        lines.extend([
            "    /// </summary>",
            "    [YamlIgnore]",
            f"    public {param.csharp_type} {param.display_name} {{",
            f"        get => {self._render_getter(param)};",
            f'        init => SetProperty("{param.declared_name}", value);',
            "    }",
        ])
        return "\n".join(lines) + "\n\n"

    def _render_getter(self, param: ParameterDescriptor) -> str:
        name = param.declared_name
        default = param.default_literal

        if param.base_type == BaseType.STRING:
            return f'GetString("{name}", {default})!' if default else f'GetString("{name}")'
        if param.base_type == BaseType.BOOL:
            return f'GetBool("{name}", {default})' if default else f'GetBool("{name}")'
        if param.base_type == BaseType.INT:
            return f'GetInt("{name}", {default})!.Value' if default else f'GetInt("{name}")!.Value'
        if default:
            return f'GetEnum("{name}", {default})'
        return f'GetNullableEnum<{param.enum_name}>("{name}")'


def _escape_xml(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_string(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')
