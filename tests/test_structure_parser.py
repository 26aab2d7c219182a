import logging
from pathlib import Path

from sharpliner_task_codegen.parser.base import BaseType, RequiredStatus
from sharpliner_task_codegen.parser.structure import parse_snippet

FIXTURES = Path(__file__).parent / "fixtures"


def _dotnet_task():
    return parse_snippet((FIXTURES / "dotnet-snippet.yml").read_text(encoding="utf-8"))


class TestSnippetHeader:
    def test_summary_name_version(self):
        task = _dotnet_task()
        assert task.summary == "Build, test, package, or publish a dotnet application, or run a custom dotnet command."
        assert task.name == "DotNetCoreCLI"
        assert task.version == "2"

    def test_empty_snippet_degrades(self, caplog):
        with caplog.at_level(logging.WARNING):
            task = parse_snippet("")
        assert task.summary == "N/A"
        assert task.name == "UnknownTask"
        assert task.parameters == ()
        assert "missing task summary line" in caplog.text

    def test_missing_identity_line_degrades(self, caplog):
        with caplog.at_level(logging.WARNING):
            task = parse_snippet("# Npm v1\n# Install and publish npm packages.")
        assert task.summary == "Install and publish npm packages."
        assert task.name == "UnknownTask"
        assert task.version == "0"
        assert task.parameters == ()
        assert "missing task definition line" in caplog.text

    def test_summary_line_without_comment_marker(self, caplog):
        snippet = "# Npm v1\nInstall packages.\n- task: Npm@1\n"
        with caplog.at_level(logging.WARNING):
            task = parse_snippet(snippet)
        assert task.summary == "N/A"
        assert task.name == "Npm"
        assert "summary comment" in caplog.text

    def test_bad_identity_line_keeps_parsing_inputs(self, caplog):
        snippet = (
            "# Npm v1\n"
            "# Install packages.\n"
            "- task: Npm\n"
            "  inputs:\n"
            "    verbose: true # boolean. Optional. Verbose logging. Default: true.\n"
        )
        with caplog.at_level(logging.WARNING):
            task = parse_snippet(snippet)
        assert task.name == "UnknownTask"
        assert task.version == "0"
        assert [p.declared_name for p in task.parameters] == ["verbose"]
        assert "did not match the task definition" in caplog.text


class TestSnippetInputs:
    def test_parameters_in_source_order(self):
        task = _dotnet_task()
        assert [p.declared_name for p in task.parameters] == [
            "command",
            "publishWebProjects",
            "projects",
            "custom",
            "packagesToPush",
            "configuration",
            "requestTimeout",
            "workingDirectory",
        ]

    def test_malformed_documentation_is_skipped_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            task = _dotnet_task()
        assert "broken" not in [p.declared_name for p in task.parameters]
        assert "Failed to parse documentation on line 12" in caplog.text
        assert "no grammar here" in caplog.text

    def test_enum_input(self):
        command = _dotnet_task().parameters[0]
        assert command.base_type == BaseType.ENUM
        assert command.enum_options == ("build", "push", "pack", "publish", "restore", "run", "test", "custom")
        assert command.required_status == RequiredStatus.REQUIRED
        assert command.default_literal == "Command.Build"
        assert command.commented_out is False

    def test_commented_out_input(self):
        publish = _dotnet_task().parameters[1]
        assert publish.commented_out is True
        assert publish.base_type == BaseType.BOOL
        assert publish.description == "Use when command = publish. Publish web projects"
        assert publish.default_literal == "true"

    def test_conditional_string(self):
        custom = _dotnet_task().parameters[3]
        assert custom.required_status == RequiredStatus.CONDITIONAL
        assert custom.is_nullable is True

    def test_known_literal_defaults(self):
        params = {p.declared_name: p for p in _dotnet_task().parameters}
        assert params["packagesToPush"].default_literal == '"$(Build.ArtifactStagingDirectory)/*.nupkg"'
        assert params["configuration"].default_literal == '"$(BuildConfiguration)"'

    def test_numeric_string_default_becomes_int(self):
        params = {p.declared_name: p for p in _dotnet_task().parameters}
        timeout = params["requestTimeout"]
        assert timeout.base_type == BaseType.INT
        assert timeout.default_literal == "300000"

    def test_shallow_lines_are_ignored(self):
        snippet = (
            "# Task\n"
            "# Summary.\n"
            "- task: Thing@3\n"
            "  inputs:\n"
            "  flat: x # string. Optional. Not indented enough.\n"
            "\n"
            "   deep: x # string. Optional. Indented enough.\n"
        )
        task = parse_snippet(snippet)
        assert [p.declared_name for p in task.parameters] == ["deep"]

    def test_parsing_is_repeatable(self):
        assert _dotnet_task() == _dotnet_task()
