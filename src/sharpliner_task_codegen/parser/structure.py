"""YAML usage snippet parser.

Reads the snippet line by line rather than as YAML: the information we
need lives in comments, which a YAML loader would throw away.

Layout::

    # <task display name>              (ignored)
    # <task summary>
    - task: <TaskName>@<Version>
      inputs:
        <name>: <example> # <documentation>
        #<name>: <example> # <documentation>     (optional input)
"""

import logging
import re

from sharpliner_task_codegen.parser.base import (
    UNKNOWN_SUMMARY,
    UNKNOWN_TASK_NAME,
    UNKNOWN_TASK_VERSION,
    ParameterDescriptor,
    TaskDescriptor,
)
from sharpliner_task_codegen.parser.documentation import parse_documentation

logger = logging.getLogger(__name__)

TASK_LINE_RE = re.compile(r"^- task:\s*(?P<name>\w+)@(?P<version>\d+)$")

INPUT_LINE_RE = re.compile(
    r"^ {3,}"  # indentation
    r"(?P<marker>#\s*)?"  # commented-out optional input
    r"(?P<name>\w+):\s*.*?"  # input name, then the example value
    r"#\s*(?P<documentation>.*)$"
)


def parse_snippet(text: str) -> TaskDescriptor:
    """Parse a usage snippet into a TaskDescriptor.

    Malformed snippets degrade to placeholder values with a warning; this
    function does not raise on bad input.
    """
    lines = text.splitlines()
    summary = UNKNOWN_SUMMARY
    name = UNKNOWN_TASK_NAME
    version = UNKNOWN_TASK_VERSION

    # Line 0 is the task display name; nothing to take from it.
    if len(lines) < 2:
        logger.warning("Snippet too short, missing task summary line.")
        return TaskDescriptor(summary=summary, name=name, version=version)

    summary_line = lines[1].strip()
    if summary_line.startswith("#"):
        summary = summary_line[1:].strip()
    else:
        logger.warning("Line 2 did not seem to contain the task summary comment: %r", lines[1])

    if len(lines) < 3:
        logger.warning("Snippet too short, missing task definition line.")
        return TaskDescriptor(summary=summary, name=name, version=version)

    match = TASK_LINE_RE.match(lines[2].strip())
    if match:
        name = match.group("name")
        version = match.group("version")
    else:
        logger.warning("Line 3 did not match the task definition pattern: %r", lines[2])

    parameters = _parse_inputs(lines[3:], first_line_number=4)
    return TaskDescriptor(summary=summary, name=name, version=version, parameters=tuple(parameters))


def _parse_inputs(lines: list[str], first_line_number: int) -> list[ParameterDescriptor]:
    parameters = []
    for line_number, line in enumerate(lines, start=first_line_number):
        match = INPUT_LINE_RE.match(line)
        if not match:
            stripped = line.strip()
            if stripped and not stripped.startswith("inputs:") and not stripped.startswith("#"):
                logger.debug("Skipping non-input line %d: %r", line_number, line)
            continue

        documentation = match.group("documentation").strip()
        parameter = parse_documentation(
            match.group("name"),
            documentation,
            commented_out=match.group("marker") is not None,
        )
        if parameter is None:
            logger.warning("Failed to parse documentation on line %d: %r", line_number, documentation)
            continue
        parameters.append(parameter)
    return parameters
