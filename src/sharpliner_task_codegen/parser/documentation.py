"""Documentation comment parser.

Turns the trailing comment of an input declaration, e.g.::

    string. Required. The configuration to use. Default: Release.

into a typed ParameterDescriptor. The comment is read as

    <TypeOrOptions> . <RequiredStatus> . <Tail>

where the tail is one of three shapes, tried in order: a bare
``Default: <value>``, a description followed by ``. Default: <value>``,
or a description alone.
"""

import logging
import re

from sharpliner_task_codegen.naming import pascal_case
from sharpliner_task_codegen.parser.base import BaseType, ParameterDescriptor, RequiredStatus
from sharpliner_task_codegen.parser.defaults import format_default

logger = logging.getLogger(__name__)

HEAD_RE = re.compile(r"^\s*(?P<type>[^.]+?)\s*\.\s*(?P<status>[^.]+?)\s*\.(?P<tail>.*)$")

DEFAULT_ONLY_RE = re.compile(r"^\s*Default:\s*(?P<default>.+?)\.?$")
DESCRIBED_DEFAULT_RE = re.compile(r"^(?P<description>.*?)\.\s*Default:\s*(?P<default>.+?)\s*\.?$")
DESCRIPTION_ONLY_RE = re.compile(r"^(?P<description>.*?)\s*\.?$")

# Range of the generated C# int property.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_documentation(
    declared_name: str, documentation: str, commented_out: bool = False
) -> ParameterDescriptor | None:
    """Parse one input's documentation comment.

    Returns None when the comment does not follow the
    ``type . status . tail`` layout; no partial descriptor is produced.
    """
    head = HEAD_RE.match(documentation)
    if not head:
        return None

    type_options = head.group("type").strip()
    status = classify_status(head.group("status").strip())
    description, default = split_tail(head.group("tail"))

    if default is not None and not description:
        description = f"Details for {declared_name}"

    display_name = pascal_case(declared_name)
    base_type, enum_options = resolve_type(type_options, default)
    enum_name = display_name if base_type == BaseType.ENUM else None

    is_nullable = (
        status in (RequiredStatus.OPTIONAL, RequiredStatus.CONDITIONAL) or base_type == BaseType.STRING
    ) and default is None

    default_literal = None
    if not is_nullable and default is not None:
        default_literal = format_default(default, base_type, enum_name)

    return ParameterDescriptor(
        declared_name=declared_name,
        display_name=display_name,
        description=description,
        base_type=base_type,
        enum_options=enum_options,
        is_nullable=is_nullable,
        default_literal=default_literal,
        required_status=status,
        raw_default=default,
        commented_out=commented_out,
    )


def split_tail(tail: str) -> tuple[str, str | None]:
    """Split the text after the status segment into (description, default)."""
    match = DEFAULT_ONLY_RE.match(tail)
    if match:
        return "", match.group("default").strip()

    match = DESCRIBED_DEFAULT_RE.match(tail)
    if match:
        return match.group("description").strip(), match.group("default").strip()

    match = DESCRIPTION_ONLY_RE.match(tail)
    return match.group("description").strip(), None


def classify_status(text: str) -> RequiredStatus:
    if text == "Required":
        return RequiredStatus.REQUIRED
    if text.startswith("Required when"):
        return RequiredStatus.CONDITIONAL
    return RequiredStatus.OPTIONAL


def resolve_type(type_options: str, default: str | None) -> tuple[BaseType, tuple[str, ...] | None]:
    """Map the first segment to a base type, plus enum options when it lists literals."""
    if "|" in type_options and type_options.startswith("'"):
        options = tuple(token.strip().strip("'") for token in type_options.split("|"))
        return BaseType.ENUM, options

    if type_options == "boolean":
        return BaseType.BOOL, None

    if type_options == "string" and default is not None and is_int_literal(default):
        return BaseType.INT, None

    if type_options != "string":
        logger.debug("Unrecognised input type %r, treating as string", type_options)
    return BaseType.STRING, None


def is_int_literal(value: str) -> bool:
    """True if value is a whole base-10 integer that fits a C# int."""
    if not _INT_RE.fullmatch(value):
        return False
    return INT_MIN <= int(value) <= INT_MAX
