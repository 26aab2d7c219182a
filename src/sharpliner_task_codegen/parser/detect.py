"""Auto-detect where a task definition comes from."""

from pathlib import Path

import yaml

from sharpliner_task_codegen.parser.structure import TASK_LINE_RE

HTML_MARKERS = ("<html", "<!doctype", "<div", "<code")


def detect_source(source: str) -> str:
    """Detect the kind of source argument.

    Returns: 'url', 'html', or 'snippet'.
    """
    if source.startswith(("http://", "https://")):
        return "url"

    text = Path(source).read_text(encoding="utf-8")
    lowered = text.lower()
    if any(marker in lowered for marker in HTML_MARKERS):
        return "html"

    # Snippets are not always valid YAML (e.g. unquoted `**/*.csproj`), so look for the task line first.
    if any(TASK_LINE_RE.match(line.strip()) for line in text.splitlines()[:3]):
        return "snippet"

    # A bare snippet loads as a one-item list holding the task step.
    try:
        data = yaml.safe_load(text)
        if isinstance(data, list) and data and isinstance(data[0], dict) and "task" in data[0]:
            return "snippet"
    except yaml.YAMLError:
        pass

    return "html"
