"""Locate the YAML usage snippet inside a task documentation page."""

from bs4 import BeautifulSoup

from sharpliner_task_codegen.config import SNIPPET_SELECTOR


def locate_snippet(html: str, selector: str = SNIPPET_SELECTOR) -> str:
    """Return the text of the first code block matching selector, or '' if none."""
    soup = BeautifulSoup(html, "html.parser")
    element = soup.select_one(selector)
    if element is None:
        return ""
    return element.get_text()
