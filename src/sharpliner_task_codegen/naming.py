"""Identifier case conversion for generated C# names."""

import re

# Runs of letters and digits (any script); everything else separates words.
_RUN_RE = re.compile(r"[^\W_]+")


def _split_run(run: str) -> list[str]:
    # Digits never start a word; they stay with whatever surrounds them.
    words = []
    start = 0
    last_case = None
    for i, ch in enumerate(run):
        if ch.isupper():
            next_is_lower = i + 1 < len(run) and run[i + 1].islower()
            if i > start and (last_case == "lower" or (last_case == "upper" and next_is_lower)):
                words.append(run[start:i])
                start = i
            last_case = "upper"
        elif ch.islower():
            last_case = "lower"
    words.append(run[start:])
    return words


def split_words(text: str) -> list[str]:
    """Split text into words at separators, case transitions and acronym boundaries."""
    return [word for run in _RUN_RE.findall(text) for word in _split_run(run)]


def pascal_case(text: str) -> str:
    """Convert text to PascalCase, e.g. 'feedsToUse' -> 'FeedsToUse', 'ci, install' -> 'CiInstall'."""
    return "".join(word[0].upper() + word[1:].lower() for word in split_words(text))
