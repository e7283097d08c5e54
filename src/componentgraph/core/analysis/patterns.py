from __future__ import annotations

"""
Selector Pattern Matching.

Lightweight text patterns used by the static analysis subsystem to read
declared selectors out of definition files and to detect selector usage
inside markup templates. This is not a parser: both operations work on raw
text so that a real parser can later replace them behind the same functions.
"""

import re
from functools import lru_cache
from typing import Optional

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_declared_name(text: str, field: str = "selector") -> Optional[str]:
    """
    Extract the first quoted literal declared under the given field label.

    Matches declarations such as ``selector: 'app-header'`` or
    ``selector: "app-header"``.

    Args:
        text: Raw content of a component definition file.
        field: Field label introducing the literal.

    Returns:
        Optional[str]: The declared literal, or None if absent or empty.
    """
    match = _declaration_pattern(field).search(text)
    if not match:
        return None
    name = match.group(1).strip()
    return name or None


def contains_tag_reference(text: str, name: str) -> bool:
    """
    Verify whether a template opens a tag named after a selector.

    The selector must be followed by whitespace, ``>`` or ``/``, so that
    ``<app-item>`` does not count as a usage of ``app-it``. Matching is
    case-insensitive.

    Args:
        text: Raw template markup.
        name: Selector to look for.

    Returns:
        bool: True if at least one tag opening is found.
    """
    if not name:
        return False
    return _tag_pattern(name).search(text) is not None


def strip_definition_suffix(file_name: str, suffix: str) -> str:
    """Return the component base name of a definition file name."""
    if suffix and file_name.endswith(suffix):
        return file_name[:-len(suffix)]
    return file_name

# -----------------------------------------------------------------------------
# PRIVATE HELPERS (PATTERN CACHE)
# -----------------------------------------------------------------------------

@lru_cache(maxsize=None)
def _declaration_pattern(field: str) -> re.Pattern:
    return re.compile(rf"{re.escape(field)}\s*:\s*['\"](.*?)['\"]")


@lru_cache(maxsize=None)
def _tag_pattern(name: str) -> re.Pattern:
    return re.compile(rf"<{re.escape(name)}(\s|>|/)", re.IGNORECASE)
