from __future__ import annotations

"""
Template Pairing Resolver.

Locates the markup template that belongs to a component definition file,
following the two naming conventions in use: ``<base>.component.html``
(preferred) and ``<base>.html``.
"""

import os
from typing import List, Optional


def resolve_template_path(
        directory: str,
        base_name: str,
        definition_suffix: str,
        template_extensions: List[str],
) -> Optional[str]:
    """
    Find the existing template file for a component.

    Candidates built from the specific convention (the definition suffix
    without its source extension, e.g. ``.component``) are checked first,
    for every template extension, then the plain ``<base><ext>`` ones.
    Only existence is checked; the content is not validated.

    Args:
        directory: Directory holding the definition file.
        base_name: Definition file name without the definition suffix.
        definition_suffix: Suffix identifying definition files.
        template_extensions: Accepted template extensions, in preference order.

    Returns:
        Optional[str]: Absolute path of the first existing candidate, or None.
    """
    for candidate in template_candidates(base_name, definition_suffix, template_extensions):
        path = os.path.join(directory, candidate)
        if os.path.isfile(path):
            return os.path.abspath(path)
    return None


def template_candidates(
        base_name: str,
        definition_suffix: str,
        template_extensions: List[str],
) -> List[str]:
    """List candidate template file names, most specific first."""
    stem, source_ext = os.path.splitext(definition_suffix)
    if not source_ext:
        # Single-part suffix such as ".vue": no specific convention
        stem = ""
    candidates: List[str] = []
    if stem:
        candidates.extend(f"{base_name}{stem}{ext}" for ext in template_extensions)
    candidates.extend(f"{base_name}{ext}" for ext in template_extensions)
    return candidates
