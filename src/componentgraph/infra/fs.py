from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, display-path formatting, text reading and JSON
artifact persistence. Acts as the single place where the graph tool touches
the disk, so that analysis code stays free of I/O policy.
"""

import json
import os
import re
from typing import Any, Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def to_display_path(path: str, base_dir: str, separator: str = "\\") -> str:
    """
    Express a path relative to a base directory with a fixed separator.

    Output is identical on every platform: ``src/app/header`` relative to
    ``src`` becomes ``app\\header`` with the default separator.

    Args:
        path: Path to format.
        base_dir: Directory the path is expressed against.
        separator: Separator joining the path segments.

    Returns:
        str: The formatted relative path.
    """
    rel = os.path.relpath(os.path.abspath(path), os.path.abspath(base_dir))
    parts = [p for p in re.split(r"[\\/]", rel) if p and p != "."]
    return separator.join(parts)


def is_within(path: str, directory: str) -> bool:
    """True if ``path`` is ``directory`` or lies below it. Paths on different drives never nest."""
    try:
        return os.path.commonpath([os.path.abspath(path), os.path.abspath(directory)]) == os.path.abspath(directory)
    except ValueError:
        return False

# -----------------------------------------------------------------------------
# READ / WRITE API
# -----------------------------------------------------------------------------

def read_text(path: str) -> str:
    """
    Read a text file as UTF-8, replacing undecodable bytes.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def write_json_document(path: str, data: Any) -> str:
    """
    Persist a JSON document, overwriting any previous content.

    Output is deterministic: 2-space indentation, insertion-ordered keys,
    UTF-8 without ASCII escaping and a trailing newline.

    Args:
        path: Destination file.
        data: JSON-compatible payload.

    Returns:
        str: Absolute path of the written file.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    target = os.path.abspath(path)
    os.makedirs(os.path.dirname(target), exist_ok=True)
    with open(target, "w", encoding="utf-8", newline="\n") as f:
        f.write(json.dumps(data, ensure_ascii=False, indent=2))
        f.write("\n")
    return target

