from __future__ import annotations

"""
Component Registry Builder.

Walks a project tree depth-first, reads every component definition file,
extracts its declared selector and pairs it with a template file. The
result maps each selector to its ComponentRecord.
"""

import logging
import os
from typing import List, Optional, Tuple

from componentgraph.core.analysis.pairing import resolve_template_path
from componentgraph.core.analysis.patterns import (
    extract_declared_name,
    strip_definition_suffix,
)
from componentgraph.domain.graph_models import ComponentRecord, Registry
from componentgraph.infra.fs import read_text, to_display_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_registry(
        scan_root: str,
        source_root: Optional[str] = None,
        definition_suffix: str = ".component.ts",
        template_extensions: Optional[List[str]] = None,
        selector_field: str = "selector",
        path_separator: str = "\\",
) -> Tuple[Registry, List[str]]:
    """
    Scan a directory tree and register every declared component.

    Entries are visited in sorted order so that repeated runs over the same
    tree register components, and resolve selector collisions, identically.
    A selector declared twice keeps the last scanned definition.

    Args:
        scan_root: Directory to scan recursively.
        source_root: Directory display names are computed against
                     (defaults to scan_root).
        definition_suffix: File suffix identifying definition files.
        template_extensions: Accepted template extensions.
        selector_field: Field label declaring the selector.
        path_separator: Separator used in display names.

    Returns:
        Tuple[Registry, List[str]]: The registry and the collected warnings.

    Raises:
        OSError: If a directory cannot be listed or a definition file read.
    """
    scan_root_abs = os.path.abspath(scan_root)
    source_root_abs = os.path.abspath(source_root) if source_root else scan_root_abs
    extensions = list(template_extensions) if template_extensions is not None else [".html"]

    registry: Registry = {}
    warnings: List[str] = []

    logger.debug(f"Scanning component definitions under: {scan_root_abs}")
    _walk_component_files(
        scan_root_abs,
        registry,
        warnings,
        source_root=source_root_abs,
        definition_suffix=definition_suffix,
        template_extensions=extensions,
        selector_field=selector_field,
        path_separator=path_separator,
    )
    return registry, warnings


def read_component_record(
        file_path: str,
        source_root: str,
        definition_suffix: str,
        template_extensions: List[str],
        selector_field: str = "selector",
        path_separator: str = "\\",
) -> Optional[ComponentRecord]:
    """
    Build the record of a single definition file.

    Args:
        file_path: Absolute path of the definition file.
        source_root: Directory display names are computed against.
        definition_suffix: File suffix identifying definition files.
        template_extensions: Accepted template extensions.
        selector_field: Field label declaring the selector.
        path_separator: Separator used in the display name.

    Returns:
        Optional[ComponentRecord]: The record, or None if no selector is declared.

    Raises:
        OSError: If the file cannot be read.
    """
    selector = extract_declared_name(read_text(file_path), selector_field)
    if selector is None:
        logger.debug(f"No '{selector_field}' declaration in {file_path}. Skipped.")
        return None

    directory, file_name = os.path.split(file_path)
    base_name = strip_definition_suffix(file_name, definition_suffix)

    return ComponentRecord(
        selector=selector,
        name=to_display_path(os.path.join(directory, base_name), source_root, path_separator),
        definition_path=file_path,
        template_path=resolve_template_path(
            directory, base_name, definition_suffix, template_extensions
        ),
    )

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _walk_component_files(
        directory: str,
        registry: Registry,
        warnings: List[str],
        **options,
) -> None:
    """Recursive depth-first descent accumulating records into the registry."""
    for entry in sorted(os.listdir(directory)):
        full_path = os.path.join(directory, entry)

        if os.path.isdir(full_path):
            _walk_component_files(full_path, registry, warnings, **options)
            continue

        if not entry.endswith(options["definition_suffix"]):
            continue

        record = read_component_record(full_path, **options)
        if record is None:
            continue

        previous = registry.get(record.selector)
        if previous is not None:
            msg = (
                f"Duplicate selector '{record.selector}': "
                f"{previous.definition_path} replaced by {record.definition_path}"
            )
            logger.warning(msg)
            warnings.append(msg)

        registry[record.selector] = record
