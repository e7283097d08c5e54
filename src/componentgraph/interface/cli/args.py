from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the raw argparse
namespace into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from componentgraph.domain.config import RENDER_MODES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the component-graph CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="component-graph",
        description=(
            "Extract the component usage graph of a front-end project by "
            "matching declared selectors against template markup."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--scan-root",
        dest="scan_root",
        default=None,
        help="Directory scanned for component definitions (default: src/app).",
    )
    p.add_argument(
        "--source-root",
        dest="source_root",
        default=None,
        help="Directory display names and template paths are relative to (default: src).",
    )
    p.add_argument(
        "--graph-output",
        dest="graph_output_path",
        default=None,
        help="Destination of the flat graph JSON document.",
    )
    p.add_argument(
        "--tree-output",
        dest="tree_output_path",
        default=None,
        help="Destination of the rooted tree JSON document.",
    )

    # --- Rendering ---
    p.add_argument(
        "-m", "--mode",
        dest="mode",
        choices=RENDER_MODES,
        default=None,
        help="Output shape: flat graph, rooted tree, or both.",
    )
    p.add_argument(
        "-r", "--root",
        dest="root_selector",
        default=None,
        help="Selector of the tree root (default: app-root).",
    )
    p.add_argument(
        "--separator",
        dest="path_separator",
        default=None,
        help="Separator used in display names and template paths (default: \\).",
    )
    p.add_argument(
        "--no-summary",
        action="store_true",
        help="Do not print the relationship summary.",
    )

    # --- Discovery ---
    p.add_argument(
        "--suffix",
        dest="definition_suffix",
        default=None,
        help="Suffix identifying component definition files (default: .component.ts).",
    )
    p.add_argument(
        "--template-ext",
        dest="template_extensions",
        default=None,
        help="Comma-separated template extensions, in preference order (default: .html).",
    )
    p.add_argument(
        "--field",
        dest="selector_field",
        default=None,
        help="Field label declaring the selector (default: selector).",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help="JSON file with configuration keys layered over the defaults.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore --config and start from the built-in defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Analyze and report without writing any artifact.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON instead of a human summary.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["scan_root"] = args.scan_root
    overrides["source_root"] = args.source_root
    overrides["graph_output_path"] = args.graph_output_path
    overrides["tree_output_path"] = args.tree_output_path

    overrides["mode"] = args.mode
    overrides["root_selector"] = args.root_selector
    overrides["path_separator"] = args.path_separator
    overrides["definition_suffix"] = args.definition_suffix
    overrides["selector_field"] = args.selector_field

    if args.template_extensions:
        overrides["template_extensions"] = _split_csv(args.template_extensions)
    if args.no_summary:
        overrides["print_summary"] = False

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of sanitized strings."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
