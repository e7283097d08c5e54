from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging initialization, loading and merging
of configuration sources (defaults, JSON config file and CLI overrides),
graph engine execution and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from componentgraph.core.pipeline.engine import run_graph
from componentgraph.core.pipeline.validator import validate_config
from componentgraph.domain.config import get_default_config, load_config
from componentgraph.domain.graph_models import GraphResult
from componentgraph.infra.logging import LoggingConfig, configure_logging, get_logger
from componentgraph.interface.cli import args as cli_args

logger = get_logger(__name__)

# Process exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2
EXIT_MISSING_ROOT = 3
EXIT_INTERRUPTED = 130

_EXIT_CODES: Dict[str, int] = {
    "invalid_input": EXIT_INVALID_INPUT,
    "missing_root": EXIT_MISSING_ROOT,
}

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (defaults vs config file)
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_path)

    # 4. Map and merge command-line overrides
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    # 5. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 6. Engine execution phase
    try:
        result = run_graph(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        msg = "Execution interrupted by user."
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = f"Graph extraction failed: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, show_relations=clean_conf["print_summary"])

    if result.ok:
        return EXIT_OK
    return _EXIT_CODES.get(result.error_kind, EXIT_FAILURE)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys with a non-None value are merged.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: GraphResult, show_relations: bool = True) -> None:
    """
    Format and print the run result to the standard streams.

    Args:
        result: The graph result to render.
        show_relations: Whether to print the relationship summary.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        if result.error_kind == "missing_root":
            print("Available components:", file=sys.stderr)
            for selector, name in result.available_selectors.items():
                print(f"- {selector} ({name})", file=sys.stderr)
        return

    print(f"Components found: {result.component_count}")
    if result.graph_path:
        print(f"Component graph: {result.graph_path}")
    if result.tree_path:
        print(f"Component tree: {result.tree_path}")

    if result.warnings:
        print(f"Warnings: {len(result.warnings)}")

    if show_relations and result.summary_lines:
        print("\nComponent relationships (child -> parents):")
        for line in result.summary_lines:
            print(line)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
