from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. CSV string parsing logic.
3. Handling of boolean flags (store_true) and mode choices.
"""

import pytest

from componentgraph.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_path_arguments():
    args = parse_args([
        "-i", "/project/src/app",
        "--source-root", "/project/src",
        "--graph-output", "/out/graph.json",
        "--tree-output", "/out/tree.json",
    ])

    overrides = args_to_overrides(args)

    assert overrides["scan_root"] == "/project/src/app"
    assert overrides["source_root"] == "/project/src"
    assert overrides["graph_output_path"] == "/out/graph.json"
    assert overrides["tree_output_path"] == "/out/tree.json"


def test_cli_rendering_flags_mapping():
    args = parse_args(["--mode", "tree", "--root", "app-shell", "--no-summary", "--separator", "/"])

    overrides = args_to_overrides(args)

    assert overrides["mode"] == "tree"
    assert overrides["root_selector"] == "app-shell"
    assert overrides["print_summary"] is False
    assert overrides["path_separator"] == "/"


def test_cli_csv_list_parsing():
    args = parse_args(["--template-ext", ".html, .htm,", "--suffix", ".cmp.ts", "--field", "tag"])

    overrides = args_to_overrides(args)

    assert overrides["template_extensions"] == [".html", ".htm"]
    assert overrides["definition_suffix"] == ".cmp.ts"
    assert overrides["selector_field"] == "tag"


def test_cli_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        parse_args(["--mode", "sideways"])


def test_cli_defaults_are_explicit_in_overrides():
    """
    Unset options are present as None; the merge in app.py skips them.
    """
    args = parse_args([])
    overrides = args_to_overrides(args)

    assert overrides["scan_root"] is None
    assert overrides["mode"] is None
    assert "template_extensions" not in overrides
    assert "print_summary" not in overrides
    assert args.dry_run is False
    assert args.json_output is False
