from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Data integrity of GraphResult factories (Success/Error).
2. Immutability of frozen dataclasses.
3. Recursive TreeNode serialization.
"""

import dataclasses

import pytest

from componentgraph.domain.graph_models import (
    ComponentRecord,
    GraphResult,
    TreeNode,
    create_error_result,
    create_success_result,
)


def test_component_record_is_frozen():
    record = ComponentRecord(selector="app-a", name="a", definition_path="/a.component.ts")

    assert record.template_path is None
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.selector = "app-b"  # type: ignore[misc]


def test_tree_node_to_dict_keeps_empty_children():
    leaf = TreeNode(name="app\\leaf", selector="app-leaf", path=None)
    root = TreeNode(name="app\\root", selector="app-root", path=".\\src\\root.html", children=[leaf])

    assert root.to_dict() == {
        "name": "app\\root",
        "selector": "app-root",
        "path": ".\\src\\root.html",
        "children": [
            {"name": "app\\leaf", "selector": "app-leaf", "path": None, "children": []},
        ],
    }


def test_create_success_result_populates_fields(engine_config):
    registry = {
        "app-a": ComponentRecord(selector="app-a", name="a", definition_path="/a.ts"),
    }

    result = create_success_result(
        cfg=engine_config,
        scan_root="/project/src/app",
        registry=registry,
        usages={"app-a": []},
        graph={"app-a": {"name": "a", "parents": []}},
        graph_path="/out/graph.json",
        summary_lines=["- app-a is used by: nobody"],
    )

    assert isinstance(result, GraphResult)
    assert result.ok is True
    assert result.error == ""
    assert result.error_kind == ""
    assert result.mode == "both"
    assert result.component_count == 1
    assert result.tree is None
    assert result.cycles == []


def test_create_error_result_handles_defaults():
    result = create_error_result("Root missing", "missing_root", {}, "/project")

    assert result.ok is False
    assert result.error_kind == "missing_root"
    assert result.mode == ""
    assert result.graph is None
    assert result.warnings == []
    assert result.available_selectors == {}
