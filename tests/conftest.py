from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures building small Angular-style projects on disk.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
ComponentWriter = Callable[..., Path]


@pytest.fixture
def write_component() -> ComponentWriter:
    """
    Return a helper that writes one component to disk.

    The helper writes ``<base>.component.ts`` declaring the selector and,
    when markup is given, the template named after ``template_name``
    (``<base>.component.html`` by default).
    """
    def _write(
            directory: Path,
            base: str,
            selector: Optional[str],
            markup: Optional[str] = None,
            template_name: Optional[str] = None,
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        declaration = f"  selector: '{selector}',\n" if selector is not None else ""
        definition = directory / f"{base}.component.ts"
        definition.write_text(
            "import { Component } from '@angular/core';\n\n"
            "@Component({\n"
            f"{declaration}"
            f"  templateUrl: './{base}.component.html',\n"
            "})\n"
            f"export class {base.capitalize()}Component {{}}\n",
            encoding="utf-8",
        )
        if markup is not None:
            name = template_name or f"{base}.component.html"
            (directory / name).write_text(markup, encoding="utf-8")
        return definition

    return _write


@pytest.fixture
def angular_project(tmp_path: Path, write_component: ComponentWriter) -> Path:
    """
    Create the reference four-component project.

    Structure:
    /project
      /src
        /app
          app.component.ts      (app-root: <app-header>, <app-body>)
          app.component.html
          /header
            header.component.ts (app-header, no template)
          /body
            body.component.ts   (app-body: <app-footer/>)
            body.component.html
          /footer
            footer.component.ts (app-footer, no template)

    Returns:
        Path: The project directory (parent of ``src``).
    """
    project = tmp_path / "project"
    app = project / "src" / "app"

    write_component(
        app, "app", "app-root",
        "<app-header></app-header>\n<main>\n  <app-body class=\"main\"></app-body>\n</main>\n",
    )
    write_component(app / "header", "header", "app-header")
    write_component(app / "body", "body", "app-body", "<section>\n  <app-footer/>\n</section>\n")
    write_component(app / "footer", "footer", "app-footer")

    return project


@pytest.fixture
def engine_config(angular_project: Path) -> Dict[str, Any]:
    """Return a complete engine configuration targeting the reference project."""
    return {
        "source_root": str(angular_project / "src"),
        "scan_root": str(angular_project / "src" / "app"),
        "graph_output_path": str(angular_project / "out" / "angular-component-graph.json"),
        "tree_output_path": str(angular_project / "out" / "angular-component-tree.json"),
        "mode": "both",
        "root_selector": "app-root",
        "path_separator": "\\",
        "print_summary": True,
        "definition_suffix": ".component.ts",
        "template_extensions": [".html"],
        "selector_field": "selector",
    }
