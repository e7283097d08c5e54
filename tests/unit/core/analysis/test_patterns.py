from __future__ import annotations

"""
Unit tests for Selector Pattern Matching.

Verifies:
1. Extraction of the declared selector literal from definition text.
2. Tag-opening detection of selectors inside template markup.
3. Base name derivation from definition file names.
"""

import pytest

from componentgraph.core.analysis.patterns import (
    contains_tag_reference,
    extract_declared_name,
    strip_definition_suffix,
)


# -----------------------------------------------------------------------------
# Declared name extraction
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("text, expected", [
    ("@Component({ selector: 'app-header' })", "app-header"),
    ('@Component({ selector: "app-header" })', "app-header"),
    ("@Component({\n  selector:'app-tight',\n})", "app-tight"),
    ("@Component({ selector : 'app-spaced' })", "app-spaced"),
])
def test_extract_declared_name_quote_styles(text, expected):
    assert extract_declared_name(text) == expected


def test_extract_declared_name_returns_first_declaration():
    text = "selector: 'app-first'\n// selector: 'app-second'"
    assert extract_declared_name(text) == "app-first"


def test_extract_declared_name_absent_or_empty():
    assert extract_declared_name("export class Plain {}") is None
    assert extract_declared_name("selector: ''") is None


def test_extract_declared_name_custom_field():
    text = "defineElement({ tag: 'x-button' })"
    assert extract_declared_name(text, field="tag") == "x-button"
    assert extract_declared_name(text) is None


# -----------------------------------------------------------------------------
# Tag reference detection
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("markup", [
    "<app-footer></app-footer>",
    "<app-footer/>",
    '<app-footer class="x"></app-footer>',
    "<app-footer\n  [input]=\"value\">",
    "<APP-FOOTER></APP-FOOTER>",
])
def test_contains_tag_reference_matches_tag_openings(markup):
    assert contains_tag_reference(markup, "app-footer") is True


@pytest.mark.parametrize("markup", [
    "<app-footer-extra></app-footer-extra>",
    "app-footer appears as text",
    "<div app-footer></div>",
    "</app-footer>",
    "<app-footer",
])
def test_contains_tag_reference_rejects_non_openings(markup):
    assert contains_tag_reference(markup, "app-footer") is False


def test_contains_tag_reference_treats_selector_literally():
    # Regex metacharacters in a selector must not act as wildcards
    assert contains_tag_reference("<appXitem>", "app.item") is False
    assert contains_tag_reference("<app.item>", "app.item") is True


def test_contains_tag_reference_empty_name():
    assert contains_tag_reference("< >", "") is False


# -----------------------------------------------------------------------------
# Base name derivation
# -----------------------------------------------------------------------------

def test_strip_definition_suffix():
    assert strip_definition_suffix("header.component.ts", ".component.ts") == "header"
    assert strip_definition_suffix("notes.ts", ".component.ts") == "notes.ts"
