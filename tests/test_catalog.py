from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console

from create_starter import (
    FRAMEWORKS,
    TemplateGroup,
    TemplateLeaf,
    find_template,
    iter_templates,
    render_catalog_tree,
    render_label,
    template_directory,
    template_names,
)


def test_template_names_are_flattened_in_catalog_order():
    names = template_names()
    assert names[:2] == ["unbuild", "rollup"]
    assert names[-1] == "weapp"
    assert "lib" not in names
    assert "vue3" not in names
    assert len(names) == len(set(names))


def test_every_leaf_has_a_directory():
    for leaf in iter_templates():
        assert isinstance(leaf, TemplateLeaf)
        assert leaf.directory


def test_find_template_is_exact_and_case_sensitive():
    assert find_template("weapp") == TemplateLeaf("weapp", "weapp-starter")
    assert find_template("PCWeb-TDesign").directory == "vue3-pcweb-tdesign-starter"
    assert find_template("WEAPP") is None
    assert find_template("vue3") is None
    assert find_template("") is None
    assert find_template(None) is None


def test_find_template_rejects_ambiguous_names():
    catalog = (
        TemplateGroup("a", (TemplateLeaf("same", "a-same"),)),
        TemplateGroup("b", (TemplateLeaf("same", "b-same"),)),
        TemplateLeaf("unique", "unique-dir"),
    )
    assert find_template("same", catalog) is None
    assert find_template("unique", catalog).directory == "unique-dir"


def test_group_requires_variants():
    with pytest.raises(ValueError):
        TemplateGroup("empty", ())


def test_styles_do_not_affect_equality():
    assert TemplateLeaf("x", "dir", style="red") == TemplateLeaf("x", "dir", style="blue", recommended=True)


def test_template_directory(tmp_path: Path):
    leaf = find_template("unbuild")
    assert template_directory(leaf, tmp_path) == (tmp_path / "template-lib-unbuild-starter").resolve()


def test_render_label():
    assert render_label(find_template("unbuild")) == "[bright_blue]unbuild[/bright_blue] [dim](recommended)[/dim]"
    assert render_label(find_template("weapp")) == "[cyan]weapp[/cyan]"
    lib = FRAMEWORKS[0]
    assert render_label(lib) == "[red]lib[/red] [dim](2 variants)[/dim]"


def test_render_catalog_tree_lists_every_template():
    console = Console(record=True, width=100)
    console.print(render_catalog_tree())
    output = console.export_text()
    for name in template_names():
        assert name in output
    assert "react" in output
