"""Tests for markdown enumeration order and exclusions."""

import pytest

from obsidian_notes.core.scan_operations import is_excluded, list_markdown_files
from obsidian_notes.data_models import VaultRoot
from obsidian_notes.exceptions import VaultNotFoundError


def test_lists_only_markdown_files(vault, make_note):
    make_note("a.md", "a")
    make_note("image.png", "")
    make_note("notes.txt", "")
    make_note("readme.MD.bak", "")

    assert list_markdown_files(vault) == ["a.md"]


def test_order_is_files_first_then_sorted_subdirectories(vault, make_note):
    make_note("b.md")
    make_note("a.md")
    make_note("zeta/z.md")
    make_note("alpha/two.md")
    make_note("alpha/one.md")
    make_note("alpha/nested/deep.md")

    assert list_markdown_files(vault) == [
        "a.md",
        "b.md",
        "alpha/one.md",
        "alpha/two.md",
        "alpha/nested/deep.md",
        "zeta/z.md",
    ]


def test_order_is_stable_across_scans(vault, make_note):
    for name in ["c.md", "a.md", "sub/b.md", "sub/a.md"]:
        make_note(name)
    assert list_markdown_files(vault) == list_markdown_files(vault)


def test_default_exclusions_skip_tool_directories(vault, make_note):
    make_note("keep.md")
    make_note("node_modules/pkg/readme.md")
    make_note(".obsidian/workspace.md")
    make_note(".git/info.md")

    assert list_markdown_files(vault) == ["keep.md"]


def test_hidden_files_and_directories_are_skipped(vault, make_note):
    make_note(".hidden.md")
    make_note(".trash/deleted.md")
    make_note("visible.md")

    assert list_markdown_files(vault) == ["visible.md"]


def test_custom_exclude_patterns(vault, make_note):
    make_note("Templates/daily.md")
    make_note("Daily/2024-01-01.md")
    make_note("Daily/draft-1.md")

    result = list_markdown_files(vault, ["Templates/**", "*/draft-*.md"])
    assert result == ["Daily/2024-01-01.md"]


def test_empty_exclusions_still_skip_hidden(vault, make_note):
    make_note("node_modules/x.md")
    make_note(".git/y.md")

    assert list_markdown_files(vault, []) == ["node_modules/x.md"]


def test_missing_vault_raises(tmp_path):
    with pytest.raises(VaultNotFoundError):
        list_markdown_files(VaultRoot(path=tmp_path / "missing"))


@pytest.mark.parametrize(
    "relative, expected",
    [
        ("node_modules/a/b.md", True),
        ("docs/node_modules/a.md", False),
        ("notes.md", False),
    ],
)
def test_is_excluded(relative, expected):
    assert is_excluded(relative, ["node_modules/**"]) is expected


def test_directory_matches_its_own_globstar_pattern():
    assert is_excluded("node_modules", ["node_modules/**"], directory=True)
    assert not is_excluded("node_modules", ["node_modules/**"])


def test_globstar_excludes_directory_at_any_depth(vault, make_note):
    make_note("keep.md")
    make_note("drafts/x.md")
    make_note("Projects/drafts/y.md")
    make_note("Projects/final.md")

    result = list_markdown_files(vault, ("**/drafts/**",))

    assert result == ["keep.md", "Projects/final.md"]


def test_bare_directory_name_prunes_directory(vault, make_note):
    make_note("keep.md")
    make_note("Templates/daily.md")
    make_note("Templates/nested/weekly.md")

    assert list_markdown_files(vault, ["Templates"]) == ["keep.md"]


def test_globstar_file_pattern(vault, make_note):
    make_note("a.md")
    make_note("deep/er/scratch.md")
    make_note("scratch.md")

    assert list_markdown_files(vault, ["**/scratch.md"]) == ["a.md"]
