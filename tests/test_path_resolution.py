import pytest

from obsidian_notes import VaultRoot
from obsidian_notes.core.vault_operations import (
    ensure_vault_ready,
    relative_note_path,
    resolve_note_path,
)
from obsidian_notes.exceptions import (
    AccessDeniedError,
    InvalidArgumentsError,
    VaultNotFoundError,
)


def test_resolves_nested_relative_path(vault):
    resolved = resolve_note_path(vault, "Daily/2024-01-01.md")
    assert resolved == vault.path / "Daily" / "2024-01-01.md"


def test_leading_slash_addresses_same_note(vault):
    assert resolve_note_path(vault, "/notes/a.md") == resolve_note_path(vault, "notes/a.md")


def test_inner_parent_segments_are_collapsed(vault):
    resolved = resolve_note_path(vault, "Projects/../Daily/./today.md")
    assert resolved == vault.path / "Daily" / "today.md"


@pytest.mark.parametrize(
    "relative",
    [
        "../outside.md",
        "../../etc/passwd",
        "Daily/../../outside.md",
        "a/b/../../../escape.md",
    ],
)
def test_traversal_outside_vault_is_denied(vault, relative):
    with pytest.raises(AccessDeniedError):
        resolve_note_path(vault, relative)


def test_sibling_directory_sharing_prefix_is_denied(tmp_path):
    (tmp_path / "vault").mkdir()
    (tmp_path / "vault-other").mkdir()
    vault = VaultRoot(path=tmp_path / "vault")

    with pytest.raises(AccessDeniedError):
        resolve_note_path(vault, "../vault-other/secret.md")


def test_access_denied_message_names_path(vault):
    with pytest.raises(AccessDeniedError) as exc_info:
        resolve_note_path(vault, "../x.md")
    assert "Access denied" in str(exc_info.value)
    assert exc_info.value.relative_path == "../x.md"


def test_vault_root_itself_is_contained(vault):
    assert resolve_note_path(vault, "") == vault.path
    assert resolve_note_path(vault, "sub/..") == vault.path


def test_relative_note_path_uses_forward_slashes(vault):
    resolved = resolve_note_path(vault, "Daily/today.md")
    assert relative_note_path(vault, resolved) == "Daily/today.md"


def test_vault_root_from_string_is_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    root = VaultRoot.from_string("my-vault")
    assert root.path.is_absolute()
    assert root.path == tmp_path / "my-vault"


def test_vault_root_rejects_empty_path():
    with pytest.raises(ValueError):
        VaultRoot.from_string("  ")


def test_missing_vault_is_reported_lazily(tmp_path):
    root = VaultRoot.from_string(str(tmp_path / "missing"))
    # Construction succeeds; access fails.
    with pytest.raises(VaultNotFoundError):
        ensure_vault_ready(root)


def test_nul_character_is_rejected(vault):
    with pytest.raises(InvalidArgumentsError):
        resolve_note_path(vault, "notes/a\x00.md")
