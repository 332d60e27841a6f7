"""Shared fixtures: synthetic vaults built under pytest's tmp_path."""

from pathlib import Path

import pytest

from obsidian_notes import ServerSettings, VaultRoot


@pytest.fixture
def vault_path(tmp_path: Path) -> Path:
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def vault(vault_path: Path) -> VaultRoot:
    return VaultRoot(path=vault_path)


@pytest.fixture
def settings(vault: VaultRoot) -> ServerSettings:
    return ServerSettings(vault=vault)


@pytest.fixture
def make_note(vault_path: Path):
    """Write a note relative to the vault root, creating folders as needed."""

    def _write(relative: str, content: str = "") -> Path:
        note_path = vault_path / relative
        note_path.parent.mkdir(parents=True, exist_ok=True)
        note_path.write_text(content, encoding="utf-8")
        return note_path

    return _write
