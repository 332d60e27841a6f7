"""Allow ``python -m obsidian_notes <vault-path>``."""

from obsidian_notes.cli import main

main()
