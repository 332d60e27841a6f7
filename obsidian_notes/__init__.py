"""Obsidian Notes MCP Server

Exposes a single Obsidian vault to an agent via Model Context Protocol:
read, write, append, patch, search and list notes, plus a read-only
resource view with one ``obsidian:///`` URI per note.
"""

from obsidian_notes.config import ServerSettings, load_server_configuration
from obsidian_notes.data_models import OperationResult, ResourceEntry, SearchResult, VaultRoot
from obsidian_notes.dispatcher import OPERATIONS, OperationDispatcher
from obsidian_notes.core.resource_operations import ResourceCatalog

__version__ = "0.1.0"
__all__ = [
    "ServerSettings",
    "load_server_configuration",
    "VaultRoot",
    "SearchResult",
    "ResourceEntry",
    "OperationResult",
    "OPERATIONS",
    "OperationDispatcher",
    "ResourceCatalog",
]
