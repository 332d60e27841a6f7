"""Module-level constants for the Obsidian notes MCP server."""

# Resources
URI_SCHEME = "obsidian"
MARKDOWN_MIME_TYPE = "text/markdown"
NOTE_SUFFIX = ".md"

# Limits
MAX_SEARCH_RESULTS = 20
DEFAULT_LIST_LIMIT = 50
SNIPPET_CONTEXT_CHARS = 50
FILENAME_MATCH_MARKER = "Matched in filename"

# Scanning
DEFAULT_EXCLUDE_PATTERNS = (
    "node_modules/**",
    ".git/**",
    ".obsidian/**",
)

# Logging
LOG_LEVEL = "INFO"
