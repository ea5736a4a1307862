"""Local configuration for jiradoc."""

from __future__ import annotations

import os


DEFAULT_MARKDOWN_PRESET = "gfm-like"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_JSON_INDENT = 2

# Fixed text substituted for Markdown constructs the tree cannot represent.
UNSUPPORTED_NODE_PLACEHOLDER = "-!- unimplemented markdown node -!-"

JIRADOC_MARKDOWN_PRESET = os.getenv("JIRADOC_MARKDOWN_PRESET", DEFAULT_MARKDOWN_PRESET)
JIRADOC_STRICT_PARSE = os.getenv("JIRADOC_STRICT_PARSE", "false").lower() in {"1", "true", "yes"}
JIRADOC_LOG_LEVEL = os.getenv("JIRADOC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
JIRADOC_JSON_INDENT = int(os.getenv("JIRADOC_JSON_INDENT", str(DEFAULT_JSON_INDENT)))
