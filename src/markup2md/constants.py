#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the markup2md library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Markup Grammar - Option keys and literal tokens of the wiki dialect
3. Markdown Output - Defaults for rendered markdown
4. Transpile Behavior - Error handling defaults for callers
5. Command Line - Config discovery and exit codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

OnErrorMode = Literal["raise", "raw", "placeholder"]
CodeFenceChar = Literal["`", "~"]

# =============================================================================
# Markup Grammar
# =============================================================================

CODE_BLOCK_KEYWORD = "code"

CODE_OPTION_TITLE = "title"
CODE_OPTION_LINE_NUMBERS = "linenumbers"
CODE_OPTION_LANGUAGE = "language"
CODE_OPTION_FIRST_LINE = "firstline"
CODE_OPTION_COLLAPSE = "collapse"

ADMONITION_OPTION_TITLE = "title"
ADMONITION_OPTION_SHOW_ICON = "show_icon"

OPTION_LIST_START = ":"
OPTION_SEPARATOR = "|"
OPTION_ASSIGN = "="
TAG_OPEN = "{"
TAG_CLOSE = "}"

BOOLEAN_TOKENS = {"true": True, "false": False}

# firstline is an unsigned 64-bit value
MAX_FIRST_LINE = 2**64 - 1

DEFAULT_SHOW_ICON = True

# =============================================================================
# Markdown Output
# =============================================================================

DEFAULT_CODE_FENCE_CHAR: CodeFenceChar = "`"
CODE_FENCE_CHARS = ["`", "~"]
DEFAULT_CODE_FENCE_MIN = 3

# =============================================================================
# Transpile Behavior
# =============================================================================

DEFAULT_ON_ERROR: OnErrorMode = "raw"
ON_ERROR_MODES = ["raise", "raw", "placeholder"]
DEFAULT_PLACEHOLDER = "*Description could not be rendered.*"
DEFAULT_NORMALIZE_LINE_ENDINGS = True

# Hover text defaults for tickets without the corresponding field
DEFAULT_TICKET_TITLE = "No title"
DEFAULT_TICKET_DESCRIPTION = "No description"
DEFAULT_TICKET_ASSIGNEE = "Unassigned"

# =============================================================================
# Command Line
# =============================================================================

CONFIG_FILENAMES = [".markup2md.toml", ".markup2md.yaml", ".markup2md.yml", ".markup2md.json"]
PYPROJECT_TOOL_SECTION = "markup2md"
ENV_VAR_PREFIX = "MARKUP2MD_"

EXIT_SUCCESS = 0
EXIT_PARSING_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_FILE_ERROR = 3
