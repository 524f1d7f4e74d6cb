#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the versiondiff library.

Constants are organized by category:
1. Type Definitions - Literal types shared across modules
2. Diff Defaults - labels and normalization defaults
3. Rendering - line prefixes and output formats
4. Input Acquisition - text decoding and file detection
5. Configuration - config discovery names and environment variables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

OpTag = Literal["equal", "insert", "delete"]
OutputFormat = Literal["unified", "json", "html"]
ColorMode = Literal["auto", "always", "never"]

# =============================================================================
# Diff Defaults
# =============================================================================

DEFAULT_BASE_LABEL = "base"

# Labels used by the two-pane text comparison
DEFAULT_LEFT_LABEL = "a"
DEFAULT_RIGHT_LABEL = "b"

DEFAULT_IGNORE_TRAILING_WHITESPACE = False

# Characters removed by ignore_trailing_whitespace: ASCII whitespace, the
# Unicode space separators, line/paragraph separators and U+FEFF. Unlike
# str.isspace() this leaves U+001C..U+001F and U+0085 in place.
TRAILING_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Length of generated hex identifiers for versions
VERSION_ID_BYTES = 6

# =============================================================================
# Rendering
# =============================================================================

UNIFIED_OLD_HEADER = "---"
UNIFIED_NEW_HEADER = "+++"

OP_PREFIXES: dict[str, str] = {
    "equal": " ",
    "delete": "-",
    "insert": "+",
}

DEFAULT_OUTPUT_FORMAT: OutputFormat = "unified"
DEFAULT_COLOR_MODE: ColorMode = "auto"
DEFAULT_JSON_INDENT = 2

# =============================================================================
# Input Acquisition
# =============================================================================

DEFAULT_FALLBACK_ENCODINGS = ["utf-8", "utf-8-sig", "latin-1"]
DEFAULT_CHARDET_SAMPLE_SIZE = 8192
DEFAULT_CHARDET_CONFIDENCE = 0.7

PDF_EXTENSIONS = (".pdf",)
# Always decoded as text, even when the content opens with the PDF magic
TEXT_EXTENSIONS = (".txt", ".text", ".md", ".markdown")
PDF_MAGIC = b"%PDF-"

# (install_name, import_name, version_spec)
DEPS_PDF = [("pymupdf", "fitz", ">=1.24.0")]

# Optional input formats and the packages each needs
OPTIONAL_FEATURES = {"pdf": DEPS_PDF}

STDIN_MARKER = "-"
STDIN_LABEL = "stdin"

# =============================================================================
# Configuration
# =============================================================================

CONFIG_BASENAME = ".versiondiff"
CONFIG_EXTENSIONS = (".toml", ".yaml", ".yml", ".json")
PYPROJECT_TOOL_SECTION = "versiondiff"
CONFIG_ENV_VAR = "VERSIONDIFF_CONFIG"
