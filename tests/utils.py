#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Helpers shared by the markup2md test suite."""

import shutil
import tempfile
from pathlib import Path

ADMONITION_KEYWORDS = ["info", "tip", "warning", "note"]


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def code_block(content: str, options: str = "") -> str:
    """Build ``{code[:options]}`` markup around ``content``."""
    opener = f"{{code:{options}}}" if options else "{code}"
    return f"{opener}\n{content}{{code}}"


def admonition(keyword: str, content: str, options: str = "") -> str:
    """Build ``{keyword[:options]}`` markup around ``content``."""
    opener = f"{{{keyword}:{options}}}" if options else f"{{{keyword}}}"
    return f"{opener}\n{content}{{{keyword}}}"
