"""
Catalog Reader - Static Menu Codex
==================================

Serves the menu codex exactly as it is stored on disk. The document is
maintained out of band; its structure is never inspected here.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class CatalogNotFoundError(Exception):
    """Raised when the codex file cannot be read or parsed."""
    pass


class CatalogReader:
    """
    Reads the codex on every call (no caching), so edits to the file are
    visible to the next request.

    USAGE:
        reader = CatalogReader(Path("gustanto_codex.json"))
        codex = reader.get_catalog()
    """

    def __init__(self, codex_path: Path):
        self.codex_path = Path(codex_path)

    def get_catalog(self) -> Any:
        """
        Load and return the codex JSON value unchanged.

        Raises:
            CatalogNotFoundError: file missing, unreadable or not valid JSON.
        """
        try:
            data = self.codex_path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Error reading codex {self.codex_path}: {e}")
            raise CatalogNotFoundError(str(e)) from e

        try:
            return json.loads(data)
        except json.JSONDecodeError as e:
            logger.error(f"Codex {self.codex_path} is not valid JSON: {e}")
            raise CatalogNotFoundError(str(e)) from e
