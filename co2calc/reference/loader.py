"""Load and validate reference tables from JSON files."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from co2calc.reference.schema import ReferenceTables

logger = logging.getLogger(__name__)

# Default directory for reference table files
_CONFIG_DIR = Path(__file__).parent / "configs"


def load_reference_tables(file_path: Path | None = None) -> ReferenceTables:
    """Load and validate reference tables from a JSON file.

    If no path is provided, loads the bundled V1 tables.
    """
    if file_path is None:
        file_path = _CONFIG_DIR / "reference_tables_v1.json"

    if not file_path.exists():
        raise FileNotFoundError(f"Reference tables not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    tables = ReferenceTables.model_validate(raw)
    logger.debug("Loaded reference tables %s v%s", tables.id, tables.version)
    return tables


@lru_cache(maxsize=1)
def get_default_reference_tables() -> ReferenceTables:
    """Return the bundled V1 tables (parsed once per process)."""
    return load_reference_tables()
