from .loader import get_default_reference_tables, load_reference_tables
from .schema import ReferenceTables

__all__ = [
    "ReferenceTables",
    "get_default_reference_tables",
    "load_reference_tables",
]
