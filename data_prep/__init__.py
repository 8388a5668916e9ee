"""
Data preparation: loading record exports, importing bank CSVs, validation.
"""

from .loader import (
    ImportResult,
    RecordSnapshot,
    canonicalize_columns,
    import_transactions_csv,
    load_records,
    load_snapshot,
    read_frame,
    records_from_frame,
)
from .validators import ValidationResult, validate_records, validate_snapshot

__all__ = [
    "ImportResult",
    "RecordSnapshot",
    "canonicalize_columns",
    "import_transactions_csv",
    "load_records",
    "load_snapshot",
    "read_frame",
    "records_from_frame",
    "ValidationResult",
    "validate_records",
    "validate_snapshot",
]
