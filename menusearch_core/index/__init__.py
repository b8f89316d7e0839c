"""MenuSearch Index Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from menusearch_core.index.records import (
    FieldKind,
    MenuRecord,
    RecordProvider,
    StaticRecordProvider,
)
from menusearch_core.index.inverted import (
    Posting,
    TermIndex,
)

__all__ = [
    "FieldKind",
    "MenuRecord",
    "RecordProvider",
    "StaticRecordProvider",
    "Posting",
    "TermIndex",
]
