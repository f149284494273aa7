"""Ask-AI domain models -- re-exports all public model classes.

    - directory.py -- AI directory entries
    - provider.py  -- ProviderSpec, the data record behind every adapter
    - query.py     -- Query, ProviderResult, AggregateResponse
"""

from __future__ import annotations

from askai.models.directory import DirectoryEntry
from askai.models.provider import ProviderSpec
from askai.models.query import AggregateResponse, ProviderResult, Query

__all__ = [
    "AggregateResponse",
    "DirectoryEntry",
    "ProviderResult",
    "ProviderSpec",
    "Query",
]
