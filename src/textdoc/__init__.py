"""In-memory text documents with simple word statistics.

A Document keeps its title, author and body text in plain string fields;
everything else (words, counts, averages) is derived from the body on demand.
"""
from __future__ import annotations

from .document import Document, EmptyDocumentError
from .profiles import DocumentProfile, load_profile, profile_from_cfg
from .stats import DocumentStats, compute_stats

__all__ = [
    "Document",
    "EmptyDocumentError",
    "DocumentProfile",
    "load_profile",
    "profile_from_cfg",
    "DocumentStats",
    "compute_stats",
]
