# src/story_kit/diff/__init__.py

"""Structural diffing of story documents.

Example:
    >>> from story_kit.diff import diff_documents, summarize_diff
    >>>
    >>> diff = diff_documents(old_document, new_document)
    >>> print(summarize_diff(diff))
    1 passage(s) added, 1 passage(s) modified
"""

from .config import DiffOptions
from .differ import diff_documents
from .equality import structurally_equal
from .models import StructuralDiff
from .summary import NO_CHANGES, format_diff, summarize_diff

__all__ = [
    "diff_documents",
    "DiffOptions",
    "StructuralDiff",
    "structurally_equal",
    "summarize_diff",
    "format_diff",
    "NO_CHANGES",
]
