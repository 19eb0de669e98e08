# src/story_kit/diff/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class DiffOptions:
    """Options for passage comparison.

    By default a passage counts as modified when its content, title or
    links differ. The flags below widen or relax that check.
    """

    ignore_whitespace: bool = False  # collapse whitespace runs in content
    compare_tags: bool = False  # order-insensitive
    compare_positions: bool = False
