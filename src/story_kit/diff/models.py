# src/story_kit/diff/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class StructuralDiff:
    """Set-based delta between two story documents.

    The three passage id sets are mutually exclusive. The flags report
    that something changed, not which field.
    """

    passages_added: frozenset[str] = frozenset()
    passages_removed: frozenset[str] = frozenset()
    passages_modified: frozenset[str] = frozenset()
    metadata_changed: bool = False
    variables_changed: bool = False

    @property
    def has_changes(self) -> bool:
        return bool(
            self.passages_added
            or self.passages_removed
            or self.passages_modified
            or self.metadata_changed
            or self.variables_changed
        )
