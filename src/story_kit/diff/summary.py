# src/story_kit/diff/summary.py

from .models import StructuralDiff

NO_CHANGES = "No changes"


def summarize_diff(diff: StructuralDiff) -> str:
    """One-line summary, e.g. "1 passage(s) added, metadata changed"."""
    parts: list[str] = []

    if diff.passages_added:
        parts.append(f"{len(diff.passages_added)} passage(s) added")
    if diff.passages_removed:
        parts.append(f"{len(diff.passages_removed)} passage(s) removed")
    if diff.passages_modified:
        parts.append(f"{len(diff.passages_modified)} passage(s) modified")
    if diff.metadata_changed:
        parts.append("metadata changed")
    if diff.variables_changed:
        parts.append("variables changed")

    if not parts:
        return NO_CHANGES
    return ", ".join(parts)


def format_diff(diff: StructuralDiff) -> str:
    """Multi-line report listing changed passage ids, sorted within each group."""
    lines = ["=== Story Diff ===", ""]

    if not diff.has_changes:
        lines.append("No changes detected.")
        return "\n".join(lines)

    lines.append(summarize_diff(diff))
    lines.append("")
    lines.extend(f"+ {pid}" for pid in sorted(diff.passages_added))
    lines.extend(f"- {pid}" for pid in sorted(diff.passages_removed))
    lines.extend(f"~ {pid}" for pid in sorted(diff.passages_modified))
    return "\n".join(lines)
