# src/story_kit/diff/differ.py

import logging
from time import monotonic

from story_kit.observability import names
from story_kit.observability.base import MetricsHook, NoOpMetricsHook
from story_kit.parsers.models import ParsedDocument, ParsedPassage

from .config import DiffOptions
from .equality import structurally_equal
from .models import StructuralDiff

logger = logging.getLogger(__name__)


def diff_documents(
    previous: ParsedDocument,
    current: ParsedDocument,
    options: DiffOptions | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> StructuralDiff:
    """Compute the structural delta from ``previous`` to ``current``.

    Passages are matched by id. When a document repeats an id, the last
    passage with that id is the one compared.

    Args:
        previous: The older document.
        current: The newer document.
        options: Comparison options; see ``DiffOptions``.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        A ``StructuralDiff``. Never raises for well-formed documents.
    """
    start = monotonic()
    options = options or DiffOptions()

    old = _index(previous.passages)
    new = _index(current.passages)

    added = frozenset(new.keys() - old.keys())
    removed = frozenset(old.keys() - new.keys())
    modified = frozenset(
        pid
        for pid in old.keys() & new.keys()
        if _passage_changed(old[pid], new[pid], options)
    )

    metadata_changed = not structurally_equal(
        (previous.title, previous.author, previous.metadata),
        (current.title, current.author, current.metadata),
    )
    variables_changed = not structurally_equal(previous.variables, current.variables)

    diff = StructuralDiff(
        passages_added=added,
        passages_removed=removed,
        passages_modified=modified,
        metadata_changed=metadata_changed,
        variables_changed=variables_changed,
    )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.DIFF_DURATION, elapsed_ms)
    metrics_hook.record_gauge(
        names.DIFF_PASSAGES_CHANGED, len(added) + len(removed) + len(modified)
    )
    logger.debug(
        "Diff: +%d -%d ~%d passages, metadata_changed=%s, variables_changed=%s",
        len(added),
        len(removed),
        len(modified),
        metadata_changed,
        variables_changed,
    )
    return diff


def _index(passages: list[ParsedPassage]) -> dict[str, ParsedPassage]:
    return {p.id: p for p in passages}


def _passage_changed(
    old: ParsedPassage, new: ParsedPassage, options: DiffOptions
) -> bool:
    old_content, new_content = old.content, new.content
    if options.ignore_whitespace:
        old_content = _normalize_whitespace(old_content)
        new_content = _normalize_whitespace(new_content)

    if old_content != new_content or old.title != new.title:
        return True
    if not structurally_equal(old.links, new.links):
        return True
    if options.compare_tags and sorted(old.tags) != sorted(new.tags):
        return True
    if options.compare_positions and not structurally_equal(old.position, new.position):
        return True
    return False


def _normalize_whitespace(text: str) -> str:
    return " ".join(text.split())
