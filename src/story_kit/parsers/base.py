# src/story_kit/parsers/base.py

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from time import monotonic

from story_kit.errors import DuplicatePassageIdError, MalformedInputError
from story_kit.observability import names
from story_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import ParserConfig
from .models import ParsedDocument, ParsedPassage

logger = logging.getLogger(__name__)


class FormatParser(ABC):
    """Contract implemented by every source-format parser.

    Subclasses implement ``can_parse``, ``get_format`` and ``_parse``;
    ``parse`` wraps ``_parse`` with metrics and logging.
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or ParserConfig()
        self.metrics_hook = metrics_hook

    @abstractmethod
    def can_parse(self, content: str) -> bool:
        """
        Cheap sniff used for dispatch only.

        Requirements:
        - Never raises
        - False for anything this parser cannot confidently claim
        """
        raise NotImplementedError

    @abstractmethod
    def get_format(self) -> str:
        """Stable lowercase format tag, e.g. "json" or "twee"."""
        raise NotImplementedError

    @abstractmethod
    def _parse(self, content: str) -> ParsedDocument:
        raise NotImplementedError

    def parse(self, content: str) -> ParsedDocument:
        """
        Parse content into the canonical document model.

        Raises:
            MalformedInputError: content cannot be decoded as this format.
        """
        fmt = self.get_format()
        labels = {"format": fmt}
        logger.debug("Parsing %d characters as %s", len(content), fmt)
        start = monotonic()
        self.metrics_hook.increment(names.PARSE_REQUESTS_TOTAL, labels=labels)

        try:
            document = self._parse(content)
        except MalformedInputError as e:
            logger.error("Failed to parse %s content: %s", fmt, e)
            self.metrics_hook.increment(names.PARSE_ERRORS_TOTAL, labels=labels)
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms, labels)
        self.metrics_hook.increment(
            names.PARSE_PASSAGES_TOTAL, len(document.passages), labels=labels
        )
        logger.debug(
            "Parsed %s document '%s' with %d passages",
            fmt,
            document.title,
            len(document.passages),
        )
        return document

    def _apply_id_policy(self, passages: list[ParsedPassage]) -> list[ParsedPassage]:
        policy = self.config.duplicate_ids
        if policy == "allow":
            return passages

        seen: set[str] = set()
        result: list[ParsedPassage] = []
        for passage in passages:
            if passage.id in seen:
                if policy == "error":
                    raise DuplicatePassageIdError(passage.id, fmt=self.get_format())
                passage = _with_suffix(passage, seen)
                logger.debug("Renamed duplicate passage id to %s", passage.id)
            seen.add(passage.id)
            result.append(passage)
        return result


def _with_suffix(passage: ParsedPassage, taken: set[str]) -> ParsedPassage:
    n = 2
    while f"{passage.id}-{n}" in taken:
        n += 1
    return replace(passage, id=f"{passage.id}-{n}")
