# src/story_kit/parsers/registry.py

import logging

from story_kit.errors import UnsupportedFormatError
from story_kit.observability import names
from story_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import FormatParser
from .models import ParsedDocument

logger = logging.getLogger(__name__)

DEFAULT_EXCERPT_LENGTH = 60


class ParserRegistry:
    """Ordered set of format parsers used to dispatch unknown content.

    Parsers are tried by ascending priority, then by registration order.
    When no priority is given the registration index is used, so plain
    ``register`` calls dispatch first-registered-first.
    """

    def __init__(
        self,
        excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._parsers: dict[str, tuple[int, int, FormatParser]] = {}
        self._counter = 0
        self.excerpt_length = excerpt_length
        self.metrics_hook = metrics_hook

    def register(self, parser: FormatParser, *, priority: int | None = None) -> None:
        fmt = parser.get_format()
        if fmt in self._parsers:
            raise ValueError(f"Parser '{fmt}' already registered")

        order = self._counter
        self._counter += 1
        self._parsers[fmt] = (order if priority is None else priority, order, parser)
        logger.debug("Registered parser: %s", fmt)

    def get(self, fmt: str) -> FormatParser:
        try:
            return self._parsers[fmt][2]
        except KeyError:
            logger.error("Parser not found: %s", fmt)
            raise KeyError(f"Parser '{fmt}' not found")

    def remove(self, fmt: str) -> None:
        try:
            del self._parsers[fmt]
            logger.debug("Removed parser: %s", fmt)
        except KeyError:
            logger.error("Cannot remove parser, not found: %s", fmt)
            raise KeyError(f"Parser '{fmt}' not found")

    def list(self) -> list[FormatParser]:
        """Registered parsers in dispatch order."""
        entries = sorted(self._parsers.values(), key=lambda e: (e[0], e[1]))
        return [parser for _, _, parser in entries]

    def select(self, content: str) -> FormatParser:
        """Return the first parser whose sniff accepts ``content``.

        Raises:
            UnsupportedFormatError: no registered parser accepts it.
        """
        for parser in self.list():
            if parser.can_parse(content):
                logger.debug("Selected parser: %s", parser.get_format())
                return parser

        excerpt = content[: self.excerpt_length]
        logger.error("No parser accepts content starting with %r", excerpt)
        self.metrics_hook.increment(names.SELECTION_MISSES_TOTAL)
        raise UnsupportedFormatError(excerpt)

    def parse(self, content: str) -> ParsedDocument:
        return self.select(content).parse(content)
