# src/story_kit/parsers/twee_parser.py

import json
import logging
from typing import Any

from .base import FormatParser
from .extraction import HEADER_MARKER, LINK_OPEN, scan_links, slugify, split_passages
from .models import ParsedDocument, ParsedPassage

logger = logging.getLogger(__name__)

STORY_TITLE = "StoryTitle"
STORY_DATA = "StoryData"


class TweeParser(FormatParser):
    """
    Parser for link-markup (Twee) sources.
    - Header pass splits passages, then each body is scanned for links
    - Passage ids are slugs of titles
    - Malformed tags or positions degrade to empty values
    """

    def can_parse(self, content: str) -> bool:
        if not isinstance(content, str):
            return False
        return HEADER_MARKER in content and LINK_OPEN in content

    def get_format(self) -> str:
        return "twee"

    def _parse(self, content: str) -> ParsedDocument:
        title = self.config.default_title
        metadata: dict[str, Any] | None = None
        passages: list[ParsedPassage] = []

        for header, body in split_passages(content):
            if self.config.special_passages and header.title == STORY_TITLE:
                first_line = body.split("\n", 1)[0].strip()
                if first_line:
                    title = first_line
                continue

            if self.config.special_passages and header.title == STORY_DATA:
                story_data = self._load_story_data(body)
                if story_data is not None:
                    metadata = {**(metadata or {}), **story_data}
                continue

            text, links = scan_links(body)
            passages.append(
                ParsedPassage(
                    id=slugify(header.title),
                    title=header.title,
                    content=text,
                    tags=header.tags,
                    position=header.position,
                    links=links,
                )
            )

        return ParsedDocument(
            title=title,
            passages=self._apply_id_policy(passages),
            metadata=metadata,
        )

    def _load_story_data(self, body: str) -> dict[str, Any] | None:
        try:
            data = json.loads(body)
        except (ValueError, RecursionError):
            logger.debug("Ignoring undecodable %s passage", STORY_DATA)
            return None
        if not isinstance(data, dict):
            return None
        return data
