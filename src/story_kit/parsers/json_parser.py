# src/story_kit/parsers/json_parser.py

import json
from typing import Any

from .interchange import InterchangeParser


class JsonParser(InterchangeParser):
    """Parser for the JSON interchange format."""

    def can_parse(self, content: str) -> bool:
        # Skip the decode for anything that cannot be a JSON object
        if not isinstance(content, str) or not content.lstrip().startswith("{"):
            return False
        return super().can_parse(content)

    def get_format(self) -> str:
        return "json"

    def _load(self, content: str) -> Any:
        return json.loads(content)
