# src/story_kit/parsers/yaml_parser.py

from typing import Any

import yaml

from .interchange import InterchangeParser


class YamlParser(InterchangeParser):
    """Parser for the interchange shape written as YAML.

    Every JSON document is also valid YAML, so register this after
    ``JsonParser``.
    """

    decode_errors = (yaml.YAMLError, ValueError, RecursionError)

    def get_format(self) -> str:
        return "yaml"

    def _load(self, content: str) -> Any:
        return yaml.safe_load(content)
