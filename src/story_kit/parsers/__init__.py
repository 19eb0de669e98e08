# src/story_kit/parsers/__init__.py

"""Format ingestion for story-kit.

Converts story sources into one canonical ``ParsedDocument``.

Design principles:
- Pure: parsing never touches files, network or shared state
- Sniff then parse: ``can_parse`` is a cheap non-raising dispatch check
- Explicit order: the registry dispatches by priority, never by discovery
- Soft degradation: malformed tags or positions become empty values

Example:
    >>> from story_kit.parsers import create_registry
    >>>
    >>> registry = create_registry()
    >>> document = registry.parse(":: Start\\nGo [[North]]\\n:: North\\nCold.")
    >>> [p.id for p in document.passages]
    ['start', 'north']
"""

from .base import FormatParser
from .config import DuplicateIdPolicy, ParserConfig
from .extraction import extract_links, parse_link, slugify
from .factory import create_parser, create_registry, parse_story
from .json_parser import JsonParser
from .models import (
    DEFAULT_TITLE,
    ParsedDocument,
    ParsedPassage,
    Position,
    document_to_dict,
)
from .registry import ParserRegistry
from .twee_parser import TweeParser
from .yaml_parser import YamlParser

__all__ = [
    # Factory
    "create_parser",
    "create_registry",
    "parse_story",
    # Contract
    "FormatParser",
    "ParserRegistry",
    # Parsers
    "JsonParser",
    "TweeParser",
    "YamlParser",
    # Config
    "ParserConfig",
    "DuplicateIdPolicy",
    # Model
    "DEFAULT_TITLE",
    "ParsedDocument",
    "ParsedPassage",
    "Position",
    "document_to_dict",
    # Extraction
    "extract_links",
    "parse_link",
    "slugify",
]
