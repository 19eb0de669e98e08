# Diff
from .diff import (
    DiffOptions,
    StructuralDiff,
    diff_documents,
    format_diff,
    summarize_diff,
)

# Errors
from .errors import (
    DuplicatePassageIdError,
    MalformedInputError,
    StoryFormatError,
    UnsupportedFormatError,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    FormatParser,
    JsonParser,
    ParsedDocument,
    ParsedPassage,
    ParserConfig,
    ParserRegistry,
    Position,
    TweeParser,
    YamlParser,
    create_parser,
    create_registry,
    parse_story,
)

__all__ = [
    # Diff
    "DiffOptions",
    "StructuralDiff",
    "diff_documents",
    "format_diff",
    "summarize_diff",
    # Errors
    "DuplicatePassageIdError",
    "MalformedInputError",
    "StoryFormatError",
    "UnsupportedFormatError",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "FormatParser",
    "JsonParser",
    "ParsedDocument",
    "ParsedPassage",
    "ParserConfig",
    "ParserRegistry",
    "Position",
    "TweeParser",
    "YamlParser",
    "create_parser",
    "create_registry",
    "parse_story",
]
