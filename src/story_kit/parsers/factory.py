# src/story_kit/parsers/factory.py

from story_kit.errors import MalformedInputError
from story_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import FormatParser
from .config import ParserConfig
from .models import ParsedDocument
from .registry import ParserRegistry

# Dispatch order of the default registry. JSON comes before YAML because
# every JSON document is also YAML.
DEFAULT_FORMATS = ("json", "twee", "yaml")


def create_parser(
    fmt: str,
    config: ParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> FormatParser:
    """Create a parser for a format tag.

    Raises:
        ValueError: If the format is unknown.

    Example:
        >>> parser = create_parser("twee")
        >>> document = parser.parse(":: Start\\nGo [[North]]")
    """
    config = config or ParserConfig()

    if fmt == "json":
        from .json_parser import JsonParser

        return JsonParser(config, metrics_hook)

    if fmt == "twee":
        from .twee_parser import TweeParser

        return TweeParser(config, metrics_hook)

    if fmt == "yaml":
        from .yaml_parser import YamlParser

        return YamlParser(config, metrics_hook)

    raise ValueError(f"Unknown story format: {fmt}")


def create_registry(
    config: ParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParserRegistry:
    """Create a registry holding every built-in parser in default order."""
    config = config or ParserConfig()
    registry = ParserRegistry(
        excerpt_length=config.excerpt_length, metrics_hook=metrics_hook
    )
    for fmt in DEFAULT_FORMATS:
        registry.register(create_parser(fmt, config, metrics_hook))
    return registry


def parse_story(
    content: str | bytes,
    registry: ParserRegistry | None = None,
) -> ParsedDocument:
    """Parse content of unknown format with the first parser that accepts it.

    Bytes are decoded as UTF-8 (a leading BOM is dropped).

    Raises:
        UnsupportedFormatError: no parser accepts the content.
        MalformedInputError: the selected parser cannot decode it, or the
            bytes are not valid UTF-8.
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise MalformedInputError(
                "Content is not valid UTF-8", fmt="text", cause=e
            ) from e

    registry = registry or create_registry()
    return registry.parse(content)
