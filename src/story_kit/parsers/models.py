# src/story_kit/parsers/models.py

from dataclasses import dataclass, field
from typing import Any

DEFAULT_TITLE = "Untitled Story"


@dataclass(frozen=True)
class Position:
    """Canvas placement hint for a passage."""

    x: int
    y: int


@dataclass(frozen=True)
class ParsedPassage:
    id: str
    title: str
    content: str
    tags: list[str] = field(default_factory=list)
    position: Position | None = None
    links: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ParsedDocument:
    """Format-agnostic story document.

    Every parser produces this shape and the differ consumes it.
    Passages keep source order; ids are the addressing key.
    """

    title: str
    passages: list[ParsedPassage]
    author: str | None = None
    metadata: dict[str, Any] | None = None
    variables: dict[str, Any] | None = None


def passage_to_dict(passage: ParsedPassage) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": passage.id,
        "title": passage.title,
        "content": passage.content,
        "tags": list(passage.tags),
        "links": list(passage.links),
    }
    if passage.position is not None:
        data["position"] = {"x": passage.position.x, "y": passage.position.y}
    return data


def document_to_dict(document: ParsedDocument) -> dict[str, Any]:
    """Serialize a document to the structured interchange shape.

    Optional fields holding ``None`` are omitted, so the result decodes
    back to an equal document.
    """
    data: dict[str, Any] = {"title": document.title}
    if document.author is not None:
        data["author"] = document.author
    data["passages"] = [passage_to_dict(p) for p in document.passages]
    if document.metadata is not None:
        data["metadata"] = dict(document.metadata)
    if document.variables is not None:
        data["variables"] = dict(document.variables)
    return data
