# src/story_kit/parsers/interchange.py

"""Structured interchange decoding shared by the JSON and YAML parsers.

The decoded value is checked against a permissive schema: field presence
is explicit, unknown top-level keys pass through into ``metadata``, and
unknown passage keys are ignored.

Decodable values of the wrong type are coerced or dropped rather than
rejected:
- numbers, booleans and YAML dates in ``id``, ``title``, ``author`` and
  ``content`` become strings
- ``tags``/``links`` that are not lists become empty; non-scalar items
  are skipped
- a ``position`` without integer ``x``/``y`` becomes absent

Only shapes the model cannot hold at all (``passages`` that is not a list
of objects, a non-object ``metadata``) are rejected.
"""

from abc import abstractmethod
from dataclasses import replace
from datetime import date
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from story_kit.errors import MalformedInputError

from .base import FormatParser
from .config import ParserConfig
from .extraction import slugify
from .models import ParsedDocument, ParsedPassage, Position


def _scalar_to_str(value: Any) -> Any:
    if isinstance(value, (int, float, date)):
        return str(value)
    return value


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


class PositionSchema(BaseModel):
    x: int
    y: int

    class Config:
        extra = "ignore"


class PassageSchema(BaseModel):
    id: str | None = None
    title: str | None = None
    content: str | None = None
    tags: list[str] = []
    position: PositionSchema | None = None
    links: list[str] = []

    class Config:
        extra = "ignore"

    @field_validator("id", "title", "content", mode="before")
    @classmethod
    def _coerce_scalar(cls, value: Any) -> Any:
        return _scalar_to_str(value)

    @field_validator("tags", "links", mode="before")
    @classmethod
    def _coerce_str_list(cls, value: Any) -> list[str]:
        if not isinstance(value, list):
            return []
        items = (_scalar_to_str(v) for v in value)
        return [item for item in items if isinstance(item, str)]

    @field_validator("position", mode="before")
    @classmethod
    def _coerce_position(cls, value: Any) -> dict[str, int] | None:
        if not isinstance(value, dict):
            return None
        x, y = _as_int(value.get("x")), _as_int(value.get("y"))
        if x is None or y is None:
            return None
        return {"x": x, "y": y}


class DocumentSchema(BaseModel):
    title: str | None = None
    author: str | None = None
    passages: list[PassageSchema]
    metadata: dict[str, Any] | None = None
    variables: dict[str, Any] | None = None

    class Config:
        extra = "allow"

    @field_validator("title", "author", mode="before")
    @classmethod
    def _coerce_scalar(cls, value: Any) -> Any:
        return _scalar_to_str(value)


def decode_document(
    data: Any,
    *,
    config: ParserConfig,
    fmt: str,
) -> ParsedDocument:
    """Convert a decoded object into a ``ParsedDocument``.

    Raises:
        MalformedInputError: the value is not an object, lacks ``passages``,
            has ``passages`` that is not a list of objects, or has a passage
            with neither ``id`` nor ``title``.
    """
    if not isinstance(data, dict):
        raise MalformedInputError(
            f"Expected an object, got {type(data).__name__}", fmt=fmt
        )

    try:
        schema = DocumentSchema.model_validate(data)
    except ValidationError as e:
        raise MalformedInputError(
            "Invalid story document", fmt=fmt, cause=e
        ) from e

    passages = [
        _decode_passage(index, p, fmt=fmt)
        for index, p in enumerate(schema.passages)
    ]

    metadata = schema.metadata
    extras = schema.model_extra or {}
    if extras:
        metadata = {**extras, **(metadata or {})}

    return ParsedDocument(
        title=schema.title if schema.title is not None else config.default_title,
        author=schema.author,
        passages=passages,
        metadata=metadata,
        variables=schema.variables,
    )


def _decode_passage(
    index: int, passage: PassageSchema, *, fmt: str
) -> ParsedPassage:
    if passage.id is None and passage.title is None:
        raise MalformedInputError(
            f"Passage {index} has neither id nor title", fmt=fmt
        )

    passage_id = passage.id if passage.id is not None else slugify(passage.title or "")
    position = None
    if passage.position is not None:
        position = Position(x=passage.position.x, y=passage.position.y)

    return ParsedPassage(
        id=passage_id,
        title=passage.title if passage.title is not None else passage_id,
        content=passage.content or "",
        tags=list(passage.tags),
        position=position,
        links=list(passage.links),
    )


class InterchangeParser(FormatParser):
    """Base for parsers whose input is a self-describing object.

    ``can_parse`` claims any content that decodes to a mapping with a
    ``passages`` member. ``parse`` trusts that shape beyond the schema.
    """

    # Exceptions ``_load`` may raise for undecodable content
    decode_errors: tuple[type[Exception], ...] = (ValueError, RecursionError)

    @abstractmethod
    def _load(self, content: str) -> Any:
        raise NotImplementedError

    def can_parse(self, content: str) -> bool:
        if not isinstance(content, str) or not content.strip():
            return False
        try:
            data = self._load(content)
        except self.decode_errors:
            return False
        return isinstance(data, dict) and "passages" in data

    def _parse(self, content: str) -> ParsedDocument:
        fmt = self.get_format()
        try:
            data = self._load(content)
        except self.decode_errors as e:
            raise MalformedInputError(
                f"Could not decode {fmt} content", fmt=fmt, cause=e
            ) from e

        document = decode_document(data, config=self.config, fmt=fmt)
        return replace(document, passages=self._apply_id_policy(document.passages))
