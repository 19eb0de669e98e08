# src/story_kit/parsers/config.py

from dataclasses import dataclass
from typing import Literal

from .models import DEFAULT_TITLE

DuplicateIdPolicy = Literal["allow", "error", "suffix"]


@dataclass(frozen=True)
class ParserConfig:
    """Configuration shared by every format parser.

    Immutable. Explicit. No magic defaults from environment.
    """

    default_title: str = DEFAULT_TITLE
    # "allow" keeps colliding ids as-is, "error" raises,
    # "suffix" renames later passages to id-2, id-3, ...
    duplicate_ids: DuplicateIdPolicy = "allow"
    special_passages: bool = True  # StoryTitle / StoryData in markup
    excerpt_length: int = 60
