# src/story_kit/parsers/extraction.py

"""Text scanning helpers for link-markup story sources.

Every routine here is a single forward scan over its input using
``str.find``/``str.rfind``; none of them uses backtracking regular
expressions, so the cost stays linear in input length.

Grammar handled::

    ::Title [tag1 tag2] {x,y}
    body text with [[Link]] or [[Display|Target]]
"""

import json
from collections.abc import Iterator
from dataclasses import dataclass, field

from .models import Position

HEADER_MARKER = "::"
LINK_OPEN = "[["
LINK_CLOSE = "]]"

_SLUG_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789")


@dataclass(frozen=True)
class PassageHeader:
    title: str
    tags: list[str] = field(default_factory=list)
    position: Position | None = None


def slugify(title: str) -> str:
    """Map a passage title to a stable id.

    Lowercases, replaces each maximal run of characters outside
    ``[a-z0-9]`` with one hyphen and drops hyphens left at either end.

    >>> slugify("My Passage!")
    'my-passage'
    >>> slugify("A  B")
    'a-b'
    """
    out: list[str] = []
    in_gap = False
    for ch in title.lower():
        if ch in _SLUG_CHARS:
            out.append(ch)
            in_gap = False
        elif not in_gap:
            out.append("-")
            in_gap = True
    return "".join(out).strip("-")


def parse_link(inner: str) -> tuple[str, str]:
    """Split the text between ``[[`` and ``]]`` into (display, target).

    Supported forms:
    - [[Target]]
    - [[Display|Target]]
    - [[Display->Target]]
    - [[Target<-Display]]
    """
    if "|" in inner:
        display, _, target = inner.rpartition("|")
    elif "->" in inner:
        display, _, target = inner.rpartition("->")
    elif "<-" in inner:
        target, _, display = inner.partition("<-")
    else:
        display = target = inner
    return display.strip(), target.strip()


def scan_links(body: str) -> tuple[str, list[str]]:
    """Find every link in ``body``.

    Returns the body with each link replaced by its display text, and the
    link targets in order of occurrence (duplicates kept). Links with an
    empty target are dropped from both, and an opener that never closes
    is removed from the text.
    """
    pieces: list[str] = []
    links: list[str] = []
    pos = 0

    while True:
        start = body.find(LINK_OPEN, pos)
        if start == -1:
            break
        end = body.find(LINK_CLOSE, start + 2)
        if end == -1:
            break

        # innermost opener wins for inputs like "[[a [[b]]"
        start = body.rfind(LINK_OPEN, start, end)

        display, target = parse_link(body[start + 2 : end])
        pieces.append(body[pos:start])
        if target:
            links.append(target)
            pieces.append(display or target)
        pos = end + 2

    pieces.append(body[pos:])
    return "".join(pieces).replace(LINK_OPEN, ""), links


def extract_links(body: str) -> list[str]:
    """Return link targets from ``body`` in order of occurrence."""
    return scan_links(body)[1]


def parse_tags(text: str) -> list[str]:
    return text.split()


def parse_position(text: str) -> Position | None:
    """Parse the inside of a ``{...}`` header annotation.

    Accepts ``x,y`` and the Twee 3 form ``"position":"x,y"``.
    Anything else yields ``None``.
    """
    text = text.strip()
    if text.startswith('"'):
        try:
            data = json.loads("{" + text + "}")
        except ValueError:
            return None
        value = data.get("position")
        if not isinstance(value, str):
            return None
        text = value

    x, sep, y = text.partition(",")
    if not sep:
        return None
    try:
        return Position(x=int(x), y=int(y))
    except ValueError:
        return None


def parse_header(line: str) -> PassageHeader | None:
    """Parse a ``::Title [tags] {x,y}`` line.

    Returns ``None`` when the line is not a header or the title is empty.
    An unterminated tag list or position is ignored.
    """
    if not line.startswith(HEADER_MARKER):
        return None

    rest = line[len(HEADER_MARKER) :]
    cut = _first_index(rest, "[{")
    title = rest[:cut].strip()
    if not title:
        return None

    tags: list[str] = []
    position = None
    remainder = rest[cut:]

    if remainder.startswith("["):
        close = remainder.find("]")
        if close != -1:
            tags = parse_tags(remainder[1:close])
            remainder = remainder[close + 1 :].lstrip()

    if remainder.startswith("{"):
        close = remainder.find("}")
        if close != -1:
            position = parse_position(remainder[1:close])

    return PassageHeader(title=title, tags=tags, position=position)


def split_passages(text: str) -> Iterator[tuple[PassageHeader, str]]:
    """Split markup into (header, body) pairs in source order.

    Text before the first header is skipped. Bodies are trimmed and the
    last passage runs to end of input. A ``::`` line that is not a valid
    header (empty title) is dropped.
    """
    header: PassageHeader | None = None
    body: list[str] = []

    for line in text.replace("\r\n", "\n").split("\n"):
        parsed = parse_header(line)
        if parsed is None:
            if header is not None and not line.startswith(HEADER_MARKER):
                body.append(line)
            continue

        if header is not None:
            yield header, "\n".join(body).strip()
        header = parsed
        body = []

    if header is not None:
        yield header, "\n".join(body).strip()


def _first_index(text: str, chars: str) -> int:
    found = [i for i in (text.find(c) for c in chars) if i != -1]
    return min(found) if found else len(text)
