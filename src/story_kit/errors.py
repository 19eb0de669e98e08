# src/story_kit/errors.py


class StoryFormatError(ValueError):
    """Base class for every error raised while importing a story."""


class MalformedInputError(StoryFormatError):
    """Content claims a format but cannot be decoded as that format.

    The underlying failure is kept on ``cause`` (and chained as
    ``__cause__`` by the raiser).
    """

    def __init__(
        self,
        message: str,
        *,
        fmt: str,
        cause: BaseException | None = None,
    ) -> None:
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.format = fmt
        self.cause = cause


class DuplicatePassageIdError(MalformedInputError):
    """Two passages resolved to the same id under the "error" policy."""

    def __init__(self, passage_id: str, *, fmt: str) -> None:
        super().__init__(f"Duplicate passage id '{passage_id}'", fmt=fmt)
        self.passage_id = passage_id


class UnsupportedFormatError(StoryFormatError):
    """No registered parser accepts the content."""

    def __init__(self, excerpt: str) -> None:
        super().__init__(f"No parser accepts content starting with {excerpt!r}")
        self.excerpt = excerpt
