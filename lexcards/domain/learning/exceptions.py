"""Learning module domain exceptions."""

from lexcards.domain.common.exceptions import DomainError


class ContentDecodeError(DomainError):
    """Raised when a content payload cannot be turned into a typed variant."""


class UnsupportedContentTypeError(ContentDecodeError):
    """Raised when the content discriminant is not a known flashcard type."""

    def __init__(self, flashcard_type: object) -> None:
        super().__init__(
            f"Unsupported flashcard type: {flashcard_type!r}",
            {"flashcard_type": flashcard_type},
        )
        self.flashcard_type = flashcard_type


class MalformedContentError(ContentDecodeError):
    """Raised when a payload does not have the shape its discriminant requires."""

    def __init__(self, flashcard_type: str, reason: str) -> None:
        super().__init__(f"Invalid {flashcard_type} content: {reason}")
        self.flashcard_type = flashcard_type
        self.reason = reason
