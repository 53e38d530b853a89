"""Exceptions for learning use cases."""

from lexcards.exceptions import LexcardsError, NotFoundError


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: int | None = None) -> None:
        self.flashcard_id = flashcard_id
        # Same message whether or not the ID ever existed
        super().__init__("the requested flashcard could not be found")


class EditConflictError(LexcardsError):
    """The card changed (or vanished) since the caller last read it."""

    def __init__(self, flashcard_id: int, expected_version: int) -> None:
        self.flashcard_id = flashcard_id
        self.expected_version = expected_version
        super().__init__(
            "unable to update the record due to an edit conflict, please try again",
            status_code=409,
        )
