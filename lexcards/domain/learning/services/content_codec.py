"""
Codec between the stored/transported content payload and typed variants.

The payload travels next to its discriminant as an opaque JSON object.
This is the only place that knows which variant a discriminant selects,
so the store and the entity builder stay agnostic to the set of kinds.
"""

import json
from collections.abc import Callable, Mapping
from typing import Any

from lexcards.domain.learning.exceptions import (
    MalformedContentError,
    UnsupportedContentTypeError,
)
from lexcards.domain.learning.value_objects.flashcard_content import (
    FlashcardContent,
    FlashcardType,
    MCQContent,
    QAContent,
    YesNoContent,
)

_DECODERS: dict[FlashcardType, Callable[[Mapping[str, object]], FlashcardContent]] = {
    FlashcardType.QA: QAContent.from_json,
    FlashcardType.MCQ: MCQContent.from_json,
    FlashcardType.YES_NO: YesNoContent.from_json,
}

# A new FlashcardType member without a decoder fails at import time.
_missing = set(FlashcardType) - _DECODERS.keys()
if _missing:
    raise RuntimeError(f"No content decoder registered for {sorted(_missing)}")


class ContentCodec:
    """Bidirectional mapping between raw payloads and content variants."""

    @staticmethod
    def parse_type(flashcard_type: object) -> FlashcardType:
        """
        Resolve a raw discriminant.

        Raises:
            UnsupportedContentTypeError: If it is not one of the known types
        """
        if isinstance(flashcard_type, str):
            try:
                return FlashcardType(flashcard_type)
            except ValueError:
                pass
        raise UnsupportedContentTypeError(flashcard_type)

    @classmethod
    def decode(cls, flashcard_type: object, raw: Any) -> FlashcardContent:  # noqa: ANN401
        """
        Decode a raw payload into the variant its discriminant selects.

        Args:
            flashcard_type: The discriminant ("qa", "mcq" or "yes_no")
            raw: JSON object as a mapping, or its encoded str/bytes form

        Returns:
            The typed content variant

        Raises:
            UnsupportedContentTypeError: If the discriminant is unknown
            MalformedContentError: If the payload does not fit the variant
        """
        content_type = cls.parse_type(flashcard_type)

        if isinstance(raw, str | bytes | bytearray):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError as e:
                raise MalformedContentError(content_type, "payload is not valid JSON") from e

        if not isinstance(raw, Mapping):
            raise MalformedContentError(content_type, "payload must be a JSON object")

        return _DECODERS[content_type](raw)

    @staticmethod
    def encode(content: FlashcardContent) -> dict[str, object]:
        """Encode a content variant as a JSON-compatible dict."""
        return content.to_json()
