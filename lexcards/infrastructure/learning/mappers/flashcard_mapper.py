"""Mapper for Flashcard ORM ↔ Domain conversion."""

from lexcards.domain.common.value_objects import FlashcardId
from lexcards.domain.learning.entities.flashcard import Flashcard
from lexcards.domain.learning.services.content_codec import ContentCodec
from lexcards.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """
        Convert ORM model to domain entity.

        Raises:
            ContentDecodeError: If the stored content no longer matches its type
        """
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            question=orm_model.question,
            text=orm_model.text,
            content=ContentCodec.decode(orm_model.flashcard_type, orm_model.flashcard_content),
            categories=orm_model.categories or [],
            version=orm_model.version,
            created_at=orm_model.created_at,
            section=orm_model.section,
            section_type=orm_model.section_type,
            source_file=orm_model.source_file,
        )

    def to_orm(
        self, domain_entity: Flashcard, orm_model: FlashcardORM | None = None
    ) -> FlashcardORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.question = domain_entity.question
            orm_model.text = domain_entity.text
            orm_model.flashcard_type = domain_entity.type.value
            orm_model.flashcard_content = domain_entity.encoded_content()
            orm_model.categories = list(domain_entity.categories)
            orm_model.section = domain_entity.section
            orm_model.section_type = domain_entity.section_type
            orm_model.source_file = domain_entity.source_file
            return orm_model

        # Create new
        return FlashcardORM(
            id=domain_entity.id.value if domain_entity.id.is_assigned else None,
            question=domain_entity.question,
            text=domain_entity.text,
            flashcard_type=domain_entity.type.value,
            flashcard_content=domain_entity.encoded_content(),
            categories=list(domain_entity.categories),
            section=domain_entity.section,
            section_type=domain_entity.section_type,
            source_file=domain_entity.source_file,
            version=1,
        )
