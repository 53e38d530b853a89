from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from lexcards.application.learning.use_cases.flashcards.create_flashcard_use_case import (
    CreateFlashcardUseCase,
)
from lexcards.application.learning.use_cases.flashcards.delete_flashcard_use_case import (
    DeleteFlashcardUseCase,
)
from lexcards.application.learning.use_cases.flashcards.get_flashcard_use_case import (
    GetFlashcardUseCase,
)
from lexcards.application.learning.use_cases.flashcards.list_flashcards_use_case import (
    ListFlashcardsUseCase,
)
from lexcards.application.learning.use_cases.flashcards.update_flashcard_use_case import (
    UpdateFlashcardUseCase,
)
from lexcards.application.learning.use_cases.progress.flashcard_stats_use_case import (
    FlashcardStatsUseCase,
)
from lexcards.application.learning.use_cases.progress.review_flashcard_use_case import (
    ReviewFlashcardUseCase,
)
from lexcards.config import get_settings
from lexcards.infrastructure.learning.repositories.flashcard_repository import FlashcardRepository
from lexcards.infrastructure.learning.repositories.progress_repository import ProgressRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)
    statement_timeout = providers.Callable(
        lambda settings: settings.DATABASE_STATEMENT_TIMEOUT_SECONDS, settings
    )
    default_page_size = providers.Callable(lambda settings: settings.DEFAULT_PAGE_SIZE, settings)

    # Repositories
    flashcard_repository = providers.Factory(
        FlashcardRepository, db=db, statement_timeout=statement_timeout
    )
    progress_repository = providers.Factory(
        ProgressRepository, db=db, statement_timeout=statement_timeout
    )

    # Learning module, application use cases
    create_flashcard_use_case = providers.Factory(
        CreateFlashcardUseCase,
        flashcard_repository=flashcard_repository,
    )
    get_flashcard_use_case = providers.Factory(
        GetFlashcardUseCase,
        flashcard_repository=flashcard_repository,
    )
    update_flashcard_use_case = providers.Factory(
        UpdateFlashcardUseCase,
        flashcard_repository=flashcard_repository,
    )
    delete_flashcard_use_case = providers.Factory(
        DeleteFlashcardUseCase,
        flashcard_repository=flashcard_repository,
    )
    list_flashcards_use_case = providers.Factory(
        ListFlashcardsUseCase,
        flashcard_repository=flashcard_repository,
        default_page_size=default_page_size,
    )
    review_flashcard_use_case = providers.Factory(
        ReviewFlashcardUseCase,
        progress_repository=progress_repository,
    )
    flashcard_stats_use_case = providers.Factory(
        FlashcardStatsUseCase,
        flashcard_repository=flashcard_repository,
    )


# Initialize container
container = Container()
