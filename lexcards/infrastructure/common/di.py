from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

from dependency_injector.providers import Provider

from lexcards.core import container
from lexcards.database import session_scope

T = TypeVar("T")


@contextmanager
def resolve_use_case(provider: Provider[T]) -> Iterator[T]:
    """
    Resolve a container provider against a fresh database session.

    The container's db dependency is overridden for the duration of the
    block and the session is closed afterwards.
    """
    with session_scope() as db:
        container.db.override(db)
        try:
            yield provider()
        finally:
            container.db.reset_override()
