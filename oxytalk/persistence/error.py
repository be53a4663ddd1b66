"""Persistence layer errors."""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from oxytalk.domain.error import PersistenceUnavailableError


@contextmanager
def database_errors(operation: str) -> Iterator[None]:
    """Raise database I/O failures as PersistenceUnavailableError.

    Integrity errors pass through unchanged: they carry business meaning
    (a duplicate pending invite) that the domain layer maps itself.

    Args:
        operation: Name of the operation, for the error message
    """
    try:
        yield
    except IntegrityError:
        raise
    except (SQLAlchemyError, OSError) as e:
        raise PersistenceUnavailableError(operation, e) from e
