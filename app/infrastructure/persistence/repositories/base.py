"""Base repository: session holder and storage error translation."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import StorageUnavailableException

logger = logging.getLogger(__name__)


class BaseRepository:
    """Read-only repository over an AsyncSession.

    Subclasses wrap every statement in storage_errors() so driver failures
    reach the application layer as StorageUnavailableException.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @contextmanager
    def storage_errors(self, operation: str) -> Iterator[None]:
        """Translate SQLAlchemyError raised inside the block.

        Raises:
            StorageUnavailableException: With the operation name and driver message.
        """
        try:
            yield
        except SQLAlchemyError as e:
            logger.warning("Storage error during %s: %s", operation, e)
            raise StorageUnavailableException(operation, str(e)) from e
