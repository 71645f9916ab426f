"""
Base service class.
All services receive the request's Session explicitly and commit
each business operation exactly once.
"""

from contextlib import contextmanager
from typing import Iterator, Optional, Type, TypeVar

from sqlalchemy.orm import Session, Query

from core.exceptions import NotFoundError

ModelT = TypeVar("ModelT")


class ServiceBase:
    """
    Usage:
        class ClientService(ServiceBase):
            def delete_client(self, client_id):
                with self.transaction():
                    ...
    """

    def __init__(self, db: Session):
        self.db = db

    def _q(self, model) -> Query:
        return self.db.query(model)

    def _get(self, model: Type[ModelT], record_id: int) -> Optional[ModelT]:
        return self.db.get(model, record_id)

    def _get_or_raise(self, model: Type[ModelT], record_id: int, message: str) -> ModelT:
        obj = self._get(model, record_id)
        if obj is None:
            raise NotFoundError(message)
        return obj

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Commit everything done inside the block as one unit.
        Any exception rolls the whole unit back and propagates.
        """
        try:
            yield self.db
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
