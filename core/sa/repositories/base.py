# core/sa/repositories/base.py
import logging
from typing import TypeVar, Generic, Optional, List, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.sa.errors import ConstraintViolation
from core.sa.models import Base

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Base)

class BaseRepository(Generic[T]):
    """Single-statement CRUD shared by the entity repositories.

    Every write commits on its own. Storage errors are not retried.
    """

    model: Type[T]

    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[T]:
        """Return every row, in the storage default order"""
        return self.session.query(self.model).all()

    def find_by_id(self, id_value: int) -> Optional[T]:
        """Return the first row with the given ID, or None if there is none"""
        return self.session.query(self.model).filter(self.model.id == id_value).first()

    def _create(self, entity: T) -> T:
        self.session.add(entity)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning(f"Rejected {self.model.__name__}: {str(e.orig)}")
            raise ConstraintViolation(str(e.orig)) from e
        self.session.refresh(entity)
        return entity

    def delete(self, entity: T) -> T:
        """Delete the row behind ``entity``.

        Returns:
            The same object, now detached from the session
        """
        self.session.delete(entity)
        self.session.commit()
        return entity
