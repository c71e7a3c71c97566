# app/repositories/base.py
import uuid
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from app.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Persistence operations shared by every entity type.

    Subclasses bind ``model`` and add the entity-specific queries they need.
    Writes are flushed through ``save``; callers decide when to commit.
    """

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, entity_id: uuid.UUID) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def list_all(self) -> List[ModelT]:
        return self.db.query(self.model).all()

    def filter(self, *criteria) -> List[ModelT]:
        return self.db.query(self.model).filter(*criteria).all()

    def first(self, *criteria) -> Optional[ModelT]:
        return self.db.query(self.model).filter(*criteria).first()

    def exists(self, *criteria) -> bool:
        return self.db.query(self.model).filter(*criteria).first() is not None

    def count(self) -> int:
        return self.db.query(self.model).count()

    def add(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        return entity

    def add_all(self, entities: List[ModelT]) -> None:
        self.db.add_all(entities)

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)

    def save(self) -> None:
        self.db.commit()

    def refresh(self, entity: ModelT) -> ModelT:
        self.db.refresh(entity)
        return entity

    def rollback(self) -> None:
        self.db.rollback()
