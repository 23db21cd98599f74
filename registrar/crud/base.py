# registrar/crud/base.py
from typing import TypeVar, Generic, Type, Any, Optional, List, Dict
from sqlalchemy import select, func
from sqlalchemy.orm import Session
from pydantic import BaseModel
from registrar.core.errors import NotFoundError
from registrar.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchema = TypeVar("CreateSchema", bound=BaseModel)
UpdateSchema = TypeVar("UpdateSchema", bound=BaseModel)

class CRUDBase(Generic[ModelType, CreateSchema, UpdateSchema]):
    def __init__(self, model: Type[ModelType], label: str | None = None):
        self.model = model
        self.label = label or model.__name__

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.get(self.model, id)

    def get_or_raise(self, db: Session, id: Any) -> ModelType:
        """Like get(), but a missing row is a NotFoundError (404 at the API)."""
        obj = db.get(self.model, id)
        if obj is None:
            raise NotFoundError(f"{self.label} not found")
        return obj

    def get_multi(self, db: Session, *, skip: int = 0, limit: int = 100) -> List[ModelType]:
        stmt = select(self.model).order_by(self.model.id).offset(skip).limit(limit)
        return list(db.scalars(stmt).all())

    def count(self, db: Session) -> int:
        return db.scalar(select(func.count()).select_from(self.model)) or 0

    def create(self, db: Session, obj_in: CreateSchema, extra: Dict[str, Any] | None = None) -> ModelType:
        data = obj_in.model_dump()
        if extra:
            data.update(extra)
        obj = self.model(**data)
        db.add(obj); db.commit(); db.refresh(obj)
        return obj

    def update(self, db: Session, db_obj: ModelType, obj_in: UpdateSchema | Dict[str, Any]) -> ModelType:
        # schemas only carry the fields the client actually sent
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        for field, value in data.items():
            setattr(db_obj, field, value)
        db.add(db_obj); db.commit(); db.refresh(db_obj)
        return db_obj
